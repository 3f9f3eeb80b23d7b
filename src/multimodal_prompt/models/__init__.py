"""Typed inputs for the panel and the prompt builder."""

from multimodal_prompt.models.capabilities import (
    CAPABILITY_INFO,
    Capability,
    CapabilityFlags,
    CapabilityInfo,
)
from multimodal_prompt.models.context import (
    DeviceType,
    Dimensions,
    EnvironmentalContext,
    Interaction,
    InteractionType,
    MediaMetadata,
    MediaType,
    MultimodalContext,
    NetworkCondition,
)
from multimodal_prompt.models.descriptors import (
    DesignScheme,
    SupabaseConnection,
    SupabaseCredentials,
    SupabaseState,
)

__all__ = [
    "CAPABILITY_INFO",
    "Capability",
    "CapabilityFlags",
    "CapabilityInfo",
    "DesignScheme",
    "DeviceType",
    "Dimensions",
    "EnvironmentalContext",
    "Interaction",
    "InteractionType",
    "MediaMetadata",
    "MediaType",
    "MultimodalContext",
    "NetworkCondition",
    "SupabaseConnection",
    "SupabaseCredentials",
    "SupabaseState",
]
