"""Multimodal-Prompt: capability controls and the enhanced multimodal system prompt.

Usage:
    from multimodal_prompt import Capability, CapabilityFlags, get_enhanced_multimodal_prompt

    flags = CapabilityFlags.of(Capability.VIDEO_ANALYSIS)
    prompt = get_enhanced_multimodal_prompt(capabilities=flags)
"""

__version__ = "0.1.0"

from .models import Capability, CapabilityFlags, MultimodalContext
from .panel import CapabilityPanel
from .prompts import PromptBuilder, get_enhanced_multimodal_prompt

__all__ = [
    "Capability",
    "CapabilityFlags",
    "CapabilityPanel",
    "MultimodalContext",
    "PromptBuilder",
    "get_enhanced_multimodal_prompt",
]
