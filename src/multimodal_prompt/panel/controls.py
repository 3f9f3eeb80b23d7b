"""Headless capability toggle panel.

The panel holds only transient UI state (active count, advanced section
open/closed). Every change is forwarded synchronously to the parent's
callbacks as a complete new value; the parent owns the truth.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from multimodal_prompt.models.capabilities import Capability, CapabilityFlags
from multimodal_prompt.models.context import (
    DeviceType,
    EnvironmentalContext,
    MediaType,
    MultimodalContext,
    NetworkCondition,
)

logger = logging.getLogger(__name__)

QUICK_CAPABILITY_COUNT = 4


@dataclass
class PanelCallbacks:
    """Callbacks the parent supplies to receive panel updates."""

    on_capabilities_change: Callable[[CapabilityFlags], None]
    on_context_change: Callable[[MultimodalContext], None] | None = None


class CapabilityPanel:
    """Toggles capability flags and edits the optional context form.

    Usage::

        panel = CapabilityPanel(CapabilityFlags.none(), on_capabilities_change=print)
        panel.toggle(Capability.VIDEO_ANALYSIS)
        panel.active_count  # 1
    """

    def __init__(
        self,
        capabilities: CapabilityFlags,
        on_capabilities_change: Callable[[CapabilityFlags], None],
        context: MultimodalContext | None = None,
        on_context_change: Callable[[MultimodalContext], None] | None = None,
    ) -> None:
        self.callbacks = PanelCallbacks(on_capabilities_change, on_context_change)
        self.capabilities = capabilities
        self.context = context
        self.advanced_open = False
        self.active_count = capabilities.active_count

    # -- capabilities -----------------------------------------------------

    def toggle(self, capability: Capability | str) -> CapabilityFlags:
        """Flip one flag and emit the full resulting set."""
        updated = self.capabilities.toggled(capability)
        self._emit_capabilities(updated)
        return updated

    def enable_all(self) -> CapabilityFlags:
        updated = CapabilityFlags.all()
        self._emit_capabilities(updated)
        return updated

    def disable_all(self) -> CapabilityFlags:
        updated = CapabilityFlags.none()
        self._emit_capabilities(updated)
        return updated

    def is_enabled(self, capability: Capability | str) -> bool:
        return self.capabilities[capability]

    @property
    def quick_capabilities(self) -> list[Capability]:
        """Capabilities shown above the fold."""
        return list(Capability)[:QUICK_CAPABILITY_COUNT]

    @property
    def advanced_capabilities(self) -> list[Capability]:
        """Capabilities shown in the collapsible advanced section."""
        return list(Capability)[QUICK_CAPABILITY_COUNT:]

    def _emit_capabilities(self, updated: CapabilityFlags) -> None:
        self.capabilities = updated
        self.active_count = updated.active_count
        logger.debug("Capabilities changed: %r", updated)
        self.callbacks.on_capabilities_change(updated)

    # -- context form -----------------------------------------------------

    @property
    def context_form_visible(self) -> bool:
        return self.context is not None and self.callbacks.on_context_change is not None

    def set_context_field(self, field: str, value: Any) -> MultimodalContext | None:
        """Shallow-merge one field into the context and emit it.

        Does nothing when the parent supplied no context callback.
        """
        if self.callbacks.on_context_change is None:
            return None
        base = self.context or MultimodalContext()
        updated = base.merged(field, value)
        self.context = updated
        logger.debug("Context field %s changed", field)
        self.callbacks.on_context_change(updated)
        return updated

    def set_media_type(self, media_type: MediaType | str | None) -> MultimodalContext | None:
        """Select the current media type; an empty selection clears it."""
        return self.set_context_field("current_media_type", _or_none(media_type, MediaType))

    def set_device_type(self, device_type: DeviceType | str | None) -> MultimodalContext | None:
        return self._set_environment(device_type=_or_none(device_type, DeviceType))

    def set_network_conditions(
        self, network: NetworkCondition | str | None
    ) -> MultimodalContext | None:
        return self._set_environment(network_conditions=_or_none(network, NetworkCondition))

    def set_accessibility(self, enabled: bool) -> MultimodalContext | None:
        return self._set_environment(accessibility=enabled)

    def _set_environment(self, **changes: Any) -> MultimodalContext | None:
        current = self.context.environmental_context if self.context else None
        env = current or EnvironmentalContext()
        return self.set_context_field("environmental_context", env.model_copy(update=changes))

    # -- transient UI state -----------------------------------------------

    def toggle_advanced(self) -> bool:
        self.advanced_open = not self.advanced_open
        return self.advanced_open

    def status_summary(self) -> str:
        if self.active_count == 0:
            return (
                "No multimodal capabilities enabled. Enable capabilities above "
                "to unlock advanced features."
            )
        if self.active_count == 1:
            return "1 multimodal capability enabled. The system will use enhanced prompts for this feature."
        return (
            f"{self.active_count} multimodal capabilities enabled. The system will use "
            "advanced prompts with full support for multiple formats."
        )


def _or_none(value: Any, enum_cls: type) -> Any:
    if value is None or value == "":
        return None
    return enum_cls(value)
