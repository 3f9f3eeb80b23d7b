"""Capability toggle panel."""

from multimodal_prompt.panel.controls import CapabilityPanel, PanelCallbacks

__all__ = ["CapabilityPanel", "PanelCallbacks"]
