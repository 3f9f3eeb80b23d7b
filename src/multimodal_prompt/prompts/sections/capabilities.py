"""Enhanced capabilities section — lists the enabled multimodal capabilities."""

from __future__ import annotations

from typing import Any

from multimodal_prompt.models.capabilities import CapabilityFlags


def build_capabilities_section(context: dict[str, Any]) -> str:
    """One line per enabled capability, in declaration order.

    With nothing enabled the block keeps a single empty line between its tags.
    """
    flags: CapabilityFlags = context.get("capabilities") or CapabilityFlags.none()

    body = "\n".join(f"- {c.value}: {c.prompt_description}" for c in flags.enabled())
    return f"<enhanced_multimodal_capabilities>\n{body}\n</enhanced_multimodal_capabilities>"
