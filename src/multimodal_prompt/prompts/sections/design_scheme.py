"""User design scheme section — only present when a scheme is supplied."""

from __future__ import annotations

from typing import Any

from multimodal_prompt.models.descriptors import DesignScheme


def build_design_scheme_section(context: dict[str, Any]) -> str:
    """Dump font, palette and features verbatim, then the fixed design requirements.

    The block is padded with a newline on each side.
    """
    scheme: DesignScheme | None = context.get("design_scheme")
    if scheme is None:
        return ""

    lines = [
        "<user_design_scheme>",
        f"FONT: {DesignScheme.dump(scheme.font)}",
        f"PALETTE: {DesignScheme.dump(scheme.palette)}",
        f"FEATURES: {DesignScheme.dump(scheme.features)}",
        "",
        "MULTIMODAL DESIGN REQUIREMENTS:",
        "- Apply design scheme consistently across all media types",
        "- Ensure visual coherence in video, audio, and interactive elements",
        "- Use brand colors and typography in all generated content",
        "- Maintain design language across different interaction modes",
        "</user_design_scheme>",
    ]
    return "\n" + "\n".join(lines) + "\n"
