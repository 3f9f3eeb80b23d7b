"""Context awareness section — media, device, network and recent interactions."""

from __future__ import annotations

from typing import Any

from multimodal_prompt.models.context import MediaMetadata, MultimodalContext
from multimodal_prompt.prompts.text import format_local_time, format_number

NO_CONTEXT_TEXT = "No additional context provided."
RECENT_INTERACTION_LIMIT = 3


def build_context_awareness_section(context: dict[str, Any]) -> str:
    """Build the context block, falling back to defaults for unset fields.

    Absent sub-blocks leave an empty line in their slot, so the blank-line
    layout of the block is the same whichever fields are set.
    """
    mm_context: MultimodalContext | None = context.get("multimodal_context")

    if mm_context is None:
        return "\n".join(["<context_awareness>", NO_CONTEXT_TEXT, "</context_awareness>"])

    env = mm_context.environmental_context
    media_type = mm_context.current_media_type.value if mm_context.current_media_type else "text"
    device = env.device_type.value if env and env.device_type else "desktop"
    network = env.network_conditions.value if env and env.network_conditions else "fast"
    accessibility = "enabled" if env and env.accessibility else "disabled"

    lines = [
        "<context_awareness>",
        "",
        "Current Context:",
        f"- Media Type: {media_type}",
        f"- Device: {device}",
        f"- Network: {network}",
        f"- Accessibility: {accessibility}",
        "",
    ]
    lines.extend(_metadata_lines(mm_context.media_metadata))
    lines.append("")
    lines.extend(_interaction_lines(mm_context))
    lines.extend(["", "</context_awareness>"])
    return "\n".join(lines)


def _metadata_lines(metadata: MediaMetadata | None) -> list[str]:
    if metadata is None:
        return [""]

    duration = f"- Duration: {format_number(metadata.duration)}s" if metadata.duration else ""
    dimensions = ""
    if metadata.dimensions:
        dimensions = f"- Dimensions: {metadata.dimensions.width}x{metadata.dimensions.height}"

    return [
        "",
        "Media Metadata:",
        f"- Format: {metadata.format}",
        f"- Size: {metadata.size} bytes",
        duration,
        dimensions,
        "",
    ]


def _interaction_lines(mm_context: MultimodalContext) -> list[str]:
    recent = mm_context.recent_interactions(RECENT_INTERACTION_LIMIT)
    if not recent:
        return [""]

    lines = ["", "Recent Interactions:"]
    for interaction in recent:
        lines.append(
            f"- {interaction.type.value}: {interaction.content} "
            f"({format_local_time(interaction.timestamp)})"
        )
    lines.append("")
    return lines
