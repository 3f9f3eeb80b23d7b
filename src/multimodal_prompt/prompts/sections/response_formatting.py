"""Response formatting rules and the permitted markup elements."""

from __future__ import annotations

from typing import Any

from multimodal_prompt.prompts.text import ALLOWED_HTML_ELEMENTS


def build_response_formatting_section(context: dict[str, Any]) -> str:
    elements = context.get("allowed_html_elements", ALLOWED_HTML_ELEMENTS)

    lines = [
        "<response_formatting>",
        "Use 2 spaces for code indentation",
        f"Available HTML elements: {', '.join(elements)}",
        "",
        "MULTIMODAL RESPONSES:",
        "- Include descriptions of visual elements when processing images",
        "- Provide transcripts when processing audio",
        "- Summarize key points when processing documents",
        "- Reference code context when providing technical solutions",
        "</response_formatting>",
    ]
    return "\n".join(lines)
