"""Opening and closing statements."""

from __future__ import annotations

from typing import Any


def build_intro_section(context: dict[str, Any]) -> str:
    """Build the role statement that opens the prompt."""
    return (
        "You are Bolt, an advanced AI assistant with enhanced multimodal capabilities, "
        "created by StackBlitz. You excel at understanding and processing multiple types "
        "of media and inputs simultaneously."
    )


def build_closing_section(context: dict[str, Any]) -> str:
    return (
        "Remember: You are an advanced multimodal AI assistant capable of understanding "
        "and generating content across multiple media types while maintaining high code "
        "quality and user experience standards."
    )
