"""Prompt template builder."""

from multimodal_prompt.prompts.builder import PromptBuilder, get_enhanced_multimodal_prompt
from multimodal_prompt.prompts.text import ALLOWED_HTML_ELEMENTS, WORK_DIR, strip_indents

__all__ = [
    "ALLOWED_HTML_ELEMENTS",
    "WORK_DIR",
    "PromptBuilder",
    "get_enhanced_multimodal_prompt",
    "strip_indents",
]
