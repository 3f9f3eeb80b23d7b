"""Dynamic prompt composer that assembles sections into the multimodal system prompt."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from multimodal_prompt.models.capabilities import CapabilityFlags
from multimodal_prompt.models.context import MultimodalContext
from multimodal_prompt.models.descriptors import DesignScheme, SupabaseConnection
from multimodal_prompt.prompts.sections.accessibility import build_accessibility_section
from multimodal_prompt.prompts.sections.artifacts import build_artifacts_section
from multimodal_prompt.prompts.sections.capabilities import build_capabilities_section
from multimodal_prompt.prompts.sections.chain_of_thought import build_chain_of_thought_section
from multimodal_prompt.prompts.sections.code_generation import build_code_generation_section
from multimodal_prompt.prompts.sections.collaboration import build_collaboration_section
from multimodal_prompt.prompts.sections.context_awareness import build_context_awareness_section
from multimodal_prompt.prompts.sections.database import build_database_section
from multimodal_prompt.prompts.sections.design_scheme import build_design_scheme_section
from multimodal_prompt.prompts.sections.intro import build_closing_section, build_intro_section
from multimodal_prompt.prompts.sections.performance import build_performance_section
from multimodal_prompt.prompts.sections.processing_rules import build_processing_rules_section
from multimodal_prompt.prompts.sections.response_formatting import (
    build_response_formatting_section,
)
from multimodal_prompt.prompts.sections.system_constraints import build_system_constraints_section
from multimodal_prompt.prompts.text import ALLOWED_HTML_ELEMENTS, WORK_DIR, strip_indents

logger = logging.getLogger(__name__)


class PromptBuilder:
    """Assembles the multimodal system prompt from sections.

    Section order:
      Intro → Capabilities → Context → Processing Rules → Code Generation →
      System Constraints → Artifacts → Accessibility → Performance →
      Collaboration → Design Scheme → Database → Response Formatting →
      Chain of Thought → Closing
    """

    def __init__(self) -> None:
        self._sections = [
            build_intro_section,
            build_capabilities_section,
            build_context_awareness_section,
            build_processing_rules_section,
            build_code_generation_section,
            build_system_constraints_section,
            build_artifacts_section,
            build_accessibility_section,
            build_performance_section,
            build_collaboration_section,
            build_design_scheme_section,
            build_database_section,
            build_response_formatting_section,
            build_chain_of_thought_section,
            build_closing_section,
        ]

    def build(
        self,
        cwd: str = WORK_DIR,
        supabase: SupabaseConnection | None = None,
        design_scheme: DesignScheme | None = None,
        capabilities: CapabilityFlags | None = None,
        context: MultimodalContext | None = None,
        allowed_html_elements: Sequence[str] = ALLOWED_HTML_ELEMENTS,
    ) -> str:
        """Build the complete system prompt."""
        section_context: dict[str, Any] = {
            "cwd": cwd,
            "supabase": supabase,
            "design_scheme": design_scheme,
            "capabilities": capabilities or CapabilityFlags.none(),
            "multimodal_context": context,
            "allowed_html_elements": tuple(allowed_html_elements),
        }

        # absent optional sections still occupy a slot in the join
        parts = [section_fn(section_context) for section_fn in self._sections]

        logger.debug(
            "Built prompt from %d/%d sections (%d capabilities enabled)",
            sum(1 for part in parts if part),
            len(self._sections),
            section_context["capabilities"].active_count,
        )
        return strip_indents("\n\n".join(parts))


def get_enhanced_multimodal_prompt(
    cwd: str = WORK_DIR,
    supabase: SupabaseConnection | Mapping[str, Any] | None = None,
    design_scheme: DesignScheme | Mapping[str, Any] | None = None,
    capabilities: CapabilityFlags | Mapping[str, bool] | None = None,
    context: MultimodalContext | Mapping[str, Any] | None = None,
    allowed_html_elements: Sequence[str] = ALLOWED_HTML_ELEMENTS,
) -> str:
    """Build the multimodal prompt, accepting typed inputs or their camelCase dict forms."""
    if isinstance(supabase, Mapping):
        supabase = SupabaseConnection.model_validate(supabase)
    if isinstance(design_scheme, Mapping):
        design_scheme = DesignScheme.model_validate(design_scheme)
    if capabilities is not None and not isinstance(capabilities, CapabilityFlags):
        capabilities = CapabilityFlags.from_dict(capabilities)
    if isinstance(context, Mapping):
        context = MultimodalContext.from_dict(dict(context))

    return PromptBuilder().build(
        cwd=cwd,
        supabase=supabase,
        design_scheme=design_scheme,
        capabilities=capabilities,
        context=context,
        allowed_html_elements=allowed_html_elements,
    )
