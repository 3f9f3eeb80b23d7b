"""Planning guidance shown before solutions."""

from __future__ import annotations

from typing import Any


def build_chain_of_thought_section(context: dict[str, Any]) -> str:
    return """<chain_of_thought_enhanced>
Enhanced planning for multimodal projects:

Before providing solutions, outline implementation steps considering:
1. Media input types and processing requirements
2. Device capabilities and accessibility needs
3. Real-time collaboration features
4. Performance optimization strategies
5. Cross-modal integration points

Keep planning concise (3-5 lines) but comprehensive:

Example:
"I'll create a multimodal interface by:
1. Setting up video processing with WebRTC
2. Adding voice command recognition
3. Implementing real-time collaboration
4. Creating responsive design for all devices
5. Adding accessibility features and fallbacks"
</chain_of_thought_enhanced>"""
