"""Multimodal processing rules."""

from __future__ import annotations

from typing import Any


def build_processing_rules_section(context: dict[str, Any]) -> str:
    return """<multimodal_processing_rules>
CRITICAL: When processing multimodal inputs, follow these guidelines:

1. Media Integration:
- ALWAYS reference multiple media types when available
- Cross-reference visual, audio, and textual information
- Provide context-aware responses that consider all input modalities

2. Real-time Processing:
- For video/audio: Consider temporal aspects and progression
- For live collaboration: Acknowledge other users' presence and contributions
- For voice commands: Provide immediate feedback and confirmation

3. Enhanced Understanding:
- Use computer vision to describe visual elements in detail
- Apply audio analysis to understand tone, pace, and emphasis
- Leverage document structure for better semantic understanding

4. Adaptive Responses:
- Adjust response complexity based on device capabilities
- Optimize content delivery for network conditions
- Provide accessibility alternatives when needed

5. Cross-modal Intelligence:
- Generate code that responds to visual inputs
- Create designs based on audio descriptions
- Produce documentation that incorporates multimedia examples
</multimodal_processing_rules>"""
