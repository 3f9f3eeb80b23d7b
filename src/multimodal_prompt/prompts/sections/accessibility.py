"""Accessibility enhancements."""

from __future__ import annotations

from typing import Any


def build_accessibility_section(context: dict[str, Any]) -> str:
    return """<accessibility_enhancements>
CRITICAL: Enhanced accessibility for multimodal applications:

1. Multi-Sensory Feedback:
- Provide visual, audio, and haptic feedback
- Ensure information is available through multiple channels
- Support screen readers and voice navigation

2. Adaptive Interfaces:
- Adjust interface complexity based on user needs
- Provide alternative input methods
- Support keyboard navigation and voice commands

3. Cognitive Accessibility:
- Simplify complex multimodal interactions
- Provide clear instructions and feedback
- Allow users to control the pace of information

4. Device Independence:
- Ensure functionality across different device types
- Provide graceful degradation for limited devices
- Support both touch and non-touch interfaces
</accessibility_enhancements>"""
