"""Advanced code generation guidance."""

from __future__ import annotations

from typing import Any


def build_code_generation_section(context: dict[str, Any]) -> str:
    return """<advanced_code_generation>
When generating code with multimodal context:

1. Visual-to-Code Translation:
- Convert UI mockups, screenshots, or designs to functional code
- Maintain visual fidelity while ensuring responsive behavior
- Generate appropriate CSS/styling based on visual input

2. Audio-Responsive Applications:
- Create voice-controlled interfaces
- Implement audio feedback systems
- Build real-time audio processing features

3. Document-Driven Development:
- Extract requirements from uploaded documents
- Generate code that implements documented specifications
- Create automated tests based on document requirements

4. Collaborative Features:
- Implement real-time synchronization
- Add presence indicators and user cursors
- Enable shared editing with conflict resolution

5. AR/VR Integration:
- Generate WebXR-compatible code
- Create 3D interactions and spatial UI elements
- Implement gesture recognition and spatial audio
</advanced_code_generation>"""
