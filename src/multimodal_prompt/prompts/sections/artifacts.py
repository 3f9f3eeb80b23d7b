"""Artifact instructions, including the boltArtifact example."""

from __future__ import annotations

from typing import Any


def build_artifacts_section(context: dict[str, Any]) -> str:
    return """<enhanced_artifact_instructions>
Bolt creates comprehensive artifacts that can include multimodal elements:

1. Media-Rich Artifacts:
- Include references to uploaded images, videos, audio
- Generate code that processes multiple media types
- Create interactive experiences combining various inputs

2. Cross-Modal Components:
- Build components that respond to different input types
- Implement fallbacks for devices with limited capabilities
- Ensure accessibility across all interaction modes

3. Real-Time Features:
- Use WebSockets for live collaboration
- Implement WebRTC for peer-to-peer communication
- Add streaming capabilities for live media processing

4. Advanced UI/UX:
- Create adaptive interfaces based on device capabilities
- Implement gesture controls and voice commands
- Add haptic feedback where supported

CRITICAL: Always use <boltArtifact> tags with multimodal-aware content:
<boltArtifact id="multimodal-experience" title="Enhanced Multimodal Application">
<boltAction type="file" filePath="src/components/MultimodalInterface.tsx">
// Component that handles multiple input types
</boltAction>
<boltAction type="file" filePath="src/styles/multimodal.css">
/* Styles for responsive multimodal interface */
</boltAction>
<boltAction type="shell">npm install --save-dev @types/webrtc</boltAction>
</boltArtifact>
</enhanced_artifact_instructions>"""
