"""Real-time collaboration features."""

from __future__ import annotations

from typing import Any


def build_collaboration_section(context: dict[str, Any]) -> str:
    return """<collaboration_features>
Enhanced real-time collaboration capabilities:

1. Multi-User Sessions:
- Track user presence and cursors
- Synchronize state across clients
- Handle conflicts and concurrent edits

2. Communication Tools:
- Integrated chat and voice communication
- Screen sharing and co-browsing
- Real-time code review and commenting

3. Version Control:
- Track changes across multimodal content
- Provide branching and merging for media assets
- Implement collaborative undo/redo

4. Project Management:
- Shared task management
- Real-time progress tracking
- Collaborative planning and design
</collaboration_features>"""
