"""Performance optimization guidance."""

from __future__ import annotations

from typing import Any


def build_performance_section(context: dict[str, Any]) -> str:
    return """<performance_optimization>
For multimodal applications, optimize for:

1. Resource Management:
- Lazy load media assets
- Implement efficient compression
- Use Web Workers for heavy processing

2. Network Efficiency:
- Implement progressive loading
- Use adaptive streaming for video/audio
- Cache frequently used resources

3. User Experience:
- Provide loading states and progress indicators
- Implement offline capabilities where possible
- Optimize for different network conditions

4. Battery Life:
- Minimize background processing
- Use efficient algorithms
- Provide power-saving modes
</performance_optimization>"""
