"""Runtime constraints of the in-browser WebContainer."""

from __future__ import annotations

from typing import Any

AVAILABLE_COMMANDS = (
    "cat", "chmod", "cp", "echo", "hostname", "kill", "ln", "ls", "mkdir", "mv", "ps",
    "pwd", "rm", "rmdir", "xxd", "alias", "cd", "clear", "curl", "env", "false",
    "getconf", "head", "sort", "tail", "touch", "true", "uptime", "which", "code", "jq",
    "loadenv", "node", "python", "python3", "wasm", "xdg-open", "command", "exit",
    "export", "source",
)


def build_system_constraints_section(context: dict[str, Any]) -> str:
    lines = [
        "<system_constraints>",
        "You operate in WebContainer, an in-browser Node.js runtime that emulates a Linux system:",
        "- Runs in browser, not full Linux system or cloud VM",
        "- Shell emulating zsh with limited command set",
        "- Cannot run native binaries (only JS, WebAssembly)",
        "- Python limited to standard library (no pip, no third-party libraries)",
        "- No C/C++/Rust compiler available",
        "- Git not available",
        f"- Available commands: {', '.join(AVAILABLE_COMMANDS)}",
        "",
        "MULTIMODAL LIMITATIONS:",
        "- Video processing limited to browser-compatible formats",
        "- Audio processing requires Web Audio API",
        "- Document processing limited to client-side parsing",
        "- AR features require WebXR support",
        "</system_constraints>",
    ]
    return "\n".join(lines)
