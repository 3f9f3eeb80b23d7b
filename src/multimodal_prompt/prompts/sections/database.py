"""Database instructions section, branching on the Supabase connection state.

In the fully connected state the project URL and anon key are written into
the prompt verbatim as ``.env`` assignments.
"""

from __future__ import annotations

from typing import Any

from multimodal_prompt.models.descriptors import SupabaseConnection, SupabaseState

NOT_CONNECTED_TEXT = (
    'You are not connected to Supabase. Remind user to "connect to Supabase in chat box '
    'before proceeding".'
)
NO_PROJECT_TEXT = (
    "Connected to Supabase but no project selected. Remind user to select project in chat box."
)


def build_database_section(context: dict[str, Any]) -> str:
    supabase: SupabaseConnection | None = context.get("supabase")
    if supabase is None:
        return ""

    lines = [
        "<database_instructions_enhanced>",
        "Enhanced database operations for multimodal applications:",
        "",
        "CRITICAL: Use Supabase for databases by default, unless specified otherwise.",
        "",
    ]

    state = supabase.state
    if state is SupabaseState.DISCONNECTED:
        lines.append(NOT_CONNECTED_TEXT)
    elif state is SupabaseState.NO_PROJECT:
        lines.append(NO_PROJECT_TEXT)
    else:
        lines.extend(_connected_lines(supabase))

    lines.append("</database_instructions_enhanced>")
    return "\n" + "\n".join(lines) + "\n"


def _connected_lines(supabase: SupabaseConnection) -> list[str]:
    lines = ["", ""]

    if supabase.has_credentials:
        creds = supabase.credentials
        lines.extend([
            "Create .env file if it doesn't exist with:",
            f"VITE_SUPABASE_URL={creds.supabase_url}",
            f"VITE_SUPABASE_ANON_KEY={creds.anon_key}",
            "",
            "MULTIMODAL DATABASE ENHANCEMENTS:",
            "- Store media metadata and references",
            "- Track user interactions across different modalities",
            "- Enable real-time collaboration data synchronization",
            "- Support large file storage with proper indexing",
            "",
        ])

    lines.extend([
        "",
        "MEDIA STORAGE REQUIREMENTS:",
        "- Use Supabase Storage for media assets",
        "- Implement proper file organization and versioning",
        "- Add metadata extraction and indexing",
        "- Support different media formats and conversions",
        "",
        "REAL-TIME DATA:",
        "- Use Supabase Realtime for collaborative features",
        "- Implement presence tracking and live updates",
        "- Handle concurrent access to shared resources",
        "- Provide conflict resolution for collaborative editing",
        "",
    ])
    return lines
