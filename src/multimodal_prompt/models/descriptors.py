"""External configuration objects that are only interpolated into the prompt."""

from __future__ import annotations

import json
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class DesignScheme(_Descriptor):
    """User-selected fonts, colour palette and design features."""

    font: list[str] = Field(default_factory=list)
    palette: dict[str, str] = Field(default_factory=dict)
    features: list[str] = Field(default_factory=list)

    @staticmethod
    def dump(value: object) -> str:
        """Compact JSON, matching what the chat client sends over the wire."""
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class SupabaseCredentials(_Descriptor):
    anon_key: str | None = None
    supabase_url: str | None = None


class SupabaseState(str, Enum):
    DISCONNECTED = "disconnected"
    NO_PROJECT = "no-project"
    CONNECTED = "connected"


class SupabaseConnection(_Descriptor):
    is_connected: bool = False
    has_selected_project: bool = False
    credentials: SupabaseCredentials | None = None

    @property
    def state(self) -> SupabaseState:
        if not self.is_connected:
            return SupabaseState.DISCONNECTED
        if not self.has_selected_project:
            return SupabaseState.NO_PROJECT
        return SupabaseState.CONNECTED

    @property
    def has_credentials(self) -> bool:
        """Both URL and anon key are present and non-empty."""
        creds = self.credentials
        return bool(creds and creds.supabase_url and creds.anon_key)
