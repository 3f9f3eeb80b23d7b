"""Configuration management with TOML loading."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from multimodal_prompt.errors import ConfigError, MultimodalPromptError
from multimodal_prompt.models.capabilities import CapabilityFlags
from multimodal_prompt.models.descriptors import (
    DesignScheme,
    SupabaseConnection,
    SupabaseCredentials,
)
from multimodal_prompt.prompts.text import ALLOWED_HTML_ELEMENTS, WORK_DIR

DEFAULT_CONFIG_DIR = ".multimodal-prompt"
DEFAULT_CONFIG_FILE = "config.toml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    working_directory: str = WORK_DIR
    capabilities: CapabilityFlags = field(default_factory=CapabilityFlags.none)
    allowed_html_elements: tuple[str, ...] = ALLOWED_HTML_ELEMENTS
    log_level: str = "WARNING"
    supabase: SupabaseConnection | None = None
    design_scheme: DesignScheme | None = None
    data_dir: str = ""  # resolved lazily

    def __post_init__(self):
        if not self.data_dir:
            self.data_dir = os.path.join(os.getcwd(), DEFAULT_CONFIG_DIR)

    @property
    def history_path(self) -> str:
        return os.path.join(self.data_dir, "panel_history")

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Settings:
        """Load settings from TOML config file. A missing file yields defaults."""
        if config_path is None:
            config_path = Path(os.getcwd()) / DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE

        config_path = Path(config_path)
        raw: dict[str, Any] = {}

        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(str(e), path=str(config_path)) from e

        try:
            return cls._from_dict(raw)
        except ConfigError as e:
            raise ConfigError(str(e), path=str(config_path)) from e

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Settings:
        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

        capability_data = data.get("capabilities", {})
        if not isinstance(capability_data, dict):
            raise ConfigError("[capabilities] must be a table")
        for name, value in capability_data.items():
            if not isinstance(value, bool):
                raise ConfigError(f"[capabilities] {name} must be a boolean")
        try:
            capabilities = CapabilityFlags.from_dict(capability_data)
        except MultimodalPromptError as e:
            raise ConfigError(f"[capabilities] {e}") from e

        elements = data.get("allowed_html_elements", ALLOWED_HTML_ELEMENTS)
        if not isinstance(elements, (list, tuple)) or not all(isinstance(e, str) for e in elements):
            raise ConfigError("allowed_html_elements must be a list of strings")

        if "supabase" in data and not isinstance(data["supabase"], dict):
            raise ConfigError("[supabase] must be a table")

        try:
            supabase = _supabase_from_dict(data["supabase"]) if "supabase" in data else None
            design_scheme = (
                DesignScheme.model_validate(data["design_scheme"])
                if "design_scheme" in data
                else None
            )
        except ValidationError as e:
            raise ConfigError(str(e)) from e

        return cls(
            working_directory=data.get("working_directory", WORK_DIR),
            capabilities=capabilities,
            allowed_html_elements=tuple(elements),
            log_level=log_level,
            supabase=supabase,
            design_scheme=design_scheme,
        )


def _supabase_from_dict(data: dict[str, Any]) -> SupabaseConnection:
    credentials = None
    if data.get("supabase_url") or data.get("anon_key"):
        credentials = SupabaseCredentials(
            supabase_url=data.get("supabase_url"),
            anon_key=data.get("anon_key"),
        )
    return SupabaseConnection(
        is_connected=data.get("is_connected", False),
        has_selected_project=data.get("has_selected_project", False),
        credentials=credentials,
    )
