"""Configuration management."""

from multimodal_prompt.config.settings import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE, Settings

__all__ = ["DEFAULT_CONFIG_DIR", "DEFAULT_CONFIG_FILE", "Settings"]
