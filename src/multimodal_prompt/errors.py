"""Exception hierarchy for multimodal-prompt."""

from __future__ import annotations


class MultimodalPromptError(Exception):
    """Base class for all errors raised by this package."""


class UnknownCapabilityError(MultimodalPromptError, KeyError):
    """A capability name outside the fixed vocabulary was supplied."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown capability: {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class UnknownContextFieldError(MultimodalPromptError, KeyError):
    """A context field name that MultimodalContext does not define."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unknown context field: {field!r}")

    def __str__(self) -> str:
        return self.args[0]


class ConfigError(MultimodalPromptError):
    """Configuration file or argument could not be parsed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
