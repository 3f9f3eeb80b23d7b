"""Interaction context schema using Pydantic v2.

Every field is optional. An unset field means "unspecified", which the
prompt builder renders with a fixed fallback rather than as false.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from multimodal_prompt.errors import ConfigError, UnknownContextFieldError


class MediaType(str, Enum):
    VIDEO = "video"
    AUDIO = "audio"
    IMAGE = "image"
    DOCUMENT = "document"
    CODE = "code"
    THREE_D = "3d"


class DeviceType(str, Enum):
    DESKTOP = "desktop"
    MOBILE = "mobile"
    TABLET = "tablet"
    VR = "vr"


class NetworkCondition(str, Enum):
    FAST = "fast"
    MEDIUM = "medium"
    SLOW = "slow"


class InteractionType(str, Enum):
    CLICK = "click"
    VOICE = "voice"
    GESTURE = "gesture"
    KEYBOARD = "keyboard"


class _ContextModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Dimensions(_ContextModel):
    width: int
    height: int


class MediaMetadata(_ContextModel):
    format: str
    size: int
    duration: float | None = None
    dimensions: Dimensions | None = None


class Interaction(_ContextModel):
    """A single user interaction. ``timestamp`` is epoch milliseconds."""

    type: InteractionType
    timestamp: int
    content: str


class EnvironmentalContext(_ContextModel):
    device_type: DeviceType | None = None
    network_conditions: NetworkCondition | None = None
    accessibility: bool = False


class MultimodalContext(_ContextModel):
    """Snapshot of the current media, device, network and accessibility state."""

    current_media_type: MediaType | None = None
    media_metadata: MediaMetadata | None = None
    user_interaction_history: tuple[Interaction, ...] = ()
    environmental_context: EnvironmentalContext | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MultimodalContext:
        """Parse the camelCase wire form. Raises ConfigError on invalid input."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(e)) from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def merged(self, field: str, value: Any) -> MultimodalContext:
        """Return a copy with one top-level field replaced (shallow merge).

        ``field`` may be the snake_case attribute or its camelCase alias.
        """
        name = _resolve_field(field)
        data = {n: getattr(self, n) for n in type(self).model_fields}
        data[name] = value
        return type(self).model_validate(data)

    def recent_interactions(self, limit: int = 3) -> tuple[Interaction, ...]:
        """The last ``limit`` interactions, oldest first."""
        if limit <= 0:
            return ()
        return self.user_interaction_history[-limit:]


def _resolve_field(field: str) -> str:
    fields = MultimodalContext.model_fields
    if field in fields:
        return field
    for name, info in fields.items():
        if info.alias == field:
            return name
    raise UnknownContextFieldError(field)
