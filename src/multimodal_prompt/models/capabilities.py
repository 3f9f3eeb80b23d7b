"""Capability vocabulary and the immutable flag set built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from multimodal_prompt.errors import UnknownCapabilityError


class Capability(str, Enum):
    """The eight multimodal capabilities, in declaration order.

    Declaration order is significant: it is the order used when listing
    enabled capabilities in the generated prompt and in the panel.
    """

    VIDEO_ANALYSIS = "videoAnalysis"
    AUDIO_TRANSCRIPTION = "audioTranscription"
    DOCUMENT_UNDERSTANDING = "documentUnderstanding"
    IMAGE_RECOGNITION = "imageRecognition"
    CODE_CONTEXT_ANALYSIS = "codeContextAnalysis"
    REAL_TIME_COLLABORATION = "realTimeCollaboration"
    AR_INTEGRATION = "arIntegration"
    VOICE_COMMANDS = "voiceCommands"

    @classmethod
    def parse(cls, name: str | Capability) -> Capability:
        """Resolve a camelCase value, snake_case member name, or member."""
        if isinstance(name, Capability):
            return name
        try:
            return cls(name)
        except ValueError:
            pass
        try:
            return cls[name.upper().replace("-", "_")]
        except KeyError:
            raise UnknownCapabilityError(name) from None

    @property
    def info(self) -> CapabilityInfo:
        return CAPABILITY_INFO[self]

    @property
    def prompt_description(self) -> str:
        return CAPABILITY_INFO[self].prompt_description


@dataclass(frozen=True)
class CapabilityInfo:
    title: str
    description: str
    prompt_description: str


CAPABILITY_INFO: dict[Capability, CapabilityInfo] = {
    Capability.VIDEO_ANALYSIS: CapabilityInfo(
        title="Video Analysis",
        description="Video content processing, motion recognition and temporal analysis",
        prompt_description="Video content analysis, motion tracking, and temporal understanding",
    ),
    Capability.AUDIO_TRANSCRIPTION: CapabilityInfo(
        title="Audio Transcription",
        description="Speech-to-text conversion, audio analysis and sound pattern recognition",
        prompt_description="Speech-to-text, audio analysis, and sound pattern recognition",
    ),
    Capability.DOCUMENT_UNDERSTANDING: CapabilityInfo(
        title="Document Understanding",
        description="Semantic analysis of PDF, Word, Excel and other document formats",
        prompt_description="PDF, Word, Excel parsing and semantic analysis",
    ),
    Capability.IMAGE_RECOGNITION: CapabilityInfo(
        title="Image Recognition",
        description="Advanced computer vision, object detection and scene analysis",
        prompt_description="Advanced computer vision, object detection, and scene understanding",
    ),
    Capability.CODE_CONTEXT_ANALYSIS: CapabilityInfo(
        title="Code Context Analysis",
        description="Deep codebase analysis, pattern recognition and architectural insights",
        prompt_description="Deep codebase analysis, pattern recognition, and architectural insights",
    ),
    Capability.REAL_TIME_COLLABORATION: CapabilityInfo(
        title="Real-Time Collaboration",
        description="Multi-user sessions with synchronization and collaborative editing",
        prompt_description="Multi-user session awareness and collaborative development",
    ),
    Capability.AR_INTEGRATION: CapabilityInfo(
        title="AR/VR Integration",
        description="Augmented reality, 3D overlays and spatial interactions",
        prompt_description="Augmented reality overlays and 3D spatial understanding",
    ),
    Capability.VOICE_COMMANDS: CapabilityInfo(
        title="Voice Commands",
        description="Voice control, natural language recognition and audio feedback",
        prompt_description="Natural language processing for voice interactions and commands",
    ),
}


class CapabilityFlags(Mapping[Capability, bool]):
    """Immutable mapping of every Capability to enabled/disabled.

    All eight keys are always present. Updates return a new instance::

        flags = CapabilityFlags.none().toggled(Capability.VIDEO_ANALYSIS)
        flags.enabled()  # [Capability.VIDEO_ANALYSIS]
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[Capability, bool] | None = None) -> None:
        values = values or {}
        self._values: tuple[bool, ...] = tuple(bool(values.get(c, False)) for c in Capability)

    @classmethod
    def none(cls) -> CapabilityFlags:
        return cls()

    @classmethod
    def all(cls) -> CapabilityFlags:
        return cls({c: True for c in Capability})

    @classmethod
    def of(cls, *capabilities: Capability | str) -> CapabilityFlags:
        return cls({Capability.parse(c): True for c in capabilities})

    @classmethod
    def from_dict(cls, data: Mapping[str | Capability, object]) -> CapabilityFlags:
        """Build from a mapping keyed by camelCase, snake_case or Capability.

        Raises UnknownCapabilityError for keys outside the vocabulary.
        """
        return cls({Capability.parse(k): bool(v) for k, v in data.items()})

    def to_dict(self) -> dict[str, bool]:
        return {c.value: v for c, v in zip(Capability, self._values)}

    def __getitem__(self, key: Capability | str) -> bool:
        capability = Capability.parse(key)
        return self._values[list(Capability).index(capability)]

    def __iter__(self) -> Iterator[Capability]:
        return iter(Capability)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CapabilityFlags):
            return self._values == other._values
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        enabled = ", ".join(c.value for c in self.enabled())
        return f"CapabilityFlags({enabled})"

    def toggled(self, capability: Capability | str) -> CapabilityFlags:
        """Return a copy with exactly one flag flipped."""
        target = Capability.parse(capability)
        return CapabilityFlags({c: (not v if c is target else v) for c, v in self.items()})

    def with_all(self, value: bool) -> CapabilityFlags:
        return CapabilityFlags({c: value for c in Capability})

    def with_enabled(self, capabilities: Iterable[Capability | str]) -> CapabilityFlags:
        updated = dict(self.items())
        for c in capabilities:
            updated[Capability.parse(c)] = True
        return CapabilityFlags(updated)

    def enabled(self) -> list[Capability]:
        return [c for c, v in zip(Capability, self._values) if v]

    @property
    def active_count(self) -> int:
        return sum(self._values)
