"""Shared test fixtures for the multimodal-prompt test suite."""

from __future__ import annotations

from datetime import datetime

import pytest

from multimodal_prompt.models import (
    Capability,
    CapabilityFlags,
    Dimensions,
    EnvironmentalContext,
    Interaction,
    InteractionType,
    MediaMetadata,
    MediaType,
    MultimodalContext,
)


def _local_ms(hour: int, minute: int, second: int) -> int:
    """Epoch milliseconds for a local wall-clock time on a fixed day."""
    return int(datetime(2024, 3, 5, hour, minute, second).timestamp() * 1000)


def _section(prompt: str, tag: str) -> str:
    """Return the body between <tag> and </tag> in a generated prompt."""
    start = prompt.index(f"<{tag}>\n") + len(tag) + 3
    end = prompt.index(f"</{tag}>")
    return prompt[start:end]


class Recorder:
    """Collects every value passed to a panel callback."""

    def __init__(self) -> None:
        self.calls: list = []

    def __call__(self, value) -> None:
        self.calls.append(value)

    @property
    def last(self):
        return self.calls[-1]


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def local_ms():
    return _local_ms


@pytest.fixture
def section():
    return _section


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def context_recorder():
    return Recorder()


@pytest.fixture
def video_and_audio():
    return CapabilityFlags.of(Capability.VIDEO_ANALYSIS, Capability.AUDIO_TRANSCRIPTION)


@pytest.fixture
def full_context():
    return MultimodalContext(
        current_media_type=MediaType.VIDEO,
        media_metadata=MediaMetadata(
            format="mp4",
            size=1048576,
            duration=12.5,
            dimensions=Dimensions(width=1920, height=1080),
        ),
        user_interaction_history=(
            Interaction(type=InteractionType.CLICK, timestamp=_local_ms(9, 0, 0), content="first"),
            Interaction(type=InteractionType.VOICE, timestamp=_local_ms(9, 5, 0), content="second"),
            Interaction(type=InteractionType.GESTURE, timestamp=_local_ms(13, 10, 30), content="third"),
            Interaction(type=InteractionType.KEYBOARD, timestamp=_local_ms(15, 4, 5), content="fourth"),
        ),
        environmental_context=EnvironmentalContext(
            device_type="mobile", network_conditions="slow", accessibility=True
        ),
    )
