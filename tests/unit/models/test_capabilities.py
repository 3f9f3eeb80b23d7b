"""Tests for the capability vocabulary and CapabilityFlags."""

import pytest

from multimodal_prompt.errors import UnknownCapabilityError
from multimodal_prompt.models import Capability, CapabilityFlags


class TestCapability:
    def test_declaration_order(self):
        assert [c.value for c in Capability] == [
            "videoAnalysis",
            "audioTranscription",
            "documentUnderstanding",
            "imageRecognition",
            "codeContextAnalysis",
            "realTimeCollaboration",
            "arIntegration",
            "voiceCommands",
        ]

    @pytest.mark.parametrize("name", ["videoAnalysis", "video_analysis", "VIDEO_ANALYSIS"])
    def test_parse_accepts_wire_and_member_names(self, name):
        assert Capability.parse(name) is Capability.VIDEO_ANALYSIS

    def test_parse_unknown_raises(self):
        with pytest.raises(UnknownCapabilityError, match="telepathy"):
            Capability.parse("telepathy")

    def test_every_capability_has_prompt_description(self):
        for capability in Capability:
            assert capability.prompt_description
            assert capability.info.title


class TestCapabilityFlags:
    def test_defaults_to_all_disabled(self):
        flags = CapabilityFlags()
        assert len(flags) == 8
        assert flags.active_count == 0
        assert flags.enabled() == []

    def test_all(self):
        flags = CapabilityFlags.all()
        assert flags.active_count == 8
        assert all(flags.values())

    def test_toggle_flips_exactly_one(self):
        flags = CapabilityFlags.of(Capability.AR_INTEGRATION)
        toggled = flags.toggled(Capability.VOICE_COMMANDS)

        assert toggled[Capability.VOICE_COMMANDS] is True
        assert toggled[Capability.AR_INTEGRATION] is True
        assert toggled.active_count == 2
        # original unchanged
        assert flags[Capability.VOICE_COMMANDS] is False

    def test_toggle_twice_is_identity(self):
        flags = CapabilityFlags.of(Capability.IMAGE_RECOGNITION)
        for capability in Capability:
            assert flags.toggled(capability).toggled(capability) == flags

    def test_enabled_follows_declaration_order(self):
        flags = CapabilityFlags.of(
            Capability.VOICE_COMMANDS, Capability.VIDEO_ANALYSIS, Capability.CODE_CONTEXT_ANALYSIS
        )
        assert flags.enabled() == [
            Capability.VIDEO_ANALYSIS,
            Capability.CODE_CONTEXT_ANALYSIS,
            Capability.VOICE_COMMANDS,
        ]

    def test_from_dict_and_to_dict(self):
        flags = CapabilityFlags.from_dict({"videoAnalysis": True, "voice_commands": 1})
        data = flags.to_dict()

        assert list(data) == [c.value for c in Capability]
        assert data["videoAnalysis"] is True
        assert data["voiceCommands"] is True
        assert data["arIntegration"] is False

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(UnknownCapabilityError):
            CapabilityFlags.from_dict({"holograms": True})

    def test_lookup_by_string(self):
        flags = CapabilityFlags.of("audioTranscription")
        assert flags["audioTranscription"] is True
        assert flags["audio_transcription"] is True
        assert "holograms" not in flags

    def test_value_equality_and_hash(self):
        a = CapabilityFlags.of(Capability.VIDEO_ANALYSIS)
        b = CapabilityFlags.from_dict({"videoAnalysis": True})
        assert a == b
        assert hash(a) == hash(b)
        assert a != CapabilityFlags.none()

    def test_with_all(self):
        flags = CapabilityFlags.of(Capability.VIDEO_ANALYSIS)
        assert flags.with_all(True) == CapabilityFlags.all()
        assert flags.with_all(False) == CapabilityFlags.none()

    def test_with_enabled_keeps_existing(self):
        flags = CapabilityFlags.of(Capability.VIDEO_ANALYSIS).with_enabled(["arIntegration"])
        assert flags.enabled() == [Capability.VIDEO_ANALYSIS, Capability.AR_INTEGRATION]
