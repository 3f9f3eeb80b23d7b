"""Unit tests for multimodal_prompt.cli.app."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from multimodal_prompt.cli.app import PanelState, _handle_command, cli, run_panel
from multimodal_prompt.config import Settings
from multimodal_prompt.models import Capability, CapabilityFlags, MediaType, MultimodalContext
from multimodal_prompt.panel import CapabilityPanel


@pytest.fixture
def missing_config(tmp_path):
    return str(tmp_path / "none.toml")


# ---------------------------------------------------------------------------
# Click entry points
# ---------------------------------------------------------------------------


class TestClickCommands:
    def test_cli_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_show_default(self, missing_config):
        result = CliRunner().invoke(cli, ["-c", missing_config, "show"])
        assert result.exit_code == 0
        assert result.output.startswith("You are Bolt")
        assert "No additional context provided." in result.output

    def test_show_enable_and_context_options(self, missing_config):
        result = CliRunner().invoke(cli, [
            "-c", missing_config, "show",
            "--enable", "voiceCommands", "--enable", "videoAnalysis",
            "--media-type", "audio", "--device", "vr", "--accessibility",
        ])
        assert result.exit_code == 0
        out = result.output
        assert out.index("- videoAnalysis:") < out.index("- voiceCommands:")
        assert "- audioTranscription:" not in out
        assert "- Media Type: audio" in out
        assert "- Device: vr" in out
        assert "- Network: fast" in out
        assert "- Accessibility: enabled" in out

    def test_show_all(self, missing_config):
        result = CliRunner().invoke(cli, ["-c", missing_config, "show", "--all"])
        assert result.exit_code == 0
        for capability in Capability:
            assert f"- {capability.value}:" in result.output

    def test_show_unknown_capability_rejected(self, missing_config):
        result = CliRunner().invoke(cli, ["-c", missing_config, "show", "--enable", "telepathy"])
        assert result.exit_code != 0

    def test_show_supabase_connected(self, missing_config):
        result = CliRunner().invoke(cli, [
            "-c", missing_config, "show", "--supabase-state", "connected",
            "--supabase-url", "https://abc.supabase.co", "--supabase-key", "anon",
        ])
        assert result.exit_code == 0
        assert "VITE_SUPABASE_URL=https://abc.supabase.co" in result.output
        assert "VITE_SUPABASE_ANON_KEY=anon" in result.output

    def test_show_supabase_credentials_imply_connected(self, missing_config):
        result = CliRunner().invoke(cli, [
            "-c", missing_config, "show",
            "--supabase-url", "https://abc.supabase.co", "--supabase-key", "anon",
        ])
        assert result.exit_code == 0
        assert "VITE_SUPABASE_URL=https://abc.supabase.co" in result.output
        assert "VITE_SUPABASE_ANON_KEY=anon" in result.output

    def test_show_supabase_disconnected(self, missing_config):
        result = CliRunner().invoke(cli, ["-c", missing_config, "show", "--supabase-state", "disconnected"])
        assert result.exit_code == 0
        assert "You are not connected to Supabase." in result.output
        assert "VITE_SUPABASE" not in result.output

    def test_show_context_and_design_files(self, tmp_path, missing_config):
        context_file = tmp_path / "context.json"
        context_file.write_text(json.dumps({"currentMediaType": "image", "environmentalContext": {"networkConditions": "slow"}}))
        scheme_file = tmp_path / "scheme.json"
        scheme_file.write_text(json.dumps({"font": ["Inter"], "palette": {"primary": "#fff"}, "features": []}))

        result = CliRunner().invoke(cli, [
            "-c", missing_config, "show",
            "--context-file", str(context_file), "--design-scheme", str(scheme_file), "--device", "tablet",
        ])
        assert result.exit_code == 0
        assert "- Media Type: image" in result.output
        assert "- Network: slow" in result.output
        assert "- Device: tablet" in result.output
        assert 'FONT: ["Inter"]' in result.output

    def test_show_invalid_context_file(self, tmp_path, missing_config):
        context_file = tmp_path / "context.json"
        context_file.write_text(json.dumps({"currentMediaType": "hologram"}))
        result = CliRunner().invoke(cli, ["-c", missing_config, "show", "--context-file", str(context_file)])
        assert result.exit_code != 0
        assert "Error" in result.output

    def test_config_capabilities_used(self, tmp_path):
        config = tmp_path / "config.toml"
        config.write_text("[capabilities]\narIntegration = true\n")
        result = CliRunner().invoke(cli, ["-c", str(config), "show"])
        assert result.exit_code == 0
        assert "- arIntegration:" in result.output

    def test_bad_config_reports_error(self, tmp_path):
        config = tmp_path / "config.toml"
        config.write_text("[capabilities]\ntelepathy = true\n")
        result = CliRunner().invoke(cli, ["-c", str(config), "show"])
        assert result.exit_code != 0
        assert "telepathy" in result.output

    def test_non_table_supabase_reports_error(self, tmp_path):
        config = tmp_path / "config.toml"
        config.write_text('supabase = "yes"\n')
        result = CliRunner().invoke(cli, ["-c", str(config), "show"])
        assert result.exit_code != 0
        assert "[supabase] must be a table" in result.output

    def test_capabilities_table(self, missing_config):
        result = CliRunner().invoke(cli, ["-c", missing_config, "capabilities"])
        assert result.exit_code == 0
        assert "videoAnalysis" in result.output


# ---------------------------------------------------------------------------
# Interactive panel commands
# ---------------------------------------------------------------------------


@pytest.fixture
def panel_setup(tmp_path):
    state = PanelState(Settings(data_dir=str(tmp_path)))
    panel = CapabilityPanel(
        state.capabilities,
        on_capabilities_change=state.on_capabilities_change,
        context=state.context,
        on_context_change=state.on_context_change,
    )
    return panel, state


class TestHandleCommand:
    def test_toggle_updates_parent_state(self, panel_setup):
        panel, state = panel_setup
        _handle_command("toggle videoAnalysis", panel, state)
        assert state.capabilities == CapabilityFlags.of(Capability.VIDEO_ANALYSIS)

    def test_all_and_none(self, panel_setup):
        panel, state = panel_setup
        _handle_command("all", panel, state)
        assert state.capabilities == CapabilityFlags.all()
        _handle_command("none", panel, state)
        assert state.capabilities == CapabilityFlags.none()

    def test_context_commands(self, panel_setup):
        panel, state = panel_setup
        _handle_command("media video", panel, state)
        _handle_command("network medium", panel, state)
        _handle_command("a11y on", panel, state)

        assert state.context.current_media_type is MediaType.VIDEO
        assert state.context.environmental_context.network_conditions.value == "medium"
        assert state.context.environmental_context.accessibility is True
        assert "- Media Type: video" in state.prompt()

    def test_a11y_requires_on_or_off(self, panel_setup):
        panel, state = panel_setup
        _handle_command("a11y maybe", panel, state)
        assert state.context == MultimodalContext()

    def test_advanced_toggles_panel_state(self, panel_setup):
        panel, state = panel_setup
        _handle_command("advanced", panel, state)
        assert panel.advanced_open is True


class TestRunPanel:
    @patch("multimodal_prompt.cli.app.PromptSession")
    def test_processes_commands_until_exit(self, mock_session_class, tmp_path):
        session = MagicMock()
        session.prompt.side_effect = ["toggle arIntegration", "", "bogus", "toggle telepathy", "exit"]
        mock_session_class.return_value = session

        run_panel(Settings(data_dir=str(tmp_path)))

        assert session.prompt.call_count == 5

    @patch("multimodal_prompt.cli.app.PromptSession")
    def test_stops_on_eof(self, mock_session_class, tmp_path):
        session = MagicMock()
        session.prompt.side_effect = EOFError
        mock_session_class.return_value = session

        run_panel(Settings(data_dir=str(tmp_path)))

        assert session.prompt.call_count == 1
