# tests/test_cli_create.py
"""
Tests for the command surface.
"""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from chatbot_config import __version__
from chatbot_config.cli.cli import app
from chatbot_config.core.exceptions import AssemblyError

pytestmark = pytest.mark.tier2

runner = CliRunner()

BASIC_SCRIPT = dict(
    prefix=["demo"],
    bedrockEnable=[True],
    bedrockRegion=["us-east-1"],
    bedrockRoleArn=[""],
    enableRag=[True],
    ragsToEnable=[["aurora"]],
    kendra=[False],
    defaultEmbedding=["amazon.titan-embed-text-v1"],
)


def _invoke(collector, args=(), confirm=True):
    with (
        patch("chatbot_config.cli.commands.create.TerminalCollector", return_value=collector),
        patch("chatbot_config.cli.commands.create.ui.prompt_confirm", return_value=confirm),
    ):
        return runner.invoke(app, list(args))


class TestVersionAndHelp:
    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "--prefix" in result.output


class TestCreateCommand:
    """Tests for the default wizard action."""

    def test_writes_config_on_confirm(self, workspace, scripted):
        result = _invoke(scripted(**BASIC_SCRIPT))

        assert result.exit_code == 0, result.output
        assert "Configuration written to" in result.output
        data = json.loads((workspace / "bin" / "config.json").read_text(encoding="utf-8"))
        assert data["prefix"] == "demo"
        assert data["bedrock"] == {"enabled": True, "region": "us-east-1"}
        assert data["rag"]["engines"]["aurora"] == {"enabled": True}

    def test_declined_confirmation_writes_nothing(self, workspace, scripted):
        result = _invoke(scripted(**BASIC_SCRIPT), confirm=False)

        assert result.exit_code == 0
        assert "Skipping" in result.output
        assert not (workspace / "bin" / "config.json").exists()

    def test_prefix_flag_overrides_loaded_prefix(self, workspace, scripted):
        _invoke(scripted(**BASIC_SCRIPT))
        collector = scripted()

        result = _invoke(collector, ["--prefix", "override"])

        assert result.exit_code == 0, result.output
        assert collector.defaults_seen["prefix"] == ["override"]
        data = json.loads((workspace / "bin" / "config.json").read_text(encoding="utf-8"))
        assert data["prefix"] == "override"

    def test_existing_config_seeds_defaults(self, workspace, scripted):
        _invoke(scripted(**BASIC_SCRIPT))
        collector = scripted()

        _invoke(collector)

        assert collector.defaults_seen["prefix"] == ["demo"]
        assert collector.defaults_seen["ragsToEnable"] == [["aurora"]]
        assert collector.defaults_seen["defaultEmbedding"] == ["amazon.titan-embed-text-v1"]

    def test_malformed_existing_config_aborts_before_prompting(self, workspace, scripted):
        path = workspace / "bin" / "config.json"
        path.parent.mkdir(parents=True)
        path.write_text("{broken", encoding="utf-8")
        collector = scripted()

        result = _invoke(collector)

        assert result.exit_code == 1
        assert "Could not complete the operation." in result.output
        assert "Invalid JSON" in result.output
        assert collector.asked == []

    def test_undecodable_existing_config_aborts(self, workspace, scripted):
        path = workspace / "bin" / "config.json"
        path.parent.mkdir(parents=True)
        path.write_bytes(b"\xff\xfe")
        collector = scripted()

        result = _invoke(collector)

        assert result.exit_code == 1
        assert "Could not complete the operation." in result.output
        assert "Failed to read config" in result.output
        assert collector.asked == []

    def test_user_abort_writes_nothing(self, workspace, scripted):
        collector = scripted()

        def interrupted(question):
            raise KeyboardInterrupt

        collector.ask = interrupted

        result = _invoke(collector)

        assert result.exit_code == 1
        assert "Aborted" in result.output
        assert not (workspace / "bin" / "config.json").exists()

    def test_assembly_error_is_fatal(self, workspace, scripted):
        with patch(
            "chatbot_config.cli.commands.create.assemble_from_answers",
            side_effect=AssemblyError("Default embedding 'x' is not in the embedding catalog"),
        ):
            result = _invoke(scripted(**BASIC_SCRIPT))

        assert result.exit_code == 1
        assert "embedding catalog" in result.output
        assert not (workspace / "bin" / "config.json").exists()
