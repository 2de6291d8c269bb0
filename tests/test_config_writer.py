# tests/test_config_writer.py
"""
Tests for persisting the assembled config.
"""

from __future__ import annotations

import json

import pytest

from chatbot_config.config.writer import write_config
from chatbot_config.core.exceptions import ConfigWriteError
from chatbot_config.wizard.assembler import assemble_config

pytestmark = pytest.mark.tier2


def _config():
    answers = {
        "prefix": "démo",
        "privateWebsite": False,
        "bedrockEnable": False,
        "enableRag": False,
    }
    return assemble_config(answers, [], None)


class TestWriteConfig:
    """Tests for write_config."""

    def test_writes_pretty_json_to_workspace(self, workspace):
        path = write_config(_config())

        assert path == workspace / "bin" / "config.json"
        text = path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "prefix": "démo",\n  "privateWebsite": false,')
        assert json.loads(text)["rag"]["enabled"] is False

    def test_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("old contents", encoding="utf-8")

        write_config(_config(), path)

        assert json.loads(path.read_text(encoding="utf-8"))["prefix"] == "démo"

    def test_unwritable_path_raises(self, tmp_path):
        blocker = tmp_path / "bin"
        blocker.write_text("a file where the directory should be", encoding="utf-8")

        with pytest.raises(ConfigWriteError, match="Failed to write config"):
            write_config(_config(), blocker / "config.json")
