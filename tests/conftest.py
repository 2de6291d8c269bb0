# tests/conftest.py
"""
Shared fixtures.

Test Tiers:
- tier1: pure logic, no I/O (question graph, engine, assembler)
- tier2: CLI and file I/O with mocks
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any

import pytest

from chatbot_config.core.paths import ConfigPaths
from chatbot_config.wizard.question import Question

_DEFAULT = object()


class ScriptedCollector:
    """
    AnswerCollector that replays scripted answers.

    ``script`` maps a question name to a list of answers given in turn (the
    Kendra block asks the same names once per index). Names that are not
    scripted, or whose list is exhausted, get the question's default.
    """

    def __init__(self, script: dict[str, list[Any]] | None = None):
        self.script = {name: list(values) for name, values in (script or {}).items()}
        self.asked: list[str] = []
        self.defaults_seen: dict[str, list[Any]] = defaultdict(list)
        self.rejections: list[tuple[str, str]] = []

    def ask(self, question: Question) -> Any:
        self.asked.append(question.name)
        self.defaults_seen[question.name].append(question.default)
        queue = self.script.get(question.name)
        if queue:
            return queue.pop(0)
        return question.default

    def reject(self, question: Question, reason: str) -> None:
        self.rejections.append((question.name, reason))


@pytest.fixture
def scripted():
    """Factory: scripted(name=[answers, ...], ...) -> ScriptedCollector."""

    def _make(**script: list[Any]) -> ScriptedCollector:
        return ScriptedCollector(script)

    return _make


@pytest.fixture
def workspace(tmp_path):
    """Point ConfigPaths at a temporary workspace."""
    ConfigPaths.set_workspace(tmp_path)
    yield tmp_path
    ConfigPaths.reset()

