# chatbot_config/cli/prompter.py
"""
Terminal answer collector.

Maps each question type onto a UI prompt primitive. Validation and re-asking
are handled by the wizard engine; this class only asks and reports.
"""

from __future__ import annotations

from typing import Any

from chatbot_config.cli.ui import UI, ui
from chatbot_config.wizard.question import Question, QuestionType


class TerminalCollector:
    """AnswerCollector that prompts on the console."""

    def __init__(self, terminal: UI = ui):
        self.ui = terminal

    def ask(self, question: Question) -> Any:
        if question.type == QuestionType.TEXT:
            return self.ui.prompt_text(question.message, default=question.default or "")

        if question.type == QuestionType.BOOLEAN:
            return self.ui.prompt_confirm(question.message, default=bool(question.default))

        if question.type == QuestionType.SELECT:
            return self.ui.prompt_numbered_choice(
                question.message, list(question.choice_names), question.default or ""
            )

        if question.type == QuestionType.MULTI_SELECT:
            return self.ui.prompt_multi_select(
                question.message,
                [(c.name, c.label) for c in question.choices],
                defaults=list(question.default or []),
                hint=question.hint,
            )

        raise ValueError(f"Question '{question.name}' of type {question.type.value} cannot be prompted")

    def reject(self, question: Question, reason: str) -> None:
        self.ui.error(reason)
