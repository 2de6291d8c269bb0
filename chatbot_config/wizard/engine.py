# chatbot_config/wizard/engine.py
"""
Sequential question evaluation.

Each question's visibility is decided right before it would be shown, using
only answers already collected. Hidden questions store their skip value;
shown questions are asked until their validator accepts the answer.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from chatbot_config.logging.logger import get_logger
from chatbot_config.logging.tags import WIZARD
from chatbot_config.wizard.question import (
    AnswerSet,
    Question,
    QuestionType,
    check_dependency_order,
)

logger = get_logger(__name__)


class AnswerCollector(Protocol):
    """
    Something that can answer questions (terminal, test script, ...).

    ask() blocks until one answer is available. reject() is told why the
    last answer was refused; ask() is then called again for the same question.
    """

    def ask(self, question: Question) -> Any: ...

    def reject(self, question: Question, reason: str) -> None: ...


def ask_until_valid(question: Question, collector: AnswerCollector) -> Any:
    """Ask one question, re-asking only it until the answer validates."""
    while True:
        value = collector.ask(question)
        reason = question.validate(value)
        if reason is None:
            return value
        logger.debug(f"{WIZARD} Rejected answer for '{question.name}': {reason}")
        collector.reject(question, reason)


def run_questions(
    questions: Sequence[Question],
    collector: AnswerCollector,
    answers: Optional[AnswerSet] = None,
) -> AnswerSet:
    """
    Evaluate questions in declaration order.

    Args:
        questions: Dependency-ordered question list
        collector: Source of answers
        answers: Answers collected so far (not mutated)

    Returns:
        New AnswerSet containing an entry for every question

    Raises:
        WizardDefinitionError: If the list is not dependency-ordered
    """
    check_dependency_order(questions)

    collected: AnswerSet = dict(answers or {})

    for question in questions:
        if not question.is_visible(collected):
            logger.debug(f"{WIZARD} Skipping '{question.name}'")
            skipped = question.skip_value
            collected[question.name] = list(skipped) if isinstance(skipped, list) else skipped
            continue

        if question.type == QuestionType.NESTED_LOOP:
            logger.debug(f"{WIZARD} Entering loop '{question.name}'")
            collected[question.name] = question.loop(collector)
        else:
            collected[question.name] = ask_until_valid(question, collector)

    return collected
