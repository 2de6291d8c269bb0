# chatbot_config/wizard/__init__.py
"""
The wizard core: question graph, evaluation engine, Kendra loop, assembler.

Usage:
    from chatbot_config.wizard import build_questions, run_questions, assemble_from_answers

    answers = run_questions(build_questions(defaults), collector)
    config = assemble_from_answers(answers)
"""

from chatbot_config.wizard.assembler import assemble_config, assemble_from_answers
from chatbot_config.wizard.engine import AnswerCollector, run_questions
from chatbot_config.wizard.kendra import run_kendra_wizard
from chatbot_config.wizard.question import (
    AnswerSet,
    Choice,
    Question,
    QuestionType,
    check_dependency_order,
)
from chatbot_config.wizard.questions import build_questions

__all__ = [
    "AnswerCollector",
    "AnswerSet",
    "Choice",
    "Question",
    "QuestionType",
    "assemble_config",
    "assemble_from_answers",
    "build_questions",
    "check_dependency_order",
    "run_kendra_wizard",
    "run_questions",
]
