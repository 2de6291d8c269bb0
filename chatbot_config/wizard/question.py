# chatbot_config/wizard/question.py
"""
Question declarations and validators.

A Question is static data: what to ask, how to validate the answer, and
under which earlier answers it is shown. The engine (engine.py) evaluates a
list of them in order.

Visibility predicates only ever see the answers named in ``depends_on``;
check_dependency_order() asserts those were declared earlier.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence

from chatbot_config.core.exceptions import WizardDefinitionError

# question name -> answer value
AnswerSet = dict[str, Any]

# value -> None when valid, otherwise the reason shown to the user
Validator = Callable[[Any], Optional[str]]

Predicate = Callable[[Mapping[str, Any]], bool]


class QuestionType(str, Enum):
    """How a question is asked."""

    TEXT = "text"
    BOOLEAN = "boolean"
    SELECT = "single-select"
    MULTI_SELECT = "multi-select"
    NESTED_LOOP = "nested-loop"


@dataclass(frozen=True)
class Choice:
    """A selectable option. ``label`` is display-only."""

    name: str
    label: str = ""

    @property
    def display(self) -> str:
        return self.label or self.name


def choices_of(values: Sequence[Any]) -> tuple[Choice, ...]:
    """Build choices from plain strings or str-valued enum members."""
    return tuple(Choice(getattr(v, "value", v)) for v in values)


def _always(_: Mapping[str, Any]) -> bool:
    return True


@dataclass(frozen=True)
class Question:
    """
    One prompt in the wizard.

    Attributes:
        name: Unique key in the AnswerSet
        type: How the question is asked
        message: Prompt text
        default: Pre-filled answer
        choices: Options for select types
        validator: Returns a reason string for invalid answers
        depends_on: Names of earlier questions the predicate reads
        visible: Predicate over the depends_on answers
        skip_value: Stored when the question is not shown (None = unset)
        hint: Extra help line for select types
        loop: Runner for NESTED_LOOP questions, called with the collector
    """

    name: str
    type: QuestionType
    message: str
    default: Any = None
    choices: tuple[Choice, ...] = ()
    validator: Optional[Validator] = None
    depends_on: tuple[str, ...] = ()
    visible: Predicate = _always
    skip_value: Any = None
    hint: str = ""
    loop: Optional[Callable[[Any], Any]] = field(default=None, compare=False)

    @property
    def choice_names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.choices)

    def is_visible(self, answers: Mapping[str, Any]) -> bool:
        """Evaluate the predicate over a read-only view of its dependencies."""
        if not self.depends_on:
            return self.visible(MappingProxyType({}))
        view = {name: answers.get(name) for name in self.depends_on}
        return self.visible(MappingProxyType(view))

    def validate(self, value: Any) -> Optional[str]:
        """Type checks first, then the custom validator."""
        if self.type == QuestionType.SELECT and value not in self.choice_names:
            return f"Choose one of: {', '.join(self.choice_names)}"
        if self.type == QuestionType.MULTI_SELECT:
            unknown = [v for v in value if v not in self.choice_names]
            if unknown:
                return f"Unknown choices: {', '.join(unknown)}"
        if self.validator is not None:
            return self.validator(value)
        return None


# =============================================================================
# Ordering Check
# =============================================================================


def check_dependency_order(questions: Sequence[Question]) -> None:
    """
    Assert names are unique and every dependency is declared earlier.

    Raises:
        WizardDefinitionError: On a duplicate name or forward/self reference
    """
    seen: set[str] = set()
    for question in questions:
        if question.name in seen:
            raise WizardDefinitionError(f"Duplicate question name '{question.name}'")
        for dep in question.depends_on:
            if dep not in seen:
                raise WizardDefinitionError(
                    f"Question '{question.name}' depends on '{dep}', "
                    f"which is not declared before it"
                )
        if question.type in (QuestionType.SELECT, QuestionType.MULTI_SELECT) and not question.choices:
            raise WizardDefinitionError(f"Question '{question.name}' has no choices")
        if question.type == QuestionType.NESTED_LOOP and question.loop is None:
            raise WizardDefinitionError(f"Question '{question.name}' has no loop runner")
        seen.add(question.name)


# =============================================================================
# Validators
# =============================================================================


def matches(pattern: re.Pattern[str], reason: str, allow_empty: bool = False) -> Validator:
    """Validator accepting strings matching ``pattern`` (optionally empty)."""

    def _validate(value: Any) -> Optional[str]:
        text = value or ""
        if allow_empty and text == "":
            return None
        if pattern.match(text):
            return None
        return reason

    return _validate


def at_least_one(reason: str) -> Validator:
    """Validator for multi-select questions that are shown."""

    def _validate(value: Any) -> Optional[str]:
        return None if value else reason

    return _validate


def known_choices(defaults: Sequence[str], choices: Sequence[Choice]) -> list[str]:
    """Drop saved selections that no longer exist in the catalog."""
    names = {c.name for c in choices}
    return [d for d in defaults if d in names]
