# chatbot_config/wizard/kendra.py
"""
Kendra source sub-wizard.

Asks a fixed six-question block once per external Kendra index until the
user declines to add another. Previously configured indexes seed the
defaults, last one first; after they run out, blocks start empty. Answers
seeded from an existing index keep that index's position in the result.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

from chatbot_config.config.schema import KendraSourceDescriptor
from chatbot_config.core.constants import (
    IAM_ROLE_ARN_RE,
    KENDRA_ID_RE,
    SOURCE_NAME_RE,
    SupportedRegion,
)
from chatbot_config.logging.logger import get_logger
from chatbot_config.logging.tags import KENDRA
from chatbot_config.wizard.engine import AnswerCollector, run_questions
from chatbot_config.wizard.question import (
    AnswerSet,
    Question,
    QuestionType,
    choices_of,
    matches,
)

logger = get_logger(__name__)

REGION_CHOICES = choices_of(list(SupportedRegion))

validate_source_name = matches(
    SOURCE_NAME_RE,
    "Use at least 2 letters, digits, '_' or '-', not starting or ending with '-'",
)
validate_role_arn = matches(
    IAM_ROLE_ARN_RE,
    "Must be empty or match arn:aws:iam::<account-id>:role/<name>",
    allow_empty=True,
)
validate_kendra_id = matches(
    KENDRA_ID_RE,
    "Must be a UUID like 12345678-1234-1234-1234-123456789012",
)


def build_source_questions(seed: Optional[KendraSourceDescriptor] = None) -> list[Question]:
    """The per-index block, pre-filled from ``seed`` when given."""
    region = seed.region.value if seed is not None else REGION_CHOICES[0].name
    region_note = f" ({seed.region.value})" if seed is not None else ""

    return [
        Question(
            name="name",
            type=QuestionType.TEXT,
            message="Kendra source name",
            default=seed.name if seed is not None else "",
            validator=validate_source_name,
        ),
        Question(
            name="region",
            type=QuestionType.SELECT,
            message=f"Region of the Kendra index{region_note}",
            default=region,
            choices=REGION_CHOICES,
        ),
        Question(
            name="roleArn",
            type=QuestionType.TEXT,
            message="Cross account role Arn to assume to call Kendra, leave empty if not needed",
            default=(seed.role_arn or "") if seed is not None else "",
            validator=validate_role_arn,
        ),
        Question(
            name="kendraId",
            type=QuestionType.TEXT,
            message="Kendra ID",
            default=seed.kendra_id if seed is not None else "",
            validator=validate_kendra_id,
        ),
        Question(
            name="enabled",
            type=QuestionType.BOOLEAN,
            message="Enable this index",
            default=seed.enabled if seed is not None else True,
        ),
        Question(
            name="newKendra",
            type=QuestionType.BOOLEAN,
            message="Do you want to add another Kendra source",
            default=False,
        ),
    ]


def descriptor_from_answers(answers: AnswerSet) -> KendraSourceDescriptor:
    """Build a descriptor from one block's answers; empty roleArn becomes unset."""
    return KendraSourceDescriptor(
        enabled=answers["enabled"],
        name=answers["name"],
        role_arn=answers["roleArn"] or None,
        kendra_id=answers["kendraId"],
        region=SupportedRegion(answers["region"]),
    )


def run_kendra_wizard(
    collector: AnswerCollector,
    existing: Iterable[KendraSourceDescriptor] = (),
) -> list[KendraSourceDescriptor]:
    """
    Collect external Kendra indexes.

    Args:
        collector: Source of answers
        existing: Previously configured indexes in declaration order

    Returns:
        Descriptors answered from a seed, in their original order, followed
        by newly added descriptors in entry order
    """
    remaining = deque(existing)
    seeded: list[KendraSourceDescriptor] = []
    added: list[KendraSourceDescriptor] = []

    add_another = True
    while add_another:
        seed = remaining.pop() if remaining else None
        answers = run_questions(build_source_questions(seed), collector)
        source = descriptor_from_answers(answers)
        # Seeds are offered last-first; store them back in their original slot.
        if seed is not None:
            seeded.insert(0, source)
        else:
            added.append(source)
        logger.info(f"{KENDRA} Added source '{source.name}' ({source.region.value})")
        add_another = answers["newKendra"]

    return seeded + added
