# chatbot_config/wizard/questions.py
"""
The main question graph.

Questions are declared in dependency order. Each shown-when rule reads only
earlier answers, and every hidden question stores an explicit skip value:

    certificate, domain      <- privateWebsite        (unset)
    bedrockRegion, RoleArn   <- bedrockEnable         (unset)
    sagemakerModels          <- enableSagemakerModels ([])
    ragsToEnable             <- enableRag             ([])
    kendraEnterprise         <- ragsToEnable has kendra (False)
    kendra                   <- enableRag             (False)
    kendraExternal           <- enableRag, kendra     ([])
    defaultEmbedding         <- enableRag             (unset)
"""

from __future__ import annotations

from functools import partial

from chatbot_config.config.loader import WizardDefaults
from chatbot_config.core.constants import (
    DEFAULT_BEDROCK_REGION,
    EMBEDDING_MODEL_NAMES,
    IAM_ROLE_ARN_RE,
    KENDRA,
    RAG_ENGINES,
    SupportedBedrockRegion,
    SupportedSageMakerModel,
)
from chatbot_config.wizard.kendra import run_kendra_wizard
from chatbot_config.wizard.question import (
    Choice,
    Question,
    QuestionType,
    at_least_one,
    choices_of,
    known_choices,
    matches,
)

BEDROCK_REGION_CHOICES = choices_of(list(SupportedBedrockRegion))
SAGEMAKER_MODEL_CHOICES = choices_of(list(SupportedSageMakerModel))
RAG_ENGINE_CHOICES = tuple(Choice(name, label) for name, label in RAG_ENGINES)
EMBEDDING_CHOICES = choices_of(EMBEDDING_MODEL_NAMES)

validate_bedrock_role_arn = matches(
    IAM_ROLE_ARN_RE,
    "Must be empty or match arn:aws:iam::<account-id>:role/<name>",
    allow_empty=True,
)


def _flag(name: str):
    """Shown-when rule: the earlier boolean answer ``name`` is true."""
    return lambda answers: bool(answers[name])


def build_questions(defaults: WizardDefaults) -> list[Question]:
    """
    Declare the ordered question list, pre-filled from ``defaults``.

    Args:
        defaults: Flattened prior config (WizardDefaults() for a fresh run)

    Returns:
        Questions ready for run_questions()
    """
    bedrock_enable = defaults.bedrock_enable if defaults.bedrock_enable is not None else True
    default_embedding = defaults.default_embedding
    if default_embedding not in EMBEDDING_MODEL_NAMES:
        default_embedding = EMBEDDING_MODEL_NAMES[0]
    bedrock_region = defaults.bedrock_region
    if bedrock_region not in {c.name for c in BEDROCK_REGION_CHOICES}:
        bedrock_region = DEFAULT_BEDROCK_REGION

    return [
        Question(
            name="prefix",
            type=QuestionType.TEXT,
            message="Prefix to differentiate this deployment",
            default=defaults.prefix or "",
        ),
        Question(
            name="privateWebsite",
            type=QuestionType.BOOLEAN,
            message="Do you want to deploy a private website? I.e only accessible in VPC",
            default=defaults.private_website,
        ),
        Question(
            name="certificate",
            type=QuestionType.TEXT,
            message="ACM certificate ARN",
            default=defaults.certificate or "",
            depends_on=("privateWebsite",),
            visible=_flag("privateWebsite"),
        ),
        Question(
            name="domain",
            type=QuestionType.TEXT,
            message="Domain for private website",
            default=defaults.domain or "",
            depends_on=("privateWebsite",),
            visible=_flag("privateWebsite"),
        ),
        Question(
            name="bedrockEnable",
            type=QuestionType.BOOLEAN,
            message="Do you have access to Bedrock and want to enable it",
            default=bedrock_enable,
        ),
        Question(
            name="bedrockRegion",
            type=QuestionType.SELECT,
            message="Region where Bedrock is available",
            default=bedrock_region,
            choices=BEDROCK_REGION_CHOICES,
            depends_on=("bedrockEnable",),
            visible=_flag("bedrockEnable"),
        ),
        Question(
            name="bedrockRoleArn",
            type=QuestionType.TEXT,
            message="Cross account role arn to invoke Bedrock - leave empty if Bedrock is in same account",
            default=defaults.bedrock_role_arn or "",
            validator=validate_bedrock_role_arn,
            depends_on=("bedrockEnable",),
            visible=_flag("bedrockEnable"),
        ),
        Question(
            name="enableSagemakerModels",
            type=QuestionType.BOOLEAN,
            message="Do you want to use any Sagemaker Models",
            default=defaults.enable_sagemaker_models,
        ),
        Question(
            name="sagemakerModels",
            type=QuestionType.MULTI_SELECT,
            message="Which SageMaker Models do you want to enable",
            hint="[denotes instance size to host model]",
            default=known_choices(defaults.sagemaker_models, SAGEMAKER_MODEL_CHOICES),
            choices=SAGEMAKER_MODEL_CHOICES,
            validator=at_least_one("You need to select at least one model"),
            depends_on=("enableSagemakerModels",),
            visible=_flag("enableSagemakerModels"),
            skip_value=[],
        ),
        Question(
            name="enableRag",
            type=QuestionType.BOOLEAN,
            message="Do you want to enable RAG",
            default=defaults.enable_rag,
        ),
        Question(
            name="ragsToEnable",
            type=QuestionType.MULTI_SELECT,
            message="Which datastores do you want to enable for RAG",
            default=known_choices(defaults.rags_to_enable, RAG_ENGINE_CHOICES),
            choices=RAG_ENGINE_CHOICES,
            validator=at_least_one("You need to select at least one engine"),
            depends_on=("enableRag",),
            visible=_flag("enableRag"),
            skip_value=[],
        ),
        Question(
            name="kendraEnterprise",
            type=QuestionType.BOOLEAN,
            message="Do you want to enable Kendra Enterprise Edition?",
            default=defaults.kendra_enterprise,
            depends_on=("ragsToEnable",),
            visible=lambda answers: KENDRA in answers["ragsToEnable"],
            skip_value=False,
        ),
        Question(
            name="kendra",
            type=QuestionType.BOOLEAN,
            message="Do you want to add existing Kendra indexes",
            default=len(defaults.kendra_external) > 0,
            depends_on=("enableRag",),
            visible=_flag("enableRag"),
            skip_value=False,
        ),
        Question(
            name="kendraExternal",
            type=QuestionType.NESTED_LOOP,
            message="Existing Kendra indexes",
            depends_on=("enableRag", "kendra"),
            visible=lambda answers: bool(answers["enableRag"] and answers["kendra"]),
            skip_value=[],
            loop=partial(run_kendra_wizard, existing=defaults.kendra_external),
        ),
        Question(
            name="defaultEmbedding",
            type=QuestionType.SELECT,
            message="Which is the default embedding model",
            default=default_embedding,
            choices=EMBEDDING_CHOICES,
            depends_on=("enableRag",),
            visible=_flag("enableRag"),
        ),
    ]
