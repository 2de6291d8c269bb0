# chatbot_config/wizard/assembler.py
"""
Config assembly.

Turns the flat AnswerSet into the nested SystemConfig in a single step. The
function is pure: no prompts, no I/O, no partially built documents.

Derivation rules:
    - certificate/domain only for private websites
    - bedrock block only when Bedrock is enabled; "" role ARN -> unset
    - sagemaker models only when SageMaker models are enabled
    - engine flags from the ragsToEnable selection, all off without RAG
    - kendra.enabled = createIndex or any external index
    - exactly one default embedding (catalog's first when RAG is off)
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from pydantic import ValidationError

from chatbot_config.config.schema import (
    BedrockConfig,
    CrossEncoderModel,
    EmbeddingModel,
    EngineToggle,
    KendraEngineConfig,
    KendraSourceDescriptor,
    LlmsConfig,
    RagConfig,
    RagEngines,
    SystemConfig,
)
from chatbot_config.core.constants import (
    AURORA,
    CROSS_ENCODER_MODELS,
    EMBEDDING_MODELS,
    KENDRA,
    OPENSEARCH,
)
from chatbot_config.core.exceptions import AssemblyError
from chatbot_config.logging.logger import get_logger
from chatbot_config.logging.tags import ASSEMBLER

logger = get_logger(__name__)


def build_embedding_catalog(default_name: str) -> list[EmbeddingModel]:
    """
    The fixed embedding catalog with ``default_name`` flagged.

    Raises:
        AssemblyError: If no catalog entry has that name
    """
    if not any(m["name"] == default_name for m in EMBEDDING_MODELS):
        raise AssemblyError(
            f"Default embedding '{default_name}' is not in the embedding catalog"
        )
    return [EmbeddingModel(**m, default=m["name"] == default_name) for m in EMBEDDING_MODELS]


def build_cross_encoder_catalog() -> list[CrossEncoderModel]:
    return [CrossEncoderModel(**m, default=True) for m in CROSS_ENCODER_MODELS]


def assemble_config(
    answers: Mapping[str, Any],
    kendra_external: Sequence[KendraSourceDescriptor],
    default_embedding: Optional[str],
) -> SystemConfig:
    """
    Build the SystemConfig from a completed answer set.

    Args:
        answers: Flat answers keyed by question name; skipped questions may
            be absent and are read as false/empty/unset
        kendra_external: Descriptors collected by the Kendra loop
        default_embedding: Selected default embedding name

    Returns:
        Fully formed, validated SystemConfig

    Raises:
        AssemblyError: If the answers violate the assembler contract
    """
    private_website = bool(answers.get("privateWebsite", False))
    enable_rag = bool(answers.get("enableRag", False))
    selected = list(answers.get("ragsToEnable") or []) if enable_rag else []
    sagemaker = (
        list(answers.get("sagemakerModels") or []) if answers.get("enableSagemakerModels") else []
    )

    if enable_rag:
        if default_embedding is None:
            raise AssemblyError("RAG is enabled but no default embedding was selected")
        external = list(kendra_external)
        enterprise = KENDRA in selected and bool(answers.get("kendraEnterprise", False))
    else:
        default_embedding = EMBEDDING_MODELS[0]["name"]
        external = []
        enterprise = False

    create_index = KENDRA in selected

    try:
        bedrock = None
        if answers.get("bedrockEnable", False):
            bedrock = BedrockConfig(
                enabled=True,
                region=answers.get("bedrockRegion"),
                role_arn=answers.get("bedrockRoleArn") or None,
            )

        config = SystemConfig(
            prefix=answers.get("prefix") or "",
            private_website=private_website,
            certificate=(answers.get("certificate") or None) if private_website else None,
            domain=(answers.get("domain") or None) if private_website else None,
            bedrock=bedrock,
            llms=LlmsConfig(sagemaker=sagemaker),
            rag=RagConfig(
                enabled=enable_rag,
                engines=RagEngines(
                    aurora=EngineToggle(enabled=AURORA in selected),
                    opensearch=EngineToggle(enabled=OPENSEARCH in selected),
                    kendra=KendraEngineConfig(
                        enabled=create_index or len(external) > 0,
                        create_index=create_index,
                        external=external,
                        enterprise=enterprise,
                    ),
                ),
                embeddings_models=build_embedding_catalog(default_embedding),
                cross_encoder_models=build_cross_encoder_catalog(),
            ),
        )
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise AssemblyError(f"Assembled config is invalid at {location}: {first['msg']}") from e

    logger.debug(
        f"{ASSEMBLER} Assembled config for prefix '{config.prefix}' "
        f"(rag={enable_rag}, engines={selected}, external={len(external)})"
    )
    return config


def assemble_from_answers(answers: Mapping[str, Any]) -> SystemConfig:
    """Assemble using the Kendra loop output and embedding choice stored in ``answers``."""
    return assemble_config(
        answers,
        kendra_external=answers.get("kendraExternal") or [],
        default_embedding=answers.get("defaultEmbedding"),
    )
