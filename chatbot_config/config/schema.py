# chatbot_config/config/schema.py
"""
Schema of the SystemConfig document.

This is the SINGLE source of truth for the file the wizard writes and the
deployment tooling reads. Python attributes are snake_case; the JSON keys are
camelCase through the alias generator, in declaration order.

Schema hierarchy:
- SystemConfig: top-level deployment document
  - BedrockConfig: optional Bedrock access settings
  - LlmsConfig: selected inference models
  - RagConfig: retrieval-augmentation settings
    - RagEngines: per-engine enablement (aurora, opensearch, kendra)
      - KendraEngineConfig / KendraSourceDescriptor
    - EmbeddingModel / CrossEncoderModel catalogs
"""

from __future__ import annotations

import json
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from chatbot_config.core.constants import (
    IAM_ROLE_ARN_RE,
    KENDRA_ID_RE,
    SOURCE_NAME_RE,
    SupportedRegion,
)

_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="forbid",
)


# =============================================================================
# Bedrock / LLMs
# =============================================================================


class BedrockConfig(BaseModel):
    """Bedrock access. The block is omitted entirely when Bedrock is off."""

    enabled: bool = True
    region: str
    role_arn: Optional[str] = Field(
        default=None, description="Cross-account role; unset for same account"
    )

    model_config = _MODEL_CONFIG


class LlmsConfig(BaseModel):
    """Inference models to deploy."""

    sagemaker: list[str] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


# =============================================================================
# RAG Engines
# =============================================================================


class KendraSourceDescriptor(BaseModel):
    """
    A pre-existing Kendra index the deployment should query.

    Example:
        >>> KendraSourceDescriptor(
        ...     name="hr-docs",
        ...     region="eu-west-1",
        ...     kendra_id="12345678-1234-1234-1234-123456789012",
        ... )
    """

    enabled: bool = True
    name: str
    role_arn: Optional[str] = None
    kendra_id: str
    region: SupportedRegion

    model_config = _MODEL_CONFIG

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        if not SOURCE_NAME_RE.match(v):
            raise ValueError("name must match ^\\w[\\w-]*\\w$")
        return v

    @field_validator("role_arn", mode="before")
    @classmethod
    def _check_role_arn(cls, v: Optional[str]) -> Optional[str]:
        if v == "":
            return None
        if v is not None and not IAM_ROLE_ARN_RE.match(v):
            raise ValueError("roleArn must be an IAM role ARN")
        return v

    @field_validator("kendra_id")
    @classmethod
    def _check_kendra_id(cls, v: str) -> str:
        if not KENDRA_ID_RE.match(v):
            raise ValueError("kendraId must be a UUID")
        return v


class EngineToggle(BaseModel):
    enabled: bool = False

    model_config = _MODEL_CONFIG


class KendraEngineConfig(BaseModel):
    """
    Kendra engine settings.

    create_index and the external list are independent; enabled is derived
    from them and must agree.
    """

    enabled: bool = False
    create_index: bool = False
    external: list[KendraSourceDescriptor] = Field(default_factory=list)
    enterprise: bool = False

    model_config = _MODEL_CONFIG

    @model_validator(mode="after")
    def _check_enabled(self) -> "KendraEngineConfig":
        expected = self.create_index or len(self.external) > 0
        if self.enabled != expected:
            raise ValueError("kendra.enabled must equal createIndex or a non-empty external list")
        return self


class RagEngines(BaseModel):
    aurora: EngineToggle = Field(default_factory=EngineToggle)
    opensearch: EngineToggle = Field(default_factory=EngineToggle)
    kendra: KendraEngineConfig = Field(default_factory=KendraEngineConfig)

    model_config = _MODEL_CONFIG


# =============================================================================
# Model Catalogs
# =============================================================================


class EmbeddingModel(BaseModel):
    provider: Literal["sagemaker", "bedrock", "openai"]
    name: str
    dimensions: int = Field(..., gt=0)
    default: bool = False

    model_config = _MODEL_CONFIG


class CrossEncoderModel(BaseModel):
    provider: Literal["sagemaker"]
    name: str
    default: bool = False

    model_config = _MODEL_CONFIG


class RagConfig(BaseModel):
    """
    Retrieval-augmentation block.

    Invariants:
        - disabled RAG means every engine is disabled and no external
          Kendra index is listed
        - exactly one embedding model and one cross-encoder are default
    """

    enabled: bool = False
    engines: RagEngines = Field(default_factory=RagEngines)
    embeddings_models: list[EmbeddingModel]
    cross_encoder_models: list[CrossEncoderModel]

    model_config = _MODEL_CONFIG

    @model_validator(mode="after")
    def _check_invariants(self) -> "RagConfig":
        if not self.enabled:
            engines = self.engines
            if engines.aurora.enabled or engines.opensearch.enabled or engines.kendra.enabled:
                raise ValueError("engines must be disabled when rag is disabled")
            if engines.kendra.external:
                raise ValueError("kendra.external must be empty when rag is disabled")

        defaults = [m for m in self.embeddings_models if m.default]
        if len(defaults) != 1:
            raise ValueError(
                f"exactly one embedding model must be default, found {len(defaults)}"
            )
        cross_defaults = [m for m in self.cross_encoder_models if m.default]
        if len(cross_defaults) != 1:
            raise ValueError(
                f"exactly one cross-encoder model must be default, found {len(cross_defaults)}"
            )
        return self

    @property
    def default_embedding(self) -> EmbeddingModel:
        return next(m for m in self.embeddings_models if m.default)


# =============================================================================
# Top-level Document
# =============================================================================


class SystemConfig(BaseModel):
    """
    The complete deployment document written to bin/config.json.

    Example JSON (abridged):
        {
          "prefix": "demo",
          "privateWebsite": false,
          "bedrock": {"enabled": true, "region": "us-east-1"},
          "llms": {"sagemaker": []},
          "rag": {"enabled": true, "engines": {...}, ...}
        }
    """

    prefix: str = ""
    private_website: bool = False
    certificate: Optional[str] = None
    domain: Optional[str] = None
    bedrock: Optional[BedrockConfig] = None
    llms: LlmsConfig = Field(default_factory=LlmsConfig)
    rag: RagConfig

    model_config = _MODEL_CONFIG

    def to_dict(self) -> dict:
        """JSON-ready dict with camelCase keys; unset fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Canonical text form: 2-space indent, declared key order."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


__all__ = [
    "BedrockConfig",
    "CrossEncoderModel",
    "EmbeddingModel",
    "EngineToggle",
    "KendraEngineConfig",
    "KendraSourceDescriptor",
    "LlmsConfig",
    "RagConfig",
    "RagEngines",
    "SystemConfig",
]
