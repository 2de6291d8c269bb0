# chatbot_config/core/constants.py
"""
Fixed enumerations and model catalogs surfaced to the user.

Changing a catalog here changes both the wizard choices and the assembled
config. Entries are plain data; the schema module turns them into models.
"""

from __future__ import annotations

import re
from enum import Enum

# =============================================================================
# Regions
# =============================================================================


class SupportedRegion(str, Enum):
    """AWS regions a Kendra index can live in."""

    AF_SOUTH_1 = "af-south-1"
    AP_EAST_1 = "ap-east-1"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_NORTHEAST_3 = "ap-northeast-3"
    AP_SOUTH_1 = "ap-south-1"
    AP_SOUTH_2 = "ap-south-2"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_SOUTHEAST_3 = "ap-southeast-3"
    AP_SOUTHEAST_4 = "ap-southeast-4"
    CA_CENTRAL_1 = "ca-central-1"
    EU_CENTRAL_1 = "eu-central-1"
    EU_CENTRAL_2 = "eu-central-2"
    EU_NORTH_1 = "eu-north-1"
    EU_SOUTH_1 = "eu-south-1"
    EU_SOUTH_2 = "eu-south-2"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_3 = "eu-west-3"
    IL_CENTRAL_1 = "il-central-1"
    ME_CENTRAL_1 = "me-central-1"
    ME_SOUTH_1 = "me-south-1"
    SA_EAST_1 = "sa-east-1"
    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"


class SupportedBedrockRegion(str, Enum):
    """Regions where Bedrock can be invoked."""

    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    EU_CENTRAL_1 = "eu-central-1"
    US_EAST_1 = "us-east-1"
    US_WEST_2 = "us-west-2"


DEFAULT_BEDROCK_REGION = SupportedBedrockRegion.US_EAST_1.value


# =============================================================================
# Inference Models
# =============================================================================


class SupportedSageMakerModel(str, Enum):
    """SageMaker-hosted LLMs, suffixed with the instance size hosting them."""

    FALCON_LITE = "FalconLite [ml.g5.12xlarge]"
    LLAMA2_13B_CHAT = "Llama2_13b_Chat [ml.g5.12xlarge]"
    MISTRAL_7B_INSTRUCT = "Mistral7b_Instruct [ml.g5.2xlarge]"
    MISTRAL_7B_INSTRUCT2 = "Mistral7b_Instruct2 [ml.g5.2xlarge]"
    IDEFICS_9B = "Idefics_9b (Multimodal) [ml.g5.12xlarge]"
    IDEFICS_80B = "Idefics_80b (Multimodal) [ml.g5.48xlarge]"


# =============================================================================
# Retrieval Engines
# =============================================================================

AURORA = "aurora"
OPENSEARCH = "opensearch"
KENDRA = "kendra"

# (name, label) in display order
RAG_ENGINES: tuple[tuple[str, str], ...] = (
    (AURORA, "Aurora"),
    (OPENSEARCH, "OpenSearch"),
    (KENDRA, "Kendra (managed)"),
)


# =============================================================================
# Embedding / Cross-Encoder Catalogs
# =============================================================================

# The first entry is the forced default when RAG is disabled.
EMBEDDING_MODELS: tuple[dict, ...] = (
    {"provider": "sagemaker", "name": "intfloat/multilingual-e5-large", "dimensions": 1024},
    {"provider": "sagemaker", "name": "sentence-transformers/all-MiniLM-L6-v2", "dimensions": 384},
    {"provider": "bedrock", "name": "amazon.titan-embed-text-v1", "dimensions": 1536},
    {"provider": "openai", "name": "text-embedding-ada-002", "dimensions": 1536},
)

EMBEDDING_MODEL_NAMES: tuple[str, ...] = tuple(m["name"] for m in EMBEDDING_MODELS)

CROSS_ENCODER_MODELS: tuple[dict, ...] = (
    {"provider": "sagemaker", "name": "cross-encoder/ms-marco-MiniLM-L-12-v2"},
)


# =============================================================================
# Validation Patterns
# =============================================================================

IAM_ROLE_ARN_RE = re.compile(r"^arn:aws[\w-]*:iam::\d{12}:role/[\w+=,.@/-]+$")
KENDRA_ID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
SOURCE_NAME_RE = re.compile(r"^\w[\w-]*\w$")
