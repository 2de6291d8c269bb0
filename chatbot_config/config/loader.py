# chatbot_config/config/loader.py
"""
Existing-config loading.

Reads a previously written SystemConfig (if any) and flattens it into the
WizardDefaults bag used to pre-populate every prompt. The file is read-only
input here: it is never modified in place.

Usage:
    from chatbot_config.config.loader import load_defaults

    defaults = load_defaults()            # empty bag if no file exists
    defaults.prefix, defaults.enable_rag
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from chatbot_config.config.schema import KendraSourceDescriptor, SystemConfig
from chatbot_config.core.constants import AURORA, KENDRA, OPENSEARCH
from chatbot_config.core.exceptions import ConfigParseError, ConfigValidationError
from chatbot_config.core.paths import ConfigPaths
from chatbot_config.logging.logger import get_logger
from chatbot_config.logging.tags import CONFIG

logger = get_logger(__name__)


# =============================================================================
# Defaults Bag
# =============================================================================


@dataclass(frozen=True)
class WizardDefaults:
    """
    Flattened view of a prior SystemConfig.

    Every field has an "empty" value so a fresh run needs no special casing.
    None means "no prior answer"; the question then uses its own fallback.
    """

    prefix: Optional[str] = None
    private_website: bool = False
    certificate: Optional[str] = None
    domain: Optional[str] = None
    bedrock_enable: Optional[bool] = None
    bedrock_region: Optional[str] = None
    bedrock_role_arn: Optional[str] = None
    enable_sagemaker_models: bool = False
    sagemaker_models: tuple[str, ...] = ()
    enable_rag: bool = False
    rags_to_enable: tuple[str, ...] = ()
    kendra_enterprise: bool = False
    kendra_external: tuple[KendraSourceDescriptor, ...] = field(default=())
    default_embedding: Optional[str] = None

    @classmethod
    def from_config(cls, config: SystemConfig) -> "WizardDefaults":
        """Flatten a loaded SystemConfig into prompt defaults."""
        engines = config.rag.engines

        # "kendra" is pre-selected only when the deployment creates its own
        # index; external indexes alone are offered through the Kendra loop.
        rags: list[str] = []
        if engines.aurora.enabled:
            rags.append(AURORA)
        if engines.opensearch.enabled:
            rags.append(OPENSEARCH)
        if engines.kendra.create_index:
            rags.append(KENDRA)

        bedrock = config.bedrock
        return cls(
            prefix=config.prefix,
            private_website=config.private_website,
            certificate=config.certificate,
            domain=config.domain,
            bedrock_enable=bedrock.enabled if bedrock is not None else False,
            bedrock_region=bedrock.region if bedrock is not None else None,
            bedrock_role_arn=bedrock.role_arn if bedrock is not None else None,
            enable_sagemaker_models=len(config.llms.sagemaker) > 0,
            sagemaker_models=tuple(config.llms.sagemaker),
            enable_rag=config.rag.enabled,
            rags_to_enable=tuple(rags),
            kendra_enterprise=engines.kendra.enterprise,
            kendra_external=tuple(engines.kendra.external),
            default_embedding=config.rag.default_embedding.name,
        )

    def with_prefix(self, prefix: Optional[str]) -> "WizardDefaults":
        """Return a copy whose prefix is overridden (no-op for None)."""
        if prefix is None:
            return self
        return replace(self, prefix=prefix)


# =============================================================================
# Loading Functions
# =============================================================================


def load_existing_config(path: Union[str, Path, None] = None) -> Optional[SystemConfig]:
    """
    Load a prior SystemConfig.

    Args:
        path: Config file; defaults to ConfigPaths.config()

    Returns:
        The parsed config, or None if the file doesn't exist

    Raises:
        ConfigParseError: If the file is unreadable or not valid JSON
        ConfigValidationError: If the JSON doesn't match SystemConfig
    """
    p = Path(path) if path is not None else ConfigPaths.config()

    if not p.exists():
        logger.debug(f"{CONFIG} No existing config at {p}")
        return None

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a JSON object", path=p)

    try:
        config = SystemConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise ConfigValidationError(
            f"Invalid config at {location}: {first['msg']}", path=p
        ) from e

    logger.info(f"{CONFIG} Loaded existing config from {p}")
    return config


def load_defaults(path: Union[str, Path, None] = None) -> WizardDefaults:
    """Load the prior config and flatten it; empty defaults if none exists."""
    config = load_existing_config(path)
    if config is None:
        return WizardDefaults()
    return WizardDefaults.from_config(config)


__all__ = ["WizardDefaults", "load_defaults", "load_existing_config"]
