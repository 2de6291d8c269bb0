# chatbot_config/config/writer.py
"""
Persist an assembled SystemConfig.

Only called after the user confirmed. A full new document always replaces
any previous file at the same path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from chatbot_config.config.schema import SystemConfig
from chatbot_config.core.exceptions import ConfigWriteError
from chatbot_config.core.paths import ConfigPaths
from chatbot_config.logging.logger import get_logger
from chatbot_config.logging.tags import CONFIG

logger = get_logger(__name__)


def write_config(config: SystemConfig, path: Union[str, Path, None] = None) -> Path:
    """
    Write the config as 2-space-indented UTF-8 JSON.

    Args:
        config: Assembled document
        path: Target file; defaults to ConfigPaths.config()

    Returns:
        The path written to

    Raises:
        ConfigWriteError: If the directory or file cannot be written
    """
    p = Path(path) if path is not None else ConfigPaths.config()

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(config.to_json(), encoding="utf-8")
    except OSError as e:
        raise ConfigWriteError(f"Failed to write config: {e}", path=p) from e

    logger.info(f"{CONFIG} Wrote config to {p}")
    return p
