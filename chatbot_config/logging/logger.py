# chatbot_config/logging/logger.py
"""
Unified logging setup for chatbot-config.

All modules use:
    from chatbot_config.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in the CLI entrypoint. Log output goes to stderr
so it never interleaves with the wizard prompts on stdout.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream=None,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times; handler duplication is prevented.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here; configuration happens in configure_logging().
    """
    return logging.getLogger(name)
