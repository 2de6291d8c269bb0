# chatbot_config/core/exceptions.py
"""
All exceptions raised by chatbot-config.

Hierarchy:
    ChatbotConfigError
    ├── ConfigError - Config file failures (carries the offending path)
    │   ├── ConfigParseError - File unreadable or not valid JSON
    │   ├── ConfigValidationError - JSON does not match SystemConfig
    │   └── ConfigWriteError - Output file could not be written
    └── WizardError - Wizard contract failures
        ├── WizardDefinitionError - Question list declared out of order
        └── AssemblyError - Answer set cannot be assembled into a config

Answer validation failures are NOT exceptions: the engine re-prompts the
question with the validator's reason.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ChatbotConfigError(Exception):
    """
    Base exception for every chatbot-config failure.

    The CLI catches this type, prints a one-line summary and exits non-zero.
    """

    pass


# =============================================================================
# Config File Errors
# =============================================================================


class ConfigError(ChatbotConfigError):
    """Base error for configuration file issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigParseError(ConfigError):
    """Raised when the existing config cannot be read or parsed."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when the existing config doesn't match the SystemConfig schema."""

    pass


class ConfigWriteError(ConfigError):
    """Raised when the assembled config cannot be persisted."""

    pass


# =============================================================================
# Wizard Errors
# =============================================================================


class WizardError(ChatbotConfigError):
    """Base error for wizard contract violations."""

    pass


class WizardDefinitionError(WizardError):
    """
    Question list violates the dependency ordering.

    A question may only depend on questions declared strictly before it.
    """

    pass


class AssemblyError(WizardError):
    """
    Answer set is inconsistent with the assembler's contract.

    Signals a defect in question/assembler coupling, never a user input error.
    """

    pass
