# chatbot_config/core/__init__.py
"""
Core building blocks shared by the wizard and the CLI.

- constants: fixed catalogs and region enumerations
- exceptions: error hierarchy
- paths: well-known file locations
"""

from chatbot_config.core.exceptions import (
    AssemblyError,
    ChatbotConfigError,
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    ConfigWriteError,
    WizardDefinitionError,
    WizardError,
)
from chatbot_config.core.paths import ConfigPaths

__all__ = [
    "AssemblyError",
    "ChatbotConfigError",
    "ConfigError",
    "ConfigParseError",
    "ConfigPaths",
    "ConfigValidationError",
    "ConfigWriteError",
    "WizardDefinitionError",
    "WizardError",
]
