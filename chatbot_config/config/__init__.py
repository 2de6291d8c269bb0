# chatbot_config/config/__init__.py
"""
SystemConfig schema, loading and writing.

Usage:
    from chatbot_config.config import load_defaults, write_config

    defaults = load_defaults()
    ...
    write_config(config)
"""

from chatbot_config.config.loader import WizardDefaults, load_defaults, load_existing_config
from chatbot_config.config.schema import KendraSourceDescriptor, SystemConfig
from chatbot_config.config.writer import write_config

__all__ = [
    "KendraSourceDescriptor",
    "SystemConfig",
    "WizardDefaults",
    "load_defaults",
    "load_existing_config",
    "write_config",
]
