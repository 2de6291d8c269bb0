# chatbot_config/logging/tags.py
"""
Logging subsystem tags.

Prefix log messages with these so output stays searchable:
    logger.info(f"{WIZARD} Asking {question.name}")
"""

CLI = "[CLI]"
CONFIG = "[CONFIG]"
WIZARD = "[WIZARD]"
KENDRA = "[KENDRA]"
ASSEMBLER = "[ASSEMBLER]"
