# chatbot_config/logging/__init__.py
from chatbot_config.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
