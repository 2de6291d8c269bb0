# chatbot_config/cli/__init__.py
"""
chatbot-config CLI.

Usage:
    chatbot-config                 # Run the wizard
    chatbot-config --prefix demo   # Override the prefix default
    chatbot-config --version       # Print the version
"""

from chatbot_config.cli.cli import app

__all__ = ["app"]
