# chatbot_config/cli/commands/__init__.py
"""CLI command implementations."""
