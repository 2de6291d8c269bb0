"""
chatbot-config - configuration wizard for the chatbot deployment stack.

Asks a sequence of conditional questions, validates every answer and writes
the resulting SystemConfig document to bin/config.json, where the deployment
tooling picks it up.

Architecture:
    chatbot_config/
    ├── core/       # Catalogs, paths, exceptions
    ├── config/     # SystemConfig schema, loading and writing
    ├── wizard/     # Question graph, engine, Kendra loop, assembler
    └── cli/        # Typer app and terminal answer collector

Usage:
    $ chatbot-config
    $ chatbot-config --prefix demo
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
