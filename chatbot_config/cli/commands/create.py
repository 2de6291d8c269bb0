# chatbot_config/cli/commands/create.py
"""
Create/update command: run the wizard and write bin/config.json.

Flow:
    load existing config -> questions -> Kendra loop -> embedding choice
    -> assemble -> show -> confirm -> write
"""

from __future__ import annotations

from typing import NoReturn, Optional

import typer

from chatbot_config.cli.prompter import TerminalCollector
from chatbot_config.cli.ui import ui
from chatbot_config.config.loader import load_defaults
from chatbot_config.config.writer import write_config
from chatbot_config.core.exceptions import ChatbotConfigError
from chatbot_config.core.paths import ConfigPaths
from chatbot_config.logging.logger import get_logger
from chatbot_config.logging.tags import CLI
from chatbot_config.wizard import assemble_from_answers, build_questions, run_questions

logger = get_logger(__name__)

CONFIRM_MESSAGE = "Do you want to create/update the configuration based on the above settings"


def _fail(err: Exception) -> NoReturn:
    ui.error("Could not complete the operation.")
    typer.echo(str(err))
    raise typer.Exit(1)


def command(prefix: Optional[str] = None) -> None:
    """
    Run the configuration wizard.

    Args:
        prefix: Overrides the prefix default from the existing config
    """
    config_path = ConfigPaths.config()
    logger.info(f"{CLI} Starting wizard (config: {config_path})")

    try:
        defaults = load_defaults(config_path).with_prefix(prefix)
    except ChatbotConfigError as e:
        _fail(e)

    collector = TerminalCollector(ui)

    try:
        answers = run_questions(build_questions(defaults), collector)
        config = assemble_from_answers(answers)

        ui.section("This is the chosen configuration:")
        ui.syntax(config.to_json(), "json")

        if not ui.prompt_confirm(CONFIRM_MESSAGE, default=True):
            ui.warning("Skipping")
            return

        written = write_config(config, config_path)
    except (KeyboardInterrupt, EOFError):
        ui.warning("Aborted, no configuration written.")
        raise typer.Exit(1)
    except ChatbotConfigError as e:
        _fail(e)

    ui.success(f"Configuration written to {written}")
