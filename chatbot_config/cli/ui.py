# chatbot_config/cli/ui.py
"""
Shared UI helpers for the CLI.

Usage:
    from chatbot_config.cli.ui import ui

    ui.section("Chatbot Config")
    ui.success("Done!")
    name = ui.prompt_text("Enter name", default="default")

    # Numbered choice selection
    region = ui.prompt_numbered_choice("Region", ["us-east-1", "us-west-2"], "us-east-1")
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.syntax import Syntax

console = Console()


class UI:
    """Rich-backed output and prompt primitives."""

    # -------------------------------------------------------------------------
    # Output Methods
    # -------------------------------------------------------------------------

    def section(self, title: str) -> None:
        """Print a section header."""
        console.print(f"\n[bold cyan]{title}[/bold cyan]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {msg}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {msg}")

    def warning(self, msg: str) -> None:
        console.print(f"[yellow]⚠[/yellow] {msg}")

    def syntax(self, code: str, language: str = "json") -> None:
        """Print syntax-highlighted code."""
        console.print(Syntax(code, language, theme="monokai", line_numbers=False))

    # -------------------------------------------------------------------------
    # Prompt Methods
    # -------------------------------------------------------------------------

    def prompt_text(self, prompt: str, default: str = "") -> str:
        """Prompt for text input. An empty reply returns ``default``."""
        return Prompt.ask(prompt, default=default, show_default=bool(default), console=console)

    def prompt_confirm(self, prompt: str, default: bool = True) -> bool:
        """Prompt for yes/no confirmation."""
        return Confirm.ask(prompt, default=default, console=console)

    def prompt_numbered_choice(
        self,
        prompt: str,
        choices: list[str],
        default: str = "",
    ) -> str:
        """
        Prompt for a numbered choice selection.

        The default option is always shown at position [1].

        Example output:
            Region where Bedrock is available:
              [1] us-east-1 (default)
              [2] us-west-2
            Choice [1]:
            → us-east-1
        """
        if not choices:
            return default

        if default not in choices:
            default = choices[0]

        ordered_choices = [default] + [c for c in choices if c != default]

        console.print(f"  [bold]{prompt}:[/bold]")
        for i, choice in enumerate(ordered_choices, 1):
            if choice == default:
                console.print(f"    [cyan][{i}][/cyan] {escape(choice)} [dim](default)[/dim]")
            else:
                console.print(f"    [cyan][{i}][/cyan] {escape(choice)}")

        while True:
            response = Prompt.ask("  Choice", default="1", console=console)
            try:
                idx = int(response)
            except ValueError:
                console.print("  [red]Please enter a number[/red]")
                continue

            if 1 <= idx <= len(ordered_choices):
                selected = ordered_choices[idx - 1]
                console.print(f"  [dim]→ {escape(selected)}[/dim]")
                return selected
            console.print(f"  [red]Please enter 1-{len(ordered_choices)}[/red]")

    def prompt_multi_select(
        self,
        prompt: str,
        choices: list[tuple[str, str]],
        defaults: Optional[list[str]] = None,
        hint: str = "",
    ) -> list[str]:
        """
        Prompt for multi-select with toggle.

        Example output:
            Which datastores do you want to enable for RAG:
              [1] [x] aurora - Aurora
              [2] [ ] opensearch - OpenSearch
              [3] [ ] kendra - Kendra (managed)
            Toggle (1-3), 'a' for all, 'n' for none, Enter to confirm

        Args:
            prompt: Prompt text
            choices: List of (name, description) tuples
            defaults: Names selected initially (None = nothing selected)
            hint: Extra help line

        Returns:
            Selected names in choice order
        """
        if not choices:
            return []

        names = [name for name, _ in choices]
        selected = set(defaults or [])

        while True:
            console.print(f"\n  [bold]{prompt}:[/bold]")
            if hint:
                console.print(f"  [dim]{escape(hint)}[/dim]")
            for i, (name, desc) in enumerate(choices, 1):
                check = "[green]x[/green]" if name in selected else " "
                desc_str = f" [dim]- {escape(desc)}[/dim]" if desc else ""
                console.print(f"    [cyan][{i}][/cyan] \\[{check}] {escape(name)}{desc_str}")

            console.print(
                f"\n  [dim]Toggle (1-{len(choices)}), 'a' for all, 'n' for none, Enter to confirm[/dim]"
            )
            response = Prompt.ask("  ", default="", show_default=False, console=console)
            response = response.strip().lower()

            if response == "":
                result = [name for name in names if name in selected]
                console.print(f"  [dim]→ {escape(', '.join(result)) if result else '(none)'}[/dim]")
                return result

            if response == "a":
                selected = set(names)
            elif response == "n":
                selected = set()
            else:
                for part in response.split(","):
                    try:
                        idx = int(part.strip())
                    except ValueError:
                        continue
                    if 1 <= idx <= len(choices):
                        selected ^= {names[idx - 1]}


ui = UI()

__all__ = ["ui", "console", "UI"]
