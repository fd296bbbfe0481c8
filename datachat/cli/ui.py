# datachat/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from datachat.cli.ui import ui

    ui.header("Tables")
    ui.success("Done!")
    question = ui.prompt_text("Question")
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.syntax import Syntax
from rich.table import Table

console = Console()


class UI:
    """Consistent styling for every datachat command."""

    # -------------------------------------------------------------------------
    # Output Methods
    # -------------------------------------------------------------------------

    def print(self, msg: str, style: str = "") -> None:
        """Print a plain message. Text is never parsed as markup."""
        if style:
            console.print(f"[{style}]{escape(msg)}[/{style}]", soft_wrap=True)
        else:
            console.print(escape(msg), soft_wrap=True)

    def header(self, title: str, subtitle: str = "") -> None:
        """
        Print a command header.

        Args:
            title: Main header title
            subtitle: Optional subtitle (dim text below title)
        """
        if subtitle:
            content = f"[bold]{escape(title)}[/bold]\n[dim]{escape(subtitle)}[/dim]"
        else:
            content = f"[bold]{escape(title)}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def section(self, title: str) -> None:
        console.print(f"\n[bold cyan]{escape(title)}[/bold cyan]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {escape(msg)}", soft_wrap=True)

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}", soft_wrap=True)

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}{detail_str}", soft_wrap=True)

    def info(self, msg: str) -> None:
        console.print(f"[dim]{escape(msg)}[/dim]", soft_wrap=True)

    # -------------------------------------------------------------------------
    # Prompt Methods
    # -------------------------------------------------------------------------

    def prompt_text(self, prompt: str, default: str = "") -> str:
        if default:
            return Prompt.ask(prompt, default=default, console=console)
        return Prompt.ask(prompt, console=console)

    def prompt_confirm(self, prompt: str, default: bool = True) -> bool:
        return Confirm.ask(prompt, default=default, console=console)

    # -------------------------------------------------------------------------
    # Tables and Code
    # -------------------------------------------------------------------------

    def table(
        self,
        headers: list[str],
        rows: list[list[Any]],
        title: str = "",
    ) -> None:
        """Print a table. None cells render empty."""
        table = Table(title=title or None, show_header=True, header_style="bold")
        for header in headers:
            table.add_column(header, overflow="fold")
        for row in rows:
            table.add_row(*("" if cell is None else str(cell) for cell in row))
        console.print(table)

    def syntax(self, code: str, language: str = "sql") -> None:
        console.print(Syntax(code, language, theme="monokai", word_wrap=True))

    def markdown(self, text: str) -> None:
        console.print(Markdown(text))


ui = UI()

__all__ = ["ui", "console", "UI"]
