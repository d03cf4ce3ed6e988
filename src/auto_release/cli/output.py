"""Console output helpers.

ReleaseLogger prints prefixed, colored status lines through rich consoles.
Messages are escaped, so changelog text with square brackets is printed
verbatim rather than parsed as markup.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

SCRIPT_NAME = "Auto Release"


class ReleaseLogger:
    """Status output for release commands.

    Normal output goes to ``console``; errors go to ``err_console``.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        *,
        dry_run: bool = False,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.dry_run = dry_run

    @property
    def prefix(self) -> str:
        tag = f"[bold cyan]{escape(f'[{SCRIPT_NAME}]')}[/]"
        if self.dry_run:
            return f"{tag} [dim](dry run)[/]"
        return tag

    def _print(self, console: Console, message: str) -> None:
        console.print(message, soft_wrap=True, highlight=False, emoji=False)

    def info(self, message: str) -> None:
        self._print(self.console, f"{self.prefix} {escape(message)}")

    def success(self, message: str) -> None:
        self._print(self.console, f"{self.prefix} [green]{escape(message)}[/]")

    def warn(self, message: str) -> None:
        self._print(self.console, f"{self.prefix} [yellow]{escape(message)}[/]")

    def error(self, message: str) -> None:
        self._print(self.err_console, f"{self.prefix} [red]{escape(message)}[/]")

    def block(self, title: str, content: str) -> None:
        """Print a title line followed by raw multi-line content."""
        self.info(title)
        self.console.print(content, markup=False, highlight=False, emoji=False, soft_wrap=True)


def console_confirm(prompt: str, console: Console | None = None) -> bool:
    """Ask a single yes/no question; only ``y`` (any case) counts as yes.

    A closed or empty stdin counts as no.
    """
    try:
        answer = (console or Console()).input(prompt)
    except EOFError:
        return False
    return answer.strip().lower() == "y"


def configure_logging(verbose: bool = False) -> None:
    """Route library log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
