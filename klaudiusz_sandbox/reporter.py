"""User-facing terminal output.

Everything printed here is also written to the log, so the log file holds
the full story of a run even though the terminal shows the short version.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

logger = logging.getLogger(__name__)


class Reporter:
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False, emoji=False)

    def banner(self, title: str, subtitle: Optional[str] = None, *, style: str = "blue") -> None:
        logger.info("== %s ==", title)
        body = Text(title, style=f"bold {style}")
        if subtitle:
            body.append("\n")
            body.append(subtitle, style="dim")
        self.console.print()
        self.console.print(Panel(Align.center(body), border_style=style, width=46))

    def step(self, counter: str, message: str) -> None:
        logger.info("[%s] %s", counter, message)
        self.console.print(f"\n[blue]\\[{counter}] {escape(message)}[/blue]", soft_wrap=True)

    def success(self, message: str) -> None:
        logger.info(message)
        self.console.print(f"  [green]✓ {escape(message)}[/green]", soft_wrap=True)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.console.print(f"  [yellow]! {escape(message)}[/yellow]", soft_wrap=True)

    def error(self, message: str) -> None:
        logger.error(message)
        self.console.print(f"  [red]✗ {escape(message)}[/red]", soft_wrap=True)

    def hint(self, message: str) -> None:
        logger.info("hint: %s", message)
        self.console.print(f"    [dim]{escape(message)}[/dim]", soft_wrap=True)

    def info(self, message: str = "", *, style: str = "") -> None:
        if message:
            logger.info(message)
        text = escape(message)
        self.console.print(f"[{style}]{text}[/{style}]" if style and text else text, soft_wrap=True)
