from __future__ import annotations

import logging
from typing import Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm

logger = logging.getLogger(__name__)


class Prompter(Protocol):
    def confirm(self, question: str, *, default: bool) -> bool:
        ...


class ConsolePrompter:
    """Asks yes/no questions on the terminal."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def confirm(self, question: str, *, default: bool) -> bool:
        try:
            answer = Confirm.ask(question, default=default, console=self.console)
        except EOFError:
            # stdin closed (piped / non-interactive run)
            self.console.print()
            answer = default
        logger.info("Prompt %r -> %s", question, "yes" if answer else "no")
        return bool(answer)
