"""Tests for the terminal prompter and reporter."""

import logging
from unittest.mock import patch

import pytest
from rich.console import Console
from rich.prompt import Confirm

from klaudiusz_sandbox.prompt import ConsolePrompter
from klaudiusz_sandbox.reporter import Reporter


@pytest.mark.parametrize("answer", [True, False])
def test_console_prompter_returns_answer(console: Console, answer: bool) -> None:
    prompter = ConsolePrompter(console)

    with patch.object(Confirm, "ask", return_value=answer) as mock_ask:
        assert prompter.confirm("Continue?", default=not answer) is answer

    mock_ask.assert_called_once_with("Continue?", default=not answer, console=console)


@pytest.mark.parametrize("default", [True, False])
def test_console_prompter_eof_uses_default(console: Console, default: bool) -> None:
    """Closed stdin (e.g. piped install) takes the default answer."""
    prompter = ConsolePrompter(console)

    with patch.object(Confirm, "ask", side_effect=EOFError):
        assert prompter.confirm("Continue?", default=default) is default


def test_reporter_escapes_markup(console: Console) -> None:
    Reporter(console).success("copied [bold]literally[/bold]")

    assert "✓ copied [bold]literally[/bold]" in console.file.getvalue()


def test_reporter_step_counter(console: Console) -> None:
    Reporter(console).step("2/4", "Installing Dockerfile template...")

    assert "[2/4] Installing Dockerfile template..." in console.file.getvalue()


def test_reporter_mirrors_to_log(console: Console, caplog: pytest.LogCaptureFixture) -> None:
    reporter = Reporter(console)

    with caplog.at_level(logging.INFO, logger="klaudiusz_sandbox.reporter"):
        reporter.warn("image in use")
        reporter.error("build failed")

    levels = {(r.levelno, r.getMessage()) for r in caplog.records}
    assert (logging.WARNING, "image in use") in levels
    assert (logging.ERROR, "build failed") in levels


def test_reporter_long_lines_not_wrapped(console: Console) -> None:
    line = "alias klaudiusz='" + "x" * 300 + "'"

    Reporter(console).info(line)

    assert line in console.file.getvalue()
