"""Shared fixtures: a config rooted in tmp_path plus fake capabilities."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest
from rich.console import Console

from klaudiusz_sandbox.config import SandboxConfig
from klaudiusz_sandbox.logging_utils import reset_logging
from klaudiusz_sandbox.pipeline import StepContext
from klaudiusz_sandbox.reporter import Reporter


class FakeRunner:
    """CommandRunner that records calls and returns scripted exit codes."""

    def __init__(
        self,
        available: Sequence[str] = ("claude", "docker"),
        returncodes: Optional[Dict[str, int]] = None,
    ) -> None:
        self.available = set(available)
        # Keyed by the first two argv items, e.g. "docker build".
        self.returncodes = dict(returncodes or {})
        self.checked: List[str] = []
        self.calls: List[List[str]] = []
        self.quiet_calls: List[List[str]] = []

    def _rc(self, argv: Sequence[str]) -> int:
        return self.returncodes.get(" ".join(argv[:2]), 0)

    def is_available(self, name: str) -> bool:
        self.checked.append(name)
        return name in self.available

    def run(self, argv: Sequence[str]) -> int:
        self.calls.append(list(argv))
        return self._rc(argv)

    def run_quiet(self, argv: Sequence[str]) -> int:
        self.quiet_calls.append(list(argv))
        return self._rc(argv)

    @property
    def all_calls(self) -> List[List[str]]:
        return self.quiet_calls + self.calls


class ScriptedPrompter:
    """Prompter answering from a list; falls back to the default when empty."""

    def __init__(self, answers: Sequence[bool] = ()) -> None:
        self.answers = list(answers)
        self.questions: List[str] = []

    def confirm(self, question: str, *, default: bool) -> bool:
        self.questions.append(question)
        if self.answers:
            return self.answers.pop(0)
        return default


@pytest.fixture(autouse=True)
def _isolated_logging():
    yield
    reset_logging()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    d = tmp_path / "templates"
    d.mkdir()
    (d / "Dockerfile.bun").write_text("FROM scratch\n")
    (d / ".dockerignore").write_text("*\n!settings.json\n")
    return d


@pytest.fixture
def config(home: Path, template_dir: Path) -> SandboxConfig:
    claude_home = home / ".claude"
    claude_home.mkdir()
    return SandboxConfig(
        home=home,
        claude_home=claude_home,
        sandbox_home=home / ".klaudiusz-sandbox",
        template_dir=template_dir,
    )


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False, emoji=False)


@pytest.fixture
def ctx(config: SandboxConfig, runner: FakeRunner, prompter: ScriptedPrompter, console: Console) -> StepContext:
    return StepContext(config=config, runner=runner, prompter=prompter, reporter=Reporter(console))
