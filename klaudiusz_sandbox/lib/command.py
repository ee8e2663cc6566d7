from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

# Exit status a POSIX shell reports for a command it cannot find.
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(str(a)) for a in argv)


def run_cmd(argv: Sequence[str], *, capture: bool = True) -> CmdResult:
    """Run a command to completion with consistent logging.

    - Always logs the command.
    - capture=True collects stdout/stderr (logged at DEBUG); capture=False
      lets the child write straight to the terminal.
    - A missing executable is reported as exit status 127, like a shell would.
    """

    argv_list = [str(a) for a in argv]
    logger.info("CMD %s", fmt_argv(argv_list))

    try:
        if capture:
            p = subprocess.run(
                argv_list,
                text=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        else:
            p = subprocess.run(argv_list)
    except FileNotFoundError as e:
        logger.warning("Executable not found: %s", argv_list[0])
        return CmdResult(argv=argv_list, returncode=COMMAND_NOT_FOUND, stdout="", stderr=str(e))

    stdout = p.stdout or ""
    stderr = p.stderr or ""
    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())
    logger.info("EXIT %d", p.returncode)

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)


class CommandRunner(Protocol):
    """Capability for talking to external programs."""

    def is_available(self, name: str) -> bool:
        ...

    def run(self, argv: Sequence[str]) -> int:
        """Run to completion, streaming output to the terminal."""
        ...

    def run_quiet(self, argv: Sequence[str]) -> int:
        """Run to completion with output captured; only the exit status matters."""
        ...


class SubprocessRunner:
    def is_available(self, name: str) -> bool:
        found = shutil.which(name)
        logger.debug("which %s -> %s", name, found)
        return found is not None

    def run(self, argv: Sequence[str]) -> int:
        return run_cmd(argv, capture=False).returncode

    def run_quiet(self, argv: Sequence[str]) -> int:
        return run_cmd(argv, capture=True).returncode
