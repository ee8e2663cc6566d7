"""Shell resource file helpers for the sandbox alias.

The alias rebuilds the image quietly (a cached build is near-instant) and
then starts ``claude`` inside ``docker sandbox run`` using that image as the
template, so the sandbox always reflects the current configuration home.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .command import fmt_argv

logger = logging.getLogger(__name__)

ALIAS_COMMENT = "# Klaudiusz Sandbox"


def alias_command(*, image_name: str, dockerfile: Path, context_dir: Path) -> str:
    build = fmt_argv(["docker", "build", "-q", "-t", image_name, "-f", str(dockerfile), str(context_dir)])
    run = fmt_argv(["docker", "sandbox", "run", "--template", image_name, "claude"])
    return f"{build} >/dev/null && {run}"


def alias_line(alias_name: str, command: str) -> str:
    # Single quotes around the whole command; embedded ones become '\''.
    quoted = command.replace("'", "'\\''")
    return f"alias {alias_name}='{quoted}'"


def alias_marker(alias_name: str) -> str:
    return f"alias {alias_name}="


def has_alias(rc_path: Path, alias_name: str) -> bool:
    content = rc_path.read_text(encoding="utf-8", errors="replace")
    return alias_marker(alias_name) in content


def append_alias(rc_path: Path, line: str) -> None:
    """Append the comment + alias block to ``rc_path``."""

    with rc_path.open("a", encoding="utf-8") as f:
        f.write(f"\n{ALIAS_COMMENT}\n{line}\n")
    logger.info("Appended alias to %s", rc_path)


def existing_rc_files(candidates: list[Path]) -> list[Path]:
    return [p for p in candidates if p.is_file()]


def rc_files_with_alias(candidates: list[Path], alias_name: str) -> list[Path]:
    """RC files that define the alias; unreadable files are skipped."""

    found = []
    for rc in existing_rc_files(candidates):
        try:
            if has_alias(rc, alias_name):
                found.append(rc)
        except OSError as e:
            logger.warning("Could not read %s: %s", rc, e)
    return found
