from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

IMAGE_NAME = "claude-dev-bun"
ALIAS_NAME = "klaudiusz"
SANDBOX_DIRNAME = ".klaudiusz-sandbox"
SHELL_RC_NAMES = (".zshrc", ".bashrc")

DOCKERFILE_NAME = "Dockerfile.bun"
DOCKERIGNORE_NAME = ".dockerignore"

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

DEFAULT_DOCKERIGNORE = """\
# Exclude everything by default (future-proof)
*

# Include only what the Dockerfile needs
!plugins/
!plugins/**
!agents/
!agents/**
!skills/
!skills/**
!settings.json
"""


@dataclass(frozen=True)
class SandboxConfig:
    """Every path and name the installer touches, resolved once at startup."""

    home: Path
    claude_home: Path
    sandbox_home: Path
    image_name: str = IMAGE_NAME
    template_dir: Path = TEMPLATE_DIR
    alias_name: str = ALIAS_NAME
    shell_rc_names: Tuple[str, ...] = SHELL_RC_NAMES

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        home: Optional[Path] = None,
    ) -> "SandboxConfig":
        env = os.environ if environ is None else environ
        home_dir = Path(home) if home is not None else Path.home()

        override = env.get("CLAUDE_HOME")
        claude_home = Path(override).expanduser() if override else home_dir / ".claude"

        return cls(
            home=home_dir,
            claude_home=claude_home,
            sandbox_home=home_dir / SANDBOX_DIRNAME,
        )

    @property
    def dockerfile_path(self) -> Path:
        return self.sandbox_home / DOCKERFILE_NAME

    @property
    def dockerignore_path(self) -> Path:
        return self.claude_home / DOCKERIGNORE_NAME

    @property
    def dockerfile_template(self) -> Path:
        return self.template_dir / DOCKERFILE_NAME

    @property
    def dockerignore_template(self) -> Path:
        return self.template_dir / DOCKERIGNORE_NAME

    @property
    def shell_rc_candidates(self) -> list[Path]:
        return [self.home / name for name in self.shell_rc_names]
