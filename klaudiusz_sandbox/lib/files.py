from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> bool:
    """Create ``path`` (and parents) if needed. Returns True if it was created."""

    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    logger.info("Created directory %s", path)
    return True


def copy_file(src: Path, dst: Path) -> None:
    if not src.is_file():
        raise FileNotFoundError(str(src))

    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dst)
    logger.info("Copied %s -> %s", src, dst)


def write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))


def remove_tree(path: Path) -> bool:
    """Remove a directory tree. Returns False when there was nothing to remove."""

    if not path.exists():
        return False
    shutil.rmtree(path)
    logger.info("Removed directory %s", path)
    return True


def remove_file(path: Path) -> bool:
    if not path.exists() and not path.is_symlink():
        return False
    path.unlink()
    logger.info("Removed file %s", path)
    return True
