from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = str(Path("~/.local/state/klaudiusz-sandbox/setup.log").expanduser())
FALLBACK_LOG_NAME = "klaudiusz-sandbox-setup.log"

_CONFIGURED_ATTR = "_klaudiusz_configured"
_LOG_PATH_ATTR = "_klaudiusz_log_path"
_HANDLERS_ATTR = "_klaudiusz_handlers"


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.DEBUG,
    also_console: bool = False,
) -> str:
    """Configure logging.

    Every run is recorded to a log file; the terminal only shows the
    reporter's summary lines unless also_console is set.

    Notes:
    - If the requested log location is not writable we fall back to a file
      in the working directory.
    - Calling this twice is a no-op that returns the path chosen first.

    Returns the actual file path being used, or "" when no location was
    writable and records only go to stderr.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    if getattr(logger, _CONFIGURED_ATTR, False):
        return getattr(logger, _LOG_PATH_ATTR, log_path)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handlers: list[logging.Handler] = []
    file_handler: Optional[logging.Handler] = None
    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        chosen_path = log_path
    except OSError:
        chosen_path = str(Path.cwd() / FALLBACK_LOG_NAME)
        try:
            file_handler = logging.FileHandler(chosen_path, encoding="utf-8")
        except OSError:
            # No writable location at all: keep the records on stderr.
            chosen_path = ""
            also_console = True

    if file_handler is not None:
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, _CONFIGURED_ATTR, True)
    setattr(logger, _LOG_PATH_ATTR, chosen_path)
    setattr(logger, _HANDLERS_ATTR, handlers)

    logging.getLogger(__name__).info(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path


def reset_logging() -> None:
    """Detach the handlers added by configure_logging().

    Test hook: lets each test start from an unconfigured root logger.
    """

    logger = logging.getLogger()
    if not getattr(logger, _CONFIGURED_ATTR, False):
        return
    for h in getattr(logger, _HANDLERS_ATTR, []):
        logger.removeHandler(h)
        h.close()
    setattr(logger, _HANDLERS_ATTR, [])
    setattr(logger, _CONFIGURED_ATTR, False)
