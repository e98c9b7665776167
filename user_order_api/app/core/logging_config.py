"""
Logging setup shared by the user and order services.

``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger.  Both application factories call it, and
running both services in one process calls it twice, so only the first
call has any effect.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# The order service's user lookups go through urllib3, which logs every
# connection at DEBUG.
NOISY_LOGGERS = ("urllib3",)

LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_log_level(level: str) -> str:
    """Return the canonical name for ``level``, or ``"INFO"`` if unknown."""
    name = level.upper()
    if name == "WARN":
        return "WARNING"
    return name if name in LEVEL_NAMES else "INFO"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, resolve_log_level(level))
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
