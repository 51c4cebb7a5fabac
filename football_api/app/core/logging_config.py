"""
Logging configuration for the Football API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger exactly once.  Every module logs through
``logging.getLogger(__name__)`` so records carry the module path, e.g.
``football_api.app.services.equipe_service``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    debug : bool
        When false, uvicorn's per-request access log is limited to
        warnings since every handler already logs its own request line.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (pytest's capture handler, or a second create_app call).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if not debug:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
