"""
Logging setup for the API process.

``setup_logging`` is called by ``create_app`` with the level and log
file from ``Settings``.  Records go to stderr and, when ``LOG_FILE``
is set, are appended to that file as well.  If the root logger
already has handlers (uvicorn or pytest installed them first) the
call leaves them alone.
"""

import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    ``level`` is a level name such as ``"debug"``; unknown names mean
    ``INFO``.
    """
    if logging.getLogger().handlers:
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )
