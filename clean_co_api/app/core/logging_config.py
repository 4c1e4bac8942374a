"""
Logging configuration for the Clean Co API.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and, when set,
``LOG_FILE``.  Token rejections, booking changes and storage failures
are all logged through the root handlers installed here.  The MongoDB
driver loggers (pymongo, motor) stay at INFO or above even when the
service runs at DEBUG.  Later calls, for example from tests that build
several applications, leave the existing configuration untouched.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Driver loggers that are far too chatty at DEBUG.
_NOISY_LOGGERS = ("pymongo", "motor")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name such as ``"DEBUG"`` or ``"info"``.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that should receive a copy of every record.
        Resolved relative to the current working directory.
    """
    root = logging.getLogger()
    if root.handlers:
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

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.INFO))
