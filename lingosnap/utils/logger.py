"""Logging setup shared by all modules."""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Get a configured logger.

    Handlers are attached to the package root logger only once, so calling
    this from every module is cheap.

    Args:
        name: Logger name (usually __name__)
        level: Log level name (defaults to Config.LOG_LEVEL)
        log_file: Optional file to mirror the log into (defaults to Config.LOG_FILE)

    Returns:
        Logger instance
    """
    from ..config import Config

    root = logging.getLogger("lingosnap")
    if not getattr(root, "_lingosnap_configured", False):
        root.setLevel(level or Config.LOG_LEVEL)
        formatter = logging.Formatter(LOG_FORMAT)

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

        log_file = log_file or Config.LOG_FILE
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        root._lingosnap_configured = True

    return logging.getLogger(name)
