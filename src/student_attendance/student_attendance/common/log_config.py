from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure root logging once per process.

    A rotating file handler is added when log_file is set.
    """

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB per file
            backupCount=5,
            encoding="utf-8",
        )
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), handlers=handlers)

    # Only warnings and errors from the dev server
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
