# todoapp/core/logging_config.py

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(name)s:%(levelname)s] %(message)s"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger and align uvicorn/fastapi loggers to it.

    Handlers are only attached the first time; later calls just adjust
    levels, so no extra file handles are opened.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handlers = [logging.StreamHandler(sys.stdout)]
        if log_file:
            handlers.append(logging.FileHandler(log_file, mode="a"))
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, handlers=handlers)
    else:
        root.setLevel(numeric_level)

    # Set uvicorn loggers to same level
    for name in ("uvicorn.error", "uvicorn.access", "fastapi"):
        logging.getLogger(name).setLevel(numeric_level)

    logger = logging.getLogger("todoapp")
    logger.setLevel(numeric_level)
    logger.info(f"Logging configured at {logging.getLevelName(numeric_level)} level")
    return logger
