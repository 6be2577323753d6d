# shopapi/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "shopapi"


def setup_logger(level: Union[str, int] = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the "shopapi" logger shared by the stores and the HTTP layer.

    - Console output always, daily rotating file output when log_file is given
    - Unified format with timestamp, level and logger name
    - Safe to call more than once (handlers are only attached the first time)
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logger initialized")
    return logger
