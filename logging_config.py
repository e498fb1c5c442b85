import logging
import sys
from typing import Optional

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured_handlers = []


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Configure the root logger with a console handler and an optional file handler.

    Safe to call more than once: handlers installed by a previous call are replaced.
    """
    root = logging.getLogger()
    for handler in _configured_handlers:
        root.removeHandler(handler)
        handler.close()
    _configured_handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    _configured_handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        _configured_handlers.append(file_handler)

    for handler in _configured_handlers:
        root.addHandler(handler)
    root.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))

    # redis-py is chatty at DEBUG
    logging.getLogger("redis").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_success(logger: logging.Logger, message: str, *args, **kwargs):
    logger.log(SUCCESS, message, *args, **kwargs)
