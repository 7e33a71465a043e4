import logging
import os
from typing import List, Optional, Union

PathLike = Union[str, os.PathLike]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "hunting_engine.log"
PACKAGE_LOGGER = "hunting_engine"


def _handlers(log_dir: Optional[PathLike]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_dir:
        directory = os.fspath(log_dir)
        os.makedirs(directory, exist_ok=True)
        handlers.append(
            logging.FileHandler(os.path.join(directory, LOG_FILE_NAME), encoding="utf-8")
        )
    return handlers


def configure_logging(
    level: int = logging.INFO,
    log_dir: Optional[PathLike] = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Attach console (and, with `log_dir`, file) handlers to the package logger.

    Called once from `hunting_engine.logger`. Modules call
    `get_logger(__name__)` and inherit the handlers through the
    `hunting_engine.*` hierarchy. Repeated calls only update the level.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in _handlers(log_dir):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # uvicorn configures the root logger too
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)


def truncate_for_log(text: Optional[str], limit: int = 500) -> str:
    """Single-line, length-capped rendering of untrusted text for log lines."""
    if not text:
        return ""
    flat = " ".join(text.split())
    if len(flat) <= limit:
        return flat
    return flat[:limit] + f"... [{len(flat) - limit} more chars]"
