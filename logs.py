# logs.py
import sys
from pathlib import Path
from typing import List, Union

from loguru import logger

from config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]} | {message}"

_handler_ids: List[int] = []


def configure_logging(settings: Settings) -> None:
    """Install the console sink and, when LOG_DIR is set, a rotating file sink.

    Sinks added by an earlier call are replaced, so the most recent settings win.
    """
    if not _handler_ids:
        # Drop loguru's default stderr sink on first use.
        logger.remove()
    while _handler_ids:
        logger.remove(_handler_ids.pop())

    logger.configure(extra={"module": "app"})

    _handler_ids.append(logger.add(sys.stdout, colorize=True, format=CONSOLE_FORMAT, level=settings.log_level))

    if settings.log_dir:
        log_path = Path(settings.log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handler_id = logger.add(
            log_path / "catalog.log",
            rotation="100 MB",
            retention="10 days",
            compression="zip",
            format=FILE_FORMAT,
            level=settings.log_level,
        )
        _handler_ids.append(handler_id)


def get_logger(name: Union[str, None] = None):
    """Get a logger instance for a specific module"""
    return logger.bind(module=name if name else "app")
