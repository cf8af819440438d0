# refer - https://loguru.readthedocs.io/en/stable/api/logger.html
import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

logger.remove() # remove default stuff
logger.configure(extra={"name": "dep11gen"}) # shown when no name was bound

logger.add(
    sys.stderr,
    format=CONSOLE_FORMAT,
    level="INFO",
    colorize=True,
)


# Function to get logger with context
def get_logger(name: Optional[str] = None):
    if name:
        return logger.bind(name=name)
    return logger


def add_log_file(filepath: str, level: str = "INFO", **kwargs):
    kwargs.setdefault("format", FILE_FORMAT)
    kwargs.setdefault("rotation", "5 MB")
    kwargs.setdefault("retention", "90 days")
    return logger.add(filepath, level=level, **kwargs)


def set_log_level(level: str):
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)
