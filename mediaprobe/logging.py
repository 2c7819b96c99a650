"""Centralized logging configuration for mediaprobe"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler

def configure_logging(log_level: str = "INFO", log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Configure the mediaprobe logger with rich console output and an optional log file"""
    logger = logging.getLogger("mediaprobe")
    logger.setLevel(logging._nameToLevel.get(log_level.upper(), logging.INFO))

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
        logger.addHandler(file_handler)

    return logger
