"""
Service Logger
==============
Centralized logging configuration for the query assistant
"""

import logging
from pathlib import Path
from datetime import datetime
from typing import Optional


def setup_logger(
    name: str = "gauge_assistant",
    level: str = "INFO",
    log_dir: Optional[str] = None,
    file_level: int = logging.DEBUG
) -> logging.Logger:
    """
    Setup the package logger

    Module loggers (``logging.getLogger(__name__)``) inside the package
    propagate to it, so calling this once at startup covers the service.

    Args:
        name: Logger name
        level: Console logging level name
        log_dir: Directory for a timestamped log file (console only if None)
        file_level: Logging level for file output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)  # Handlers decide what is emitted

    # Remove existing handlers (avoid duplicates on reload)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.getLevelName(level.upper()))
    console_handler.setFormatter(logging.Formatter(
        '%(levelname)-8s | %(name)s | %(message)s'
    ))
    logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"assistant_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)-8s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)
        logger.info(f"Log file: {log_file}")

    return logger
