"""
Logging configuration for the application.

Provides standardized logging setup with configurable levels
and formatters. Log records go to stderr so they do not mix with
the interactive prompts on stdout.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure logging for the application.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional file to write logs to.
    """
    format_string = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=handlers,
        force=True,
    )

    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.
    
    Args:
        name: Logger name.
        
    Returns:
        Configured logger.
    """
    return logging.getLogger(name)
