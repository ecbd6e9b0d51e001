"""
Utility functions and helpers.

Provides common utilities used across the codebase.
"""

from ghclone.utils.logging_config import setup_logging, get_logger
from ghclone.utils.validation import is_valid_account_name, is_valid_directory

__all__ = [
    "setup_logging",
    "get_logger",
    "is_valid_account_name",
    "is_valid_directory",
]
