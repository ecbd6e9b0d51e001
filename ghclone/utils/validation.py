"""
Input validation utilities.

Predicates used by the interactive prompts to accept or reject input.
"""

import re
from pathlib import Path
from typing import Union

ACCOUNT_NAME_PATTERN = re.compile(r"^[0-9A-Za-z_.-]+$")


def is_valid_account_name(value: str) -> bool:
    """
    Check that an account name only uses characters the forge allows.

    This is a client-side sanity check; it does not mean the account exists.

    Args:
        value: Account name typed by the user.

    Returns:
        True if the name is non-empty and ASCII letters, digits, '_', '.'
        or '-' only.
    """
    if not value:
        return False
    return ACCOUNT_NAME_PATTERN.fullmatch(value) is not None


def is_valid_directory(path: Union[str, Path]) -> bool:
    """
    Check that a path names an existing directory.

    Args:
        path: Path to validate.

    Returns:
        True if the path exists and is a directory. Filesystem errors
        (permissions, broken links, invalid names) count as invalid.
    """
    if path is None or str(path) == "":
        return False

    try:
        return Path(path).is_dir()
    except (OSError, ValueError):
        return False
