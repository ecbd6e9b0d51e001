"""
Core module containing configuration, exit codes and errors.
"""

from ghclone.core.config import (
    Config,
    AppConfig,
    ForgeConfig,
    CloneConfig,
    PromptTheme,
)
from ghclone.core.exceptions import (
    WorkflowError,
    PromptAbortedError,
    FetchError,
    BadRequestError,
    AccountNotFoundError,
    UnexpectedStatusError,
    TransportError,
    MalformedResponseError,
    CloneError,
    GitNotAvailableError,
    ConfigurationError,
)

__all__ = [
    "Config",
    "AppConfig",
    "ForgeConfig",
    "CloneConfig",
    "PromptTheme",
    "WorkflowError",
    "PromptAbortedError",
    "FetchError",
    "BadRequestError",
    "AccountNotFoundError",
    "UnexpectedStatusError",
    "TransportError",
    "MalformedResponseError",
    "CloneError",
    "GitNotAvailableError",
    "ConfigurationError",
]
