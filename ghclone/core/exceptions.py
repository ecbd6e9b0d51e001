"""
Custom exceptions for ghclone.

Provides a hierarchy of exceptions for the workflow stages, so that a
single top-level handler can report which stage failed.
"""


class WorkflowError(Exception):
    """Base exception for all workflow-related errors."""

    def __init__(self, message: str, stage: str = None, details: dict = None):
        super().__init__(message)
        self.stage = stage
        self.details = details or {}

    def __str__(self):
        base_msg = super().__str__()
        if self.stage:
            return f"[{self.stage}] {base_msg}"
        return base_msg


class PromptAbortedError(WorkflowError):
    """Raised when the user interrupts a prompt (Ctrl-C or EOF)."""

    def __init__(self, prompt: str):
        super().__init__(
            f"Aborted while waiting for: {prompt}",
            stage="Prompt",
            details={"prompt": prompt},
        )


class FetchError(WorkflowError):
    """Raised when listing repositories from the forge fails."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, stage="Fetch", details=details)


class BadRequestError(FetchError):
    """The forge rejected the request (HTTP 400)."""

    def __init__(self, account_name: str):
        super().__init__(
            f"Bad request while listing repositories of '{account_name}'",
            details={"account_name": account_name, "status_code": 400},
        )


class AccountNotFoundError(FetchError):
    """The account does not exist on the forge (HTTP 404)."""

    def __init__(self, account_name: str):
        super().__init__(
            f"Account not found: {account_name}",
            details={"account_name": account_name, "status_code": 404},
        )


class UnexpectedStatusError(FetchError):
    """The forge answered with a status code we do not handle."""

    def __init__(self, account_name: str, status_code: int):
        super().__init__(
            f"Unexpected HTTP status {status_code} while listing "
            f"repositories of '{account_name}'",
            details={"account_name": account_name, "status_code": status_code},
        )
        self.status_code = status_code


class TransportError(FetchError):
    """Network-level failure: DNS, refused connection, timeout."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Could not reach {url}: {reason}",
            details={"url": url, "reason": reason},
        )


class MalformedResponseError(FetchError):
    """The response body is not the expected list of repositories."""

    def __init__(self, reason: str):
        super().__init__(
            f"Malformed response from forge: {reason}",
            details={"reason": reason},
        )


class CloneError(WorkflowError):
    """Raised when cloning cannot proceed at all."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, stage="Clone", details=details)


class GitNotAvailableError(CloneError):
    """Raised when the git executable cannot be found."""

    def __init__(self, executable: str):
        super().__init__(
            f"Git is not available on this system (looked for '{executable}')",
            details={"executable": executable},
        )


class ConfigurationError(WorkflowError):
    """Raised when configuration cannot be loaded."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, stage="Config", details=details)
