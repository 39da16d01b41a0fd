"""Exception hierarchy for the account statement PDF generator.

Every error raised here is fatal: the CLI logs it and exits non-zero.
"""


class StatementError(Exception):
    """Base exception for all statement generation errors."""
    pass


class FileOpenError(StatementError):
    """Raised when an input file (statement JSON or logo) cannot be opened."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Cannot open file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class DeserializationError(StatementError):
    """Raised when statement data is not well-formed for the expected schema."""
    pass


class FileWriteError(StatementError):
    """Raised when the output PDF cannot be written."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Cannot write file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnsupportedPlatformError(StatementError):
    """Raised when there is no viewer command for the host platform."""

    def __init__(self, platform_name: str) -> None:
        self.platform_name = platform_name
        super().__init__(f"Unsupported platform: {platform_name or 'unknown'}")


class ProcessLaunchError(StatementError):
    """Raised when the viewer process cannot be started."""
    pass
