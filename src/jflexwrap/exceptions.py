"""Custom exceptions for jflexwrap."""

from jflexwrap.models import ValidationStatus


class JFlexWrapError(Exception):
    """Base exception for all jflexwrap errors."""

    pass


class CliNotFoundError(JFlexWrapError):
    """Raised when the JFlex launcher script cannot be found or started."""

    def __init__(self, message: str = "JFlex launcher not found") -> None:
        super().__init__(message)


class ConfigurationError(JFlexWrapError):
    """Raised when the JFlex settings are incomplete or invalid."""

    def __init__(self, message: str, status: ValidationStatus | None = None) -> None:
        super().__init__(message)
        self.status = status


class UnexplainedFailureError(JFlexWrapError):
    """Raised when JFlex exits nonzero without reporting any error block."""

    def __init__(self, command: str, exit_code: int, stderr: str = "") -> None:
        super().__init__(
            f"Command {command} execution failed with exit code {exit_code}"
        )
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr


class InvocationTimeoutError(JFlexWrapError):
    """Raised when JFlex does not finish in time and had to be killed."""

    def __init__(self, command: str, timeout: float) -> None:
        super().__init__(f"Command {command} timed out after {timeout} seconds")
        self.command = command
        self.timeout = timeout
