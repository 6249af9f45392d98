"""jflexwrap - Python wrapper for the JFlex lexer generator."""

from jflexwrap.cli import build_command, find_cli, generate
from jflexwrap.config import JFlexSettings, validate_configuration
from jflexwrap.evaluator import evaluate, evaluate_output
from jflexwrap.exceptions import (
    CliNotFoundError,
    ConfigurationError,
    InvocationTimeoutError,
    JFlexWrapError,
    UnexplainedFailureError,
)
from jflexwrap.models import (
    ClassifiedMessages,
    DiagnosticMessage,
    InvocationOutcome,
    InvocationResult,
    ValidationStatus,
)
from jflexwrap.parser import parse, parse_into

__version__ = "0.1.0"

__all__ = [
    # Running JFlex
    "generate",
    "build_command",
    "find_cli",
    # Output handling
    "parse",
    "parse_into",
    "evaluate",
    "evaluate_output",
    # Configuration
    "JFlexSettings",
    "validate_configuration",
    # Models
    "DiagnosticMessage",
    "ClassifiedMessages",
    "InvocationOutcome",
    "InvocationResult",
    "ValidationStatus",
    # Exceptions
    "JFlexWrapError",
    "CliNotFoundError",
    "ConfigurationError",
    "UnexplainedFailureError",
    "InvocationTimeoutError",
]
