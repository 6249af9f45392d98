"""Data models for JFlex diagnostics and invocation results."""

import shlex
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class DiagnosticMessage:
    """A single message reported by JFlex.

    Attributes:
        text: Message text as printed by the tool.
        line: Source line number (1-based), or None when unknown.
        column: Source column number (1-based), or None when unknown.
            Only ever set together with ``line``.
    """

    text: str
    line: int | None = None
    column: int | None = None

    @property
    def has_position(self) -> bool:
        return self.line is not None


@dataclass(frozen=True)
class ClassifiedMessages:
    """Messages split by category, in order of appearance.

    Attributes:
        informational: Plain tool output without source positions.
        errors: Messages parsed from "Error in file" blocks.
    """

    informational: list[DiagnosticMessage] = field(default_factory=list)
    errors: list[DiagnosticMessage] = field(default_factory=list)

    def __add__(self, other: "ClassifiedMessages") -> "ClassifiedMessages":
        if not isinstance(other, ClassifiedMessages):
            return NotImplemented
        return ClassifiedMessages(
            informational=self.informational + other.informational,
            errors=self.errors + other.errors,
        )

    def __len__(self) -> int:
        return len(self.informational) + len(self.errors)


class InvocationOutcome(Enum):
    """Overall verdict of a JFlex run."""

    SUCCESS = "success"
    SUCCESS_WITH_ERRORS = "success-with-errors"
    UNEXPLAINED_FAILURE = "unexplained-failure"


class ValidationStatus(Enum):
    """Result of checking the JFlex settings before a run."""

    OK = "ok"
    HOME_INVALID = "home-invalid"
    SKELETON_MISSING = "skeleton-missing"


@dataclass(frozen=True)
class InvocationResult:
    """Result of running JFlex on a grammar file.

    Attributes:
        outcome: SUCCESS or SUCCESS_WITH_ERRORS.
        messages: Classified messages from stdout followed by stderr.
        exit_code: Process exit code.
        command: Command line that was executed.
    """

    outcome: InvocationOutcome
    messages: ClassifiedMessages
    exit_code: int = 0
    command: list[str] = field(default_factory=list)

    @property
    def errors(self) -> list[DiagnosticMessage]:
        return self.messages.errors

    @property
    def informational(self) -> list[DiagnosticMessage]:
        return self.messages.informational

    @property
    def command_text(self) -> str:
        return shlex.join(self.command)
