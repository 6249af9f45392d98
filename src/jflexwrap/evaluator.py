"""Turn parsed output and an exit code into a verdict."""

import shlex
from collections.abc import Sequence

from loguru import logger

from jflexwrap.exceptions import UnexplainedFailureError
from jflexwrap.models import (
    ClassifiedMessages,
    DiagnosticMessage,
    InvocationOutcome,
    InvocationResult,
)
from jflexwrap.parser import parse_into


def evaluate(
    exit_code: int,
    errors: Sequence[DiagnosticMessage],
    command_text: str,
    *,
    stderr: str = "",
) -> InvocationOutcome:
    """Decide whether a JFlex run succeeded.

    A nonzero exit code is acceptable as long as JFlex explained it with at
    least one error message.

    Args:
        exit_code: Process exit code.
        errors: Error messages parsed from the run's output.
        command_text: Command line that was run, for the failure message.
        stderr: Raw standard error of the run, kept on the failure.

    Returns:
        SUCCESS for exit code 0, SUCCESS_WITH_ERRORS otherwise.

    Raises:
        UnexplainedFailureError: If the exit code is nonzero and no error
            messages were parsed.
    """
    if exit_code == 0:
        return InvocationOutcome.SUCCESS
    if errors:
        return InvocationOutcome.SUCCESS_WITH_ERRORS
    raise UnexplainedFailureError(command_text, exit_code, stderr=stderr)


def evaluate_output(
    stdout: str,
    stderr: str,
    exit_code: int,
    command: Sequence[str],
) -> InvocationResult:
    """Parse both output streams of a run and evaluate it.

    Messages from stdout come before messages from stderr.

    Raises:
        UnexplainedFailureError: If the exit code is nonzero and no error
            messages were parsed.
    """
    messages = ClassifiedMessages()
    parse_into(stdout, messages.informational, messages.errors)
    parse_into(stderr, messages.informational, messages.errors)

    outcome = evaluate(
        exit_code, messages.errors, shlex.join(command), stderr=stderr
    )

    logger.info(
        f"JFlex finished with exit code {exit_code} ({outcome.value}): "
        f"{len(messages.errors)} errors, {len(messages.informational)} messages"
    )
    return InvocationResult(
        outcome=outcome,
        messages=messages,
        exit_code=exit_code,
        command=list(command),
    )
