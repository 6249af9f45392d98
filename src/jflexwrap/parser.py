"""Classifier for JFlex console output.

JFlex reports grammar errors as a four line block::

    Error in file "JFlex.flex" (line 72):
    Syntax error.
    <LEXICAL_RULES> {
          ^

The first line carries the source line number, the second the message, the
third the offending rule text and the fourth a caret under the offending
column. Everything else JFlex prints is informational, except the
"Reading skeleton file" notice which is dropped.
"""

import re
from collections.abc import Sequence

from loguru import logger

from jflexwrap.models import ClassifiedMessages, DiagnosticMessage

ERROR_MARKER = "Error in file"
SKELETON_MARKER = "Reading skeleton file"

# Matches the marker line: 'Error in file "JFlex.flex" (line 72):'
LINE_NUMBER_PATTERN = re.compile(r".*?\(line\s(\d+)\):\s*", re.ASCII)

LINE_SEPARATOR = re.compile(r"[\n\r]+")

# Lines following the marker: message, rule text, caret pointer.
BLOCK_TAIL = 3


class LineCursor:
    """Index into a sequence of lines with lookahead and rollback."""

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = lines
        self.index = 0

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self._lines)

    @property
    def current(self) -> str:
        return self._lines[self.index]

    def peek(self, offset: int = 0) -> str:
        return self._lines[self.index + offset]

    def has_ahead(self, count: int) -> bool:
        """Return True if at least ``count`` lines follow the current one."""
        return self.index + count < len(self._lines)

    def advance(self, count: int = 1) -> None:
        self.index += count

    def retreat(self, count: int = 1) -> None:
        self.index = max(self.index - count, 0)


def _line_number(marker: str) -> int | None:
    match = LINE_NUMBER_PATTERN.fullmatch(marker)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def _caret_column(pointer: str) -> tuple[int | None, bool]:
    """Locate the caret in a pointer line.

    Returns:
        ``(column, valid)``. ``valid`` is False when the first non-space
        character is not a caret. A blank line is valid but has no column.
    """
    for index, char in enumerate(pointer):
        if char == " ":
            continue
        if char == "^":
            return index + 1, True
        return None, False
    return None, True


def _read_error_block(cursor: LineCursor) -> DiagnosticMessage:
    """Consume an error block starting at the marker line.

    Leaves the cursor on the last consumed line: the pointer line, or the
    message line when the pointer line turned out not to be one.
    """
    marker = cursor.current
    message = cursor.peek(1)
    line = _line_number(marker)

    # Skip past the message and the rule text onto the pointer line.
    cursor.advance(BLOCK_TAIL)
    column, valid = _caret_column(cursor.current)
    if not valid:
        logger.debug(
            f"Not a caret line after {message!r}, re-reading as output: {cursor.current!r}"
        )
        cursor.retreat(2)

    if line is None:
        column = None
    return DiagnosticMessage(text=message, line=line, column=column)


def parse_into(
    raw_text: str,
    informational: list[DiagnosticMessage],
    errors: list[DiagnosticMessage],
) -> None:
    """Classify ``raw_text`` and append the messages to the given lists.

    Used to collect stdout and stderr of the same run into one result.
    Malformed error blocks never raise; their lines fall back to
    informational output.
    """
    if not raw_text or raw_text.isspace():
        return

    cursor = LineCursor(LINE_SEPARATOR.split(raw_text))
    while not cursor.exhausted:
        line = cursor.current
        if line.startswith(ERROR_MARKER) and cursor.has_ahead(BLOCK_TAIL):
            errors.append(_read_error_block(cursor))
        elif line and not line.startswith(SKELETON_MARKER):
            informational.append(DiagnosticMessage(text=line))
        cursor.advance()


def parse(raw_text: str) -> ClassifiedMessages:
    """Classify JFlex output into informational and error messages.

    Args:
        raw_text: Everything one stream of the tool printed.

    Returns:
        ClassifiedMessages with both lists in order of appearance.
    """
    result = ClassifiedMessages()
    parse_into(raw_text, result.informational, result.errors)
    return result
