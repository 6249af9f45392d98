"""Tests for the JFlex output classifier."""

import pytest

from jflexwrap import ClassifiedMessages, DiagnosticMessage, parse, parse_into
from jflexwrap.parser import LINE_NUMBER_PATTERN, LineCursor

SYNTAX_ERROR = (
    'Error in file "x.flex" (line 72):\n'
    "Syntax error.\n"
    "<RULES> {\n"
    "      ^\n"
)


class TestLineNumberPattern:
    """Tests for the marker line pattern."""

    def test_matches_marker(self) -> None:
        match = LINE_NUMBER_PATTERN.fullmatch('Error in file "x.flex" (line 72):')
        assert match is not None
        assert match.group(1) == "72"

    def test_allows_trailing_whitespace(self) -> None:
        match = LINE_NUMBER_PATTERN.fullmatch('Error in file "x.flex" (line 3):   ')
        assert match is not None
        assert match.group(1) == "3"

    def test_requires_colon_at_end(self) -> None:
        assert LINE_NUMBER_PATTERN.fullmatch('Error in file "x.flex" (line 3)') is None
        assert LINE_NUMBER_PATTERN.fullmatch('Error (line 3): more text') is None


class TestLineCursor:
    """Tests for the lookahead cursor."""

    def test_peek_and_advance(self) -> None:
        cursor = LineCursor(["a", "b", "c"])
        assert cursor.current == "a"
        assert cursor.peek(2) == "c"
        cursor.advance(2)
        assert cursor.current == "c"
        cursor.advance()
        assert cursor.exhausted

    def test_retreat(self) -> None:
        cursor = LineCursor(["a", "b", "c", "d"])
        cursor.advance(3)
        cursor.retreat(2)
        assert cursor.current == "b"
        cursor.retreat(5)
        assert cursor.index == 0

    def test_has_ahead(self) -> None:
        cursor = LineCursor(["a", "b", "c", "d"])
        assert cursor.has_ahead(3)
        cursor.advance()
        assert not cursor.has_ahead(3)


class TestParseEmpty:
    """Tests for inputs without any content."""

    @pytest.mark.parametrize("text", ["", " ", "\n\n", " \r\n\t "])
    def test_blank_input(self, text: str) -> None:
        result = parse(text)
        assert result.informational == []
        assert result.errors == []


class TestErrorBlocks:
    """Tests for "Error in file" blocks."""

    def test_syntax_error(self) -> None:
        result = parse(SYNTAX_ERROR)
        assert result.errors == [DiagnosticMessage("Syntax error.", line=72, column=7)]
        assert result.informational == []

    def test_caret_in_first_column(self) -> None:
        result = parse('Error in file "x.flex" (line 1):\nBad\n%%\n^')
        assert result.errors == [DiagnosticMessage("Bad", line=1, column=1)]

    def test_blank_pointer_line(self) -> None:
        result = parse('Error in file "x.flex" (line 5):\nBad rule\n<CTX>\n\n')
        assert result.errors == [DiagnosticMessage("Bad rule", line=5)]
        assert result.informational == []

    def test_space_only_pointer_line(self) -> None:
        result = parse('Error in file "x.flex" (line 5):\nBad rule\n<CTX>\n    \nDone')
        assert result.errors == [DiagnosticMessage("Bad rule", line=5)]
        assert result.informational == [DiagnosticMessage("Done")]

    def test_invalid_pointer_line_rolls_back(self) -> None:
        result = parse('Error in file "x.flex" (line 5):\nBad rule\n<CTX>\nXYZ\n')
        assert result.errors == [DiagnosticMessage("Bad rule", line=5)]
        assert result.informational == [
            DiagnosticMessage("<CTX>"),
            DiagnosticMessage("XYZ"),
        ]

    def test_rolled_back_line_can_start_a_block(self) -> None:
        text = (
            'Error in file "a.flex" (line 1):\n'
            "First\n"
            "ctx\n"
            'Error in file "b.flex" (line 2):\n'
            "Second\n"
            "ctx\n"
            "  ^\n"
        )
        result = parse(text)
        assert result.errors == [
            DiagnosticMessage("First", line=1),
            DiagnosticMessage("Second", line=2, column=3),
        ]
        assert result.informational == [DiagnosticMessage("ctx")]

    def test_short_block_is_informational(self) -> None:
        result = parse('Error in file "x.flex" (line 5):\nBad rule\n<CTX>')
        assert result.errors == []
        assert [m.text for m in result.informational] == [
            'Error in file "x.flex" (line 5):',
            "Bad rule",
            "<CTX>",
        ]

    def test_marker_without_line_number(self) -> None:
        result = parse("Error in file x.flex\nUnexpected end\nctx\n   ^")
        assert result.errors == [DiagnosticMessage("Unexpected end")]
        assert not result.errors[0].has_position

    def test_unparseable_line_number(self) -> None:
        marker = 'Error in file "x.flex" (line ' + "9" * 5000 + "):"
        result = parse(marker + "\nBad\nctx\n  ^\n")
        assert result.errors == [DiagnosticMessage("Bad")]
        assert result.errors[0].line is None
        assert result.informational == []

    def test_multiple_blocks(self) -> None:
        second = SYNTAX_ERROR.replace("72", "80").replace("Syntax error.", "Unknown macro")
        result = parse(SYNTAX_ERROR + "Warning: unused macro\n" + second)
        assert [(m.text, m.line, m.column) for m in result.errors] == [
            ("Syntax error.", 72, 7),
            ("Unknown macro", 80, 7),
        ]
        assert result.informational == [DiagnosticMessage("Warning: unused macro")]

    def test_carriage_returns(self) -> None:
        result = parse(SYNTAX_ERROR.replace("\n", "\r\n"))
        assert result.errors == [DiagnosticMessage("Syntax error.", line=72, column=7)]
        assert result.informational == []


class TestInformational:
    """Tests for plain and suppressed output."""

    def test_skeleton_notice_is_dropped(self) -> None:
        result = parse("Reading skeleton file foo.skel")
        assert result.informational == []
        assert result.errors == []

    def test_plain_lines(self) -> None:
        output = (
            "Reading \"Sample.flex\"\n"
            "Reading skeleton file foo.skel\n"
            "Constructing NFA : 12 states in NFA\n"
            "Writing code to \"SampleLexer.java\"\n"
        )
        result = parse(output)
        assert [m.text for m in result.informational] == [
            'Reading "Sample.flex"',
            "Constructing NFA : 12 states in NFA",
            'Writing code to "SampleLexer.java"',
        ]
        assert all(not m.has_position for m in result.informational)

    def test_line_count_is_preserved(self) -> None:
        lines = ["one", "two", "Reading skeleton file s.skel", "three"]
        result = parse("\n".join(lines))
        assert len(result) + 1 == len(lines)


class TestParseInto:
    """Tests for collecting several streams into one result."""

    def test_appends_in_order(self) -> None:
        informational: list[DiagnosticMessage] = [DiagnosticMessage("earlier")]
        errors: list[DiagnosticMessage] = []
        parse_into("later", informational, errors)
        parse_into(SYNTAX_ERROR, informational, errors)
        assert [m.text for m in informational] == ["earlier", "later"]
        assert len(errors) == 1

    def test_no_state_between_calls(self) -> None:
        first = "Reading \"a.flex\"\n" + SYNTAX_ERROR
        second = "Writing code\n"
        combined = parse(first) + parse(second)
        assert isinstance(combined, ClassifiedMessages)
        assert combined == parse(first + second)
