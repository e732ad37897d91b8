"""
Character-level scanner for DIMACS CNF text.

The scanner moves a Cursor over the source buffer, skipping whitespace and
comment lines, and extracts signed decimal integers. It never raises: every
call terminates and reports what it found through a ScanResult, leaving the
interpretation of unexpected input to the grammar layer.
"""

from enum import Enum
from typing import NamedTuple

WHITESPACE = " \t\r"
DIGITS = "0123456789"

# Longer digit runs are reported as TOO_LARGE without being converted
MAX_DIGITS = 19


class Cursor:
    """
    Read position within a source buffer.

    The cursor owns the text, the current offset and a 1-based line counter
    used in diagnostics. Past the last character, peek() returns the empty
    string, which acts as the end-of-input sentinel.
    """

    def __init__(self, text: str, pos: int = 0, line: int = 1):
        self.text = text
        self.pos = pos
        self.line = line

    def peek(self, offset: int = 0) -> str:
        """Return the character `offset` positions ahead, or "" at end of input."""
        index = self.pos + offset
        if index < len(self.text):
            return self.text[index]
        return ""

    def startswith(self, token: str) -> bool:
        return self.text.startswith(token, self.pos)

    def advance(self, count: int = 1) -> None:
        """Move forward by `count` characters, stopping at end of input."""
        self.pos = min(self.pos + count, len(self.text))

    def copy(self) -> "Cursor":
        return Cursor(self.text, self.pos, self.line)

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, line={self.line})"


class ScanKind(Enum):
    """What read_literal found at the cursor."""

    LITERAL = "literal"
    TERMINATOR = "terminator"
    NOT_A_NUMBER = "not_a_number"
    TOO_LARGE = "too_large"


class ScanResult(NamedTuple):
    kind: ScanKind
    value: int = 0

    @property
    def is_number(self) -> bool:
        return self.kind in (ScanKind.LITERAL, ScanKind.TERMINATOR)


def _is_comment_start(cursor: Cursor) -> bool:
    # "c" opens a comment unless it begins the header's "cnf" token
    return cursor.peek() == "c" and not (cursor.peek(1) == "n" and cursor.peek(2) == "f")


def skip_insignificant(cursor: Cursor) -> None:
    """
    Advance the cursor past whitespace, line breaks and comment lines.

    Newlines increment the cursor's line counter. A comment runs up to, but
    not including, the next newline, so the newline is counted on the next
    iteration.

    Args:
        cursor: Cursor to advance in place
    """
    while not cursor.at_end:
        char = cursor.peek()
        if char in WHITESPACE:
            cursor.advance()
        elif char == "\n":
            cursor.advance()
            cursor.line += 1
        elif _is_comment_start(cursor):
            end = cursor.text.find("\n", cursor.pos)
            cursor.pos = len(cursor.text) if end == -1 else end
        else:
            break


def read_literal(cursor: Cursor, max_digits: int = MAX_DIGITS) -> ScanResult:
    """
    Read one signed decimal integer.

    Args:
        cursor: Cursor to read from; advanced past the integer
        max_digits: Longest digit run that is converted to an int

    Returns:
        ScanResult with kind LITERAL for a non-zero value, TERMINATOR for a
        zero value, or NOT_A_NUMBER (value 0) when no digit follows the
        optional minus sign. In the last case the cursor is left on the
        offending character. A digit run longer than `max_digits` is
        consumed and reported as TOO_LARGE (value 0).
    """
    skip_insignificant(cursor)

    sign = 1
    if cursor.peek() == "-":
        sign = -1
        cursor.advance()

    start = cursor.pos
    while cursor.peek() != "" and cursor.peek() in DIGITS:
        cursor.advance()

    if cursor.pos == start:
        return ScanResult(ScanKind.NOT_A_NUMBER)
    if cursor.pos - start > max_digits:
        return ScanResult(ScanKind.TOO_LARGE)

    value = sign * int(cursor.text[start : cursor.pos])
    if value == 0:
        return ScanResult(ScanKind.TERMINATOR)
    return ScanResult(ScanKind.LITERAL, value)
