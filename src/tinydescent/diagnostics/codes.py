"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for parse failures.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        LITERAL: Exact text expected at the cursor, something else found
        SHAPE: A class of input expected (name, digit, escape) but absent
        RANGE: Input decoded to a value outside the target range
        EOF: More input required but the cursor is at end of input
        DEPTH: Grammar recursion exceeded the configured nesting limit
    """

    LITERAL = "literal"
    SHAPE = "shape"
    RANGE = "range"
    EOF = "eof"
    DEPTH = "depth"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    All parse failures live in the 3000-3999 range:
        3001-3009: Cursor and token-level failures
        3010-3019: Grammar-level limits
    """

    UNEXPECTED_EOF = 3001
    EXPECTED_LITERAL = 3002
    EXPECTED_TOKEN = 3003
    INVALID_ESCAPE = 3004
    INVALID_CODEPOINT = 3005
    INTEGER_OVERFLOW = 3006
    UNTERMINATED_STRING = 3007

    NESTING_DEPTH_EXCEEDED = 3010

    @property
    def category(self) -> ErrorCategory:
        """Category this code belongs to."""
        return _CATEGORIES[self]


_CATEGORIES: dict[DiagnosticCode, ErrorCategory] = {
    DiagnosticCode.UNEXPECTED_EOF: ErrorCategory.EOF,
    DiagnosticCode.EXPECTED_LITERAL: ErrorCategory.LITERAL,
    DiagnosticCode.EXPECTED_TOKEN: ErrorCategory.SHAPE,
    DiagnosticCode.INVALID_ESCAPE: ErrorCategory.SHAPE,
    DiagnosticCode.INVALID_CODEPOINT: ErrorCategory.RANGE,
    DiagnosticCode.INTEGER_OVERFLOW: ErrorCategory.RANGE,
    DiagnosticCode.UNTERMINATED_STRING: ErrorCategory.EOF,
    DiagnosticCode.NESTING_DEPTH_EXCEEDED: ErrorCategory.DEPTH,
}


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Offsets are bytes into the UTF-8 encoding of the source, not
        indexes into the Python ``str``. ``end`` may exceed the encoded
        length by one when a failure is anchored at end of input.

    Attributes:
        start: Starting byte offset (0-indexed, inclusive)
        end: Ending byte offset (exclusive)
        line: Line number (1-indexed)
        column: Column number in code points (1-indexed)
    """

    start: int
    end: int
    line: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    def as_tuple(self) -> tuple[int, int]:
        """Return the ``(start, end)`` byte pair."""
        return (self.start, self.end)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools
    (editor integrations read ``span`` without parsing the rendered text).

    Attributes:
        code: Unique error code
        message: One-line human-readable error description
        expected: What the parser expected, as shown after "expected:"
        span: Source location (None for failures not tied to a position)
        context: Highlighted source excerpt around the span
        info: Additional free-form detail (e.g. conversion failure)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    expected: str = ""
    span: SourceSpan | None = None
    context: str | None = None
    info: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def category(self) -> ErrorCategory:
        """Category of this diagnostic's code."""
        return self.code.category

    def format_error(self) -> str:
        """Format diagnostic with the default formatter.

        Example output:
            PARSE_ERROR
            - expected: name
            - detected:
            1 | 42
              | ^

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
