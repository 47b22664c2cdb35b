"""Cursor infrastructure for hand-written recursive-descent parsers.

Implements the code point cursor that every primitive in this package is
built from. Python 3.13+. Zero external dependencies.

Design Philosophy:
    - State is reached only through two accessors: ``source`` (the input,
      read-only) and ``pos`` (a settable byte offset). Any class providing
      them inherits every primitive.
    - Positions are byte offsets into the UTF-8 encoding of ``source``
      and always sit on a code point boundary.
    - Lookahead and consumption are code point granular, never byte
      granular, so multi-byte input is handled correctly.
    - EOF is a return value for the peek/advance family (``None``) and a
      ParseError for everything that requires input.
    - Failures carry the byte span and a pre-rendered message.

Example:
    >>> parser = TextParser("λx")
    >>> parser.peek_one()
    'λ'
    >>> parser.advance_one()
    'λ'
    >>> parser.pos  # 'λ' is two bytes in UTF-8
    2
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from tinydescent.diagnostics import (
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    ParseError,
    SourceSpan,
)
from tinydescent.syntax.highlight import highlight_error
from tinydescent.syntax.position import LineOffsetCache, utf8, utf8_width

__all__ = ["CursorBase"]

logger = logging.getLogger(__name__)

# Failures reported as UNEXPECTED_EOF when raised at end of input.
_EOF_PROMOTED_CODES = frozenset(
    {DiagnosticCode.EXPECTED_LITERAL, DiagnosticCode.EXPECTED_TOKEN}
)


class CursorBase(ABC):
    """Position tracker and lookahead/advance primitives.

    Subclasses provide the accessor pair; everything else is inherited.

    Required accessors:
        source: The full input text (never mutated)
        pos: Byte offset into the UTF-8 encoding of source (settable)

    Optional accessor:
        source_bytes: The UTF-8 encoding of source (override to store it)

    Attributes:
        formatter: Renders failure diagnostics into ParseError messages.
            Override on a subclass or instance to change output format or
            color. The default renders for terminals (bold headers, red
            underlined span).

    Thread Safety:
        A cursor instance is not safe for concurrent use. Independent
        cursors may share the same source.
    """

    formatter: DiagnosticFormatter = DiagnosticFormatter(color=True)

    @property
    @abstractmethod
    def source(self) -> str:
        """The input text."""

    @property
    @abstractmethod
    def pos(self) -> int:
        """Current byte offset into the UTF-8 encoding of source."""

    @pos.setter
    @abstractmethod
    def pos(self, value: int) -> None: ...

    @property
    def source_bytes(self) -> bytes:
        """UTF-8 encoding of source, the buffer pos indexes into.

        The default encodes on every call. Cursors over a fixed source
        should override it to return an encoding stored at construction,
        as TextParser does.
        """
        return utf8(self.source)

    # ------------------------------------------------------------------
    # Error model
    # ------------------------------------------------------------------

    def expected(
        self,
        what: str,
        *,
        code: DiagnosticCode = DiagnosticCode.EXPECTED_TOKEN,
    ) -> ParseError:
        """Build a failure anchored at the current position.

        The span is ``(pos, pos + 1)``. The caller raises the result:

            raise self.expected("name")

        Args:
            what: What was expected (literal text or a class like "name")
            code: Failure kind; literal and shape failures at end of
                input are reported as UNEXPECTED_EOF

        Returns:
            ParseError with span and rendered message
        """
        return self._failure(what, None, code)

    def expected_and(
        self,
        what: str,
        info: str,
        *,
        code: DiagnosticCode = DiagnosticCode.EXPECTED_TOKEN,
    ) -> ParseError:
        """Build a failure like expected() with an extra detail section.

        Args:
            what: What was expected
            info: Free-form detail, e.g. a conversion error message
            code: Failure kind

        Returns:
            ParseError with span and rendered message
        """
        return self._failure(what, info, code)

    def _failure(self, what: str, info: str | None, code: DiagnosticCode) -> ParseError:
        start = self.pos
        end = start + 1
        if code in _EOF_PROMOTED_CODES and self.is_eof():
            code = DiagnosticCode.UNEXPECTED_EOF

        line, column = LineOffsetCache(self.source).get_line_col(start)
        context = highlight_error(start, end, self.source, color=self.formatter.color)
        diagnostic = ErrorTemplate.expected(
            what,
            code=code,
            span=SourceSpan(start=start, end=end, line=line, column=column),
            context=context,
            info=info,
        )
        logger.debug("Parse failure %s at byte %d: expected %s", code.name, start, what)
        return ParseError(diagnostic, formatter=self.formatter)

    # ------------------------------------------------------------------
    # Lookahead / advance primitives
    # ------------------------------------------------------------------

    def peek_one(self) -> str | None:
        """Inspect the next code point without consuming it.

        Returns:
            The code point at pos, or None at end of input
        """
        data = self.source_bytes
        pos = self.pos
        if pos >= len(data):
            return None
        return data[pos : pos + utf8_width(data[pos])].decode("utf-8")

    def _end_of(self, count: int) -> int | None:
        """Byte offset after the next count code points, None if too few."""
        data = self.source_bytes
        end = self.pos
        for _ in range(count):
            if end >= len(data):
                return None
            end += utf8_width(data[end])
        return end

    def peek_many(self, count: int) -> str | None:
        """Inspect the next count code points without consuming them.

        Args:
            count: Number of code points (not bytes)

        Returns:
            The substring covering them, or None if fewer remain
        """
        end = self._end_of(count)
        if end is None:
            return None
        return self.source_bytes[self.pos : end].decode("utf-8")

    def advance_one(self) -> str | None:
        """Consume the next code point.

        Returns:
            The consumed code point, or None (without moving) at end of input
        """
        char = self.peek_one()
        if char is None:
            return None
        self.pos += len(char.encode("utf-8"))
        return char

    def advance_many(self, count: int) -> str | None:
        """Consume exactly count code points.

        Returns:
            The consumed substring, or None (without moving) if fewer remain
        """
        end = self._end_of(count)
        if end is None:
            return None
        consumed = self.source_bytes[self.pos : end].decode("utf-8")
        self.pos = end
        return consumed

    def is_eof(self) -> bool:
        """Check if the cursor has reached the end of input."""
        return self.pos >= len(self.source_bytes)

    def starts_with(self, text: str) -> bool:
        """Check whether the next code points equal text (non-consuming)."""
        return self.peek_many(len(text)) == text

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the maximal run of code points matching predicate.

        Stops at the first non-matching code point or end of input.

        Args:
            predicate: Called with each single code point

        Returns:
            The consumed substring (possibly empty)
        """
        data = self.source_bytes
        start = self.pos
        while (char := self.peek_one()) is not None and predicate(char):
            self.pos += len(char.encode("utf-8"))
        return data[start : self.pos].decode("utf-8")
