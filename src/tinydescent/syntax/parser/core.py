"""Concrete parser bound to an input string.

Grammars subclass TextParser and write their rules as methods that call
the inherited primitives:

    class TermParser(TextParser):
        def parse_term(self) -> Term:
            self.skip_trivia()
            if self.peek_one() == "(":
                ...
            return Var(self.parse_name())

    TermParser("λx x").parse_term()

Security:
    Includes a configurable input size limit and a nesting depth guard
    for recursive rules.

See Also:
    - :mod:`tinydescent.syntax.cursor` - Accessors, lookahead and errors
    - :mod:`tinydescent.syntax.parser.whitespace` - Trivia skipping
    - :mod:`tinydescent.syntax.parser.primitives` - Token-level parsers
"""

import logging

from tinydescent.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from tinydescent.core import DepthGuard
from tinydescent.diagnostics import DiagnosticCode, DiagnosticFormatter, ErrorTemplate
from tinydescent.syntax.parser.primitives import Parser
from tinydescent.syntax.position import is_char_boundary, utf8

__all__ = ["TextParser"]

logger = logging.getLogger(__name__)


class TextParser(Parser):
    """Parser over an immutable source string, starting at byte 0.

    Attributes:
        source: The input text
        pos: Current byte offset (settable, for backtracking)
        max_nesting_depth: Limit enforced by nesting()
    """

    def __init__(
        self,
        source: str,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
        formatter: DiagnosticFormatter | None = None,
    ) -> None:
        """Bind the parser to source.

        Args:
            source: Input text (must be encodable as UTF-8)
            max_source_size: Maximum UTF-8 size in bytes (default: 10 MB).
                Set to 0 to disable the limit.
            max_nesting_depth: Depth allowed by nesting() (default: 100)
            formatter: Renders ParseError messages (default: terminal, colored)

        Raises:
            ValueError: If source exceeds max_source_size
            UnicodeEncodeError: If source contains lone surrogates
        """
        limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        data = utf8(source)
        size = len(data)
        if limit > 0 and size > limit:
            msg = (
                f"Source size ({size:,} bytes) exceeds maximum ({limit:,} bytes). "
                "Configure max_source_size in TextParser constructor to increase limit."
            )
            raise ValueError(msg)

        self._source = source
        self._data = data
        self._pos = 0
        self._depth_guard = DepthGuard(
            max_depth=max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )
        if formatter is not None:
            self.formatter = formatter
        logger.debug("%s bound to %d bytes of input", type(self).__name__, size)

    @property
    def source(self) -> str:
        """The input text."""
        return self._source

    @property
    def pos(self) -> int:
        """Current byte offset.

        Assignable for backtracking. Raises ValueError unless the value is
        a code point boundary within the input (0 and the end included).
        """
        return self._pos

    @pos.setter
    def pos(self, value: int) -> None:
        if not is_char_boundary(self._data, value):
            msg = (
                f"Position {value} is not a code point boundary "
                f"in 0..{len(self._data)} bytes of input"
            )
            raise ValueError(msg)
        self._pos = value

    @property
    def source_bytes(self) -> bytes:
        """UTF-8 encoding of source, stored at construction."""
        return self._data

    @property
    def max_nesting_depth(self) -> int:
        """Maximum depth allowed by nesting() (after clamping)."""
        return self._depth_guard.max_depth

    def nesting(self) -> DepthGuard:
        """Guard one level of grammar recursion.

        Usage:
            with self.nesting():
                inner = self.parse_term()

        Returns:
            The parser's DepthGuard, to be entered with ``with``

        Raises:
            ParseError: NESTING_DEPTH_EXCEEDED at the current position
                when the limit is already reached
        """
        if self._depth_guard.is_exceeded():
            raise self.expected_and(
                ErrorTemplate.nesting_depth_expected(self._depth_guard.max_depth),
                ErrorTemplate.nesting_depth_info(),
                code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            )
        return self._depth_guard

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos={self._pos}, size={len(self._data)})"
