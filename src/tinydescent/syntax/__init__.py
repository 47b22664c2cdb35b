"""Cursor, trivia and token-level parsing.

Provides the cursor contract grammars are written against, the concrete
TextParser, and the helpers used to render error context.

Python 3.13+.
"""

from .cursor import CursorBase
from .highlight import highlight_error
from .parser import Parser, TextParser, TriviaSkipper
from .position import LineOffsetCache, byte_to_char_offset, char_to_byte_offset, line_col

__all__ = [
    "CursorBase",
    "LineOffsetCache",
    "Parser",
    "TextParser",
    "TriviaSkipper",
    "byte_to_char_offset",
    "char_to_byte_offset",
    "highlight_error",
    "line_col",
]
