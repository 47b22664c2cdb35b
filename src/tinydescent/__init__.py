"""tinydescent - cursor toolkit for hand-written recursive-descent parsers.

A code point cursor over UTF-8 text with lookahead/advance primitives,
trivia skipping, token-level parsers (names, unsigned integers, escaped
characters, quoted strings) and a structured error model whose failures
carry a byte span and a rendered message with highlighted context.

Public API:
    TextParser - Concrete parser to subclass for a grammar
    Parser - Primitive set over abstract source/pos accessors
    ParseError - Failure raised by every primitive (span + message)
    highlight_error - Render source lines with a byte span marked

Exceptions:
    DescentError - Base exception class
    ParseError - Parse failures
    DepthLimitExceededError - Nesting guard exceeded outside a parser

Submodules:
    tinydescent.syntax - Cursor, parser layers, position helpers
    tinydescent.diagnostics - Diagnostic codes, templates, formatting
    tinydescent.core - DepthGuard for recursive rules
"""

from .diagnostics import DepthLimitExceededError, DescentError, ParseError
from .syntax import Parser, TextParser, highlight_error

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tinydescent")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DepthLimitExceededError",
    "DescentError",
    "ParseError",
    "Parser",
    "TextParser",
    "__version__",
    "highlight_error",
]
