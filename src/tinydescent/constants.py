"""Shared constants for tinydescent.

This module provides centralized configuration constants used across
the cursor, diagnostics and parser layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: Size constraints applied at parser construction
- Depth limits: Recursion protection for grammars built on the cursor
- Lexical classes: Character sets recognized by the primitives
- Numeric limits: Ranges enforced by integer and code point decoding
- Rendering: Defaults for highlighted error context

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Depth limits
    "MAX_DEPTH",
    # Lexical classes
    "ASCII_WHITESPACE",
    "LINE_COMMENT_MARKER",
    "NAME_EXTRA_CHARS",
    "RADIX_DIGITS",
    "RADIX_PREFIXES",
    "DIGIT_SEPARATOR",
    # Numeric limits
    "U64_MAX",
    "U64_MAX_DIGITS",
    "MAX_UNICODE_CODE_POINT",
    "SURROGATE_RANGE_START",
    "SURROGATE_RANGE_END",
    # Rendering
    "HIGHLIGHT_CONTEXT_LINES",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in bytes of UTF-8 (10 MB).
# Checked once when a TextParser is constructed.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Default maximum nesting depth for recursive grammar rules.
# Clamped against sys.getrecursionlimit() by DepthGuard.
MAX_DEPTH: int = 100

# ============================================================================
# LEXICAL CLASSES
# ============================================================================

# ASCII whitespace as skipped by skip_spaces()/skip_trivia().
# Vertical tab (U+000B) is deliberately absent.
ASCII_WHITESPACE: str = " \t\n\x0c\r"

# Line comments run from this marker to the next newline (inclusive) or EOF.
LINE_COMMENT_MARKER: str = "//"

# Characters allowed in names besides ASCII letters and digits.
NAME_EXTRA_CHARS: str = "_.-/$"

# Two-character radix prefixes recognized by parse_u64(). Decimal has none.
RADIX_PREFIXES: dict[str, int] = {"0x": 16, "0b": 2}

# ASCII digits only. str.isdigit() accepts digits like '²' that int() rejects.
RADIX_DIGITS: dict[int, str] = {
    2: "01",
    10: "0123456789",
    16: "0123456789abcdefABCDEF",
}

# Visual separator inside digit runs, stripped before conversion.
DIGIT_SEPARATOR: str = "_"

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

U64_MAX: int = 2**64 - 1

# Significant digits of U64_MAX per radix. Longer digit runs overflow
# without being converted (int() caps decimal strings at 4300 digits).
U64_MAX_DIGITS: dict[int, int] = {2: 64, 10: 20, 16: 16}

# Maximum valid Unicode code point per Unicode Standard.
MAX_UNICODE_CODE_POINT: int = 0x10FFFF

# UTF-16 surrogate code point range (D800-DFFF), not Unicode scalar values.
SURROGATE_RANGE_START: int = 0xD800
SURROGATE_RANGE_END: int = 0xDFFF

# ============================================================================
# RENDERING
# ============================================================================

# Lines shown before and after the highlighted span.
HIGHLIGHT_CONTEXT_LINES: int = 1
