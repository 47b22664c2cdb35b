"""Token-level parsers built on the cursor primitives.

This module provides parsers for literals, names, unsigned integers,
escaped characters, quoted characters and quoted strings. Each skips
trivia first (except parse_char, which reads raw input) and raises
ParseError when the expected shape is absent.

Error Context:
    Failures are raised, never returned. The cursor is left where the
    failure was detected; backtracking is the caller's job:

        saved = parser.pos
        try:
            value = parser.parse_u64()
        except ParseError:
            parser.pos = saved
            value = parser.parse_name()
"""

from tinydescent.constants import (
    DIGIT_SEPARATOR,
    MAX_UNICODE_CODE_POINT,
    NAME_EXTRA_CHARS,
    RADIX_DIGITS,
    RADIX_PREFIXES,
    SURROGATE_RANGE_END,
    SURROGATE_RANGE_START,
    U64_MAX,
    U64_MAX_DIGITS,
)
from tinydescent.diagnostics import DiagnosticCode, ErrorTemplate
from tinydescent.syntax.parser.whitespace import TriviaSkipper

__all__ = ["Parser", "is_name_char"]

# Single-character escapes after a backslash.
_SIMPLE_ESCAPES: dict[str, str] = {
    "0": "\0",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "'": "'",
    '"': '"',
    "\\": "\\",
}


def is_name_char(char: str) -> bool:
    """Check if char may appear in a name: ASCII alphanumeric or ``_.-/$``."""
    return (char.isascii() and char.isalnum()) or char in NAME_EXTRA_CHARS


def _is_hex_digit(char: str) -> bool:
    return char in RADIX_DIGITS[16]


class Parser(TriviaSkipper):
    """Full primitive set: cursor, trivia and token-level parsers.

    Grammars subclass TextParser (which binds a concrete source) and
    compose these methods in their own rules.
    """

    def consume(self, literal: str) -> None:
        """Consume an exact literal, erroring if it is not found.

        Skips trivia first.

        Raises:
            ParseError: "expected <literal>" when the input differs
        """
        self.skip_trivia()
        if not self.starts_with(literal):
            raise self.expected(literal, code=DiagnosticCode.EXPECTED_LITERAL)
        self.advance_many(len(literal))

    def _consume_exact(self, literal: str) -> None:
        """Like consume() but without skipping trivia."""
        if not self.starts_with(literal):
            raise self.expected(literal, code=DiagnosticCode.EXPECTED_LITERAL)
        self.advance_many(len(literal))

    def parse_name(self) -> str:
        """Parse a name: ASCII letters, digits and ``_ . - / $``.

        Examples:
            foo → "foo"
            std/list.map → "std/list.map"
            $x → "$x"

        Raises:
            ParseError: "expected name" when no name character is present
        """
        self.skip_trivia()
        name = self.take_while(is_name_char)
        if not name:
            raise self.expected("name")
        return name

    def parse_u64(self) -> int:
        """Parse an unsigned 64-bit integer in decimal, hex or binary.

        Hex and binary take a ``0x`` / ``0b`` prefix. ``_`` may separate
        digits and is ignored.

        Examples:
            42 → 42
            0x1F → 31
            0b101 → 5
            1_000 → 1000

        Raises:
            ParseError: "expected numeric digit" when no digit follows;
                "expected integer" when the value exceeds 2**64 - 1
        """
        self.skip_trivia()
        radix = RADIX_PREFIXES.get(self.peek_many(2) or "", 10)
        if radix != 10:
            self.advance_many(2)

        digits = RADIX_DIGITS[radix]
        raw = self.take_while(lambda char: char in digits or char == DIGIT_SEPARATOR)
        cleaned = raw.replace(DIGIT_SEPARATOR, "")
        if not cleaned:
            raise self.expected("numeric digit")

        significant = cleaned.lstrip("0") or "0"
        too_long = len(significant) > U64_MAX_DIGITS[radix]
        if too_long or (value := int(significant, radix)) > U64_MAX:
            raise self.expected_and(
                "integer",
                ErrorTemplate.integer_overflow(U64_MAX),
                code=DiagnosticCode.INTEGER_OVERFLOW,
            )
        return value

    def parse_char(self) -> str:
        """Parse a single code point, decoding backslash escapes.

        Does NOT skip trivia: whitespace is returned as a character.

        Supported escape sequences:
            \\u{HEX} → Unicode scalar value (braces required)
            \\0 → NUL, \\n → LF, \\r → CR, \\t → TAB
            \\' → '   \\" → "   \\\\ → \\

        Raises:
            ParseError: "expected char" at end of input; "expected
                escaped-char" for a backslash at end of input;
                "expected \\<c>" for an unknown escape;
                "expected unicode-codepoint" for an invalid \\u{...}
        """
        char = self.advance_one()
        if char is None:
            raise self.expected("char", code=DiagnosticCode.UNEXPECTED_EOF)
        if char != "\\":
            return char

        escape = self.advance_one()
        if escape is None:
            raise self.expected("escaped-char", code=DiagnosticCode.UNEXPECTED_EOF)
        if escape == "u":
            return self._parse_unicode_escape()
        if escape in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[escape]
        raise self.expected(f"\\{escape}", code=DiagnosticCode.INVALID_ESCAPE)

    def _parse_unicode_escape(self) -> str:
        """Parse ``{HEX}`` after ``\\u`` into a Unicode scalar value."""
        self._consume_exact("{")
        hex_digits = self.take_while(_is_hex_digit)
        self._consume_exact("}")

        code_point = int(hex_digits, 16) if hex_digits else -1
        if (
            code_point < 0
            or code_point > MAX_UNICODE_CODE_POINT
            or SURROGATE_RANGE_START <= code_point <= SURROGATE_RANGE_END
        ):
            raise self.expected("unicode-codepoint", code=DiagnosticCode.INVALID_CODEPOINT)
        return chr(code_point)

    def parse_quoted_char(self) -> str:
        """Parse a quoted character, like ``'x'`` or ``'\\n'``."""
        self.skip_trivia()
        self.consume("'")
        char = self.parse_char()
        self.consume("'")
        return char

    def parse_quoted_string(self) -> str:
        """Parse a quoted string, like ``"foo\\tbar"``.

        Each body character goes through parse_char(), so ``\\"`` is a
        literal quote and an unescaped ``"`` closes the string.

        Raises:
            ParseError: UNTERMINATED_STRING when input ends before the
                closing quote, or any parse_char() failure
        """
        self.skip_trivia()
        self.consume('"')
        chars: list[str] = []
        while (char := self.peek_one()) != '"':
            if char is None:
                raise self.expected_and(
                    '"',
                    ErrorTemplate.unterminated_string(),
                    code=DiagnosticCode.UNTERMINATED_STRING,
                )
            chars.append(self.parse_char())
        self.consume('"')
        return "".join(chars)
