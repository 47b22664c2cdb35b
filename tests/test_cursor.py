"""Tests for cursor infrastructure.

Validates the accessor pair and the lookahead/advance primitives over
UTF-8 byte offsets.
"""

from __future__ import annotations

import gc
import sys

import pytest

from tinydescent.syntax import Parser, TextParser
from tinydescent.syntax.cursor import CursorBase

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_parser(self) -> None:
        """Parser starts at byte 0."""
        parser = TextParser("hello")

        assert parser.source == "hello"
        assert parser.pos == 0
        assert not parser.is_eof()

    def test_pos_is_settable(self) -> None:
        """pos can be restored for backtracking."""
        parser = TextParser("hello")
        parser.advance_many(3)
        parser.pos = 1

        assert parser.peek_one() == "e"

    def test_abstract_base_cannot_be_instantiated(self) -> None:
        """CursorBase and Parser require the accessor pair."""
        with pytest.raises(TypeError):
            CursorBase()  # type: ignore[abstract]
        with pytest.raises(TypeError):
            Parser()  # type: ignore[abstract]

    def test_repr(self) -> None:
        """repr shows position and byte size."""
        parser = TextParser("λx")

        assert repr(parser) == "TextParser(pos=0, size=3)"


class TestPositionSetter:
    """pos only accepts code point boundaries within the input."""

    @pytest.mark.parametrize("value", [0, 2, 3])
    def test_boundaries_accepted(self, value: int) -> None:
        """Start, end and code point starts are valid positions."""
        parser = TextParser("λx")
        parser.pos = value

        assert parser.pos == value

    def test_mid_code_point_rejected(self) -> None:
        """A byte inside a multi-byte character is not a position."""
        parser = TextParser("λx")

        with pytest.raises(ValueError, match="not a code point boundary"):
            parser.pos = 1
        assert parser.pos == 0
        assert parser.peek_one() == "λ"

    @pytest.mark.parametrize("value", [-1, 4, 100])
    def test_out_of_range_rejected(self, value: int) -> None:
        """Positions outside 0..len are rejected."""
        parser = TextParser("λx")
        parser.advance_one()

        with pytest.raises(ValueError, match="not a code point boundary"):
            parser.pos = value
        assert parser.pos == 2


class TestSourceBytes:
    """The encoded source lives exactly as long as its parser."""

    def test_source_bytes_stored(self) -> None:
        """TextParser encodes once and returns the same buffer."""
        parser = TextParser("λx")

        assert parser.source_bytes == "λx".encode()
        assert parser.source_bytes is parser.source_bytes

    def test_discarded_parser_releases_source(self) -> None:
        """Nothing outside the parser keeps the source alive."""
        source = "".join(["λ"] * 1000) + "x"
        baseline = sys.getrefcount(source)

        parser = TextParser(source)
        parser.advance_many(10)
        parser.take_while(lambda c: c == "λ")
        parser.is_eof()
        del parser
        gc.collect()

        assert sys.getrefcount(source) == baseline


class _DictCursor(Parser):
    """Cursor keeping its state in a dict, to exercise the accessor pair."""

    def __init__(self, source: str) -> None:
        self.state = {"source": source, "pos": 0}

    @property
    def source(self) -> str:
        return self.state["source"]

    @property
    def pos(self) -> int:
        return self.state["pos"]

    @pos.setter
    def pos(self, value: int) -> None:
        self.state["pos"] = value


class TestCustomAccessors:
    """Primitives work on any class that provides source and pos."""

    def test_primitives_use_accessors(self) -> None:
        """State changes go through the pos setter."""
        cursor = _DictCursor("foo 12")

        assert cursor.parse_name() == "foo"
        assert cursor.state["pos"] == 3
        assert cursor.parse_u64() == 12
        assert cursor.is_eof()

    def test_default_source_bytes(self) -> None:
        """Without an override, source_bytes encodes the current source."""
        cursor = _DictCursor("λ")

        assert cursor.source_bytes == b"\xce\xbb"


# ============================================================================
# EOF DETECTION
# ============================================================================


class TestCursorEOF:
    """Test EOF detection."""

    def test_is_eof_false_at_start(self) -> None:
        """is_eof is False at start of source."""
        assert not TextParser("hello").is_eof()

    def test_is_eof_true_at_end(self) -> None:
        """is_eof is True at end of source."""
        parser = TextParser("hello")
        parser.pos = 5

        assert parser.is_eof()

    def test_is_eof_true_for_empty_source(self) -> None:
        """is_eof is True for empty source at position 0."""
        assert TextParser("").is_eof()

    def test_is_eof_uses_byte_length(self) -> None:
        """End of input is the UTF-8 length, not the str length."""
        parser = TextParser("λ")

        assert not parser.is_eof()
        parser.pos = 2
        assert parser.is_eof()


# ============================================================================
# PEEK OPERATIONS
# ============================================================================


class TestCursorPeek:
    """Test non-consuming lookahead."""

    def test_peek_one(self) -> None:
        """peek_one returns the next code point without moving."""
        parser = TextParser("hello")

        assert parser.peek_one() == "h"
        assert parser.pos == 0

    def test_peek_one_at_eof(self) -> None:
        """peek_one returns None at end of input."""
        assert TextParser("").peek_one() is None

    @pytest.mark.parametrize("char", ["λ", "€", "😀", "п"])
    def test_peek_one_multibyte(self, char: str) -> None:
        """peek_one returns whole multi-byte code points."""
        assert TextParser(char + "x").peek_one() == char

    def test_peek_many(self) -> None:
        """peek_many counts code points, not bytes."""
        parser = TextParser("a😀b!")

        assert parser.peek_many(3) == "a😀b"
        assert parser.pos == 0

    def test_peek_many_too_few(self) -> None:
        """peek_many returns None when fewer code points remain."""
        assert TextParser("ab").peek_many(3) is None

    def test_peek_many_zero(self) -> None:
        """peek_many(0) is the empty string, even at EOF."""
        assert TextParser("").peek_many(0) == ""

    def test_peek_many_exact_remaining(self) -> None:
        """peek_many may cover everything that is left."""
        assert TextParser("abc").peek_many(3) == "abc"


# ============================================================================
# ADVANCE OPERATIONS
# ============================================================================


class TestCursorAdvance:
    """Test consuming operations."""

    def test_advance_one(self) -> None:
        """advance_one consumes and returns one code point."""
        parser = TextParser("hi")

        assert parser.advance_one() == "h"
        assert parser.pos == 1

    def test_advance_one_multibyte(self) -> None:
        """advance_one moves pos by the code point's UTF-8 width."""
        parser = TextParser("λx")

        assert parser.advance_one() == "λ"
        assert parser.pos == 2
        assert parser.advance_one() == "x"
        assert parser.pos == 3

    def test_advance_one_at_eof(self) -> None:
        """advance_one returns None and does not move at EOF."""
        parser = TextParser("a")
        parser.advance_one()

        assert parser.advance_one() is None
        assert parser.pos == 1

    def test_advance_many(self) -> None:
        """advance_many consumes exactly count code points."""
        parser = TextParser("a😀b")

        assert parser.advance_many(2) == "a😀"
        assert parser.pos == 5
        assert parser.peek_one() == "b"

    def test_advance_many_too_few(self) -> None:
        """advance_many returns None and does not move if input is short."""
        parser = TextParser("abc")

        assert parser.advance_many(5) is None
        assert parser.pos == 0


# ============================================================================
# STARTS_WITH / TAKE_WHILE
# ============================================================================


class TestStartsWith:
    """Test literal lookahead."""

    def test_starts_with_match(self) -> None:
        """starts_with matches a prefix."""
        assert TextParser("hello").starts_with("he")

    def test_starts_with_longer_than_input(self) -> None:
        """starts_with is False when the literal runs past EOF."""
        assert not TextParser("hello").starts_with("hello!")

    def test_starts_with_unicode(self) -> None:
        """starts_with compares code points."""
        assert TextParser("λx.x").starts_with("λx")

    def test_starts_with_empty(self) -> None:
        """Empty literal always matches."""
        assert TextParser("").starts_with("")

    def test_starts_with_does_not_consume(self) -> None:
        """starts_with leaves pos alone."""
        parser = TextParser("hello")
        parser.starts_with("hell")

        assert parser.pos == 0


class TestTakeWhile:
    """Test the single consuming scanner."""

    def test_take_while(self) -> None:
        """take_while consumes the maximal matching run."""
        parser = TextParser("abc123")

        assert parser.take_while(str.isalpha) == "abc"
        assert parser.pos == 3

    def test_take_while_empty_run(self) -> None:
        """take_while returns empty string without moving on no match."""
        parser = TextParser("123")

        assert parser.take_while(str.isalpha) == ""
        assert parser.pos == 0

    def test_take_while_to_eof(self) -> None:
        """take_while stops at end of input."""
        parser = TextParser("abc")

        assert parser.take_while(str.isalpha) == "abc"
        assert parser.is_eof()

    def test_take_while_multibyte(self) -> None:
        """take_while advances by bytes of each code point."""
        parser = TextParser("ñandú rest")

        assert parser.take_while(str.isalpha) == "ñandú"
        assert parser.pos == len("ñandú".encode())
        assert parser.peek_one() == " "

    def test_take_while_sees_single_code_points(self) -> None:
        """The predicate receives one code point at a time."""
        seen: list[str] = []
        parser = TextParser("a😀")

        parser.take_while(lambda c: seen.append(c) is None)

        assert seen == ["a", "😀"]
