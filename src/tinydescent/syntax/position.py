"""Position utilities over UTF-8 byte offsets.

Cursor positions and error spans are byte offsets into the UTF-8 encoding
of the source, while Python strings index by code point. This module
converts between the two and maps byte offsets to line/column for error
reporting.

Line Ending Support:
    LF (\\n) is the line delimiter. CRLF files work because the \\n is still
    present; the \\r stays part of the preceding line's text.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LineOffsetCache",
    "byte_to_char_offset",
    "char_to_byte_offset",
    "is_char_boundary",
    "line_col",
    "utf8",
    "utf8_width",
]

# Continuation bytes look like 0b10xxxxxx.
_CONTINUATION_MASK = 0xC0
_CONTINUATION_TAG = 0x80


def utf8(text: str) -> bytes:
    """UTF-8 encoding of text.

    Cursors keep their own copy for their lifetime (CursorBase.source_bytes).

    Raises:
        UnicodeEncodeError: If text contains lone surrogates
    """
    return text.encode("utf-8")


def utf8_width(lead: int) -> int:
    """Byte width of the UTF-8 sequence starting with lead byte.

    Example:
        >>> utf8_width(ord("a"))
        1
        >>> utf8_width("λ".encode()[0])
        2
        >>> utf8_width("😀".encode()[0])
        4
    """
    if lead < 0x80:
        return 1
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    return 4


def is_char_boundary(data: bytes, pos: int) -> bool:
    """Check whether byte offset pos starts a code point (or is the end)."""
    if pos <= 0 or pos >= len(data):
        return 0 <= pos <= len(data)
    return data[pos] & _CONTINUATION_MASK != _CONTINUATION_TAG


def byte_to_char_offset(text: str, pos: int) -> int:
    """Convert a byte offset to a code point index into text.

    A byte offset inside a multi-byte sequence maps to the index of that
    code point. Offsets past the end clamp to len(text).

    Example:
        >>> byte_to_char_offset("λx", 2)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    return len(utf8(text)[:pos].decode("utf-8", errors="ignore"))


def char_to_byte_offset(text: str, index: int) -> int:
    """Convert a code point index into text to a byte offset.

    Example:
        >>> char_to_byte_offset("λx", 1)
        2
    """
    if index < 0:
        msg = f"Index must be >= 0, got {index}"
        raise ValueError(msg)
    return len(text[:index].encode("utf-8"))


def line_col(text: str, pos: int) -> tuple[int, int]:
    """Compute line and column for a byte offset.

    Returns:
        (line, column) tuple, 1-indexed like text editors; the column
        counts code points, not bytes

    Example:
        >>> line_col("ab\\nλx", 5)  # 'x'
        (2, 2)
    """
    return LineOffsetCache(text).get_line_col(pos)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes the byte offset of every line start in a single pass, then
    answers lookups with binary search.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(8)
        (2, 3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_data", "_offsets")

    def __init__(self, source: str) -> None:
        data = utf8(source)
        offsets = [0]
        newline = data.find(b"\n")
        while newline != -1:
            offsets.append(newline + 1)
            newline = data.find(b"\n", newline + 1)
        self._data = data
        self._offsets: tuple[int, ...] = tuple(offsets)

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing newline opens an empty last line)."""
        return len(self._offsets)

    def line_index(self, pos: int) -> int:
        """0-based index of the line containing byte offset pos (clamped)."""
        pos = max(0, min(pos, len(self._data)))

        # Largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1
        return left

    def line_bounds(self, index: int) -> tuple[int, int]:
        """Byte range of line index (0-based), excluding its newline."""
        start = self._offsets[index]
        if index + 1 < len(self._offsets):
            return (start, self._offsets[index + 1] - 1)
        return (start, len(self._data))

    def line_text(self, index: int) -> str:
        """Text of line index (0-based), without its newline."""
        start, end = self.line_bounds(index)
        return self._data[start:end].decode("utf-8")

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for byte offset pos.

        Offsets past the end clamp to the end of the last line; the column
        of an offset inside a multi-byte sequence is that code point's.

        Returns:
            (line, column) tuple, both 1-indexed
        """
        pos = max(0, min(pos, len(self._data)))
        index = self.line_index(pos)
        prefix = self._data[self._offsets[index] : pos]
        col = len(prefix.decode("utf-8", errors="ignore")) + 1
        return (index + 1, col)
