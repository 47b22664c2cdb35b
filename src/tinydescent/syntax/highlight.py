"""Highlighted source excerpts for error messages.

Renders the lines covered by a byte span with line numbers and a marker
under the offending text:

       1 | λx(λy(x y) λz z
         |                ^
       2 | next line

With ``color=True`` the span is underlined in red instead of a marker row,
for terminals.

Python 3.13+. Zero external dependencies.
"""

from tinydescent.constants import HIGHLIGHT_CONTEXT_LINES
from tinydescent.syntax.position import LineOffsetCache, is_char_boundary, utf8

__all__ = ["highlight_error"]

_UNDERLINE_RED = "\033[4m\033[31m"
_RESET = "\033[0m"


def _marker_padding(prefix: str) -> str:
    # Keep tabs so the marker lines up with tab-indented source
    return "".join("\t" if ch == "\t" else " " for ch in prefix)


def highlight_error(
    start: int,
    end: int,
    text: str,
    *,
    color: bool = False,
    context_lines: int = HIGHLIGHT_CONTEXT_LINES,
) -> str:
    """Render the source lines around a byte span with the span marked.

    Offsets are clamped to the text and widened to code point boundaries,
    so a one-byte span on a multi-byte character marks the whole character.
    A span that covers nothing visible (end of input, a newline) marks the
    column just past the last character of its line.

    Args:
        start: Span start, byte offset (inclusive)
        end: Span end, byte offset (exclusive)
        text: Full source text
        color: Underline the span with ANSI codes instead of a marker row
        context_lines: Lines to show before and after the span

    Returns:
        Multi-line printable excerpt

    Example:
        >>> print(highlight_error(4, 5, "foo(bar"))
        1 | foo(bar
          |     ^
    """
    data = utf8(text)
    start = max(0, min(start, len(data)))
    end = max(start, min(end, len(data)))
    while not is_char_boundary(data, start):
        start -= 1
    while not is_char_boundary(data, end):
        end += 1

    cache = LineOffsetCache(text)
    first = cache.line_index(start)
    last = cache.line_index(max(start, end - 1))
    lo = max(0, first - context_lines)
    hi = min(cache.line_count - 1, last + context_lines)
    width = len(str(hi + 1))

    rendered: list[str] = []
    for index in range(lo, hi + 1):
        line_start, line_end = cache.line_bounds(index)
        gutter = f"{index + 1:>{width}} | "

        if not first <= index <= last:
            rendered.append(gutter + data[line_start:line_end].decode("utf-8"))
            continue

        seg_start = max(start, line_start)
        seg_end = max(seg_start, min(end, line_end))
        before = data[line_start:seg_start].decode("utf-8")
        marked = data[seg_start:seg_end].decode("utf-8")
        after = data[seg_end:line_end].decode("utf-8")

        if color:
            rendered.append(f"{gutter}{before}{_UNDERLINE_RED}{marked or ' '}{_RESET}{after}")
        else:
            rendered.append(gutter + before + marked + after)
            marker = "^" * max(1, len(marked))
            rendered.append(f"{' ' * width} | {_marker_padding(before)}{marker}")

    return "\n".join(rendered)
