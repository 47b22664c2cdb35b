"""Whitespace and comment skipping.

Trivia is ASCII whitespace plus ``//`` line comments. Token-level
primitives skip it before reading; grammars call these directly between
tokens when they need to.
"""

from tinydescent.constants import ASCII_WHITESPACE, LINE_COMMENT_MARKER
from tinydescent.syntax.cursor import CursorBase

__all__ = ["TriviaSkipper"]


def _is_ascii_whitespace(char: str) -> bool:
    return char in ASCII_WHITESPACE


class TriviaSkipper(CursorBase):
    """Trivia skipping on top of the cursor primitives."""

    def skip_spaces(self) -> None:
        """Skip ASCII whitespace (space, tab, LF, form feed, CR).

        Never fails; a no-op when the cursor is not at whitespace.
        """
        self.take_while(_is_ascii_whitespace)

    def skip_comment(self) -> bool:
        """Skip one line comment if the cursor is at one.

        The comment runs to and including the next newline, or to end of
        input when no newline follows.

        Returns:
            True if a comment was skipped
        """
        if not self.starts_with(LINE_COMMENT_MARKER):
            return False
        self.take_while(lambda char: char != "\n")
        self.advance_one()  # newline; no-op at EOF
        return True

    def skip_trivia(self) -> None:
        """Skip interleaved ASCII whitespace and line comments.

        Alternates until neither matches, so ``"  // a\\n  // b\\n x"`` is
        skipped up to ``x``. Idempotent: a second call consumes nothing.
        """
        while True:
            self.skip_spaces()
            if not self.skip_comment():
                return
