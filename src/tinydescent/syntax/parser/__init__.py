"""Parser layers built on the cursor.

Module Organization:
- whitespace.py: TriviaSkipper (whitespace and // line comments)
- primitives.py: Parser (names, integers, chars, quoted strings, literals)
- core.py: TextParser, the concrete parser grammars subclass

Public API:
    Parser: Abstract primitive set (bring your own source/pos accessors)
    TextParser: Concrete parser bound to a source string
    TriviaSkipper: Trivia layer alone
"""

from tinydescent.syntax.parser.core import TextParser
from tinydescent.syntax.parser.primitives import Parser
from tinydescent.syntax.parser.whitespace import TriviaSkipper

__all__ = ["Parser", "TextParser", "TriviaSkipper"]
