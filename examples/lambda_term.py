"""Lambda Term Example - A Complete Grammar on TextParser.

Demonstrates building a recursive-descent parser with tinydescent:

1. Define an AST and a TextParser subclass with one method per rule
2. Parse nested terms with comments and whitespace between tokens
3. Report failures with byte spans and highlighted context
4. Guard recursion with nesting()

Grammar:
    term := 'λ' name term        abstraction
          | '(' term* ')'        application
          | name                 variable
          | u64                  literal

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from tinydescent import ParseError, TextParser
from tinydescent.diagnostics import DiagnosticFormatter, OutputFormat


@dataclass(frozen=True, slots=True)
class Var:
    name: str


@dataclass(frozen=True, slots=True)
class Num:
    value: int


@dataclass(frozen=True, slots=True)
class Lam:
    param: str
    body: Term


@dataclass(frozen=True, slots=True)
class App:
    terms: tuple[Term, ...]


type Term = Var | Num | Lam | App


class TermParser(TextParser):
    """Parser for lambda terms."""

    def parse_program(self) -> Term:
        """Parse a single term followed only by trivia."""
        term = self.parse_term()
        self.skip_trivia()
        if not self.is_eof():
            raise self.expected("end of input")
        return term

    def parse_term(self) -> Term:
        self.skip_trivia()
        match self.peek_one():
            case "λ":
                self.consume("λ")
                param = self.parse_name()
                with self.nesting():
                    body = self.parse_term()
                return Lam(param, body)
            case "(":
                self.consume("(")
                terms: list[Term] = []
                with self.nesting():
                    self.skip_trivia()
                    while self.peek_one() not in (")", None):
                        terms.append(self.parse_term())
                        self.skip_trivia()
                self.consume(")")
                return App(tuple(terms))
            case _:
                return self.parse_atom()

    def parse_atom(self) -> Term:
        char = self.peek_one()
        if char is not None and char in "0123456789":
            return Num(self.parse_u64())
        return Var(self.parse_name())


def show(term: Term) -> str:
    """Render a term back to source form."""
    match term:
        case Var(name):
            return name
        case Num(value):
            return str(value)
        case Lam(param, body):
            return f"λ{param} {show(body)}"
        case App(terms):
            return "(" + " ".join(show(t) for t in terms) + ")"


def example_1_parse() -> None:
    """Parse a nested term."""
    print("=" * 60)
    print("Example 1: Parsing")
    print("=" * 60)

    source = """
// Church numeral two, applied
(λf λx (f (f x)) succ 0x00)
"""
    term = TermParser(source).parse_program()
    print(f"AST:      {term}")
    print(f"Rendered: {show(term)}")
    print()


def example_2_errors() -> None:
    """Show failure spans and rendered messages."""
    print("=" * 60)
    print("Example 2: Error Reporting")
    print("=" * 60)

    for source in ["(λx x", "λ(x)", "(f 99999999999999999999)", "\"quoted\""]:
        try:
            TermParser(source).parse_program()
        except ParseError as e:
            print(f"Source: {source!r}  span={e.span}")
            print(e.message)
            print()


def example_3_formats() -> None:
    """Render the same failure in other output formats."""
    print("=" * 60)
    print("Example 3: Output Formats")
    print("=" * 60)

    for output_format in (OutputFormat.SIMPLE, OutputFormat.JSON):
        parser = TermParser("(x\n  +)", formatter=DiagnosticFormatter(output_format=output_format))
        try:
            parser.parse_program()
        except ParseError as e:
            print(e.message)
    print()


def example_4_nesting() -> None:
    """Hostile nesting is rejected before the Python stack runs out."""
    print("=" * 60)
    print("Example 4: Nesting Limit")
    print("=" * 60)

    source = "(" * 10_000
    try:
        TermParser(source, max_nesting_depth=20).parse_program()
    except ParseError as e:
        print(f"Rejected at byte {e.span[0]}")
    print()


def main() -> None:
    """Run all lambda term examples."""
    print()
    print("tinydescent Lambda Term Examples")
    print()

    example_1_parse()
    example_2_errors()
    example_3_formats()
    example_4_nesting()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
