"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_BOLD = "\033[1m"
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    TERMINAL = "terminal"  # Multi-line PARSE_ERROR layout (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (terminal, simple, json)
        color: Emit ANSI emphasis (bold headers, underlined span)
        sanitize: Truncate free-form content to max_content_length
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format(diagnostic))
        PARSE_ERROR
        - expected: (
        - detected:
        1 | x)
          | ^

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        EXPECTED_LITERAL: Expected '(' at line 1, column 1
    """

    output_format: OutputFormat = OutputFormat.TERMINAL
    color: bool = False
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.TERMINAL:
                return self._format_terminal(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _header(self, text: str) -> str:
        if self.color:
            return f"{_BOLD}{text}{_RESET}"
        return text

    def _format_terminal(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in the multi-line terminal layout.

        Example output:
            PARSE_ERROR
            - expected: integer
            - detected:
            1 | 99999999999999999999
              |                     ^
            - info:
            number too large to fit in an unsigned 64-bit integer
        """
        title = "PARSE_ERROR" if diagnostic.severity == "error" else "PARSE_WARNING"
        expected = diagnostic.expected or diagnostic.message
        parts = [
            self._header(title),
            f"{self._header('- expected:')} {expected}",
        ]

        if diagnostic.context is not None:
            parts.append(self._header("- detected:"))
            parts.append(diagnostic.context)

        if diagnostic.info:
            parts.append(self._header("- info:"))
            parts.append(self._maybe_sanitize(diagnostic.info))

        if diagnostic.hint:
            parts.append(f"{self._header('- help:')} {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            EXPECTED_TOKEN: Expected name at line 2, column 5
        """
        message = self._maybe_sanitize(diagnostic.message)
        if diagnostic.span is not None:
            span = diagnostic.span
            return f"{diagnostic.code.name}: {message} at line {span.line}, column {span.column}"
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "EXPECTED_TOKEN", "code_value": 3003, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.category),
            "message": self._maybe_sanitize(diagnostic.message),
            "expected": diagnostic.expected,
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column

        if diagnostic.info:
            data["info"] = self._maybe_sanitize(diagnostic.info)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
