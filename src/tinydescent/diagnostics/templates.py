"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]

_HINTS: dict[DiagnosticCode, str] = {
    DiagnosticCode.INVALID_ESCAPE: "Valid escapes are \\n \\r \\t \\0 \\' \\\" \\\\ and \\u{HEX}",
    DiagnosticCode.INVALID_CODEPOINT: "Use 1-6 hex digits naming a scalar value outside D800-DFFF",
    DiagnosticCode.UNTERMINATED_STRING: 'Close the string with an unescaped "',
}


class ErrorTemplate:
    """Centralized error message templates.

    All parse failure messages are created here. NO f-strings in
    exception constructors! This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def expected(
        what: str,
        *,
        code: DiagnosticCode,
        span: SourceSpan,
        context: str | None = None,
        info: str | None = None,
    ) -> Diagnostic:
        """Something was expected at the span and not found.

        Args:
            what: Description of the expected input (literal text or class)
            code: Diagnostic code for the failure kind
            span: Byte span of the failure anchor
            context: Highlighted source excerpt
            info: Extra detail line (e.g. conversion failure)

        Returns:
            Diagnostic for the given code
        """
        if code is DiagnosticCode.EXPECTED_LITERAL:
            msg = f"Expected '{what}'"
        elif code is DiagnosticCode.UNEXPECTED_EOF:
            msg = f"Unexpected end of input, expected {what}"
        else:
            msg = f"Expected {what}"
        return Diagnostic(
            code=code,
            message=msg,
            expected=what,
            span=span,
            context=context,
            info=info,
            hint=_HINTS.get(code),
        )

    @staticmethod
    def integer_overflow(max_value: int) -> str:
        """Info line for an integer literal above the target width.

        Args:
            max_value: Largest representable value

        Returns:
            Detail text for expected_and()
        """
        return f"number too large to fit in an unsigned 64-bit integer (max {max_value})"

    @staticmethod
    def unterminated_string() -> str:
        """Info line for a string literal that reaches end of input."""
        return "unterminated string literal"

    @staticmethod
    def nesting_depth_expected(max_depth: int) -> str:
        """Expected text for a grammar rule entered past the depth limit."""
        return f"at most {max_depth} nested levels"

    @staticmethod
    def nesting_depth_info() -> str:
        """Info line for a grammar rule entered past the depth limit."""
        return "nesting depth limit reached; input is too deeply nested"

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Grammar recursion went deeper than allowed.

        Args:
            max_depth: Configured maximum nesting depth

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            expected=ErrorTemplate.nesting_depth_expected(max_depth),
            hint="Reduce nesting or raise max_nesting_depth",
        )
