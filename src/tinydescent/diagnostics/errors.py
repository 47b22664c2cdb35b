"""Exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information
alongside the rendered message.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic
from .formatter import DiagnosticFormatter

__all__ = ["DepthLimitExceededError", "DescentError", "ParseError"]


class DescentError(Exception):
    """Base exception for all tinydescent errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        message: Rendered, human-readable message
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        formatter: DiagnosticFormatter | None = None,
    ) -> None:
        """Initialize DescentError.

        Args:
            message: Error message string OR Diagnostic object
            formatter: Renders a Diagnostic (default: plain terminal layout)
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            rendered = (formatter or DiagnosticFormatter()).format(message)
        else:
            self.diagnostic = None
            rendered = message
        self.message = rendered
        super().__init__(rendered)


class ParseError(DescentError):
    """Parse failure anchored at a byte span of the input.

    Raised by every cursor primitive that cannot match. Propagates
    unchanged to the grammar, which decides whether to try another
    alternative.

    Attributes:
        span: Byte-indexed half-open (start, end) range into the source
        message: Rendered message with expectation and highlighted context
        diagnostic: Structured form of the failure (when built from one)

    Example:
        >>> parser = TextParser("x")
        >>> try:
        ...     parser.consume("(")
        ... except ParseError as e:
        ...     e.span
        (0, 1)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        span: tuple[int, int] | None = None,
        *,
        formatter: DiagnosticFormatter | None = None,
    ) -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            span: Byte span; taken from the Diagnostic when omitted
            formatter: Renders a Diagnostic (default: plain terminal layout)

        Raises:
            ValueError: If no span is given and none can be derived
        """
        super().__init__(message, formatter=formatter)
        if span is None:
            if self.diagnostic is None or self.diagnostic.span is None:
                msg = "ParseError requires a span"
                raise ValueError(msg)
            span = self.diagnostic.span.as_tuple()
        self.span: tuple[int, int] = span


class DepthLimitExceededError(DescentError):
    """Raised when maximum nesting depth is exceeded.

    This error indicates either:
    - Adversarial input designed to cause stack overflow
    - Unintended deep nesting in grammar input
    """
