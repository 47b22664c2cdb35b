"""Diagnostic system for parse failures.

Provides structured error diagnostics with codes, byte spans, hints and
highlighted context, rendered for terminals, single lines or JSON.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import DepthLimitExceededError, DescentError, ParseError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "DescentError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "OutputFormat",
    "ParseError",
    "SourceSpan",
]
