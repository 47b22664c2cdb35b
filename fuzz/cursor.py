#!/usr/bin/env python3
"""Cursor Integrity Fuzzer (Atheris).

Targets: tinydescent.syntax.TextParser
Tests code point stepping, byte offset alignment and the failure spans of
every token primitive.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}

def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)

atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("tinydescent").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["tinydescent"]):
    from tinydescent import ParseError
    from tinydescent.syntax import LineOffsetCache, TextParser
    from tinydescent.syntax.position import is_char_boundary, utf8

_OPERATIONS = (
    "advance_one",
    "skip_trivia",
    "parse_name",
    "parse_u64",
    "parse_char",
    "parse_quoted_char",
    "parse_quoted_string",
)


def _finding(msg: str) -> None:
    raise RuntimeError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test TextParser and LineOffsetCache integrity."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    try:
        # 1. Setup parser and cache
        source = fdp.ConsumeUnicodeNoSurrogates(1024)
        parser = TextParser(source)
        cache = LineOffsetCache(source)
        encoded = utf8(source)

        # 2. Random primitives and invariant checks
        ops = fdp.ConsumeIntInRange(1, 20)
        for _ in range(ops):
            op = _OPERATIONS[fdp.ConsumeIntInRange(0, len(_OPERATIONS) - 1)]
            before = parser.pos
            try:
                getattr(parser, op)()
            except ParseError as e:
                start, end = e.span
                if end != start + 1 or not is_char_boundary(encoded, start):
                    _finding(f"{op} failed with misaligned span {e.span}")

            if not is_char_boundary(encoded, parser.pos) or parser.pos < before:
                _finding(f"{op} moved pos from {before} to {parser.pos}")

            # Line:col must agree with a direct decode of the prefix
            line, col = cache.get_line_col(parser.pos)
            prefix = encoded[: parser.pos].decode("utf-8")
            expected = (prefix.count("\n") + 1, len(prefix) - (prefix.rfind("\n") + 1) + 1)
            if (line, col) != expected:
                _finding(f"Position mismatch at pos {parser.pos}: {line}:{col} != {expected}")

        # 3. Out-of-bounds peek test
        count = fdp.ConsumeIntInRange(0, 2000)
        _ = parser.peek_many(count)

    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise

if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
