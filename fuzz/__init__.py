"""Atheris fuzz targets for cursor robustness testing.

Requires Atheris installation (``pip install -e .[fuzz]``).

Targets:
    cursor.py - Span alignment and position integrity of the primitives

Run: python fuzz/cursor.py -max_total_time=60
"""
