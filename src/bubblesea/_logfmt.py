"""Helpers for compact debug logging.

Bubble values are arbitrary client-supplied strings. This module trims them
to a bounded preview before they reach DEBUG logs.
"""

from __future__ import annotations


def preview_for_log(value: str, *, max_string: int = 120) -> str:
    """Return *value* cut to *max_string* characters, marking any truncation."""
    if len(value) > max_string:
        return f"{value[:max_string]}…<truncated {len(value)} chars>"
    return value
