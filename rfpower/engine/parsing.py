"""
Text ⇄ number helpers for the input fields.

Input is whatever the user has typed so far, so anything that is not a
complete finite decimal number maps to ``None`` instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Optional

# sign, digits with optional fraction (".5" and "1." both allowed), exponent
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(text: str) -> Optional[float]:
    """Parse field text to a finite float, or None if it is not one yet."""
    if text is None:
        return None
    stripped = text.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        return None
    value = float(stripped)
    if not math.isfinite(value):
        # e.g. "1e999"
        return None
    return value


def format_fixed(value: float, decimals: int) -> str:
    """Fixed-point rendering with exactly ``decimals`` digits after the point."""
    text = f"{value:.{decimals}f}"
    if text.startswith("-") and not text.strip("-0."):
        # -0.0, or a tiny negative that rounds to zero
        text = text[1:]
    return text


def format_plain(value: float) -> str:
    """Shortest readable form of a parsed input: 20, 0.5, -3.25, 1e-07."""
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
