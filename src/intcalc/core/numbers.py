"""
Decimal conversion for integers of any size.

Python refuses int <-> str conversions beyond a process-wide digit limit
(4300 by default). Both directions here work in chunks that stay below it,
so neither the library nor its hosts need to touch that global setting.
"""

from __future__ import annotations

_CHUNK_DIGITS = 4000
_CHUNK_LIMIT = 10**_CHUNK_DIGITS
_LOG10_2 = 0.30102999566398120


def parse_int_literal(digits: str) -> int:
    """Convert a string of ASCII digits of any length to int."""
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_int(value: int) -> str:
    """Render an int of any size as decimal text."""
    if value < 0:
        return "-" + format_int(-value)
    if value < _CHUNK_LIMIT:
        return str(value)

    # Split near the middle; the low half is zero-padded to its width
    width = max(_CHUNK_DIGITS, int(value.bit_length() * _LOG10_2) // 2)
    high, low = divmod(value, 10**width)
    return format_int(high) + format_int(low).zfill(width)
