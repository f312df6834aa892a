"""Numeric code values of identifier characters.

Digits '0'..'9' map to 0..9 and letters 'A'..'Z' (and 'a'..'z') map to
10..35. Every other character maps to 0: callers validate the alphabet
before any check character is computed, so this never reports an error.
"""

from __future__ import annotations

# Index: ord(c) for ASCII c.
CHAR_VALUES: tuple[int, ...] = tuple(
    c - 48 if 48 <= c <= 57 else c - 55 if 65 <= c <= 90 else c - 87 if 97 <= c <= 122 else 0
    for c in range(128)
)


def char_value(c: str) -> int:
    o = ord(c)
    return CHAR_VALUES[o] if o < 128 else 0
