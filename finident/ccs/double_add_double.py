"""Modulus 10 "double-add-double" check digits.

Two incompatible variants share the name:

- ``CusipVariant`` (CUSIP, FIGI): each character contributes its value,
  doubled at even 1-based positions, with the tens and ones of the result
  added together.
- ``IsinVariant`` (ISIN): each character is first expanded to its decimal
  digits (letters become two digits), then every other digit starting from
  the right-most one is doubled, and the digits of the results are summed.

Both finish with ``(10 - sum % 10) % 10``.

Each variant has a direct ``calculate_simple`` that follows the description
step by step, and a table-driven ``calculate`` used when parsing. The tables
hold the net, already mod-10-reduced contribution of each character value, so
the inner loop is one lookup and one addition. The two must agree on every
input over ``[0-9A-Z]``.

Callers must validate the payload alphabet first; unexpected characters
silently count as value 0.
"""

from __future__ import annotations

from typing import final

from finident.ccs.char_value import char_value

# The accumulator is kept within a signed byte. Table entries are at most 9,
# so anything at or below this can take one more addition.
MAX_ACCUM: int = 127 - 9


def _finish(total: int) -> str:
    return str((10 - total % 10) % 10)


@final
class CusipVariant:
    """Variant used by CUSIP and FIGI."""

    # Net contribution of a char value at a 0-based even position (not doubled).
    # fmt: off
    EVENS: tuple[int, ...] = (
        0, 1, 2, 3, 4, 5, 6, 7, 8, 9,
        1, 2, 3, 4, 5, 6, 7, 8, 9, 0,
        2, 3, 4, 5, 6, 7, 8, 9, 0, 1,
        3, 4, 5, 6, 7, 8,
    )
    # fmt: on

    # Net contribution of a char value at a 0-based odd position (doubled).
    # fmt: off
    ODDS: tuple[int, ...] = (
        0, 2, 4, 6, 8, 1, 3, 5, 7, 9,
        2, 4, 6, 8, 0, 3, 5, 7, 9, 1,
        4, 6, 8, 0, 2, 5, 7, 9, 1, 3,
        6, 8, 0, 2, 4, 7,
    )
    # fmt: on

    @staticmethod
    def calculate(payload: str) -> str:
        """Table-driven check digit for an already validated payload."""
        evens = CusipVariant.EVENS
        odds = CusipVariant.ODDS
        total = 0
        for i, c in enumerate(payload):
            if total > MAX_ACCUM:
                total %= 10
            total += odds[char_value(c)] if i & 1 else evens[char_value(c)]
        return _finish(total)

    @staticmethod
    def calculate_simple(payload: str) -> str:
        """Reference implementation, straight from the definition."""
        total = 0
        for i, c in enumerate(payload, start=1):
            v = char_value(c)
            if i % 2 == 0:
                v *= 2
            total += v // 10 + v % 10
        return _finish(total)


@final
class IsinVariant:
    """Variant used by ISIN. Expects uppercase input."""

    # Steps consumed by each char value: one per decimal digit of the value.
    # fmt: off
    WIDTHS: tuple[int, ...] = (
        1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
        2, 2, 2, 2, 2, 2, 2, 2, 2, 2,
        2, 2, 2, 2, 2, 2, 2, 2, 2, 2,
        2, 2, 2, 2, 2, 2,
    )
    # fmt: on

    # Net contribution when the step index at the start of the character is odd.
    # fmt: off
    ODDS: tuple[int, ...] = (
        0, 1, 2, 3, 4, 5, 6, 7, 8, 9,
        2, 3, 4, 5, 6, 7, 8, 9, 0, 1,
        4, 5, 6, 7, 8, 9, 0, 1, 2, 3,
        6, 7, 8, 9, 0, 1,
    )
    # fmt: on

    # Net contribution when the step index at the start of the character is even.
    # The first digit consumed (the ones digit) is doubled.
    # fmt: off
    EVENS: tuple[int, ...] = (
        0, 2, 4, 6, 8,
        1, 3, 5, 7, 9,
        1, 3, 5, 7, 9,
        2, 4, 6, 8, 0,
        2, 4, 6, 8, 0,
        3, 5, 7, 9, 1,
        3, 5, 7, 9, 1,
        4,
    )
    # fmt: on

    @staticmethod
    def calculate(payload: str) -> str:
        """Table-driven check digit, walking the payload right to left."""
        widths = IsinVariant.WIDTHS
        evens = IsinVariant.EVENS
        odds = IsinVariant.ODDS
        total = 0
        idx = 0
        for c in reversed(payload):
            v = char_value(c)
            # After n additions total <= 9 * n, and 14 * 9 = 126 > MAX_ACCUM, so
            # the first reduction can come no earlier than the 15th character.
            if total > MAX_ACCUM:
                total %= 10
            total += odds[v] if idx & 1 else evens[v]
            idx += widths[v]
        return _finish(total)

    @staticmethod
    def calculate_simple(payload: str) -> str:
        """Reference implementation using explicit digit expansion."""
        digits = [int(d) for c in payload for d in str(char_value(c))]
        total = 0
        for i, d in enumerate(reversed(digits)):
            if i % 2 == 0:
                d *= 2
            total += sum(int(x) for x in str(d))
        return _finish(total)
