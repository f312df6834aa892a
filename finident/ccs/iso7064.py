"""ISO/IEC 7064 MOD 97-10, as used for LEI check digits (ISO 17442).

The input is read as a decimal numeral in which digits stand for themselves
and letters for their two-digit values 10..35. The running total is reduced
mod 97 as soon as it passes ``MAX``, which keeps every intermediate value
inside a signed 64-bit integer regardless of input length.
"""

from __future__ import annotations

from finident.ccs.char_value import char_value

# Largest total that can still be multiplied by 100 and have 35 added
# without exceeding 2**63 - 1.
MAX: int = (2**63 - 1 - 35) // 100

MODULUS: int = 97


def mod97_10(string: str) -> int:
    """Remainder of ``string`` mod 97. A complete, valid LEI yields 1.

    ``string`` must already be purely alphanumeric.
    """
    total = 0
    for c in string:
        v = char_value(c)
        total = total * (100 if v > 9 else 10) + v
        if total > MAX:
            total %= MODULUS
    return total % MODULUS


def compute_check_digits(string: str) -> int:
    """Check digits for ``string``, which must end in the placeholder ``"00"``."""
    return 98 - mod97_10(string)


def check_digits(payload: str) -> str:
    """Two-character check digits for a payload without placeholders."""
    return f"{compute_check_digits(payload + '00'):02d}"
