"""CIK: SEC / EDGAR Central Index Key, a positive integer of up to 10 digits.

Loose parsing (``from_string``, ``from_parts``, ``validate_component``)
accepts leading zeros, the common padded ``0000320193`` form; strict parsing
accepts only the unpadded canonical form.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Self, final

from finident.core.errors import IdentError, InvalidComponentFormatError, InvalidFormatError, InvalidValueError
from finident.core.grammar import Component, Grammar, normalize
from finident.core.result import Err, Ok
from finident.ident.base import Identifier

MAX_CIK: int = 9_999_999_999

CIK_GRAMMAR = Grammar(
    kind="CIK",
    tag="cik",
    components=(Component("value", "CIK", re.compile(r"[1-9][0-9]{0,9}")),),
)

_PADDED = re.compile(r"[0-9]{1,10}")


@final
@dataclass(frozen=True, slots=True, order=True)
class Cik(Identifier):
    value: int

    GRAMMAR: ClassVar[Grammar] = CIK_GRAMMAR

    @classmethod
    def _wrap(cls, parts: tuple[str, ...]) -> Self:
        return cls(int(parts[0]))

    @classmethod
    def from_string(cls, raw: str) -> Ok[Self] | Err[IdentError]:
        s = normalize(raw)
        if _PADDED.fullmatch(s) is None:
            return Err(InvalidFormatError.create("CIK", raw))
        n = int(s)
        if n == 0:
            return Err(InvalidValueError.create("CIK", raw, "cannot be zero"))
        return Ok(cls(n))

    @classmethod
    def validate_format(cls, raw: str) -> Ok[str] | Err[InvalidFormatError]:
        s = normalize(raw)
        if _PADDED.fullmatch(s) is None or int(s) == 0:
            return Err(InvalidFormatError.create("CIK", raw))
        return Ok(str(int(s)))

    @classmethod
    def validate_component(cls, name: str, raw: str) -> Ok[str] | Err[InvalidComponentFormatError]:
        """Loose: leading zeros allowed, returned unpadded."""
        component = CIK_GRAMMAR.component(name)
        s = normalize(raw)
        if _PADDED.fullmatch(s) is None or int(s) == 0:
            return Err(InvalidComponentFormatError.create("CIK", component.name, component.label, raw))
        return Ok(str(int(s)))

    @classmethod
    def from_parts(cls, *parts: str) -> Ok[Self] | Err[IdentError]:
        if len(parts) != 1:
            raise TypeError(f"CIK takes 1 components, got {len(parts)}")
        match cls.validate_component("value", parts[0]):
            case Err() as e:
                return e
            case Ok(s):
                return Ok(cls(int(s)))
        raise AssertionError("unreachable")

    @staticmethod
    def from_int(value: int) -> Ok[Cik] | Err[InvalidValueError]:
        if value == 0:
            return Err(InvalidValueError.create("CIK", str(value), "cannot be zero"))
        if value < 0:
            return Err(InvalidValueError.create("CIK", str(value), "cannot be negative"))
        if value > MAX_CIK:
            return Err(InvalidValueError.create("CIK", str(value), "cannot be more than 10 digits"))
        return Ok(Cik(value))

    def __str__(self) -> str:
        return str(self.value)

    def to_string_padded(self) -> str:
        return f"{self.value:010d}"
