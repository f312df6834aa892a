"""Standard Industrial Classification (1987) codes, structure only.

Four levels, each with a string ``code`` (as printed in the manual) and an
integer ``id`` unique only within its level:

- Division: ``A``..``K``, or the non-standard BLS pseudo division ``*``.
- Major Group: two digits (not ``00``), optionally followed by ``0`` or ``00``.
- Industry Group: three digits (not starting ``00``), optionally followed by ``0``.
- Industry: four digits, not starting ``00`` and not ending in ``0``.

A code string with trailing zeros belongs to the shallowest level it fits,
so ``"0100"`` is Major Group ``01``, not an Industry.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import final

from finident.core.errors import InvalidFormatError, InvalidValueError
from finident.core.grammar import normalize
from finident.core.result import Err, Ok

_DIVISION = re.compile(r"[A-K*]")
_MAJOR_GROUP = re.compile(r"([0-9]{2})(?:00?)?")
_INDUSTRY_GROUP = re.compile(r"([0-9]{3})0?")
_INDUSTRY = re.compile(r"[0-9]{4}")

_PSEUDO_DIVISION_ID = 27


def _division_id(s: str) -> int | None:
    if _DIVISION.fullmatch(s) is None:
        return None
    return _PSEUDO_DIVISION_ID if s == "*" else ord(s) - ord("A") + 1


def _major_group_id(s: str) -> int | None:
    m = _MAJOR_GROUP.fullmatch(s)
    if m is None or m[1] == "00":
        return None
    return int(m[1])


def _industry_group_id(s: str) -> int | None:
    m = _INDUSTRY_GROUP.fullmatch(s)
    if m is None or m[1].startswith("00"):
        return None
    return int(m[1])


def _industry_id(s: str) -> int | None:
    if _INDUSTRY.fullmatch(s) is None or s.startswith("00") or s.endswith("0"):
        return None
    return int(s)


class _SicLevel:
    __slots__ = ()

    @property
    def code(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.code

    def to_string_tagged(self) -> str:
        return f"sic:{self.code}"


@final
@dataclass(frozen=True, slots=True, order=True)
class SicDivisionCode(_SicLevel):
    id: int

    @property
    def code(self) -> str:
        return "*" if self.id == _PSEUDO_DIVISION_ID else chr(ord("A") + self.id - 1)

    @staticmethod
    def from_string(raw: str) -> Ok[SicDivisionCode] | Err[InvalidFormatError]:
        return SicDivisionCode.from_string_strict(normalize(raw)).map_err(lambda _: _invalid("SIC Division", raw))

    @staticmethod
    def from_string_strict(raw: str) -> Ok[SicDivisionCode] | Err[InvalidFormatError]:
        i = _division_id(raw)
        if i is None:
            return Err(_invalid("SIC Division", raw))
        return Ok(SicDivisionCode(i))


@final
@dataclass(frozen=True, slots=True, order=True)
class SicMajorGroupCode(_SicLevel):
    id: int

    @property
    def code(self) -> str:
        return f"{self.id:02d}"

    @staticmethod
    def from_string(raw: str) -> Ok[SicMajorGroupCode] | Err[InvalidFormatError]:
        return SicMajorGroupCode.from_string_strict(normalize(raw)).map_err(
            lambda _: _invalid("SIC Major Group", raw)
        )

    @staticmethod
    def from_string_strict(raw: str) -> Ok[SicMajorGroupCode] | Err[InvalidFormatError]:
        i = _major_group_id(raw)
        if i is None:
            return Err(_invalid("SIC Major Group", raw))
        return Ok(SicMajorGroupCode(i))

    @staticmethod
    def from_id(id: int) -> Ok[SicCode] | Err[InvalidFormatError | InvalidValueError]:
        """The code printed as two digits. Always a Major Group when in range."""
        return _from_id("SIC Major Group", id, 99, 2)


@final
@dataclass(frozen=True, slots=True, order=True)
class SicIndustryGroupCode(_SicLevel):
    id: int

    @property
    def code(self) -> str:
        return f"{self.id:03d}"

    @property
    def major_group(self) -> SicMajorGroupCode:
        return SicMajorGroupCode(self.id // 10)

    @staticmethod
    def from_string(raw: str) -> Ok[SicIndustryGroupCode] | Err[InvalidFormatError]:
        return SicIndustryGroupCode.from_string_strict(normalize(raw)).map_err(
            lambda _: _invalid("SIC Industry Group", raw)
        )

    @staticmethod
    def from_string_strict(raw: str) -> Ok[SicIndustryGroupCode] | Err[InvalidFormatError]:
        i = _industry_group_id(raw)
        if i is None:
            return Err(_invalid("SIC Industry Group", raw))
        return Ok(SicIndustryGroupCode(i))

    @staticmethod
    def from_id(id: int) -> Ok[SicCode] | Err[InvalidFormatError | InvalidValueError]:
        """The code printed as three digits; ``100`` comes back as Major Group ``10``."""
        return _from_id("SIC Industry Group", id, 999, 3)


@final
@dataclass(frozen=True, slots=True, order=True)
class SicIndustryCode(_SicLevel):
    id: int

    @property
    def code(self) -> str:
        return f"{self.id:04d}"

    @property
    def industry_group(self) -> SicIndustryGroupCode:
        return SicIndustryGroupCode(self.id // 10)

    @property
    def major_group(self) -> SicMajorGroupCode:
        return SicMajorGroupCode(self.id // 100)

    @staticmethod
    def from_string(raw: str) -> Ok[SicIndustryCode] | Err[InvalidFormatError]:
        return SicIndustryCode.from_string_strict(normalize(raw)).map_err(lambda _: _invalid("SIC Industry", raw))

    @staticmethod
    def from_string_strict(raw: str) -> Ok[SicIndustryCode] | Err[InvalidFormatError]:
        i = _industry_id(raw)
        if i is None:
            return Err(_invalid("SIC Industry", raw))
        return Ok(SicIndustryCode(i))

    @staticmethod
    def from_id(id: int) -> Ok[SicCode] | Err[InvalidFormatError | InvalidValueError]:
        """The code printed as four digits; ``100`` comes back as Major Group ``01``."""
        return _from_id("SIC Industry", id, 9999, 4)


type SicCode = SicDivisionCode | SicMajorGroupCode | SicIndustryGroupCode | SicIndustryCode

_LEVELS: tuple[tuple[Callable[[str], int | None], Callable[[int], SicCode]], ...] = (
    (_division_id, SicDivisionCode),
    (_major_group_id, SicMajorGroupCode),
    (_industry_group_id, SicIndustryGroupCode),
    (_industry_id, SicIndustryCode),
)


def _invalid(kind: str, raw: str) -> InvalidFormatError:
    return InvalidFormatError.create(kind, raw)


def _from_id(kind: str, id: int, max_id: int, width: int) -> Ok[SicCode] | Err[InvalidFormatError | InvalidValueError]:
    if not 1 <= id <= max_id:
        return Err(InvalidValueError.create(kind, str(id), f"id must be between 1 and {max_id}"))
    return sic_code_from_string_strict(f"{id:0{width}d}")


def sic_code_from_string_strict(raw: str) -> Ok[SicCode] | Err[InvalidFormatError]:
    """The shallowest level whose format ``raw`` fits."""
    for level_id, level in _LEVELS:
        i = level_id(raw)
        if i is not None:
            return Ok(level(i))
    return Err(_invalid("SIC", raw))


def sic_code_from_string(raw: str) -> Ok[SicCode] | Err[InvalidFormatError]:
    return sic_code_from_string_strict(normalize(raw)).map_err(lambda _: _invalid("SIC", raw))


def is_valid_sic_format(raw: str) -> bool:
    return sic_code_from_string(raw).is_ok


def is_valid_sic_format_strict(raw: str) -> bool:
    return sic_code_from_string_strict(raw).is_ok
