"""ISO 3166 country codes. Format only; no table of assigned codes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Self, final

from finident.core.errors import IdentError, InvalidFormatError, InvalidValueError
from finident.core.grammar import Component, Grammar, normalize
from finident.core.result import Err, Ok
from finident.ident.base import Identifier


@final
@dataclass(frozen=True, slots=True, order=True)
class CountryCodeAlpha2(Identifier):
    value: str

    GRAMMAR: ClassVar[Grammar] = Grammar(
        kind="ISO 3166 alpha-2 country code",
        tag="country",
        components=(Component("value", "country code", re.compile(r"[A-Z]{2}")),),
    )


@final
@dataclass(frozen=True, slots=True, order=True)
class CountryCodeAlpha3(Identifier):
    value: str

    GRAMMAR: ClassVar[Grammar] = Grammar(
        kind="ISO 3166 alpha-3 country code",
        tag="country",
        components=(Component("value", "country code", re.compile(r"[A-Z]{3}")),),
    )


@final
@dataclass(frozen=True, slots=True, order=True)
class CountryCodeNumeric3(Identifier):
    """Numeric code, held as an int and rendered with three digits."""

    value: int

    GRAMMAR: ClassVar[Grammar] = Grammar(
        kind="ISO 3166 numeric-3 country code",
        tag="country",
        components=(Component("value", "country code", re.compile(r"[0-9]{3}")),),
    )

    @classmethod
    def _wrap(cls, parts: tuple[str, ...]) -> Self:
        return cls(int(parts[0]))

    @staticmethod
    def from_int(value: int) -> Ok[CountryCodeNumeric3] | Err[InvalidValueError]:
        if not 0 <= value <= 999:
            return Err(InvalidValueError.create(
                CountryCodeNumeric3.GRAMMAR.kind, str(value), "must be between 0 and 999",
            ))
        return Ok(CountryCodeNumeric3(value))

    def __str__(self) -> str:
        return f"{self.value:03d}"


type CountryCode = CountryCodeAlpha2 | CountryCodeAlpha3 | CountryCodeNumeric3


def country_code_from_string_strict(raw: str) -> Ok[CountryCode] | Err[IdentError]:
    """Dispatch on shape: two letters, three letters or three digits."""
    for cls in (CountryCodeAlpha2, CountryCodeAlpha3, CountryCodeNumeric3):
        if cls.is_valid_format_strict(raw):
            return cls.from_string_strict(raw)
    return Err(InvalidFormatError.create("ISO 3166 country code", raw))


def country_code_from_string(raw: str) -> Ok[CountryCode] | Err[IdentError]:
    match country_code_from_string_strict(normalize(raw)):
        case Err():
            return Err(InvalidFormatError.create("ISO 3166 country code", raw))
        case ok:
            return ok
