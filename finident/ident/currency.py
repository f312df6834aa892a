"""ISO 4217 currency codes. Format only."""

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
class CurrencyCodeAlpha3(Identifier):
    value: str

    GRAMMAR: ClassVar[Grammar] = Grammar(
        kind="ISO 4217 alpha-3 currency code",
        tag="currency",
        components=(Component("value", "currency code", re.compile(r"[A-Z]{3}")),),
    )


@final
@dataclass(frozen=True, slots=True, order=True)
class CurrencyCodeNumeric3(Identifier):
    value: int

    GRAMMAR: ClassVar[Grammar] = Grammar(
        kind="ISO 4217 numeric-3 currency code",
        tag="currency",
        components=(Component("value", "currency code", re.compile(r"[0-9]{3}")),),
    )

    @classmethod
    def _wrap(cls, parts: tuple[str, ...]) -> Self:
        return cls(int(parts[0]))

    @staticmethod
    def from_int(value: int) -> Ok[CurrencyCodeNumeric3] | Err[InvalidValueError]:
        if not 0 <= value <= 999:
            return Err(InvalidValueError.create(
                CurrencyCodeNumeric3.GRAMMAR.kind, str(value), "must be between 0 and 999",
            ))
        return Ok(CurrencyCodeNumeric3(value))

    def __str__(self) -> str:
        return f"{self.value:03d}"


type CurrencyCode = CurrencyCodeAlpha3 | CurrencyCodeNumeric3


def currency_code_from_string_strict(raw: str) -> Ok[CurrencyCode] | Err[IdentError]:
    if CurrencyCodeAlpha3.is_valid_format_strict(raw):
        return CurrencyCodeAlpha3.from_string_strict(raw)
    if CurrencyCodeNumeric3.is_valid_format_strict(raw):
        return CurrencyCodeNumeric3.from_string_strict(raw)
    return Err(InvalidFormatError.create("ISO 4217 currency code", raw))


def currency_code_from_string(raw: str) -> Ok[CurrencyCode] | Err[IdentError]:
    """Alpha or numeric code, after normalizing whitespace and case."""
    result = currency_code_from_string_strict(normalize(raw))
    if isinstance(result, Err):
        return Err(InvalidFormatError.create("ISO 4217 currency code", raw))
    return result
