"""EIN: U.S. IRS Employer Identification Number, ``PP-BBBBBBB``.

The hyphen is optional on input and a one-digit prefix is zero padded.
Suffixes (e.g. plan numbers) are not supported. A handful of well-formed
values are conventionally used as "no EIN" placeholders. The parsing
factories reject them with an InvalidValueError; ``parse_optional`` maps
them to None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Self, final

from finident.core import factory
from finident.core.errors import IdentError, InvalidValueError
from finident.core.grammar import Component, Grammar
from finident.core.result import Err, Ok
from finident.ident.base import Identifier

EIN_GRAMMAR = Grammar(
    kind="EIN",
    tag="ein",
    components=(
        Component("prefix", "prefix", re.compile(r"[0-9]{1,2}")),
        Component("body", "body", re.compile(r"[0-9]{7}")),
    ),
    separator="-?",
)

RESERVED: frozenset[tuple[str, str]] = frozenset({
    ("00", "0000000"),
    ("01", "1111111"),
    ("04", "4444444"),
    ("11", "1111111"),
    ("88", "8888888"),
    ("99", "9999999"),
})


@final
@dataclass(frozen=True, slots=True, order=True)
class Ein(Identifier):
    prefix: str
    body: str

    GRAMMAR: ClassVar[Grammar] = EIN_GRAMMAR

    @classmethod
    def _wrap(cls, parts: tuple[str, ...]) -> Self:
        prefix, body = parts
        return cls(prefix.zfill(2), body)

    @property
    def value(self) -> str:
        return f"{self.prefix}-{self.body}"

    @property
    def is_reserved(self) -> bool:
        """True for placeholder values that stand for "no EIN"."""
        return (self.prefix, self.body) in RESERVED

    @classmethod
    def _not_reserved(cls, result: Ok[Self] | Err[IdentError], raw: str) -> Ok[Self] | Err[IdentError]:
        match result:
            case Ok(ein) if ein.is_reserved:
                return Err(InvalidValueError.create("EIN", raw, "is a reserved 'no EIN' placeholder"))
        return result

    @classmethod
    def from_string(cls, raw: str) -> Ok[Self] | Err[IdentError]:
        return cls._not_reserved(cls._build(factory.from_string(EIN_GRAMMAR, raw, strict=False)), raw)

    @classmethod
    def from_string_strict(cls, raw: str) -> Ok[Self] | Err[IdentError]:
        return cls._not_reserved(cls._build(factory.from_string(EIN_GRAMMAR, raw, strict=True)), raw)

    @classmethod
    def from_parts(cls, *parts: str) -> Ok[Self] | Err[IdentError]:
        return cls._not_reserved(cls._build(factory.from_parts(EIN_GRAMMAR, parts, strict=False)), "-".join(parts))

    @classmethod
    def from_parts_strict(cls, *parts: str) -> Ok[Self] | Err[IdentError]:
        return cls._not_reserved(cls._build(factory.from_parts(EIN_GRAMMAR, parts, strict=True)), "-".join(parts))

    @staticmethod
    def parse_optional(raw: str) -> Ok[Ein | None] | Err[IdentError]:
        """Like from_string, but a reserved placeholder yields Ok(None)."""
        match Ein._build(factory.from_string(EIN_GRAMMAR, raw, strict=False)):
            case Err() as e:
                return e
            case Ok(ein):
                return Ok(None if ein.is_reserved else ein)
