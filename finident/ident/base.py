"""Shared surface of every grammar-driven identifier value.

Concrete classes are ``@final @dataclass(frozen=True, slots=True, order=True)``
holding the canonical string, declare a ``GRAMMAR`` and inherit the
classmethod factories below. Each factory returns ``Ok[Self] | Err[IdentError]``.
"""

from __future__ import annotations

from typing import ClassVar, Self

from finident.core import factory
from finident.core.errors import IdentError, InvalidComponentFormatError, InvalidFormatError
from finident.core.grammar import Grammar
from finident.core.result import Err, Ok


class Identifier:
    """Base for identifiers built by the shared pipeline."""

    __slots__ = ()

    GRAMMAR: ClassVar[Grammar]

    @classmethod
    def _wrap(cls, parts: tuple[str, ...]) -> Self:
        return cls("".join(parts))  # type: ignore[call-arg]

    @classmethod
    def _build(cls, result: Ok[tuple[str, ...]] | Err[IdentError]) -> Ok[Self] | Err[IdentError]:
        match result:
            case Err() as e:
                return e
            case Ok(parts):
                return Ok(cls._wrap(parts))

    # -- whole string -------------------------------------------------------

    @classmethod
    def from_string(cls, raw: str) -> Ok[Self] | Err[IdentError]:
        """Parse after normalizing whitespace and case."""
        return cls._build(factory.from_string(cls.GRAMMAR, raw, strict=False))

    @classmethod
    def from_string_strict(cls, raw: str) -> Ok[Self] | Err[IdentError]:
        """Parse exactly as given."""
        return cls._build(factory.from_string(cls.GRAMMAR, raw, strict=True))

    @classmethod
    def from_parts(cls, *parts: str) -> Ok[Self] | Err[IdentError]:
        return cls._build(factory.from_parts(cls.GRAMMAR, parts, strict=False))

    @classmethod
    def from_parts_strict(cls, *parts: str) -> Ok[Self] | Err[IdentError]:
        return cls._build(factory.from_parts(cls.GRAMMAR, parts, strict=True))

    @classmethod
    def validate_format(cls, raw: str) -> Ok[str] | Err[InvalidFormatError]:
        return factory.validate_format(cls.GRAMMAR, raw, strict=False)

    @classmethod
    def validate_format_strict(cls, raw: str) -> Ok[str] | Err[InvalidFormatError]:
        return factory.validate_format(cls.GRAMMAR, raw, strict=True)

    @classmethod
    def is_valid_format(cls, raw: str) -> bool:
        """Structure only. Check characters are not verified."""
        return cls.validate_format(raw).is_ok

    @classmethod
    def is_valid_format_strict(cls, raw: str) -> bool:
        return cls.validate_format_strict(raw).is_ok

    # -- single components --------------------------------------------------

    @classmethod
    def validate_component(cls, name: str, raw: str) -> Ok[str] | Err[InvalidComponentFormatError]:
        return factory.validate_component(cls.GRAMMAR, name, raw, strict=False)

    @classmethod
    def validate_component_strict(cls, name: str, raw: str) -> Ok[str] | Err[InvalidComponentFormatError]:
        return factory.validate_component(cls.GRAMMAR, name, raw, strict=True)

    @classmethod
    def is_valid_component_format(cls, name: str, raw: str) -> bool:
        return cls.validate_component(name, raw).is_ok

    @classmethod
    def is_valid_component_format_strict(cls, name: str, raw: str) -> bool:
        return cls.validate_component_strict(name, raw).is_ok

    # -- rendering ----------------------------------------------------------

    def __str__(self) -> str:
        return self.value  # type: ignore[attr-defined, no-any-return]

    def to_string_tagged(self) -> str:
        return f"{self.GRAMMAR.tag}:{self}"


class CheckedIdentifier(Identifier):
    """Identifier whose grammar ends in check characters."""

    __slots__ = ()

    @classmethod
    def from_payload(cls, payload: str) -> Ok[Self] | Err[IdentError]:
        """Build from everything but the check characters, computing them."""
        return cls._build(factory.from_payload(cls.GRAMMAR, payload, strict=False))

    @classmethod
    def from_payload_strict(cls, payload: str) -> Ok[Self] | Err[IdentError]:
        return cls._build(factory.from_payload(cls.GRAMMAR, payload, strict=True))

    @classmethod
    def from_payload_parts(cls, *parts: str) -> Ok[Self] | Err[IdentError]:
        return cls._build(factory.from_payload_parts(cls.GRAMMAR, parts, strict=False))

    @classmethod
    def from_payload_parts_strict(cls, *parts: str) -> Ok[Self] | Err[IdentError]:
        return cls._build(factory.from_payload_parts(cls.GRAMMAR, parts, strict=True))

    @classmethod
    def validate_payload_format(cls, raw: str) -> Ok[str] | Err[InvalidComponentFormatError]:
        return factory.validate_payload_format(cls.GRAMMAR, raw, strict=False)

    @classmethod
    def validate_payload_format_strict(cls, raw: str) -> Ok[str] | Err[InvalidComponentFormatError]:
        return factory.validate_payload_format(cls.GRAMMAR, raw, strict=True)

    @classmethod
    def calculate_check_digit(cls, *parts: str) -> Ok[str] | Err[IdentError]:
        """Check characters for the given payload components (loose)."""
        return factory.calculate_check(cls.GRAMMAR, parts, strict=False)
