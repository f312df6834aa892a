"""Error value hierarchy. No factory in finident raises for bad input.

Every error is a frozen dataclass value that can be pattern-matched,
compared, and serialized. Base class IdentError, four @final subclasses.
An IncorrectCheckCharacterError carries enough context for a caller to
repair the input; the library itself never applies a repair.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import final


@dataclass(frozen=True, slots=True)
class IdentError:
    """Base error value. NOT @final: has subclasses."""

    message: str
    code: str
    kind: str  # identifier kind, e.g. "CUSIP"

    def with_context(self, context: str) -> IdentError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {"message": self.message, "code": self.code, "kind": self.kind}

    def __str__(self) -> str:
        return self.message


@final
@dataclass(frozen=True, slots=True)
class InvalidFormatError(IdentError):
    """The whole input does not match the identifier grammar."""

    raw: str

    @staticmethod
    def create(kind: str, raw: str) -> InvalidFormatError:
        return InvalidFormatError(
            message=f"Format of identifier '{raw}' is not valid for {kind}.",
            code="INVALID_FORMAT",
            kind=kind,
            raw=raw,
        )

    def to_dict(self) -> dict[str, object]:
        return {**IdentError.to_dict(self), "raw": self.raw}


@final
@dataclass(frozen=True, slots=True)
class InvalidComponentFormatError(IdentError):
    """A named sub-field (e.g. a CUSIP Issuer) does not match its grammar."""

    component: str
    raw: str

    @staticmethod
    def create(kind: str, component: str, label: str, raw: str) -> InvalidComponentFormatError:
        return InvalidComponentFormatError(
            message=f"Format of {label} '{raw}' is not valid for {kind}.",
            code="INVALID_COMPONENT_FORMAT",
            kind=kind,
            component=component,
            raw=raw,
        )

    def to_dict(self) -> dict[str, object]:
        return {**IdentError.to_dict(self), "component": self.component, "raw": self.raw}


def _describe(labelled: Sequence[tuple[str, str]]) -> str:
    parts = [f"{label} '{value}'" for label, value in labelled]
    if len(parts) <= 1:
        return "".join(parts)
    return f"{', '.join(parts[:-1])} and {parts[-1]}"


@final
@dataclass(frozen=True, slots=True)
class IncorrectCheckCharacterError(IdentError):
    """Supplied check character(s) differ from the ones computed from the payload.

    ``components`` holds the validated payload parts as (name, value) pairs,
    in identifier order.
    """

    supplied: str
    expected: str
    components: tuple[tuple[str, str], ...]

    @staticmethod
    def create(
        kind: str,
        check_label: str,
        supplied: str,
        expected: str,
        components: Sequence[tuple[str, str, str]],
    ) -> IncorrectCheckCharacterError:
        """Build from (name, label, value) triples describing the payload."""
        described = _describe([(label, value) for _, label, value in components])
        return IncorrectCheckCharacterError(
            message=(
                f"{check_label} '{supplied}' is not correct for {kind} {described}. "
                f"It should be '{expected}'."
            ),
            code="INCORRECT_CHECK_CHARACTER",
            kind=kind,
            supplied=supplied,
            expected=expected,
            components=tuple((name, value) for name, _, value in components),
        )

    @property
    def payload(self) -> str:
        return "".join(value for _, value in self.components)

    @property
    def corrected(self) -> str:
        """The identifier string with the expected check character(s)."""
        return self.payload + self.expected

    def to_dict(self) -> dict[str, object]:
        return {
            **IdentError.to_dict(self),
            "supplied": self.supplied,
            "expected": self.expected,
            "components": {name: value for name, value in self.components},
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidValueError(IdentError):
    """Input is well-formed but outside the range the identifier allows."""

    raw: str
    constraint: str

    @staticmethod
    def create(kind: str, raw: str, constraint: str) -> InvalidValueError:
        return InvalidValueError(
            message=f"{kind} {constraint}: '{raw}'",
            code="INVALID_VALUE",
            kind=kind,
            raw=raw,
            constraint=constraint,
        )

    def to_dict(self) -> dict[str, object]:
        return {**IdentError.to_dict(self), "raw": self.raw, "constraint": self.constraint}
