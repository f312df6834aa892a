"""Declarative identifier grammars.

A Grammar lists an identifier's fixed components in order (each a named
regex over an uppercase alphabet, optionally with excluded values), its
optional check component, and the CheckScheme that computes the check
characters from the concatenated payload. The shared pipeline in
finident.core.factory is driven entirely by these descriptors.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import final

from finident.ccs.double_add_double import CusipVariant, IsinVariant
from finident.ccs.iso7064 import check_digits

_WHITESPACE = re.compile(r"\s+")


def normalize(raw: str) -> str:
    """Loose-mode normalization: collapse whitespace runs, trim, uppercase."""
    return _WHITESPACE.sub(" ", raw).strip().upper()


class CheckScheme(Enum):
    """Check character system applied to an identifier payload."""

    NONE = "none"
    CUSIP = "cusip"  # modulus 10 double-add-double, CUSIP/FIGI variant
    ISIN = "isin"  # modulus 10 double-add-double, ISIN variant
    MOD97_10 = "mod97-10"  # ISO/IEC 7064, two digits

    def calculate(self, payload: str) -> str:
        """Check character(s) for an already validated payload."""
        match self:
            case CheckScheme.CUSIP:
                return CusipVariant.calculate(payload)
            case CheckScheme.ISIN:
                return IsinVariant.calculate(payload)
            case CheckScheme.MOD97_10:
                return check_digits(payload)
            case CheckScheme.NONE:
                return ""


@final
@dataclass(frozen=True, slots=True)
class Component:
    """One fixed field of an identifier, e.g. the CUSIP Issuer Number."""

    name: str
    label: str  # used in error messages
    pattern: re.Pattern[str]
    excluded: frozenset[str] = frozenset()

    def matches(self, s: str) -> bool:
        return self.pattern.fullmatch(s) is not None and s not in self.excluded


def _compile(components: tuple[Component, ...], separator: str) -> re.Pattern[str]:
    return re.compile(separator.join(f"({c.pattern.pattern})" for c in components))


@final
@dataclass(frozen=True, slots=True)
class Grammar:
    """Structure of one identifier kind.

    ``override``, when set, accepts a complete candidate string without
    check character verification (used for the LEI whitelist).
    """

    kind: str
    tag: str
    components: tuple[Component, ...]
    check: Component | None = None
    scheme: CheckScheme = CheckScheme.NONE
    separator: str = ""
    override: Callable[[str], bool] | None = None
    full_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)
    payload_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if (self.check is None) != (self.scheme is CheckScheme.NONE):
            raise TypeError(f"{self.kind} grammar needs a check component iff it has a scheme")
        object.__setattr__(self, "full_pattern", _compile(self.all_components, self.separator))
        object.__setattr__(self, "payload_pattern", _compile(self.components, self.separator))

    @property
    def all_components(self) -> tuple[Component, ...]:
        if self.check is None:
            return self.components
        return (*self.components, self.check)

    def component(self, name: str) -> Component:
        for c in self.all_components:
            if c.name == name:
                return c
        raise KeyError(f"{self.kind} has no component '{name}'")

    def split(self, s: str) -> tuple[str, ...] | None:
        """Components of a complete identifier string, or None."""
        return self._split(self.full_pattern, self.all_components, s)

    def split_payload(self, s: str) -> tuple[str, ...] | None:
        """Components of a payload (identifier without check characters), or None."""
        return self._split(self.payload_pattern, self.components, s)

    @staticmethod
    def _split(
        pattern: re.Pattern[str], components: tuple[Component, ...], s: str,
    ) -> tuple[str, ...] | None:
        m = pattern.fullmatch(s)
        if m is None:
            return None
        parts = m.groups()
        if any(p in c.excluded for c, p in zip(components, parts, strict=True)):
            return None
        return parts
