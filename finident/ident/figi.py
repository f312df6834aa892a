"""FIGI: 2-char provider, scope ``G``, 8-char id, 1 check digit.

Provider and id use digits and consonants only. Check digit is the CUSIP
variant of modulus 10 double-add-double over the 11-character payload.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, final

from finident.core.grammar import CheckScheme, Component, Grammar
from finident.ident.base import CheckedIdentifier

# Prefixes that collide with ISIN country codes.
PROVIDER_EXCLUSIONS: frozenset[str] = frozenset({"BS", "BM", "GG", "GB", "GH", "KY", "VG"})

FIGI_GRAMMAR = Grammar(
    kind="FIGI",
    tag="figi",
    components=(
        Component("provider", "provider", re.compile(r"[B-DF-HJ-NP-TV-Z0-9]{2}"), PROVIDER_EXCLUSIONS),
        Component("scope", "scope", re.compile(r"G")),
        Component("id", "id", re.compile(r"[B-DF-HJ-NP-TV-Z0-9]{8}")),
    ),
    check=Component("check_digit", "check digit", re.compile(r"[0-9]")),
    scheme=CheckScheme.CUSIP,
)


@final
@dataclass(frozen=True, slots=True, order=True)
class Figi(CheckedIdentifier):
    """Financial Instrument Global Identifier."""

    value: str

    GRAMMAR: ClassVar[Grammar] = FIGI_GRAMMAR

    @property
    def provider(self) -> str:
        return self.value[0:2]

    @property
    def scope(self) -> str:
        return self.value[2]

    @property
    def id(self) -> str:
        return self.value[3:11]

    @property
    def check_digit(self) -> str:
        return self.value[11]
