"""ISIN: 2-letter country code, 9-char security identifier, 1 check digit.

The security identifier is the national number (a CUSIP in the US). Check
digit is modulus 10 double-add-double, ISIN variant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, final

from finident.core.errors import IdentError
from finident.core.grammar import CheckScheme, Component, Grammar
from finident.core.result import Err, Ok
from finident.ident.base import CheckedIdentifier
from finident.ident.cusip import Cusip

ISIN_GRAMMAR = Grammar(
    kind="ISIN",
    tag="isin",
    components=(
        Component("country_code", "country code", re.compile(r"[A-Z]{2}")),
        Component("security_identifier", "security identifier", re.compile(r"[A-Z0-9]{9}")),
    ),
    check=Component("check_digit", "check digit", re.compile(r"[0-9]")),
    scheme=CheckScheme.ISIN,
)


@final
@dataclass(frozen=True, slots=True, order=True)
class Isin(CheckedIdentifier):
    """International Securities Identification Number (ISO 6166)."""

    value: str

    GRAMMAR: ClassVar[Grammar] = ISIN_GRAMMAR

    @property
    def country_code(self) -> str:
        return self.value[0:2]

    @property
    def security_identifier(self) -> str:
        return self.value[2:11]

    @property
    def check_digit(self) -> str:
        return self.value[11]

    @property
    def payload(self) -> str:
        return self.value[0:11]

    @staticmethod
    def from_cusip(cusip: Cusip, country_code: str = "US") -> Ok[Isin] | Err[IdentError]:
        """ISIN whose national security identifier is ``cusip``."""
        return Isin.from_payload_parts(country_code, cusip.value)
