"""CUSIP: 6-char Issuer Number, 2-char Issue Number, 1 Check Digit.

Check digit is modulus 10 double-add-double, CUSIP variant, over the
8-character payload. A letter in the first position makes it a CINS
(CUSIP International Numbering System) identifier; the letter is the
country or region code.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, final

from finident.core.grammar import CheckScheme, Component, Grammar
from finident.ident.base import CheckedIdentifier

CUSIP_GRAMMAR = Grammar(
    kind="CUSIP",
    tag="cusip",
    components=(
        Component("issuer_number", "Issuer", re.compile(r"[A-Z0-9]{6}")),
        Component("issue_number", "Issue", re.compile(r"[A-Z0-9]{2}")),
    ),
    check=Component("check_digit", "Check Digit", re.compile(r"[0-9]")),
    scheme=CheckScheme.CUSIP,
)

# CINS country codes I, O and Z are outside the base A-Y allocation.
CINS_EXTENDED: frozenset[str] = frozenset("IOZ")


@final
@dataclass(frozen=True, slots=True, order=True)
class Cusip(CheckedIdentifier):
    """Committee on Uniform Security Identification Procedures number."""

    value: str

    GRAMMAR: ClassVar[Grammar] = CUSIP_GRAMMAR

    @property
    def issuer_number(self) -> str:
        return self.value[0:6]

    @property
    def issue_number(self) -> str:
        return self.value[6:8]

    @property
    def check_digit(self) -> str:
        return self.value[8]

    @property
    def payload(self) -> str:
        return self.value[0:8]

    # -- CINS ---------------------------------------------------------------

    @property
    def is_cins(self) -> bool:
        return self.value[0].isalpha()

    @property
    def cins_country_code(self) -> str | None:
        """The CINS country/region letter, or None for a plain CUSIP."""
        return self.value[0] if self.is_cins else None

    @property
    def is_cins_base(self) -> bool:
        return self.is_cins and self.value[0] not in CINS_EXTENDED

    @property
    def is_cins_extended(self) -> bool:
        return self.value[0] in CINS_EXTENDED

    # -- private use --------------------------------------------------------

    @property
    def has_private_issuer(self) -> bool:
        """Issuer numbers ``???99?`` and ``99000?``..``99999?`` are reserved for private use."""
        issuer = self.issuer_number
        if issuer[3:5] == "99":
            return True
        return issuer[0:2] == "99" and issuer[2:5].isdigit()

    @property
    def has_private_issue(self) -> bool:
        """Issue numbers ``90``..``99`` and ``9A``..``9Y`` are reserved for private use."""
        issue = self.issue_number
        return issue[0] == "9" and (issue[1].isdigit() or "A" <= issue[1] <= "Y")

    @property
    def is_private_use(self) -> bool:
        return self.has_private_issuer or self.has_private_issue
