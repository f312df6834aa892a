"""LEI (ISO 17442): 4-char LOU identifier, 14-char entity identifier, 2 check digits.

Check digits are ISO/IEC 7064 MOD 97-10. A value from the closed list in
``lei_whitelist`` is accepted even though its check digits are wrong; such a
value reports ``is_conforming`` False.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, final

from finident.ccs.iso7064 import mod97_10
from finident.core.grammar import CheckScheme, Component, Grammar
from finident.ident import lei_whitelist
from finident.ident.base import CheckedIdentifier

LEI_GRAMMAR = Grammar(
    kind="LEI",
    tag="lei",
    components=(
        Component("lou_identifier", "LOU identifier", re.compile(r"[A-Z0-9]{4}")),
        Component("entity_identifier", "entity identifier", re.compile(r"[A-Z0-9]{14}")),
    ),
    check=Component("check_digits", "check digits", re.compile(r"[0-9]{2}")),
    scheme=CheckScheme.MOD97_10,
    override=lei_whitelist.contains,
)

_LEI_FORMAT = re.compile(r"[A-Z0-9]{18}[0-9]{2}")


@final
@dataclass(frozen=True, slots=True, order=True)
class Lei(CheckedIdentifier):
    """Legal Entity Identifier."""

    value: str

    GRAMMAR: ClassVar[Grammar] = LEI_GRAMMAR

    @property
    def lou_identifier(self) -> str:
        return self.value[0:4]

    @property
    def entity_identifier(self) -> str:
        return self.value[4:18]

    @property
    def check_digits(self) -> str:
        return self.value[18:20]

    @property
    def is_conforming(self) -> bool:
        return Lei.validate(self.value)

    @property
    def whitelist_entry(self) -> lei_whitelist.WhitelistEntry | None:
        return lei_whitelist.get(self.value)

    @staticmethod
    def validate(value: str) -> bool:
        """Exact-format check with correct check digits in 02..98. Ignores the whitelist."""
        if _LEI_FORMAT.fullmatch(value) is None:
            return False
        if not 2 <= int(value[18:20]) <= 98:
            return False
        return mod97_10(value) == 1

    @staticmethod
    def validate_allow_non_conforming(value: str) -> bool:
        return lei_whitelist.contains(value) or Lei.validate(value)
