"""MIC (ISO 10383): exactly four uppercase alphanumerics, no check character."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, final

from finident.core.grammar import Component, Grammar
from finident.ident.base import Identifier

MIC_GRAMMAR = Grammar(
    kind="MIC",
    tag="mic",
    components=(Component("value", "MIC", re.compile(r"[A-Z0-9]{4}")),),
)


@final
@dataclass(frozen=True, slots=True, order=True)
class Mic(Identifier):
    """Market Identifier Code."""

    value: str

    GRAMMAR: ClassVar[Grammar] = MIC_GRAMMAR
