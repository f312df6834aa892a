"""UtcDatetime: the timestamp type carried by LEI whitelist entries.

Registry timestamps arrive as ISO 8601 strings with arbitrary offsets and
optional fractional seconds; they are held normalized to UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import final

from dateutil.parser import isoparse

from finident.core.result import Err, Ok


@final
@dataclass(frozen=True, slots=True, order=True)
class UtcDatetime:
    """Timezone-aware UTC datetime. Naive datetimes are rejected."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            raise TypeError("UtcDatetime requires timezone-aware datetime, got naive")

    @staticmethod
    def parse(raw: datetime) -> Ok[UtcDatetime] | Err[str]:
        """Parse a datetime, rejecting naive (no tzinfo) datetimes."""
        if raw.tzinfo is None:
            return Err("UtcDatetime requires timezone-aware datetime, got naive")
        return Ok(UtcDatetime(value=raw.astimezone(UTC)))

    @staticmethod
    def parse_iso(raw: str) -> Ok[UtcDatetime] | Err[str]:
        """Parse an ISO 8601 timestamp carrying an offset or ``Z``."""
        try:
            dt = isoparse(raw)
        except ValueError as e:
            return Err(f"UtcDatetime requires ISO 8601 timestamp, got '{raw}': {e}")
        return UtcDatetime.parse(dt)

    def isoformat(self) -> str:
        return self.value.isoformat()
