"""Rolling, most-recent-first history of completed standard conversions."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from app.core.lifecycle import ConversionRequest, Outcome

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class HistoryEntry:
    category: str
    value: str
    from_unit: str
    to_unit: str
    result: float
    timestamp: int  # epoch milliseconds


def prepend_bounded(
    entries: tuple[HistoryEntry, ...], entry: HistoryEntry, limit: int
) -> tuple[HistoryEntry, ...]:
    """Return a new sequence with entry first, cut down to limit items."""
    return ((entry,) + entries)[:limit]


class HistoryLedger:
    """Memory-resident log. ``record`` is the only mutator."""

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        if not 1 <= limit <= DEFAULT_LIMIT:
            raise ValueError(f"History limit must be between 1 and {DEFAULT_LIMIT}, got {limit}")
        self.limit = limit
        self._entries: tuple[HistoryEntry, ...] = ()

    def record(self, entry: HistoryEntry) -> None:
        self._entries = prepend_bounded(self._entries, entry, self.limit)
        logger.debug("history: recorded %s (%d/%d)", entry, len(self._entries), self.limit)

    def list(self) -> list[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def on_conversion_success(
    ledger: HistoryLedger,
    request: ConversionRequest,
    outcome: Outcome,
    timestamp: Optional[int] = None,
) -> Optional[HistoryEntry]:
    """Record a finished standard conversion; any non-success outcome is ignored."""
    if not outcome.is_success:
        return None
    entry = HistoryEntry(
        category=request.category,
        value=request.value,
        from_unit=request.from_unit,
        to_unit=request.to_unit,
        result=outcome.result,
        timestamp=timestamp if timestamp is not None else int(time.time() * 1000),
    )
    ledger.record(entry)
    return entry
