"""Tests for the bounded conversion history."""

import pytest

from app.core.history import HistoryEntry, HistoryLedger, on_conversion_success, prepend_bounded
from app.core.lifecycle import ConversionRequest, Outcome


def _entry(i: int) -> HistoryEntry:
    return HistoryEntry("Length", str(i), "meter", "kilometer", i / 1000, timestamp=i)


class TestHistoryLedger:
    def test_starts_empty(self):
        assert HistoryLedger().list() == []

    def test_most_recent_first(self):
        ledger = HistoryLedger()
        ledger.record(_entry(1))
        ledger.record(_entry(2))
        assert [e.value for e in ledger.list()] == ["2", "1"]

    def test_eleventh_entry_evicts_oldest(self):
        ledger = HistoryLedger()
        for i in range(11):
            ledger.record(_entry(i))
        entries = ledger.list()
        assert len(entries) == 10
        assert entries[0] == _entry(10)
        assert _entry(0) not in entries
        assert [e.timestamp for e in entries] == list(range(10, 0, -1))

    def test_custom_limit(self):
        ledger = HistoryLedger(limit=2)
        for i in range(5):
            ledger.record(_entry(i))
        assert [e.timestamp for e in ledger.list()] == [4, 3]

    def test_non_positive_limit_rejected(self):
        with pytest.raises(ValueError):
            HistoryLedger(limit=0)

    def test_limit_above_ten_rejected(self):
        with pytest.raises(ValueError):
            HistoryLedger(limit=11)

    def test_list_is_a_snapshot(self):
        ledger = HistoryLedger()
        ledger.record(_entry(1))
        snapshot = ledger.list()
        snapshot.clear()
        assert len(ledger) == 1


class TestPrependBounded:
    def test_does_not_mutate_input(self):
        before = (_entry(1),)
        after = prepend_bounded(before, _entry(2), limit=10)
        assert before == (_entry(1),)
        assert after == (_entry(2), _entry(1))


class TestOnConversionSuccess:
    REQUEST = ConversionRequest("Length", "3600", "meter", "kilometer")

    def test_success_is_recorded(self):
        ledger = HistoryLedger()
        entry = on_conversion_success(
            ledger, self.REQUEST, Outcome.success(3.6, "kilometer"), timestamp=42,
        )
        assert ledger.list() == [entry]
        assert entry == HistoryEntry("Length", "3600", "meter", "kilometer", 3.6, 42)

    def test_timestamp_defaults_to_now(self):
        ledger = HistoryLedger()
        entry = on_conversion_success(ledger, self.REQUEST, Outcome.success(3.6, "kilometer"))
        assert entry.timestamp > 1_600_000_000_000

    @pytest.mark.parametrize("outcome", [
        Outcome.idle(), Outcome.loading(), Outcome.error("bad unit"),
    ])
    def test_other_outcomes_are_ignored(self, outcome):
        ledger = HistoryLedger()
        assert on_conversion_success(ledger, self.REQUEST, outcome) is None
        assert len(ledger) == 0
