"""Tests for the bounded history ledger."""

import pytest

from drawbox.services.history_ledger import Actor, HistoryEntry, HistoryLedger, render_values


def _entry(i):
    return HistoryEntry(value=str(i), actor=Actor.USER, timestamp=f"2024-01-01T00:00:{i:02d}+00:00")


def test_newest_first():
    ledger = HistoryLedger(capacity=3)
    ledger.record(_entry(1))
    ledger.record(_entry(2))
    assert [e.value for e in ledger.list()] == ["2", "1"]


def test_capacity_evicts_oldest():
    ledger = HistoryLedger(capacity=10)
    for i in range(11):
        ledger.record(_entry(i))

    values = [e.value for e in ledger.list()]
    assert len(values) == 10
    assert "0" not in values
    assert values[0] == "10"


def test_list_is_a_snapshot():
    ledger = HistoryLedger()
    ledger.record(_entry(1))

    snapshot = ledger.list()
    snapshot.clear()

    assert len(ledger) == 1


def test_hydrate_keeps_most_recent():
    ledger = HistoryLedger(capacity=2)
    ledger.hydrate([_entry(3), _entry(2), _entry(1)])
    assert [e.value for e in ledger.list()] == ["3", "2"]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        HistoryLedger(capacity=0)


def test_render_values():
    assert render_values([4, 8, 15]) == "4, 8, 15"
    assert render_values([42]) == "42"
