from __future__ import annotations

import pytest

from algorithms.analysis import (
    accuracy_summary,
    advantage_summary,
    phase_histogram,
    sampling_statistics,
)


def test_phase_histogram_counts_and_orders_by_value() -> None:
    rows = phase_histogram(["011", "001", "011", "000"])
    assert [r["bits"] for r in rows] == ["000", "001", "011"]
    assert [r["count"] for r in rows] == [1, 1, 2]
    assert rows[2]["percentage"] == pytest.approx(50.0)
    assert rows[2]["phase"] == pytest.approx(3 / 8)


def test_phase_histogram_limit_and_empty() -> None:
    bits = [format(i, "04b") for i in range(16)]
    assert len(phase_histogram(bits)) == 8
    assert len(phase_histogram(bits, limit=3)) == 3
    assert phase_histogram([]) == []


def test_sampling_statistics() -> None:
    stats = sampling_statistics(["1", "0", "1", "1"])
    assert stats == {"samples": 4, "ones": 3, "zeros": 1, "ratio": 0.75}
    assert sampling_statistics([])["ratio"] == 0.0


def test_advantage_summary() -> None:
    adv = advantage_summary(0.1, 10)
    assert adv["classical_samples"] == 100
    assert adv["speedup"] == pytest.approx(10.0)
    assert adv["resource_reduction"] == pytest.approx(90.0)

    assert advantage_summary(0.1, 0)["speedup"] == 0.0


def test_accuracy_summary() -> None:
    acc = accuracy_summary(0.4, 0.7)
    assert acc["target"] == pytest.approx(0.6)
    assert acc["achieved"] == 0.7
    assert acc["error_rate"] == pytest.approx(0.3)
