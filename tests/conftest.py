from __future__ import annotations

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# `algorithms/` and `visualizations/` sit at the repo root next to app.py
_ROOT = str(Path(__file__).resolve().parents[1])
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

import config  # noqa: E402


class FakeClock:
    def __init__(self, t: float = 0.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> dict:
    # Binary fractions so tick arithmetic is exact.
    return {
        "run_latency": 3.0,
        "poll_interval": 0.25,
        "step_interval": 0.5,
        "sampling_tick": 0.125,
        "qft_tick": config.QFT_TICK,
        "bloch_tick": 0.125,
        "seed": 7,
        "log_level": "INFO",
    }
