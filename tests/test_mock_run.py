from __future__ import annotations

import numpy as np
import pytest

from algorithms.mock_run import (
    MockRunGenerator,
    SimulationResults,
    enumerate_phase_strings,
    mock_sampling_bits,
)
from algorithms.parameters import SimulationParameters


def test_sampling_bits_are_ten_fair_coin_flips() -> None:
    results = MockRunGenerator(seed=1).run(SimulationParameters())
    assert len(results.sampling_results) == 10
    assert set(results.sampling_results) <= {"0", "1"}


def test_phase_results_enumerate_first_eight_states() -> None:
    results = MockRunGenerator(seed=1).run(SimulationParameters(ancilla_qubits=4))
    assert results.phase_results == [
        "0000", "0001", "0010", "0011", "0100", "0101", "0110", "0111",
    ]


@pytest.mark.parametrize("m", range(3, 9))
def test_phase_results_width_follows_register(m: int) -> None:
    results = MockRunGenerator(seed=1).run(SimulationParameters(ancilla_qubits=m))
    assert len(results.phase_results) == 8
    assert all(len(bits) == m for bits in results.phase_results)
    assert [int(b, 2) for b in results.phase_results] == list(range(8))


def test_phase_results_are_reproducible_across_runs() -> None:
    gen = MockRunGenerator()
    params = SimulationParameters(ancilla_qubits=6)
    assert gen.run(params).phase_results == gen.run(params).phase_results


@pytest.mark.parametrize(
    "epsilon, accuracy",
    [(0.4, 0.7), (0.5, 0.7), (0.3, 0.7), (0.1, 0.9), (0.01, 0.99)],
)
def test_accuracy_has_a_floor(epsilon: float, accuracy: float) -> None:
    results = MockRunGenerator(seed=1).run(SimulationParameters(epsilon=epsilon))
    assert results.accuracy == pytest.approx(accuracy)


def test_circuit_depth_matches_epsilon() -> None:
    assert MockRunGenerator(seed=1).run(SimulationParameters(epsilon=0.1)).circuit_depth == 10
    assert MockRunGenerator(seed=1).run(SimulationParameters(epsilon=0.03)).circuit_depth == 34


def test_seeded_generators_agree() -> None:
    params = SimulationParameters()
    a = MockRunGenerator(seed=99).run(params)
    b = MockRunGenerator(rng=np.random.default_rng(99)).run(params)
    assert a.sampling_results == b.sampling_results


def test_sampling_helper_counts() -> None:
    rng = np.random.default_rng(0)
    assert mock_sampling_bits(0, rng) == []
    assert len(mock_sampling_bits(20, rng)) == 20


def test_enumeration_never_exceeds_register() -> None:
    assert enumerate_phase_strings(2) == ["00", "01", "10", "11"]
    assert enumerate_phase_strings(3) == [format(i, "03b") for i in range(8)]


def test_empty_results() -> None:
    empty = SimulationResults.empty()
    assert empty.sampling_results == []
    assert empty.phase_results == []
    assert empty.accuracy == 0.0
    assert empty.circuit_depth == 0
    assert empty.is_empty
    assert not MockRunGenerator(seed=1).run(SimulationParameters()).is_empty
