"""
Synthetic run results for the phase estimation walkthrough.

Nothing here simulates a circuit. The generator fabricates data with the
*shape* of a run so the dashboard can animate progress and render results:
fair coin flips for the sampling side, a fixed enumeration of basis states
for the phase side. Anything implementing ``RunGenerator`` can replace it.
"""

from dataclasses import dataclass, field
from typing import Protocol

import numpy as np

from algorithms.parameters import SimulationParameters, circuit_depth

N_SAMPLING_BITS = 10
N_PHASE_RESULTS = 8
ACCURACY_FLOOR = 0.7


@dataclass
class SimulationResults:
    sampling_results: list = field(default_factory=list)
    phase_results: list = field(default_factory=list)
    accuracy: float = 0.0
    circuit_depth: int = 0

    @classmethod
    def empty(cls) -> "SimulationResults":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.sampling_results and not self.phase_results


class RunGenerator(Protocol):
    def run(self, parameters: SimulationParameters) -> SimulationResults:
        ...


def mock_sampling_bits(count: int, rng: np.random.Generator) -> list:
    """``count`` independent fair bits as '0'/'1' strings."""
    return ["1" if rng.random() > 0.5 else "0" for _ in range(count)]


def enumerate_phase_strings(ancilla_qubits: int, limit: int = N_PHASE_RESULTS) -> list:
    """First ``limit`` basis states of an m-qubit register, zero-padded."""
    n_states = min(limit, 2 ** ancilla_qubits)
    return [format(i, f"0{ancilla_qubits}b") for i in range(n_states)]


class MockRunGenerator:
    """
    Stand-in for an algorithm execution.

    Args:
        rng:  numpy Generator to draw the sampling bits from
        seed: seed for a fresh Generator when ``rng`` is not given
    """

    def __init__(self, rng: np.random.Generator = None, seed: int = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def run(self, parameters: SimulationParameters) -> SimulationResults:
        return SimulationResults(
            sampling_results=mock_sampling_bits(N_SAMPLING_BITS, self.rng),
            phase_results=enumerate_phase_strings(parameters.ancilla_qubits),
            accuracy=max(ACCURACY_FLOOR, 1 - parameters.epsilon),
            circuit_depth=circuit_depth(parameters.epsilon),
        )
