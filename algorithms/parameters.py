"""
Parameter model for the phase estimation dashboard.

Maps the accuracy parameter ε (and the ancilla register size) to the
resource counts shown next to the sliders:

- required ancillas       m = ⌈-log₂(ε)⌉
- classical sample count  Nsample = ⌈1/ε²⌉
- circuit depth           ⌈1/ε⌉
- phase resolution        2^(-m)
- basis states            2^m

All functions are pure and cheap; callers recompute on every change.
"""

from dataclasses import dataclass
from math import ceil, log2

from config import (
    ANCILLA_MAX,
    ANCILLA_MIN,
    DEFAULT_ANCILLAS,
    DEFAULT_EPSILON,
    DEFAULT_NOISE,
    EPSILON_MAX,
    EPSILON_MIN,
    NOISE_MAX,
    NOISE_MIN,
)

# Slider values such as 0.1 are not exact in binary; 1/0.1**2 evaluates to
# 99.99999999999999. Rounding before ceil keeps the counts on the integers.
_ROUND_DIGITS = 9


def _ceil(value: float) -> int:
    return ceil(round(value, _ROUND_DIGITS))


@dataclass
class SimulationParameters:
    epsilon: float = DEFAULT_EPSILON
    ancilla_qubits: int = DEFAULT_ANCILLAS
    noise_level: float = DEFAULT_NOISE


@dataclass(frozen=True)
class DerivedQuantities:
    required_ancillas: int
    classical_samples: int
    circuit_depth: int
    phase_resolution: float
    basis_states: int


# ---------------------------------------------------------------------------
# Closed-form resource counts
# ---------------------------------------------------------------------------

def required_ancillas(epsilon: float) -> int:
    """Ancilla qubits needed to resolve a phase to within ε: ⌈-log₂(ε)⌉."""
    return _ceil(-log2(epsilon))


def classical_sample_count(epsilon: float) -> int:
    """Direct-sampling shots for precision ε: ⌈1/ε²⌉."""
    return _ceil(1 / epsilon ** 2)


def circuit_depth(epsilon: float) -> int:
    """Controlled-U depth for precision ε: ⌈1/ε⌉."""
    return _ceil(1 / epsilon)


def phase_resolution(ancilla_qubits: int) -> float:
    return 2.0 ** -ancilla_qubits


def basis_state_count(ancilla_qubits: int) -> int:
    return 2 ** ancilla_qubits


def auto_ancillas(epsilon: float) -> int:
    """
    Ancilla count shown after an ε change.

    The required count is clamped into the slider range, so ε = 0.25
    (required 2) displays 3 ancillas.
    """
    return clamp_ancillas(required_ancillas(epsilon))


def derive(parameters: SimulationParameters) -> DerivedQuantities:
    eps = parameters.epsilon
    m = parameters.ancilla_qubits
    return DerivedQuantities(
        required_ancillas=required_ancillas(eps),
        classical_samples=classical_sample_count(eps),
        circuit_depth=circuit_depth(eps),
        phase_resolution=phase_resolution(m),
        basis_states=basis_state_count(m),
    )


# ---------------------------------------------------------------------------
# Slider clamps
# ---------------------------------------------------------------------------

def clamp_epsilon(value: float) -> float:
    return round(min(EPSILON_MAX, max(EPSILON_MIN, float(value))), 2)


def clamp_ancillas(value: int) -> int:
    return int(min(ANCILLA_MAX, max(ANCILLA_MIN, round(value))))


def clamp_noise(value: float) -> float:
    return round(min(NOISE_MAX, max(NOISE_MIN, float(value))), 2)
