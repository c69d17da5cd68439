"""
Textbook phase estimation circuit, built for drawing only.

The dashboard shows the circuit a run *would* execute; it is never
transpiled or sampled.
"""

from math import acos, cos, pi, sin

from qiskit import QuantumCircuit, QuantumRegister, ClassicalRegister
from qiskit.circuit.library import QFTGate

DEFAULT_PHASE = 0.3        # eigenphase φ of U, also the Bloch sphere phase
DEFAULT_AMPLITUDE = 0.8

# Highlighted stage for each value of the session's circuit_step cursor.
CIRCUIT_STAGES = [
    ("H", "Hadamard gates put every ancilla into superposition"),
    ("●─U", "Controlled-U^(2ᵏ) kicks the phase back onto ancilla k"),
    ("QFT†", "Inverse QFT turns the phase pattern into a basis state"),
    ("M", "Measuring the ancillas reads out φ to m bits"),
]

ALGORITHM_STEPS = [
    "Initialize ancilla qubits",
    "Apply Hadamard gates",
    "Controlled-U operations",
    "Inverse QFT",
    "Measure ancillas",
]


def build_qpe_circuit(ancilla_qubits: int, phase: float = DEFAULT_PHASE) -> QuantumCircuit:
    """
    Phase estimation of U = P(2πφ) on a single target qubit.

    Ancilla k controls U^(2ᵏ), which for a phase gate is a controlled
    phase rotation by 2π·φ·2ᵏ.
    """
    if ancilla_qubits < 1:
        raise ValueError(f"need at least one ancilla qubit, got {ancilla_qubits}")

    ancilla = QuantumRegister(ancilla_qubits, "ancilla")
    target = QuantumRegister(1, "target")
    cr = ClassicalRegister(ancilla_qubits, "meas")
    qc = QuantumCircuit(ancilla, target, cr)

    # |1⟩ is the eigenstate of P(θ) with eigenvalue e^{iθ}
    qc.x(target[0])
    qc.h(ancilla)
    qc.barrier()

    for k in range(ancilla_qubits):
        qc.cp(2 * pi * phase * 2 ** k, ancilla[k], target[0])
    qc.barrier()

    iqft = QFTGate(ancilla_qubits).inverse()
    iqft.label = "QFT†"
    qc.append(iqft, ancilla)

    qc.measure(ancilla, cr)
    return qc


def circuit_stage(circuit_step: int) -> tuple:
    return CIRCUIT_STAGES[circuit_step % len(CIRCUIT_STAGES)]


def bloch_vector(phase: float, amplitude: float) -> tuple:
    """
    Cartesian Bloch vector for a state with |0⟩ amplitude ``amplitude``
    and relative phase 2π·``phase``.
    """
    if not -1.0 <= amplitude <= 1.0:
        raise ValueError(f"amplitude must lie in [-1, 1], got {amplitude}")
    theta = acos(amplitude)
    phi = phase * 2 * pi
    return (sin(theta) * cos(phi), sin(theta) * sin(phi), cos(theta))
