import matplotlib.pyplot as plt
import numpy as np
from qiskit import QuantumCircuit

from algorithms.phase_estimation import bloch_vector


def plot_circuit(circuit: QuantumCircuit):
    """Return matplotlib figure of the phase estimation circuit diagram."""
    fig = circuit.draw("mpl", fold=-1)
    return fig


def plot_bloch_sphere(phase: float, amplitude: float, rotation: float = 0.0,
                      animating: bool = False):
    """
    Wireframe Bloch sphere with the target qubit's state vector.

    Args:
        phase:     relative phase as a fraction of a full turn
        amplitude: |0⟩ amplitude, cos θ
        rotation:  azimuth of the camera in degrees (spins while a run is active)
        animating: draw the glow ring around the equator
    """
    x, y, z = bloch_vector(phase, amplitude)

    fig = plt.figure(figsize=(4, 4))
    ax = fig.add_subplot(111, projection="3d")

    u, v = np.mgrid[0:2 * np.pi:40j, 0:np.pi:20j]
    ax.plot_wireframe(np.cos(u) * np.sin(v), np.sin(u) * np.sin(v), np.cos(v),
                      color="#b2bec3", linewidth=0.4, alpha=0.5)

    # Axes through the sphere
    for start, end in [((-1, 0, 0), (1, 0, 0)), ((0, -1, 0), (0, 1, 0)), ((0, 0, -1), (0, 0, 1))]:
        ax.plot(*zip(start, end), color="#636e72", linewidth=0.8)

    if animating:
        t = np.linspace(0, 2 * np.pi, 100)
        ax.plot(np.cos(t), np.sin(t), 0, color="#6c5ce7", linewidth=2, alpha=0.6)

    ax.quiver(0, 0, 0, x, y, z, color="#ff6b6b", linewidth=2.5, arrow_length_ratio=0.12)
    ax.scatter([x], [y], [z], color="#ff6b6b", s=30)

    ax.text(0, 0, 1.25, "|0⟩", ha="center", fontsize=11)
    ax.text(0, 0, -1.35, "|1⟩", ha="center", fontsize=11)

    ax.view_init(elev=20, azim=rotation)
    ax.set_box_aspect((1, 1, 1))
    ax.set_axis_off()
    plt.tight_layout()
    return fig

