"""
Magnetic anomaly detection demo.

A target placed on a square grid imprints a phase shift on each sensor
cell that decays with distance: φ(d) = π·exp(-d/5).
"""

import numpy as np

GRID_SIZE = 20
DECAY_LENGTH = 5.0
HEATMAP_HUE = 240         # cells are shaded in blue, darker for larger φ


def phase_shift_map(target: tuple, grid_size: int = GRID_SIZE) -> np.ndarray:
    """
    Phase shift seen by every cell.

    Args:
        target: (x, y) cell of the anomaly, x = column, y = row

    Returns:
        array of shape (grid_size, grid_size) indexed [row, col]
    """
    x, y = target
    if not (0 <= x < grid_size and 0 <= y < grid_size):
        raise ValueError(f"target {target} lies outside the {grid_size}×{grid_size} grid")

    rows, cols = np.mgrid[0:grid_size, 0:grid_size]
    distance = np.sqrt((cols - x) ** 2 + (rows - y) ** 2)
    return np.exp(-distance / DECAY_LENGTH) * np.pi


def heatmap_lightness(phase):
    """HSL lightness (percent) used to shade a cell: 100 at φ=0, 50 at φ=π."""
    return 100 - (np.asarray(phase) / np.pi) * 50


def heatmap_colorscale(steps: int = 11) -> list:
    """Plotly colorscale over φ ∈ [0, π] built from ``heatmap_lightness``."""
    scale = []
    for frac in np.linspace(0.0, 1.0, steps):
        lightness = float(heatmap_lightness(frac * np.pi))
        scale.append([float(frac), f"hsl({HEATMAP_HUE}, 100%, {lightness:.1f}%)"])
    return scale
