from __future__ import annotations

import numpy as np
import pytest

from algorithms.sensing import GRID_SIZE, heatmap_colorscale, heatmap_lightness, phase_shift_map


def test_map_peaks_at_target() -> None:
    phase = phase_shift_map((3, 12))
    assert phase.shape == (GRID_SIZE, GRID_SIZE)
    assert phase[12, 3] == pytest.approx(np.pi)
    assert np.unravel_index(np.argmax(phase), phase.shape) == (12, 3)


def test_map_decays_with_distance() -> None:
    phase = phase_shift_map((0, 0))
    assert phase[0, 5] == pytest.approx(np.pi * np.exp(-1))
    assert phase[3, 4] == pytest.approx(np.pi * np.exp(-1))
    assert phase[0, 1] > phase[0, 2] > phase[0, 3]


def test_map_is_symmetric_about_target() -> None:
    phase = phase_shift_map((10, 10))
    assert phase[10, 7] == pytest.approx(phase[10, 13])
    assert phase[7, 10] == pytest.approx(phase[13, 10])


@pytest.mark.parametrize("target", [(-1, 0), (0, GRID_SIZE), (20, 5)])
def test_target_outside_grid(target) -> None:
    with pytest.raises(ValueError, match="outside"):
        phase_shift_map(target)


def test_custom_grid_size() -> None:
    assert phase_shift_map((1, 1), grid_size=5).shape == (5, 5)


def test_heatmap_lightness() -> None:
    assert heatmap_lightness(0.0) == pytest.approx(100.0)
    assert heatmap_lightness(np.pi) == pytest.approx(50.0)
    assert heatmap_lightness(np.array([0.0, np.pi])).tolist() == pytest.approx([100.0, 50.0])


def test_heatmap_colorscale_follows_lightness() -> None:
    scale = heatmap_colorscale(steps=3)
    assert scale == [
        [0.0, "hsl(240, 100%, 100.0%)"],
        [0.5, "hsl(240, 100%, 75.0%)"],
        [1.0, "hsl(240, 100%, 50.0%)"],
    ]
