"""Tests for biome border perturbation."""

import numpy as np
import pytest

from isoterrain.terrain.boundary import find_border_cells, perturb_boundaries
from isoterrain.terrain.config import BoundaryConfig


@pytest.fixture
def split_labels() -> np.ndarray:
    """4x4 grid: biome 0 on the left half, biome 1 on the right half."""
    labels = np.zeros((4, 4), dtype=np.int16)
    labels[:, 2:] = 1
    return labels


class TestFindBorderCells:
    """Tests for border detection."""

    def test_split_border(self, split_labels: np.ndarray) -> None:
        """Both columns along the split are border cells."""
        border = find_border_cells(split_labels)
        expected = np.zeros((4, 4), dtype=bool)
        expected[:, 1:3] = True
        np.testing.assert_array_equal(border, expected)

    def test_uniform_has_no_border(self) -> None:
        """A single biome has no borders."""
        labels = np.full((5, 5), 2, dtype=np.int16)
        assert not np.any(find_border_cells(labels))

    def test_diagonal_neighbor_counts(self) -> None:
        """8-adjacency includes diagonals."""
        labels = np.full((3, 3), -1, dtype=np.int16)
        labels[0, 0] = 0
        labels[1, 1] = 1
        border = find_border_cells(labels)
        assert border[0, 0]
        assert border[1, 1]

    def test_water_is_not_a_border(self) -> None:
        """Water neighbours do not make a land cell a border."""
        labels = np.full((3, 3), -2, dtype=np.int16)
        labels[1, 1] = 0
        border = find_border_cells(labels)
        assert not np.any(border)


class TestPerturbBoundaries:
    """Tests for the perturbation pass."""

    def test_high_sample_reassigns_border(
        self, split_labels: np.ndarray, constant_noise
    ) -> None:
        """Border cells adopt the biome picked by the sample."""
        config = BoundaryConfig(offset_amount=0.3)
        # round(0.9 * 2) = 2 -> 1-based label 2 -> index 1
        result = perturb_boundaries(split_labels, 2, 0, 0, config, constant_noise(0.9))
        expected = split_labels.copy()
        expected[:, 1] = 1
        np.testing.assert_array_equal(result, expected)

    def test_no_cascade_within_pass(
        self, split_labels: np.ndarray, constant_noise
    ) -> None:
        """Cells that only become borders during the pass are untouched."""
        config = BoundaryConfig(offset_amount=0.3)
        result = perturb_boundaries(split_labels, 2, 0, 0, config, constant_noise(0.9))
        np.testing.assert_array_equal(result[:, 0], [0, 0, 0, 0])

    def test_low_sample_leaves_grid(
        self, split_labels: np.ndarray, constant_noise
    ) -> None:
        """Samples at or below the threshold change nothing."""
        config = BoundaryConfig(offset_amount=0.3)
        result = perturb_boundaries(split_labels, 2, 0, 0, config, constant_noise(0.6))
        np.testing.assert_array_equal(result, split_labels)

    def test_low_pick_clamped_to_first_biome(
        self, split_labels: np.ndarray, constant_noise
    ) -> None:
        """round(sample * N) below 1 clamps to the first biome."""
        config = BoundaryConfig(offset_amount=-1.0)
        result = perturb_boundaries(split_labels, 2, 0, 0, config, constant_noise(0.1))
        expected = split_labels.copy()
        expected[:, 2] = 0
        np.testing.assert_array_equal(result, expected)

    def test_pick_never_out_of_range(self, split_labels: np.ndarray, constant_noise) -> None:
        """A sample of 1.0 still maps to the last biome."""
        config = BoundaryConfig(offset_amount=0.0)
        result = perturb_boundaries(split_labels, 3, 0, 0, config, constant_noise(1.0))
        assert result.max() == 2
        assert result.min() >= 0

    def test_water_unchanged(self, constant_noise) -> None:
        """Water cells are never reassigned."""
        labels = np.array([[0, -1, 1], [0, -2, 1]], dtype=np.int16)
        config = BoundaryConfig(offset_amount=0.0)
        result = perturb_boundaries(labels, 2, 0, 0, config, constant_noise(0.99))
        np.testing.assert_array_equal(result[:, 1], [-1, -2])

    def test_input_not_mutated(self, split_labels: np.ndarray, constant_noise) -> None:
        """The pass writes to a new grid."""
        before = split_labels.copy()
        perturb_boundaries(split_labels, 2, 0, 0, BoundaryConfig(), constant_noise(0.99))
        np.testing.assert_array_equal(split_labels, before)

    def test_real_noise_deterministic(self, split_labels: np.ndarray) -> None:
        """Default noise source gives reproducible results."""
        config = BoundaryConfig(noise_scale=0.5, offset_amount=0.0)
        a = perturb_boundaries(split_labels, 2, 100, 200, config)
        b = perturb_boundaries(split_labels, 2, 100, 200, config)
        np.testing.assert_array_equal(a, b)
