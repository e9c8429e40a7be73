"""Elevation pipeline: banding, water flattening and smoothing."""

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import water_mask
from .classification import compute_elevation_bands
from .config import HeightConfig
from .smoothing import majority_vote


def build_elevation(
    field: NDArray[np.float32],
    classification: NDArray[np.int16],
    config: HeightConfig,
    iterations: int,
) -> NDArray[np.uint8]:
    """Derive the final elevation grid.

    Bands come from the same noise field used for classification. Water is
    flattened to 0 and excluded from smoothing, so only land cells vote and
    only land cells change.

    Args:
        field: Noise field in [0, 1].
        classification: Final classification grid.
        config: Height layer parameters.
        iterations: Elevation smoothing passes.

    Returns:
        Elevation grid in [0, layer_count).
    """
    water = water_mask(classification)

    elevation = compute_elevation_bands(field, config.thresholds)
    elevation[water] = 0

    elevation = majority_vote(elevation, iterations, mask=~water)
    return elevation.astype(np.uint8)
