"""Cell classification: water depths, land and elevation bands."""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import CLASS_DTYPE, CellClass

DEEP_WATER_MAX = 0.10
WATER_MAX = 0.28
SHALLOW_WATER_MAX = 0.38


def classify_cells(field: NDArray[np.float32]) -> NDArray[np.int16]:
    """Threshold the noise field into water depths and unassigned land.

    Args:
        field: Noise field in [0, 1].

    Returns:
        Classification grid of CellClass codes; land is UNASSIGNED.
    """
    classification = np.full(field.shape, CellClass.UNASSIGNED, dtype=CLASS_DTYPE)
    classification[field < SHALLOW_WATER_MAX] = CellClass.SHALLOW_WATER
    classification[field < WATER_MAX] = CellClass.WATER
    classification[field < DEEP_WATER_MAX] = CellClass.DEEP_WATER
    return classification


def compute_elevation_bands(
    field: NDArray[np.float32],
    thresholds: Sequence[float],
) -> NDArray[np.uint8]:
    """Band the noise field into height levels.

    A cell's level is the index of the first threshold strictly greater
    than its value, or len(thresholds) when it reaches all of them.

    Args:
        field: Noise field in [0, 1].
        thresholds: Strictly ascending thresholds.

    Returns:
        Height levels in [0, len(thresholds)].
    """
    # Compare in the field dtype so a value equal to a threshold lands above it
    edges = np.asarray(thresholds, dtype=field.dtype)
    if edges.size == 0:
        return np.zeros(field.shape, dtype=np.uint8)
    bands = np.searchsorted(edges, field, side="right")
    return bands.astype(np.uint8)
