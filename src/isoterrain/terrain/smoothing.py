"""Majority-vote cellular smoothing."""

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

# 3x3 window including the center cell
_WINDOW = np.ones((3, 3), dtype=np.int32)


def majority_vote(
    grid: NDArray,
    iterations: int,
    mask: NDArray[np.bool_] | None = None,
) -> NDArray:
    """Replace each cell with the most frequent value in its 3x3 window.

    The window covers the cell itself and its in-bounds 8-neighbours. Ties
    go to the lowest value. Every iteration reads the complete result of
    the previous one.

    Cells outside the mask are frozen: they keep their value and do not
    vote for their neighbours. The generator passes the land mask for both
    biome and elevation smoothing.

    Args:
        grid: Integer grid to smooth.
        iterations: Number of passes (0 returns an unchanged copy).
        mask: Optional boolean mask of participating cells.

    Returns:
        Smoothed copy of the grid.
    """
    result = grid.copy()
    if iterations <= 0:
        return result

    if mask is None:
        mask = np.ones(grid.shape, dtype=bool)

    # Ascending, so a strict > comparison keeps the lowest value on ties
    values = np.unique(grid[mask])

    for _ in range(iterations):
        best_count = np.zeros(grid.shape, dtype=np.int32)
        best_value = result.copy()

        for value in values:
            votes = ((result == value) & mask).astype(np.int32)
            count = ndimage.convolve(votes, _WINDOW, mode="constant", cval=0)
            better = count > best_count
            best_count[better] = count[better]
            best_value[better] = value

        result = np.where(mask, best_value, result)

    return result
