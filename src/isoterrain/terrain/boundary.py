"""Biome border perturbation using a coarser noise field."""

import logging

import numpy as np
from numpy.typing import NDArray

from .config import BoundaryConfig
from .noise import CoherentNoise, sample_lattice

logger = logging.getLogger(__name__)

# 8-connected neighbourhood as (dy, dx)
NEIGHBORS_8 = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def find_border_cells(labels: NDArray[np.int16]) -> NDArray[np.bool_]:
    """Find land cells 8-adjacent to land of a different biome.

    Args:
        labels: Grid where biome indices are >= 0 and water is negative.

    Returns:
        Boolean mask where True = border cell.
    """
    height, width = labels.shape
    land = labels >= 0

    # Pad with a water code so out-of-bounds never counts as a neighbour
    padded = np.pad(labels, 1, mode="constant", constant_values=-1)

    border = np.zeros((height, width), dtype=bool)
    for dy, dx in NEIGHBORS_8:
        neighbor = padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]
        border |= (neighbor >= 0) & (neighbor != labels)

    return border & land


def perturb_boundaries(
    labels: NDArray[np.int16],
    biome_count: int,
    offset_x: int,
    offset_y: int,
    config: BoundaryConfig,
    noise: CoherentNoise | None = None,
) -> NDArray[np.int16]:
    """Jitter biome borders.

    Border cells whose boundary noise sample exceeds
    0.5 + offset_amount * 0.5 are reassigned to the biome picked by the
    sample itself. Borders are detected on the input grid and results are
    written to a copy, so a reassignment never creates new borders within
    the same pass.

    Args:
        labels: Biome grid after region growth.
        biome_count: Number of biomes.
        offset_x: Noise x offset from the seed initializer.
        offset_y: Noise y offset from the seed initializer.
        config: Boundary parameters.
        noise: Coherent noise source (defaults to CoherentNoise()).

    Returns:
        New biome grid.
    """
    if noise is None:
        noise = CoherentNoise()

    height, width = labels.shape
    border = find_border_cells(labels)

    sample = sample_lattice(noise, width, height, offset_x, offset_y, config.noise_scale)
    threshold = 0.5 + config.offset_amount * 0.5

    # Sample picks a 1-based biome label, stored as a 0-based index
    picked = np.clip(np.rint(sample * biome_count), 1, biome_count).astype(labels.dtype) - 1

    changed = border & (sample > threshold) & (picked != labels)

    result = labels.copy()
    result[changed] = picked[changed]

    logger.debug(
        f"Boundary pass: {int(np.sum(border))} border cells, "
        f"{int(np.sum(changed))} reassigned"
    )
    return result
