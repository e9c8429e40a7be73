"""Noise field sampling: coherent noise, continental mask and hash dither.

Every function here is pure; the only randomness is the offset pair drawn
by the seed initializer.
"""

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

from .config import NoiseConfig

# Fixed permutation seed so the coherent noise is a single global function;
# per-map variation comes from the coordinate offsets.
NOISE_PERMUTATION_SEED = 1337

DETAIL_OFFSET = 9999.0
DETAIL_FREQUENCY = 3.0
DETAIL_MIX = 0.4
CORE_MASK_THRESHOLD = 0.4
OUTER_NOISE_WEIGHT = 0.5
JITTER_AMPLITUDE = 0.075


class CoherentNoise:
    """Smooth 2D noise in [0, 1] backed by OpenSimplex."""

    def __init__(self, seed: int = NOISE_PERMUTATION_SEED):
        self._generator = OpenSimplex(seed=seed)

    def sample(
        self, xs: NDArray[np.float64], ys: NDArray[np.float64]
    ) -> NDArray[np.float64]:
        """Evaluate the noise on the lattice spanned by xs and ys.

        Args:
            xs: 1D x coordinates.
            ys: 1D y coordinates.

        Returns:
            Array of shape (len(ys), len(xs)) with values in [0, 1].
        """
        raw = self._generator.noise2array(
            np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)
        )
        return np.clip((raw + 1.0) * 0.5, 0.0, 1.0)


def lerp(a: NDArray, b: NDArray, t: float) -> NDArray:
    """Linear interpolation from a to b."""
    return a + (b - a) * t


def continental_mask(
    width: int, height: int, island_factor: float
) -> NDArray[np.float64]:
    """Radial falloff from the grid center.

    Args:
        width: Grid width.
        height: Grid height.
        island_factor: Falloff strength (0 = mask is 1 everywhere).

    Returns:
        Mask of shape (height, width) in [0, 1].
    """
    cx, cy = width / 2.0, height / 2.0
    x_coords = np.arange(width, dtype=np.float64)
    y_coords = np.arange(height, dtype=np.float64)
    xx, yy = np.meshgrid(x_coords, y_coords)

    dx = (xx - cx) / width * 2.0
    dy = (yy - cy) / height * 2.0
    distance = np.sqrt(dx * dx + dy * dy)
    return np.clip(1.0 - distance * island_factor, 0.0, 1.0)


def hash_jitter(width: int, height: int) -> NDArray[np.float64]:
    """Deterministic per-cell dither in [-0.075, 0.075).

    Breaks up the visible contour bands that thresholding smooth noise
    would otherwise produce.
    """
    x_coords = np.arange(1, width + 1, dtype=np.float64)
    y_coords = np.arange(1, height + 1, dtype=np.float64)
    xx, yy = np.meshgrid(x_coords, y_coords)

    hashed = np.sin(xx * 12.9898 + yy * 78.233) * 43758.5453
    frac = hashed - np.floor(hashed)
    return frac * (2.0 * JITTER_AMPLITUDE) - JITTER_AMPLITUDE


def sample_lattice(
    noise: CoherentNoise,
    width: int,
    height: int,
    offset_x: float,
    offset_y: float,
    scale: float,
) -> NDArray[np.float64]:
    """Sample noise at ((x + offset_x) * scale, (y + offset_y) * scale)."""
    xs = (np.arange(width, dtype=np.float64) + offset_x) * scale
    ys = (np.arange(height, dtype=np.float64) + offset_y) * scale
    return noise.sample(xs, ys)


def sample_noise_field(
    width: int,
    height: int,
    offset_x: int,
    offset_y: int,
    config: NoiseConfig,
    noise: CoherentNoise | None = None,
) -> NDArray[np.float32]:
    """Compute the per-cell scalar used for classification and elevation.

    Combines the continental mask, base and detail noise layers and the
    hash jitter. The result is computed once and shared by every later
    stage that thresholds it.

    Args:
        width: Grid width.
        height: Grid height.
        offset_x: Noise x offset from the seed initializer.
        offset_y: Noise y offset from the seed initializer.
        config: Noise parameters.
        noise: Coherent noise source (defaults to CoherentNoise()).

    Returns:
        Field of shape (height, width) with values in [0, 1].
    """
    if noise is None:
        noise = CoherentNoise()

    mask = continental_mask(width, height, config.island_factor)

    base = sample_lattice(noise, width, height, offset_x, offset_y, config.scale)
    detail = sample_lattice(
        noise,
        width,
        height,
        offset_x + DETAIL_OFFSET,
        offset_y + DETAIL_OFFSET,
        config.scale * DETAIL_FREQUENCY,
    )
    mixed = lerp(base, detail, DETAIL_MIX)

    # Suppress detail away from the continent core
    weight = np.where(mask > CORE_MASK_THRESHOLD, 1.0, OUTER_NOISE_WEIGHT)

    field = np.clip(mixed * mask * weight + hash_jitter(width, height), 0.0, 1.0)
    return field.astype(np.float32)
