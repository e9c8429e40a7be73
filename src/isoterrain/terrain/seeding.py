"""Seed resolution and the shared random stream."""

import logging
import time
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

OFFSET_RANGE = 100_000


@dataclass(frozen=True)
class SeedState:
    """Resolved seed, spatial offsets and the random stream for later stages."""

    seed: int
    offset_x: int
    offset_y: int
    rng: np.random.Generator


def resolve_seed(seed: int) -> int:
    """Return seed unchanged, or a non-zero time-derived seed when it is 0."""
    if seed != 0:
        return seed
    derived = time.time_ns() & 0x7FFFFFFF
    if derived == 0:
        derived = 1
    logger.info(f"Seed 0 requested, using time-derived seed {derived}")
    return derived


def initialize_seed(seed: int) -> SeedState:
    """Create the random stream and draw the two noise offsets.

    The offsets are the first two draws from the stream, so the same
    non-zero seed always yields the same offsets and leaves the stream in
    the same state for region growth.

    Args:
        seed: Configured seed (0 = derive from time).

    Returns:
        SeedState with offsets in [-100000, 100000).
    """
    resolved = resolve_seed(seed)
    # SeedSequence only accepts non-negative entropy
    rng = np.random.default_rng(resolved % (1 << 64))
    offset_x = int(rng.integers(-OFFSET_RANGE, OFFSET_RANGE))
    offset_y = int(rng.integers(-OFFSET_RANGE, OFFSET_RANGE))
    logger.debug(f"Seed {resolved}: offsets ({offset_x}, {offset_y})")
    return SeedState(seed=resolved, offset_x=offset_x, offset_y=offset_y, rng=rng)
