"""Biome region growth: multi-source flood fill over land cells."""

import logging
from collections import deque

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import CellClass

logger = logging.getLogger(__name__)

# 4-connected neighbourhood as (dy, dx)
NEIGHBORS_4 = ((0, 1), (0, -1), (1, 0), (-1, 0))


def draw_seed_cells(
    classification: NDArray[np.int16],
    biome_count: int,
    seeds_per_biome: int,
    rng: np.random.Generator,
) -> list[tuple[int, int, int]]:
    """Draw seed cells for every biome from one shared candidate pool.

    Biomes draw in list order and the pool shrinks as cells are taken, so
    later biomes choose from fewer candidates and may get none at all on a
    small island.

    Args:
        classification: Grid with land marked UNASSIGNED.
        biome_count: Number of biomes.
        seeds_per_biome: Draws per biome.
        rng: Shared random stream.

    Returns:
        List of (y, x, biome) in draw order.
    """
    ys, xs = np.nonzero(classification == CellClass.UNASSIGNED)
    pool = list(zip(ys.tolist(), xs.tolist()))

    seeds: list[tuple[int, int, int]] = []
    for biome in range(biome_count):
        for _ in range(seeds_per_biome):
            if not pool:
                break
            idx = int(rng.integers(len(pool)))
            y, x = pool.pop(idx)
            seeds.append((y, x, biome))
    return seeds


def grow_biome_regions(
    classification: NDArray[np.int16],
    biome_count: int,
    seeds_per_biome: int,
    rng: np.random.Generator,
) -> NDArray[np.int16]:
    """Partition land cells into biome territories.

    All seeds share one FIFO worklist; an unlabeled land neighbour takes the
    label of whichever wavefront reaches it first and is never revisited.
    Land left unlabeled afterwards (unreachable from any seed) becomes
    biome 0.

    Args:
        classification: Grid with land marked UNASSIGNED.
        biome_count: Number of biomes.
        seeds_per_biome: Seed cells drawn per biome.
        rng: Shared random stream.

    Returns:
        New grid where every land cell holds a biome index.
    """
    height, width = classification.shape
    unassigned = int(CellClass.UNASSIGNED)

    # Plain lists are much faster than numpy scalar access in the BFS loop
    labels = classification.tolist()

    queue: deque[tuple[int, int]] = deque()
    for y, x, biome in draw_seed_cells(classification, biome_count, seeds_per_biome, rng):
        labels[y][x] = biome
        queue.append((y, x))

    seed_count = len(queue)

    while queue:
        y, x = queue.popleft()
        label = labels[y][x]
        for dy, dx in NEIGHBORS_4:
            ny, nx = y + dy, x + dx
            if ny < 0 or ny >= height or nx < 0 or nx >= width:
                continue
            if labels[ny][nx] != unassigned:
                continue
            labels[ny][nx] = label
            queue.append((ny, nx))

    result = np.array(labels, dtype=classification.dtype).reshape(classification.shape)

    orphaned = result == CellClass.UNASSIGNED
    orphan_count = int(np.sum(orphaned))
    if orphan_count:
        logger.debug(f"Assigning {orphan_count} unreached land cells to biome 0")
    result[orphaned] = 0

    logger.debug(f"Grew {biome_count} biomes from {seed_count} seeds")
    return result
