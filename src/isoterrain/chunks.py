"""Chunk partitioning of the finished classification and elevation grids."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .exceptions import ChunkCoordinateError
from .terrain_types import CLASS_DTYPE, CellClass


def chunk_counts(width: int, height: int, chunk_size: int) -> tuple[int, int]:
    """Number of chunks along x and y, counting partial edge chunks."""
    return (
        (width + chunk_size - 1) // chunk_size,
        (height + chunk_size - 1) // chunk_size,
    )


def chunk_coords(x: int, y: int, chunk_size: int) -> tuple[int, int]:
    """Convert world coordinates to chunk coordinates."""
    return (x // chunk_size, y // chunk_size)


def world_coords(
    chunk_x: int, chunk_y: int, local_x: int, local_y: int, chunk_size: int
) -> tuple[int, int]:
    """Convert chunk + local offset to world coordinates."""
    return (chunk_x * chunk_size + local_x, chunk_y * chunk_size + local_y)


def local_coords(x: int, y: int, chunk_size: int) -> tuple[int, int]:
    """Convert world coordinates to local coordinates within a chunk."""
    return (x % chunk_size, y % chunk_size)


@dataclass(frozen=True, eq=False)
class Chunk:
    """A size x size read-only window onto the finished map.

    Cells past the world edge hold DEEP_WATER with elevation 0.
    """

    chunk_x: int
    chunk_y: int
    size: int
    classification: NDArray[np.int16]  # Shape: (size, size)
    elevation: NDArray[np.uint8]  # Shape: (size, size)
    world_width: int
    world_height: int

    @property
    def origin(self) -> tuple[int, int]:
        """World coordinates of local (0, 0)."""
        return (self.chunk_x * self.size, self.chunk_y * self.size)

    @property
    def valid_width(self) -> int:
        """Columns of this chunk that lie inside the world."""
        return max(0, min(self.size, self.world_width - self.origin[0]))

    @property
    def valid_height(self) -> int:
        """Rows of this chunk that lie inside the world."""
        return max(0, min(self.size, self.world_height - self.origin[1]))

    def contains(self, x: int, y: int) -> bool:
        """Whether world (x, y) falls inside this chunk's square."""
        ox, oy = self.origin
        return ox <= x < ox + self.size and oy <= y < oy + self.size

    def to_local(self, x: int, y: int) -> tuple[int, int]:
        """Translate world coordinates to local chunk coordinates.

        Raises:
            ChunkCoordinateError: If (x, y) is outside this chunk.
        """
        if not self.contains(x, y):
            raise ChunkCoordinateError(
                f"({x}, {y}) is outside chunk ({self.chunk_x}, {self.chunk_y})"
            )
        return local_coords(x, y, self.size)

    def to_world(self, local_x: int, local_y: int) -> tuple[int, int]:
        """Translate local chunk coordinates to world coordinates."""
        return world_coords(self.chunk_x, self.chunk_y, local_x, local_y, self.size)

    def cell(self, local_x: int, local_y: int) -> tuple[int, int]:
        """Return (classification code, elevation) at a local coordinate."""
        return (
            int(self.classification[local_y, local_x]),
            int(self.elevation[local_y, local_x]),
        )


def extract_chunk(
    classification: NDArray[np.int16],
    elevation: NDArray[np.uint8],
    chunk_x: int,
    chunk_y: int,
    chunk_size: int,
) -> Chunk:
    """Copy one chunk out of the world grids.

    Args:
        classification: Full classification grid, shape (height, width).
        elevation: Full elevation grid, shape (height, width).
        chunk_x: Chunk x coordinate.
        chunk_y: Chunk y coordinate.
        chunk_size: Chunk edge length.

    Returns:
        Chunk with read-only arrays, padded where it overhangs the world.
    """
    height, width = classification.shape
    x_start = chunk_x * chunk_size
    y_start = chunk_y * chunk_size

    chunk_class = np.full((chunk_size, chunk_size), CellClass.DEEP_WATER, dtype=CLASS_DTYPE)
    chunk_elev = np.zeros((chunk_size, chunk_size), dtype=np.uint8)

    # Only copy if there's valid overlap
    if x_start < width and y_start < height:
        x_end = min(x_start + chunk_size, width)
        y_end = min(y_start + chunk_size, height)
        valid_w = x_end - x_start
        valid_h = y_end - y_start
        chunk_class[:valid_h, :valid_w] = classification[y_start:y_end, x_start:x_end]
        chunk_elev[:valid_h, :valid_w] = elevation[y_start:y_end, x_start:x_end]

    chunk_class.flags.writeable = False
    chunk_elev.flags.writeable = False

    return Chunk(
        chunk_x=chunk_x,
        chunk_y=chunk_y,
        size=chunk_size,
        classification=chunk_class,
        elevation=chunk_elev,
        world_width=width,
        world_height=height,
    )


def partition_chunks(
    classification: NDArray[np.int16],
    elevation: NDArray[np.uint8],
    chunk_size: int,
) -> list[Chunk]:
    """Slice the world grids into square chunks in row-major chunk order.

    Args:
        classification: Full classification grid.
        elevation: Full elevation grid.
        chunk_size: Chunk edge length.

    Returns:
        chunk_count_x * chunk_count_y chunks.
    """
    height, width = classification.shape
    count_x, count_y = chunk_counts(width, height, chunk_size)

    chunks = []
    for cy in range(count_y):
        for cx in range(count_x):
            chunks.append(extract_chunk(classification, elevation, cx, cy, chunk_size))
    return chunks
