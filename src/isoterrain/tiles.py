"""Pure-data tile emission for isometric renderers.

The generator never owns scene objects. A renderer takes the placements
produced here and instantiates whatever it needs at the given positions.
"""

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from .chunks import Chunk
from .exceptions import TerrainError
from .terrain.config import MapConfig
from .terrain_types import CellClass, describe_code, is_water_code

logger = logging.getLogger(__name__)

# Substituted for any cell whose code or elevation breaks the map invariants
INVALID_VISUAL = "#FF00FF"


def iso_position(x: float, y: float) -> tuple[float, float]:
    """Isometric screen position of a world cell."""
    return ((x - y) * 0.5, (x + y) * 0.25)


def chunk_iso_origin(chunk_x: int, chunk_y: int, chunk_size: int) -> tuple[float, float]:
    """Isometric position of a chunk's origin."""
    return (
        (chunk_x - chunk_y) * chunk_size / 2,
        (chunk_x + chunk_y) * chunk_size / 2,
    )


@dataclass(frozen=True)
class TilePlacement:
    """One tile for the renderer to place."""

    x: int
    y: int
    layer: int
    iso_x: float
    iso_y: float
    visual: Any
    invalid: bool = False


class TilePalette:
    """Maps classification codes to the configured visual handles."""

    def __init__(
        self,
        biome_visuals: list[Any],
        deep_visual: Any,
        water_visual: Any,
        shallow_visual: Any,
        layer_count: int,
    ):
        self.biome_visuals = biome_visuals
        self.water_visuals = {
            CellClass.DEEP_WATER: deep_visual,
            CellClass.WATER: water_visual,
            CellClass.SHALLOW_WATER: shallow_visual,
        }
        self.layer_count = layer_count

    @classmethod
    def from_config(cls, config: MapConfig) -> "TilePalette":
        """Build the palette from a map configuration."""
        return cls(
            biome_visuals=[biome.visual for biome in config.biomes],
            deep_visual=config.water.deep_visual,
            water_visual=config.water.water_visual,
            shallow_visual=config.water.shallow_visual,
            layer_count=config.height_layers.layer_count,
        )

    def has_code(self, code: int) -> bool:
        """Whether the code is a configured biome index or a water depth."""
        return 0 <= code < len(self.biome_visuals) or is_water_code(code)

    def visual_for(self, code: int) -> Any:
        """Visual handle for a code, passed through as configured.

        Raises:
            TerrainError: If the code has no entry in this palette.
        """
        if not self.has_code(code):
            raise TerrainError(f"No visual for {describe_code(code)}")
        if code >= 0:
            return self.biome_visuals[code]
        return self.water_visuals[CellClass(code)]


def _emit_cell(
    x: int,
    y: int,
    code: int,
    level: int,
    palette: TilePalette,
    base_iso: tuple[float, float],
    layer_y_offset: float,
) -> list[TilePlacement]:
    """Emit the layered tiles for a single cell."""
    water = is_water_code(code)
    invalid = (
        not palette.has_code(code)
        or level >= palette.layer_count
        or (water and level != 0)
    )

    if invalid:
        logger.error(
            f"Invalid cell at ({x}, {y}): {describe_code(code)} "
            f"at elevation {level}, substituting sentinel"
        )
        visual = INVALID_VISUAL
    else:
        visual = palette.visual_for(code)

    # Water fills only its base layer; land stacks layers 0..level
    top = 0 if (water or invalid) else level
    iso_x, iso_y = base_iso
    return [
        TilePlacement(
            x=x,
            y=y,
            layer=layer,
            iso_x=iso_x,
            iso_y=iso_y + layer * layer_y_offset,
            visual=visual,
            invalid=invalid,
        )
        for layer in range(top + 1)
    ]


def emit_chunk_tiles(
    chunk: Chunk,
    palette: TilePalette,
    layer_y_offset: float,
) -> list[TilePlacement]:
    """Emit tile placements for the in-world cells of a chunk.

    Positions are the chunk's isometric origin plus the cell's local
    isometric offset. An out-of-range code or elevation is logged and the
    cell is emitted with INVALID_VISUAL instead of aborting.

    Args:
        chunk: Chunk to emit.
        palette: Visual lookup.
        layer_y_offset: Vertical offset per height layer.

    Returns:
        Tile placements in row-major cell order, lowest layer first.
    """
    origin_x, origin_y = chunk_iso_origin(chunk.chunk_x, chunk.chunk_y, chunk.size)

    placements: list[TilePlacement] = []
    for local_y in range(chunk.valid_height):
        for local_x in range(chunk.valid_width):
            code, level = chunk.cell(local_x, local_y)
            x, y = chunk.to_world(local_x, local_y)
            offset_x, offset_y = iso_position(local_x, local_y)
            placements.extend(
                _emit_cell(
                    x,
                    y,
                    code,
                    level,
                    palette,
                    (origin_x + offset_x, origin_y + offset_y),
                    layer_y_offset,
                )
            )
    return placements


def emit_grid_tiles(
    classification: NDArray[np.int16],
    elevation: NDArray[np.uint8],
    palette: TilePalette,
    layer_y_offset: float,
) -> list[TilePlacement]:
    """Emit tile placements for a whole grid at world isometric positions.

    Args:
        classification: Full classification grid.
        elevation: Full elevation grid.
        palette: Visual lookup.
        layer_y_offset: Vertical offset per height layer.

    Returns:
        Tile placements in row-major cell order, lowest layer first.
    """
    height, width = classification.shape
    codes = classification.tolist()
    levels = elevation.tolist()

    placements: list[TilePlacement] = []
    for y in range(height):
        for x in range(width):
            placements.extend(
                _emit_cell(
                    x,
                    y,
                    codes[y][x],
                    levels[y][x],
                    palette,
                    iso_position(x, y),
                    layer_y_offset,
                )
            )
    return placements
