"""Seeded isometric terrain and biome map generation."""

from .chunks import (
    Chunk,
    chunk_coords,
    chunk_counts,
    local_coords,
    partition_chunks,
    world_coords,
)
from .exceptions import ChunkCoordinateError, TerrainError
from .terrain import (
    GenerationResult,
    MapConfig,
    ValidationResult,
    generate,
    generate_chunks,
    generate_terrain,
    load_config,
    validate_terrain,
)
from .terrain.config import (
    BiomeConfig,
    BoundaryConfig,
    HeightConfig,
    NoiseConfig,
    RegionConfig,
    SmoothingConfig,
    WaterConfig,
)
from .terrain_types import CellClass
from .tiles import (
    INVALID_VISUAL,
    TilePalette,
    TilePlacement,
    chunk_iso_origin,
    emit_chunk_tiles,
    emit_grid_tiles,
    iso_position,
)

__all__ = [
    # Types
    "CellClass",
    # Config
    "MapConfig",
    "BiomeConfig",
    "WaterConfig",
    "NoiseConfig",
    "RegionConfig",
    "BoundaryConfig",
    "SmoothingConfig",
    "HeightConfig",
    "load_config",
    # Generation
    "GenerationResult",
    "generate",
    "generate_chunks",
    "generate_terrain",
    # Validation
    "ValidationResult",
    "validate_terrain",
    # Chunks
    "Chunk",
    "chunk_coords",
    "chunk_counts",
    "local_coords",
    "partition_chunks",
    "world_coords",
    # Tiles
    "INVALID_VISUAL",
    "TilePalette",
    "TilePlacement",
    "chunk_iso_origin",
    "emit_chunk_tiles",
    "emit_grid_tiles",
    "iso_position",
    # Exceptions
    "TerrainError",
    "ChunkCoordinateError",
]
