"""Custom exceptions for terrain generation."""


class TerrainError(Exception):
    """Base exception for terrain errors."""

    pass


class ChunkCoordinateError(TerrainError):
    """Raised when a world coordinate does not fall inside a chunk."""

    pass
