"""Procedural terrain generation package.

This package implements the seeded map pipeline: noise field, water/land
classification, biome region growth, border perturbation, majority-vote
smoothing and elevation banding.
"""

from .config import MapConfig, load_config
from .generator import (
    GenerationResult,
    generate,
    generate_chunks,
    generate_terrain,
)
from .validation import ValidationResult, validate_terrain

__all__ = [
    "GenerationResult",
    "MapConfig",
    "ValidationResult",
    "generate",
    "generate_chunks",
    "generate_terrain",
    "load_config",
    "validate_terrain",
]
