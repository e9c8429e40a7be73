"""Main terrain generation orchestration."""

import logging

import numpy as np
from numpy.typing import NDArray

from ..chunks import Chunk, partition_chunks
from ..terrain_types import CellClass, land_mask
from .boundary import perturb_boundaries
from .classification import classify_cells
from .config import MapConfig
from .elevation import build_elevation
from .noise import CoherentNoise, sample_noise_field
from .regions import grow_biome_regions
from .seeding import SeedState, initialize_seed
from .smoothing import majority_vote
from .validation import ValidationResult, validate_terrain

logger = logging.getLogger(__name__)


class GenerationResult:
    """Result of terrain generation with intermediate data."""

    def __init__(
        self,
        classification: NDArray[np.int16],
        elevation: NDArray[np.uint8],
        field: NDArray[np.float32],
        seed_state: SeedState,
        config: MapConfig,
        validation: ValidationResult,
    ):
        self.classification = classification
        self.elevation = elevation
        self.field = field
        self.seed_state = seed_state
        self.config = config
        self.validation = validation

    @property
    def seed(self) -> int:
        """The seed actually used (time-derived when configured as 0)."""
        return self.seed_state.seed

    def biome_counts(self) -> dict[str, int]:
        """Number of cells per biome name."""
        land = self.classification[self.classification >= 0]
        counts = np.bincount(land.astype(np.int64), minlength=self.config.biome_count)
        return {
            biome.name: int(counts[i]) for i, biome in enumerate(self.config.biomes)
        }

    def chunks(self) -> list[Chunk]:
        """Partition the finished grids into chunks."""
        return partition_chunks(
            self.classification, self.elevation, self.config.chunk_size
        )


def generate_terrain(
    config: MapConfig,
    noise: CoherentNoise | None = None,
) -> GenerationResult:
    """Generate classification and elevation grids from configuration.

    Stages run strictly in order and each one returns a new complete grid.

    Args:
        config: Validated map configuration.
        noise: Coherent noise source (defaults to CoherentNoise()).

    Returns:
        GenerationResult with read-only grids.
    """
    if noise is None:
        noise = CoherentNoise()

    width, height = config.width, config.height

    # Stage A: Seed and offsets
    seed_state = initialize_seed(config.seed)
    logger.info(f"Generating terrain {width}x{height} with seed {seed_state.seed}")

    # Stage B: Noise field
    logger.info("Stage B: Sampling noise field...")
    field = sample_noise_field(
        width, height, seed_state.offset_x, seed_state.offset_y, config.noise, noise
    )

    # Stage C: Water/land classification
    logger.info("Stage C: Classifying cells...")
    classification = classify_cells(field)

    # Stage D: Biome regions
    logger.info("Stage D: Growing biome regions...")
    classification = grow_biome_regions(
        classification,
        config.biome_count,
        config.regions.seeds_per_biome,
        seed_state.rng,
    )

    # Stage E: Border perturbation
    logger.info("Stage E: Perturbing biome borders...")
    classification = perturb_boundaries(
        classification,
        config.biome_count,
        seed_state.offset_x,
        seed_state.offset_y,
        config.boundary,
        noise,
    )

    # Stage F: Biome smoothing over land only; water cells neither vote nor
    # change, so the coastline from stage C is kept exactly
    logger.info("Stage F: Smoothing biomes...")
    classification = majority_vote(
        classification,
        config.smoothing.biome_iterations,
        mask=land_mask(classification),
    )

    # Stage G: Elevation
    logger.info("Stage G: Building elevation...")
    elevation = build_elevation(
        field,
        classification,
        config.height_layers,
        config.smoothing.height_iterations,
    )

    _log_terrain_stats(classification, elevation, config)

    # Stage H: Validation
    validation = validate_terrain(classification, elevation, config)

    classification.flags.writeable = False
    elevation.flags.writeable = False
    field.flags.writeable = False

    return GenerationResult(
        classification=classification,
        elevation=elevation,
        field=field,
        seed_state=seed_state,
        config=config,
        validation=validation,
    )


def generate(config: MapConfig) -> tuple[NDArray[np.int16], NDArray[np.uint8]]:
    """Generate the map and return (classification, elevation)."""
    result = generate_terrain(config)
    return result.classification, result.elevation


def generate_chunks(config: MapConfig) -> list[Chunk]:
    """Generate the map and return it partitioned into chunks."""
    result = generate_terrain(config)
    chunks = result.chunks()
    logger.info(f"Partitioned map into {len(chunks)} chunks of {config.chunk_size}")
    return chunks


def _log_terrain_stats(
    classification: NDArray[np.int16],
    elevation: NDArray[np.uint8],
    config: MapConfig,
) -> None:
    """Log terrain generation statistics."""
    total = classification.size

    counts = {
        "deep_water": np.sum(classification == CellClass.DEEP_WATER),
        "water": np.sum(classification == CellClass.WATER),
        "shallow_water": np.sum(classification == CellClass.SHALLOW_WATER),
    }
    for i, biome in enumerate(config.biomes):
        counts[biome.name] = np.sum(classification == i)

    logger.info(f"Terrain stats ({total:,} cells):")
    for name, count in counts.items():
        pct = count / total * 100
        logger.info(f"  {name}: {count:,} ({pct:.1f}%)")

    land = classification >= 0
    if np.any(land):
        logger.info(f"  Mean land elevation: {elevation[land].mean():.2f}")
