"""Post-generation invariant checks."""

import logging

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import CellClass, water_mask
from .config import MapConfig

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of terrain validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_terrain(
    classification: NDArray[np.int16],
    elevation: NDArray[np.uint8],
    config: MapConfig,
) -> ValidationResult:
    """Validate generated grids against the map invariants.

    Args:
        classification: Final classification grid.
        elevation: Final elevation grid.
        config: Generation configuration.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    expected_shape = (config.height, config.width)
    if classification.shape != expected_shape or elevation.shape != expected_shape:
        result.add_error(
            f"Grid shapes {classification.shape}/{elevation.shape} "
            f"do not match {expected_shape}"
        )
        return result

    # Check 1: Every cell is water or a valid biome
    _check_coverage(classification, config.biome_count, result)

    # Check 2: Water is flat
    _check_water_elevation(classification, elevation, result)

    # Check 3: Elevation within layer range
    _check_elevation_range(elevation, config.height_layers.layer_count, result)

    # Check 4: Every biome is represented
    _check_biome_presence(classification, config.biome_count, result)

    if result.passed:
        logger.info("Terrain validation passed")
    else:
        logger.warning(f"Terrain validation failed with {len(result.errors)} errors")
        for error in result.errors:
            logger.error(f"  - {error}")

    for warning in result.warnings:
        logger.warning(f"  - {warning}")

    return result


def _check_coverage(
    classification: NDArray[np.int16],
    biome_count: int,
    result: ValidationResult,
) -> None:
    """Check no cell is unassigned or carries an unknown code."""
    unassigned = int(np.sum(classification == CellClass.UNASSIGNED))
    if unassigned > 0:
        result.add_error(f"{unassigned} land cells left unassigned")

    out_of_range = int(np.sum(classification >= biome_count))
    if out_of_range > 0:
        result.add_error(f"{out_of_range} cells reference a biome >= {biome_count}")

    unknown = int(np.sum(classification < CellClass.UNASSIGNED))
    if unknown > 0:
        result.add_error(f"{unknown} cells carry an unknown classification code")


def _check_water_elevation(
    classification: NDArray[np.int16],
    elevation: NDArray[np.uint8],
    result: ValidationResult,
) -> None:
    """Check water cells have elevation 0."""
    raised = int(np.sum(water_mask(classification) & (elevation != 0)))
    if raised > 0:
        result.add_error(f"{raised} water cells have non-zero elevation")


def _check_elevation_range(
    elevation: NDArray[np.uint8],
    layer_count: int,
    result: ValidationResult,
) -> None:
    """Check elevation stays below the layer count."""
    too_high = int(np.sum(elevation >= layer_count))
    if too_high > 0:
        result.add_error(f"{too_high} cells exceed {layer_count} height layers")


def _check_biome_presence(
    classification: NDArray[np.int16],
    biome_count: int,
    result: ValidationResult,
) -> None:
    """Warn about missing land or biomes that received no cells."""
    land = classification >= 0
    if not np.any(land):
        result.add_warning("No land found")
        return

    counts = np.bincount(classification[land].astype(np.int64), minlength=biome_count)
    missing = [i for i in range(biome_count) if counts[i] == 0]
    if missing:
        result.add_warning(f"Biomes with no cells: {missing}")
