"""Terrain generation configuration models."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

MAX_HEIGHT_LAYERS = 10


class BiomeConfig(BaseModel):
    """A biome: a name plus an opaque visual handle for the renderer."""

    name: str = Field(description="Biome display name")
    visual: Any = Field(default=None, description="Opaque visual handle (e.g. a colour)")


def _default_biomes() -> list[BiomeConfig]:
    return [
        BiomeConfig(name="Forest", visual="#339933"),
        BiomeConfig(name="Desert", visual="#FFE666"),
        BiomeConfig(name="Snow", visual="#FFFFFF"),
        BiomeConfig(name="Lava", visual="#991A1A"),
    ]


class WaterConfig(BaseModel):
    """Visual handles for the three water depths."""

    deep_visual: Any = Field(default="#001A66", description="Deep water visual")
    water_visual: Any = Field(default="#3366CC", description="Normal water visual")
    shallow_visual: Any = Field(default="#66A3E0", description="Shallow water visual")


class NoiseConfig(BaseModel):
    """Base noise field parameters."""

    scale: float = Field(default=0.03, gt=0.0, description="Coordinate scale for base noise")
    island_factor: float = Field(
        default=1.0,
        ge=0.0,
        description=(
            "Continental mask falloff strength. The mask reaches 0 at normalized "
            "center distance 1 / island_factor, so 1.0 keeps land possible out to "
            "the edge midpoints while 2.0 confines it to the inner half"
        ),
    )


class RegionConfig(BaseModel):
    """Biome region growth parameters."""

    seeds_per_biome: int = Field(
        default=5, ge=1, description="Seed cells drawn per biome"
    )


class BoundaryConfig(BaseModel):
    """Biome border perturbation parameters."""

    noise_scale: float = Field(default=0.1, gt=0.0, description="Border noise scale")
    offset_amount: float = Field(
        default=0.3, description="Raises the reassignment threshold above 0.5"
    )


class SmoothingConfig(BaseModel):
    """Majority-vote smoothing pass counts."""

    biome_iterations: int = Field(default=2, ge=0, description="Biome smoothing passes")
    height_iterations: int = Field(default=1, ge=0, description="Elevation smoothing passes")


class HeightConfig(BaseModel):
    """Elevation banding parameters."""

    layer_count: int = Field(
        default=4, ge=1, le=MAX_HEIGHT_LAYERS, description="Number of height layers"
    )
    thresholds: list[float] = Field(
        default_factory=lambda: [0.45, 0.6, 0.75],
        description="Ascending band thresholds, layer_count - 1 entries",
    )
    layer_y_offset: float = Field(
        default=0.25, description="Vertical offset per layer (presentation only)"
    )

    @model_validator(mode="after")
    def _check_thresholds(self) -> "HeightConfig":
        expected = self.layer_count - 1
        if len(self.thresholds) != expected:
            raise ValueError(
                f"thresholds must have layer_count - 1 = {expected} entries, "
                f"got {len(self.thresholds)}"
            )
        for value in self.thresholds:
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"threshold {value} outside [0, 1]")
        for lower, upper in zip(self.thresholds, self.thresholds[1:]):
            if upper <= lower:
                raise ValueError(
                    f"thresholds must be strictly ascending: {self.thresholds}"
                )
        return self


class MapConfig(BaseModel):
    """Complete map generation configuration."""

    seed: int = Field(default=0, description="Random seed (0 = derive from time)")
    width: int = Field(default=100, gt=0, description="Map width in cells")
    height: int = Field(default=100, gt=0, description="Map height in cells")
    chunk_size: int = Field(default=16, gt=0, description="Chunk edge length in cells")

    biomes: list[BiomeConfig] = Field(default_factory=_default_biomes, min_length=1)
    water: WaterConfig = Field(default_factory=WaterConfig)
    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    regions: RegionConfig = Field(default_factory=RegionConfig)
    boundary: BoundaryConfig = Field(default_factory=BoundaryConfig)
    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)
    height_layers: HeightConfig = Field(default_factory=HeightConfig)

    @property
    def biome_count(self) -> int:
        """Number of configured biomes."""
        return len(self.biomes)


def load_config(config_path: Path) -> MapConfig:
    """Load map configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed MapConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are invalid.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return MapConfig.model_validate(data)
