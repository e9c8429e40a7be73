"""Tests for map configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from isoterrain.terrain.config import (
    BiomeConfig,
    HeightConfig,
    MapConfig,
    SmoothingConfig,
    load_config,
)


class TestMapConfigDefaults:
    """Tests for default configuration values."""

    def test_defaults(self) -> None:
        """Default config matches the documented values."""
        config = MapConfig()
        assert config.seed == 0
        assert config.width == 100
        assert config.height == 100
        assert config.chunk_size == 16
        assert config.noise.scale == 0.03
        assert config.regions.seeds_per_biome == 5
        assert config.biome_count == 4
        assert [b.name for b in config.biomes] == ["Forest", "Desert", "Snow", "Lava"]

    def test_default_thresholds_match_layer_count(self) -> None:
        """Default thresholds have layer_count - 1 entries."""
        height = HeightConfig()
        assert len(height.thresholds) == height.layer_count - 1

    def test_visual_is_opaque(self) -> None:
        """Any value is accepted as a visual handle."""
        biome = BiomeConfig(name="Marsh", visual=(10, 80, 20))
        assert biome.visual == (10, 80, 20)


class TestMapConfigValidation:
    """Tests for fail-fast configuration errors."""

    @pytest.mark.parametrize("field", ["width", "height", "chunk_size"])
    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_dimensions_rejected(self, field: str, value: int) -> None:
        """Non-positive sizes raise instead of clamping."""
        with pytest.raises(ValidationError):
            MapConfig(**{field: value})

    def test_empty_biome_list_rejected(self) -> None:
        """At least one biome is required."""
        with pytest.raises(ValidationError):
            MapConfig(biomes=[])

    @pytest.mark.parametrize("layer_count", [0, 11])
    def test_layer_count_out_of_range(self, layer_count: int) -> None:
        """Layer count must be within [1, 10]."""
        with pytest.raises(ValidationError):
            HeightConfig(layer_count=layer_count, thresholds=[])

    def test_single_layer_needs_no_thresholds(self) -> None:
        """One layer takes an empty threshold list."""
        height = HeightConfig(layer_count=1, thresholds=[])
        assert height.thresholds == []

    def test_wrong_threshold_length(self) -> None:
        """Threshold count must be layer_count - 1."""
        with pytest.raises(ValidationError, match="layer_count - 1"):
            HeightConfig(layer_count=3, thresholds=[0.5])

    def test_thresholds_not_ascending(self) -> None:
        """Thresholds must strictly increase."""
        with pytest.raises(ValidationError, match="strictly ascending"):
            HeightConfig(layer_count=3, thresholds=[0.6, 0.5])

    def test_duplicate_thresholds_rejected(self) -> None:
        """Equal thresholds are not strictly ascending."""
        with pytest.raises(ValidationError, match="strictly ascending"):
            HeightConfig(layer_count=3, thresholds=[0.5, 0.5])

    def test_threshold_outside_unit_interval(self) -> None:
        """Thresholds must lie in [0, 1]."""
        with pytest.raises(ValidationError, match="outside"):
            HeightConfig(layer_count=2, thresholds=[1.5])

    def test_negative_iterations_rejected(self) -> None:
        """Smoothing counts cannot be negative."""
        with pytest.raises(ValidationError):
            SmoothingConfig(biome_iterations=-1)

    def test_negative_island_factor_rejected(self) -> None:
        """Island factor must be >= 0."""
        with pytest.raises(ValidationError):
            MapConfig(noise={"island_factor": -0.5})


class TestLoadConfig:
    """Tests for TOML config loading."""

    def test_load_nested_config(self, tmp_path: Path) -> None:
        """TOML tables map onto nested models."""
        path = tmp_path / "map.toml"
        path.write_text(
            "seed = 7\n"
            "width = 20\n"
            "height = 10\n"
            "\n"
            "[[biomes]]\n"
            'name = "Grass"\n'
            'visual = "#00FF00"\n'
            "\n"
            "[height_layers]\n"
            "layer_count = 2\n"
            "thresholds = [0.5]\n"
        )
        config = load_config(path)
        assert config.seed == 7
        assert config.width == 20
        assert config.height == 10
        assert config.biome_count == 1
        assert config.biomes[0].visual == "#00FF00"
        assert config.height_layers.thresholds == [0.5]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_values_rejected(self, tmp_path: Path) -> None:
        """Invalid values in the file fail validation."""
        path = tmp_path / "bad.toml"
        path.write_text("width = 0\n")
        with pytest.raises(ValidationError):
            load_config(path)
