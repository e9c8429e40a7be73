"""Shared test fixtures for terrain tests."""

from typing import Callable

import numpy as np
import pytest

from isoterrain.terrain.config import BiomeConfig, MapConfig


class ConstantNoise:
    """Coherent noise stand-in that returns the same value everywhere."""

    def __init__(self, value: float):
        self.value = value

    def sample(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return np.full((len(ys), len(xs)), self.value, dtype=np.float64)


@pytest.fixture
def constant_noise() -> Callable[[float], ConstantNoise]:
    """Factory for constant-valued noise sources."""
    return ConstantNoise


@pytest.fixture
def small_config() -> MapConfig:
    """48x40 map with a fixed seed and three biomes."""
    return MapConfig(
        seed=42,
        width=48,
        height=40,
        chunk_size=16,
        biomes=[
            BiomeConfig(name="Forest", visual="green"),
            BiomeConfig(name="Desert", visual="yellow"),
            BiomeConfig(name="Snow", visual="white"),
        ],
    )


@pytest.fixture
def island_classification() -> np.ndarray:
    """8x8 grid: ring of deep water around a 6x6 unassigned island."""
    grid = np.full((8, 8), -1, dtype=np.int16)
    grid[1:7, 1:7] = -4
    return grid
