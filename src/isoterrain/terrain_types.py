"""Cell classification codes."""

from enum import IntEnum

import numpy as np
from numpy.typing import NDArray


class CellClass(IntEnum):
    """Tagged classification codes stored in the classification grid.

    Negative codes are water or unassigned land. Any value >= 0 is a
    biome index into the configured biome list.
    """

    DEEP_WATER = -1
    WATER = -2
    SHALLOW_WATER = -3
    UNASSIGNED = -4


WATER_CODES = (CellClass.DEEP_WATER, CellClass.WATER, CellClass.SHALLOW_WATER)

# Storage dtype for classification grids
CLASS_DTYPE = np.int16


def is_water_code(value: int) -> bool:
    """Check a raw grid value for water."""
    return value in WATER_CODES


def describe_code(value: int) -> str:
    """Human-readable name for a raw grid value."""
    if value >= 0:
        return f"biome[{value}]"
    try:
        return CellClass(value).name.lower()
    except ValueError:
        return f"unknown({value})"


def water_mask(classification: NDArray[np.int16]) -> NDArray[np.bool_]:
    """Boolean mask where True = any water depth."""
    return np.isin(classification, WATER_CODES)


def land_mask(classification: NDArray[np.int16]) -> NDArray[np.bool_]:
    """Boolean mask where True = land (assigned or not)."""
    return (classification >= 0) | (classification == CellClass.UNASSIGNED)
