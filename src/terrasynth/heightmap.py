"""Heightmap generation from a terrain archetype."""

import logging

import numpy as np
from numpy.typing import NDArray

from .archetypes import ArchetypeParams, TerrainArchetype
from .exceptions import GridAllocationError

logger = logging.getLogger(__name__)


def generate_heightmap(
    archetype: TerrainArchetype,
    size: int,
    params: ArchetypeParams,
    noise_seed: int = 0,
) -> NDArray[np.float32]:
    """Evaluate an archetype over every cell of a square grid.

    Cells are clamped to be non-negative. No random draws are consumed here;
    per-run scales arrive already drawn in ``params``.

    Args:
        archetype: Archetype whose height function to evaluate.
        size: Grid cells per side.
        params: Per-run parameters for the archetype.
        noise_seed: Coherent noise permutation seed.

    Returns:
        2D height array of shape (size, size), indexed [y, x].

    Raises:
        GridAllocationError: If the grid cannot be allocated.
    """
    try:
        heights = np.empty((size, size), dtype=np.float32)
        coords = np.arange(size, dtype=np.float64)
    except (MemoryError, ValueError) as exc:
        # numpy reports shapes beyond its addressable size as ValueError
        raise GridAllocationError(f"Cannot allocate {size}x{size} height grid") from exc

    try:
        field = archetype.height_field(coords, coords, size, params, noise_seed)
    except MemoryError as exc:
        raise GridAllocationError(f"Cannot allocate {size}x{size} height grid") from exc

    np.maximum(field, 0.0, out=field)
    heights[...] = field

    logger.debug(
        f"{archetype.name} heightmap: min {heights.min():.4f}, "
        f"max {heights.max():.4f}, mean {heights.mean():.4f}"
    )
    return heights


def heightmap_stats(heights: NDArray[np.float32]) -> dict[str, float]:
    """Summarize a height grid.

    Args:
        heights: 2D height array.

    Returns:
        Dict with min, max, mean and std of the grid.
    """
    return {
        "min": float(heights.min()),
        "max": float(heights.max()),
        "mean": float(heights.mean()),
        "std": float(heights.std()),
    }
