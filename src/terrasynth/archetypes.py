"""Terrain archetype catalog.

Each archetype pairs static river metadata with a height function selected
by its kind. Per-run parameters (noise scales) are drawn once per run by
``derive_params`` and passed explicitly into evaluation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from .exceptions import OutOfRangeError
from .noise import coherent_noise_grid, lerp, smoothstep
from .random_source import RandomSource

# Fraction of map depth where the sea begins
SEA_THRESHOLD = 0.8

# Cauldron reference radius as a fraction of map size
CAULDRON_RADIUS = 0.65


class ArchetypeKind(str, Enum):
    """The five terrain generation strategies."""

    PLAINS = "plains"
    SEASIDE = "seaside"
    SEASIDE_CLIFF = "seaside_cliff"
    CAULDRON = "cauldron"
    VALLEY = "valley"


@dataclass(frozen=True)
class ArchetypeParams:
    """Parameters derived once per generation run."""

    noise_scale: float
    slope_noise_scale: float | None = None  # Valley only


@dataclass(frozen=True)
class TerrainArchetype:
    """A named terrain strategy with its river metadata.

    River endpoints are normalized (x, y) points in [0, 1]^2.
    """

    kind: ArchetypeKind
    name: str
    river_chance: float
    river_start: tuple[float, float]
    river_end: tuple[float, float]

    def height_field(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        size: int,
        params: ArchetypeParams,
        noise_seed: int = 0,
    ) -> NDArray[np.float64]:
        """Evaluate the height function on the lattice of ``xs`` by ``ys``.

        Args:
            xs: 1D column coordinates.
            ys: 1D row coordinates.
            size: Grid cells per side (the map the coordinates belong to).
            params: Per-run parameters.
            noise_seed: Coherent noise permutation seed.

        Returns:
            Unclamped heights of shape (len(ys), len(xs)).
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        return _HEIGHT_FUNCTIONS[self.kind](xs, ys, size, params, noise_seed)

    def height_at_cell(
        self,
        x: int,
        y: int,
        size: int,
        params: ArchetypeParams,
        noise_seed: int = 0,
    ) -> float:
        """Evaluate the height function for a single cell."""
        field = self.height_field(
            np.array([x], dtype=np.float64),
            np.array([y], dtype=np.float64),
            size,
            params,
            noise_seed,
        )
        return float(field[0, 0])


def _plains(xs, ys, size, params, noise_seed):
    s = params.noise_scale
    return coherent_noise_grid(xs * s, ys * s, noise_seed) * 0.1


def _coastline(xs, ys, size, params, noise_seed, coast_scale, coast_amp, coast_bias):
    s = params.noise_scale
    noise = coherent_noise_grid(xs * s, ys * s, noise_seed) * 0.1
    coast = (
        coherent_noise_grid(xs * coast_scale, ys * coast_scale, noise_seed) * coast_amp
        - coast_bias
    )
    return noise, ys[:, np.newaxis] + coast * size


def _seaside(xs, ys, size, params, noise_seed):
    noise, shore_y = _coastline(xs, ys, size, params, noise_seed, 0.03, 0.1, 0.05)
    sea = np.where(shore_y < size * SEA_THRESHOLD, 0.1, 0.0)
    return noise + sea


def _seaside_cliff(xs, ys, size, params, noise_seed):
    noise, shore_y = _coastline(xs, ys, size, params, noise_seed, 0.7, 0.15, 0.07)
    shore_y = np.clip(shore_y, 0, size)
    sea = np.where(shore_y < size * SEA_THRESHOLD, 0.5, 0.0)
    return noise + sea


def _cauldron(xs, ys, size, params, noise_seed):
    s = params.noise_scale
    center = size / 2.0
    dx = xs[np.newaxis, :] - center
    dy = ys[:, np.newaxis] - center
    t = np.sqrt(dx * dx + dy * dy) / (size * CAULDRON_RADIUS)

    base = np.select(
        [t < 0.5, t < 0.7],
        [np.full_like(t, 0.1), lerp(0.1, 0.6, (t - 0.5) / 0.2)],
        default=0.8,
    )
    noise = (coherent_noise_grid(xs * s, ys * s, noise_seed) - 0.5) * 0.1
    return base + noise


def _valley(xs, ys, size, params, noise_seed):
    if params.slope_noise_scale is None:
        raise ValueError("Valley requires slope_noise_scale")

    half = size / 2.0
    normalized = np.abs(ys - half) / half
    flat_rows = normalized <= 0.5

    # Flat floor and slopes sample noise at different scales
    flat_s = params.noise_scale
    slope_s = params.slope_noise_scale
    noise = np.empty((ys.size, xs.size), dtype=np.float64)
    noise[flat_rows] = coherent_noise_grid(xs * flat_s, ys[flat_rows] * flat_s, noise_seed)
    noise[~flat_rows] = coherent_noise_grid(
        xs * slope_s, ys[~flat_rows] * slope_s, noise_seed
    )

    elevation = np.where(
        normalized > 0.5,
        smoothstep(0.2, 0.9, (normalized - 0.4) / 0.6),
        0.2,
    )
    return elevation[:, np.newaxis] + noise * 0.1


_HEIGHT_FUNCTIONS: dict[ArchetypeKind, Callable[..., NDArray[np.float64]]] = {
    ArchetypeKind.PLAINS: _plains,
    ArchetypeKind.SEASIDE: _seaside,
    ArchetypeKind.SEASIDE_CLIFF: _seaside_cliff,
    ArchetypeKind.CAULDRON: _cauldron,
    ArchetypeKind.VALLEY: _valley,
}

# Per-run scale draws as (base, random span); Valley has two
_SCALE_RANGES: dict[ArchetypeKind, tuple[tuple[float, float], ...]] = {
    ArchetypeKind.PLAINS: ((0.005, 0.005),),
    ArchetypeKind.SEASIDE: ((0.01, 0.01),),
    ArchetypeKind.SEASIDE_CLIFF: ((0.01, 0.01),),
    ArchetypeKind.CAULDRON: ((0.05, 0.05),),
    ArchetypeKind.VALLEY: ((0.01, 0.01), (0.25, 0.1)),
}

_TOP_TO_BOTTOM = ((0.5, 0.0), (0.5, 1.0))
_LEFT_TO_RIGHT = ((0.0, 0.5), (1.0, 0.5))

CATALOG: tuple[TerrainArchetype, ...] = (
    TerrainArchetype(ArchetypeKind.PLAINS, "Plains", 1.0, *_TOP_TO_BOTTOM),
    TerrainArchetype(ArchetypeKind.SEASIDE, "Seaside", 0.5, *_TOP_TO_BOTTOM),
    TerrainArchetype(ArchetypeKind.SEASIDE_CLIFF, "SeasideCliff", 0.0, *_TOP_TO_BOTTOM),
    TerrainArchetype(ArchetypeKind.CAULDRON, "Cauldron", 0.0, *_TOP_TO_BOTTOM),
    TerrainArchetype(ArchetypeKind.VALLEY, "Valley", 1.0, *_LEFT_TO_RIGHT),
)


def archetype_count() -> int:
    """Number of archetypes in the catalog."""
    return len(CATALOG)


def get_archetype(index: int) -> TerrainArchetype:
    """Look up an archetype by catalog index.

    Raises:
        OutOfRangeError: If index is outside [0, archetype_count()).
    """
    if not 0 <= index < len(CATALOG):
        raise OutOfRangeError(
            f"Archetype index {index} out of range [0, {len(CATALOG) - 1}]"
        )
    return CATALOG[index]


def clamp_index(index: int) -> int:
    """Clamp an archetype index into the catalog range."""
    return max(0, min(index, len(CATALOG) - 1))


def find_archetype(name: str) -> int:
    """Find the catalog index of an archetype by name (case-insensitive).

    Both display names ("SeasideCliff") and kind values ("seaside_cliff")
    are accepted.

    Raises:
        OutOfRangeError: If no archetype has that name.
    """
    key = name.strip().lower()
    for index, archetype in enumerate(CATALOG):
        if key in (archetype.name.lower(), archetype.kind.value):
            return index
    raise OutOfRangeError(
        f"Unknown archetype '{name}'. "
        f"Available: {[a.name for a in CATALOG]}"
    )


def derive_params(archetype: TerrainArchetype, rng: RandomSource) -> ArchetypeParams:
    """Draw the per-run noise scales for an archetype.

    Consumes one draw, or two for Valley (flat scale first, then slope).

    Args:
        archetype: Selected archetype.
        rng: Freshly seeded random source of the run.

    Returns:
        ArchetypeParams with rounded scales.
    """
    scales = [base + rng.scaled(span) for base, span in _SCALE_RANGES[archetype.kind]]
    if len(scales) == 2:
        return ArchetypeParams(noise_scale=scales[0], slope_noise_scale=scales[1])
    return ArchetypeParams(noise_scale=scales[0])
