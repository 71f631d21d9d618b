"""Stateful terrain service consumed by presentation and gameplay layers."""

import numpy as np
import structlog
from numpy.typing import NDArray

from .archetypes import TerrainArchetype
from .config import GenerationConfig
from .generator import GenerationResult, generate_terrain
from .random_source import RandomSource
from .rivers import RiverPath

logger = structlog.get_logger()


class TerrainService:
    """Holds the most recent generated terrain and answers queries on it.

    Each call to ``select_archetype_and_generate`` replaces the previous
    grid and river path. One RandomSource lives as long as the service and
    is reseeded at the start of every run.
    """

    def __init__(self, config: GenerationConfig | None = None):
        self.config = config or GenerationConfig()
        self._rng = RandomSource()
        self._result: GenerationResult | None = None

    @property
    def last_result(self) -> GenerationResult | None:
        """The most recent generation result, if any."""
        return self._result

    @property
    def heightmap(self) -> NDArray[np.float32] | None:
        """Normalized heights of the current terrain."""
        return self._result.heights if self._result else None

    @property
    def current_archetype(self) -> TerrainArchetype | None:
        """Archetype of the current terrain."""
        return self._result.archetype if self._result else None

    def select_archetype_and_generate(self, index: int) -> None:
        """Generate new terrain for the archetype at ``index`` (clamped)."""
        result = generate_terrain(index, self.config, rng=self._rng)
        self._result = result
        logger.info(
            "terrain_generated",
            archetype=result.archetype.name,
            seed=result.seed,
            size=result.config.size,
            river_points=len(result.river_path),
        )

    def height_at(self, x: int, z: int) -> float:
        """World-scale height at integer grid coordinates.

        Out-of-bounds coordinates, or a query before any terrain exists,
        return 0.0 and log a warning.
        """
        if self._result is None:
            logger.warning("height_query_without_terrain", x=x, z=z)
            return 0.0

        size = self._result.config.size
        if not (0 <= x < size and 0 <= z < size):
            logger.warning("height_query_out_of_bounds", x=x, z=z, size=size)
            return 0.0

        return float(self._result.heights[z, x]) * self._result.config.height_scale

    def current_river_path(self) -> RiverPath:
        """The most recent river path in grid space (empty if none)."""
        if self._result is None:
            return []
        return list(self._result.river_path)
