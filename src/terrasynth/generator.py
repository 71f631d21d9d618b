"""Main terrain generation orchestration."""

import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from .archetypes import (
    ArchetypeParams,
    TerrainArchetype,
    clamp_index,
    derive_params,
    get_archetype,
)
from .config import GenerationConfig, sanitize_config
from .heightmap import generate_heightmap, heightmap_stats
from .random_source import RandomSource
from .rivers import RiverPath, carve_river, plan_river_path
from .smoothing import smooth_terrain

logger = logging.getLogger(__name__)


class GenerationResult:
    """Result of one generation run."""

    def __init__(
        self,
        heights: NDArray[np.float32],
        river_path: RiverPath,
        archetype: TerrainArchetype,
        params: ArchetypeParams,
        seed: int,
        config: GenerationConfig,
    ):
        self.heights = heights
        self.river_path = river_path
        self.archetype = archetype
        self.params = params
        self.seed = seed
        self.config = config

    @property
    def has_river(self) -> bool:
        """Whether this run carved a river."""
        return len(self.river_path) > 0

    def world_heights(self) -> NDArray[np.float32]:
        """Heights scaled to world units."""
        return self.heights * np.float32(self.config.height_scale)


def generate_terrain(
    archetype_index: int,
    config: GenerationConfig,
    rng: RandomSource | None = None,
    params: ArchetypeParams | None = None,
) -> GenerationResult:
    """Generate a heightmap and optional river for an archetype.

    Stages run in a fixed order, and the random draws happen in a fixed
    order (archetype scales, river trigger, river sway), so a fixed seed
    reproduces the grid and path exactly.

    Args:
        archetype_index: Catalog index; clamped into range.
        config: Generation configuration; invalid values are clamped.
        rng: Random source to reseed and draw from. A new one is created
            when None.
        params: Forced per-run parameters. When given, no scale draws are
            made.

    Returns:
        GenerationResult with the smoothed grid and river path.
    """
    index = clamp_index(archetype_index)
    if index != archetype_index:
        logger.warning(f"Archetype index {archetype_index} clamped to {index}")
    config = sanitize_config(config)
    archetype = get_archetype(index)

    if rng is None:
        rng = RandomSource()
    seed = rng.reseed(None if config.use_random_seed else config.fixed_seed)

    size = config.size
    logger.info(f"Generating {archetype.name} terrain {size}x{size} with seed {seed}")

    if params is None:
        params = derive_params(archetype, rng)
    logger.debug(f"Archetype parameters: {params}")

    # Stage A: Heightmap
    logger.info("Stage A: Generating heightmap...")
    heights = generate_heightmap(archetype, size, params, config.noise_seed)

    # Stage B: River
    river_path: RiverPath = []
    if rng.uniform() < archetype.river_chance:
        logger.info("Stage B: Carving river...")
        river_path = _generate_river(heights, archetype, rng, config)
        logger.info(f"River carved along {len(river_path)} points")
    else:
        logger.info("Stage B: No river for this run")

    # Stage C: Smoothing
    logger.info("Stage C: Smoothing terrain...")
    heights = smooth_terrain(
        heights,
        kernel_size=config.smoothing.kernel_size,
        iterations=config.smoothing.iterations,
    )

    _log_terrain_stats(heights, config.height_scale)

    if config.debug_output_dir:
        _dump_debug_images(Path(config.debug_output_dir), heights, river_path)

    return GenerationResult(
        heights=heights,
        river_path=river_path,
        archetype=archetype,
        params=params,
        seed=seed,
        config=config,
    )


def _generate_river(
    heights: NDArray[np.float32],
    archetype: TerrainArchetype,
    rng: RandomSource,
    config: GenerationConfig,
) -> RiverPath:
    """Plan a river between the archetype's endpoints and carve it."""
    size = config.size
    river = config.river
    start = (archetype.river_start[0] * size, archetype.river_start[1] * size)
    end = (archetype.river_end[0] * size, archetype.river_end[1] * size)

    path = plan_river_path(start, end, rng, river.curve_frequency, river.width)
    carve_river(
        heights,
        path,
        width=river.width,
        depth=river.depth,
        height_scale=config.height_scale,
        bank_noise_scale=river.bank_noise_scale,
        bank_noise_amplitude=river.bank_noise_amplitude,
        mode=river.carve_mode,
        noise_seed=config.noise_seed,
    )
    return path


def _log_terrain_stats(heights: NDArray[np.float32], height_scale: float) -> None:
    """Log terrain generation statistics."""
    stats = heightmap_stats(heights)
    logger.info(f"Terrain stats ({heights.size:,} cells):")
    for name, value in stats.items():
        logger.info(f"  {name}: {value:.4f} ({value * height_scale:.2f} world units)")


def _dump_debug_images(
    output_dir: Path,
    heights: NDArray[np.float32],
    river_path: RiverPath,
) -> None:
    """Save the heightmap, with the river overlaid, as an image.

    Args:
        output_dir: Directory to save images.
        heights: Final height grid.
        river_path: River path to overlay (may be empty).
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        logger.warning("matplotlib not available, skipping debug images")
        return

    output_dir.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10, 10))
    ax.imshow(heights, cmap="terrain", origin="upper")
    if river_path:
        xs, ys = zip(*river_path)
        ax.plot(xs, ys, color="blue", linewidth=1.5)
    ax.set_title("heights")
    ax.axis("off")

    fig.savefig(output_dir / "heights.png", dpi=150, bbox_inches="tight")
    plt.close(fig)

    logger.info(f"Debug images saved to {output_dir}")
