"""Generation configuration models and TOML loading."""

import enum
import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class CarveMode(str, enum.Enum):
    """How overlapping river cuts combine."""

    CUMULATIVE = "cumulative"  # every path point subtracts again
    DEEPEST = "deepest"  # each cell takes only its largest single cut


class SmoothingConfig(BaseModel):
    """Box-blur smoothing parameters."""

    kernel_size: int = Field(default=5, description="Box kernel side in cells")
    iterations: int = Field(default=2, description="Number of blur passes")


class RiverConfig(BaseModel):
    """River geometry and carving parameters."""

    width: float = Field(default=10.0, description="River width in cells")
    depth: float = Field(default=5.0, description="Center depth in world units")
    curve_frequency: float = Field(
        default=0.01, description="Half-periods of lateral sway along the path"
    )
    bank_noise_scale: float = Field(
        default=0.05, description="Coordinate scale of bank noise"
    )
    bank_noise_amplitude: float = Field(
        default=3.0, description="Bank noise depth in world units"
    )
    carve_mode: CarveMode = Field(
        default=CarveMode.CUMULATIVE, description="Overlap behavior of cuts"
    )


class GenerationConfig(BaseModel):
    """Complete terrain generation configuration."""

    size: int = Field(default=512, description="Grid cells per side")
    height_scale: float = Field(
        default=50.0, description="World units per normalized height unit"
    )
    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)
    river: RiverConfig = Field(default_factory=RiverConfig)

    use_random_seed: bool = Field(
        default=True, description="Seed from the wall clock instead of fixed_seed"
    )
    fixed_seed: int = Field(default=12345, description="Seed used when not random")
    noise_seed: int = Field(
        default=0, description="Permutation seed of the coherent noise field"
    )

    # Debug options
    debug_output_dir: str | None = Field(
        default=None, description="Directory for debug images (None = disabled)"
    )


def sanitize_config(config: GenerationConfig) -> GenerationConfig:
    """Clamp out-of-range values to the nearest usable value.

    A generator must always produce some deterministic output, so invalid
    sizes are corrected here and logged rather than raised.

    Args:
        config: Configuration as supplied by the caller.

    Returns:
        A configuration with every value in its valid range. The input is
        returned as-is when nothing needed clamping.
    """
    size = config.size
    height_scale = config.height_scale
    kernel_size = config.smoothing.kernel_size
    iterations = config.smoothing.iterations
    river_width = config.river.width

    if size < 1:
        logger.warning(f"Grid size {size} is invalid, using 1")
        size = 1
    if not height_scale > 0:
        logger.warning(f"Height scale {height_scale} is invalid, using 1.0")
        height_scale = 1.0
    if kernel_size < 1:
        logger.warning(f"Kernel size {kernel_size} is invalid, using 1")
        kernel_size = 1
    if iterations < 0:
        logger.warning(f"Smoothing iterations {iterations} is invalid, using 0")
        iterations = 0
    if not river_width > 0:
        logger.warning(f"River width {river_width} is invalid, using 1.0")
        river_width = 1.0

    if (size, height_scale, kernel_size, iterations, river_width) == (
        config.size,
        config.height_scale,
        config.smoothing.kernel_size,
        config.smoothing.iterations,
        config.river.width,
    ):
        return config

    return config.model_copy(
        update={
            "size": size,
            "height_scale": height_scale,
            "smoothing": config.smoothing.model_copy(
                update={"kernel_size": kernel_size, "iterations": iterations}
            ),
            "river": config.river.model_copy(update={"width": river_width}),
        }
    )


def load_config(config_path: Path) -> GenerationConfig:
    """Load configuration from a TOML file.

    Values are read from the ``[generation]`` table; a file without one is
    treated as the table itself.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed GenerationConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values have the wrong types.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return GenerationConfig.model_validate(data.get("generation", data))
