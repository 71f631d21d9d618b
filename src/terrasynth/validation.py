"""Post-generation validation."""

import logging

import numpy as np

from .generator import GenerationResult

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


def validate_terrain(generated: GenerationResult) -> ValidationResult:
    """Validate a generation result against its invariants.

    Args:
        generated: Output of generate_terrain.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()
    heights = generated.heights
    size = generated.config.size

    # Check 1: Square grid of the configured size
    if heights.shape != (size, size):
        result.add_error(f"Grid shape {heights.shape} does not match size {size}")

    # Check 2: Finite values
    non_finite = int(np.sum(~np.isfinite(heights)))
    if non_finite > 0:
        result.add_error(f"Grid has {non_finite} non-finite cells")

    # Check 3: No negative heights
    negative = int(np.sum(heights < 0))
    if negative > 0:
        result.add_error(f"Grid has {negative} negative cells")

    # Check 4: River path within the grid
    outside = sum(
        1
        for x, y in generated.river_path
        if not (0 <= x <= size and 0 <= y <= size)
    )
    if outside > 0:
        result.add_warning(f"{outside} river points lie outside the grid")

    # Check 5: Some relief
    if heights.size > 1 and float(np.ptp(heights)) == 0.0:
        result.add_warning("Grid is completely flat")

    if result.passed:
        logger.info("Terrain validation passed")
    else:
        logger.warning(f"Terrain validation failed with {len(result.errors)} errors")
        for error in result.errors:
            logger.error(f"  - {error}")

    for warning in result.warnings:
        logger.warning(f"  - {warning}")

    return result
