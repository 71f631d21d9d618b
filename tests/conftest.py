"""Shared test fixtures for terrain tests."""

import pytest

from terrasynth.config import GenerationConfig, RiverConfig, SmoothingConfig


@pytest.fixture
def small_config() -> GenerationConfig:
    """24x24 grid with a fixed seed."""
    return GenerationConfig(size=24, use_random_seed=False, fixed_seed=42)


@pytest.fixture
def unsmoothed_config() -> GenerationConfig:
    """16x16 fixed-seed grid with smoothing disabled."""
    return GenerationConfig(
        size=16,
        use_random_seed=False,
        fixed_seed=7,
        smoothing=SmoothingConfig(kernel_size=1, iterations=0),
    )


@pytest.fixture
def wavy_config() -> GenerationConfig:
    """32x32 fixed-seed grid with a strongly swaying river."""
    return GenerationConfig(
        size=32,
        use_random_seed=False,
        fixed_seed=3,
        river=RiverConfig(width=4.0, curve_frequency=3.0),
    )
