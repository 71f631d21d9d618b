"""Tests for post-generation validation."""

import numpy as np

from terrasynth.config import GenerationConfig
from terrasynth.generator import generate_terrain
from terrasynth.validation import ValidationResult, validate_terrain


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_starts_passed(self) -> None:
        result = ValidationResult()
        assert result.passed
        assert result.errors == []
        assert result.warnings == []

    def test_error_fails(self) -> None:
        result = ValidationResult()
        result.add_error("bad")
        assert not result.passed
        assert result.errors == ["bad"]

    def test_warning_keeps_passing(self) -> None:
        result = ValidationResult()
        result.add_warning("odd")
        assert result.passed
        assert result.warnings == ["odd"]


class TestValidateTerrain:
    """Tests for validate_terrain."""

    def test_generated_terrain_passes(self, small_config: GenerationConfig) -> None:
        for index in range(5):
            result = validate_terrain(generate_terrain(index, small_config))
            assert result.passed, result.errors

    def test_negative_cell_fails(self, small_config: GenerationConfig) -> None:
        generated = generate_terrain(0, small_config)
        generated.heights[3, 3] = -0.5
        result = validate_terrain(generated)
        assert not result.passed
        assert any("negative" in error for error in result.errors)

    def test_non_finite_cell_fails(self, small_config: GenerationConfig) -> None:
        generated = generate_terrain(3, small_config)
        generated.heights[0, 0] = np.nan
        assert not validate_terrain(generated).passed

    def test_wrong_shape_fails(self, small_config: GenerationConfig) -> None:
        generated = generate_terrain(3, small_config)
        generated.heights = generated.heights[:10]
        assert not validate_terrain(generated).passed

    def test_stray_river_point_warns(self, small_config: GenerationConfig) -> None:
        generated = generate_terrain(0, small_config)
        generated.river_path.append((-40.0, 3.0))
        result = validate_terrain(generated)
        assert result.passed
        assert any("outside" in warning for warning in result.warnings)

    def test_flat_grid_warns(self, small_config: GenerationConfig) -> None:
        generated = generate_terrain(3, small_config)
        generated.heights[...] = 0.3
        result = validate_terrain(generated)
        assert result.passed
        assert any("flat" in warning for warning in result.warnings)
