"""Tests for generation configuration."""

import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

from terrasynth.config import (
    CarveMode,
    GenerationConfig,
    RiverConfig,
    SmoothingConfig,
    load_config,
    sanitize_config,
)


class TestDefaults:
    """Default values."""

    def test_generation_defaults(self) -> None:
        config = GenerationConfig()
        assert config.size == 512
        assert config.height_scale == 50.0
        assert config.use_random_seed is True
        assert config.fixed_seed == 12345
        assert config.noise_seed == 0
        assert config.debug_output_dir is None

    def test_smoothing_defaults(self) -> None:
        config = SmoothingConfig()
        assert config.kernel_size == 5
        assert config.iterations == 2

    def test_river_defaults(self) -> None:
        config = RiverConfig()
        assert config.width == 10.0
        assert config.depth == 5.0
        assert config.curve_frequency == 0.01
        assert config.bank_noise_scale == 0.05
        assert config.bank_noise_amplitude == 3.0
        assert config.carve_mode == CarveMode.CUMULATIVE


class TestSanitize:
    """Tests for sanitize_config."""

    def test_valid_config_returned_as_is(self) -> None:
        config = GenerationConfig(size=64)
        assert sanitize_config(config) is config

    def test_values_clamped(self) -> None:
        config = GenerationConfig(
            size=-5,
            smoothing=SmoothingConfig(kernel_size=0, iterations=-3),
            river=RiverConfig(width=0.0, depth=2.0),
        )
        clean = sanitize_config(config)
        assert clean.size == 1
        assert clean.smoothing.kernel_size == 1
        assert clean.smoothing.iterations == 0
        assert clean.river.width == 1.0
        assert clean.river.depth == 2.0

    def test_input_not_mutated(self) -> None:
        config = GenerationConfig(size=0)
        sanitize_config(config)
        assert config.size == 0

    def test_clamp_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING"):
            sanitize_config(GenerationConfig(size=0))
        assert "Grid size 0 is invalid" in caplog.text

    @pytest.mark.parametrize("height_scale", [0.0, -50.0, float("nan")])
    def test_non_positive_height_scale_clamped(
        self, height_scale: float, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("WARNING"):
            clean = sanitize_config(GenerationConfig(height_scale=height_scale))
        assert clean.height_scale == 1.0
        assert "Height scale" in caplog.text

    def test_positive_height_scale_kept(self) -> None:
        config = GenerationConfig(height_scale=0.25)
        assert sanitize_config(config).height_scale == 0.25


class TestLoadConfig:
    """Tests for TOML loading."""

    def test_load_generation_table(self, tmp_path: Path) -> None:
        path = tmp_path / "terrain.toml"
        path.write_text(
            "[generation]\n"
            "size = 128\n"
            "use_random_seed = false\n"
            "fixed_seed = 7\n"
            "\n"
            "[generation.smoothing]\n"
            "iterations = 4\n"
            "\n"
            "[generation.river]\n"
            "width = 6.5\n"
            'carve_mode = "deepest"\n'
        )
        config = load_config(path)
        assert config.size == 128
        assert config.use_random_seed is False
        assert config.fixed_seed == 7
        assert config.smoothing.iterations == 4
        assert config.smoothing.kernel_size == 5
        assert config.river.width == 6.5
        assert config.river.carve_mode == CarveMode.DEEPEST

    def test_load_bare_table(self, tmp_path: Path) -> None:
        path = tmp_path / "terrain.toml"
        path.write_text("size = 32\nheight_scale = 10.0\n")
        config = load_config(path)
        assert config.size == 32
        assert config.height_scale == 10.0

    def test_bundled_default_matches_models(self) -> None:
        path = Path(__file__).parent.parent / "configs" / "default.toml"
        assert load_config(path) == GenerationConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_malformed_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[generation\nsize = ")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)

    def test_wrong_type(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('[generation]\nsize = "large"\n')
        with pytest.raises(ValidationError):
            load_config(path)
