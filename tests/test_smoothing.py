"""Tests for box-blur smoothing."""

import numpy as np
import pytest

from terrasynth.smoothing import kernel_window, smooth_terrain


@pytest.fixture
def noisy_grid() -> np.ndarray:
    return np.random.default_rng(0).random((32, 32)).astype(np.float32)


class TestKernelWindow:
    """Tests for the sampled window size."""

    @pytest.mark.parametrize(
        "kernel_size, window", [(0, 1), (1, 1), (2, 3), (3, 3), (4, 5), (5, 5)]
    )
    def test_window(self, kernel_size: int, window: int) -> None:
        assert kernel_window(kernel_size) == window


class TestSmoothTerrain:
    """Tests for smooth_terrain."""

    def test_zero_iterations_unchanged(self, noisy_grid: np.ndarray) -> None:
        result = smooth_terrain(noisy_grid, kernel_size=5, iterations=0)
        np.testing.assert_array_equal(result, noisy_grid)

    @pytest.mark.parametrize("iterations", [1, 3])
    def test_unit_kernel_unchanged(self, noisy_grid: np.ndarray, iterations: int) -> None:
        result = smooth_terrain(noisy_grid, kernel_size=1, iterations=iterations)
        np.testing.assert_array_equal(result, noisy_grid)

    def test_input_not_modified(self, noisy_grid: np.ndarray) -> None:
        original = noisy_grid.copy()
        result = smooth_terrain(noisy_grid, kernel_size=3, iterations=2)
        np.testing.assert_array_equal(noisy_grid, original)
        assert result is not noisy_grid

    def test_shape_and_dtype_preserved(self, noisy_grid: np.ndarray) -> None:
        result = smooth_terrain(noisy_grid, kernel_size=5, iterations=2)
        assert result.shape == noisy_grid.shape
        assert result.dtype == noisy_grid.dtype

    def test_constant_grid_fixed_point(self) -> None:
        """Edge replication keeps a constant grid constant."""
        grid = np.full((10, 10), 0.4, dtype=np.float32)
        result = smooth_terrain(grid, kernel_size=5, iterations=3)
        np.testing.assert_allclose(result, 0.4, rtol=1e-6)

    def test_interior_cell_is_window_mean(self) -> None:
        """One pass averages the 3x3 neighborhood."""
        grid = np.zeros((7, 7), dtype=np.float32)
        grid[3, 3] = 9.0
        result = smooth_terrain(grid, kernel_size=3, iterations=1)
        np.testing.assert_allclose(result[2:5, 2:5], 1.0, rtol=1e-6)
        assert result[0, 0] == 0.0

    def test_edges_replicated(self) -> None:
        """Corner windows reuse edge cells instead of padding with zeros."""
        grid = np.zeros((5, 5), dtype=np.float32)
        grid[0, 0] = 9.0
        result = smooth_terrain(grid, kernel_size=3, iterations=1)
        # The corner cell is sampled 4 times in its own clamped window
        assert result[0, 0] == pytest.approx(4.0)

    def test_even_kernel_uses_odd_window(self) -> None:
        """Kernel size 2 blurs like kernel size 3."""
        grid = np.random.default_rng(1).random((12, 12)).astype(np.float32)
        np.testing.assert_array_equal(
            smooth_terrain(grid, kernel_size=2, iterations=2),
            smooth_terrain(grid, kernel_size=3, iterations=2),
        )

    def test_passes_are_sequential(self) -> None:
        """Two passes equal one pass applied to the output of one pass."""
        grid = np.random.default_rng(2).random((12, 12)).astype(np.float32)
        once = smooth_terrain(grid, kernel_size=3, iterations=1)
        np.testing.assert_array_equal(
            smooth_terrain(grid, kernel_size=3, iterations=2),
            smooth_terrain(once, kernel_size=3, iterations=1),
        )

    def test_variance_non_increasing(self, noisy_grid: np.ndarray) -> None:
        variances = [
            float(smooth_terrain(noisy_grid, kernel_size=5, iterations=n).var())
            for n in range(5)
        ]
        assert all(b <= a for a, b in zip(variances, variances[1:]))
