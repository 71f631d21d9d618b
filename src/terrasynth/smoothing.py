"""Iterated box-blur smoothing of height grids."""

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage


def kernel_window(kernel_size: int) -> int:
    """Side of the sampled window for a kernel size.

    The window spans ``kernel_size // 2`` cells on each side of the center,
    so even sizes round up to the next odd window.
    """
    return 2 * (max(kernel_size, 0) // 2) + 1


def smooth_terrain(
    heights: NDArray[np.float32],
    kernel_size: int = 5,
    iterations: int = 2,
) -> NDArray[np.float32]:
    """Apply repeated box blur with edge replication.

    Each output cell is the mean of the window around it; window cells
    beyond the grid take the value of the nearest edge cell. Passes run in
    sequence, reading one buffer and writing the other.

    Args:
        heights: 2D height array. Not modified.
        kernel_size: Box kernel side in cells. Values <= 1 disable blurring.
        iterations: Number of passes. Values <= 0 disable blurring.

    Returns:
        New smoothed array with the same shape and dtype as ``heights``.
    """
    window = kernel_window(kernel_size)
    source = heights.copy()
    if window <= 1 or iterations <= 0:
        return source

    target = np.empty_like(source)
    for _ in range(iterations):
        ndimage.uniform_filter(source, size=window, output=target, mode="nearest")
        # Swap buffers
        source, target = target, source

    return source
