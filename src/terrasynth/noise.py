"""Coherent noise and interpolation helpers.

Noise is a deterministic function of its coordinates; sampling never
consumes draws from a RandomSource.
"""

from functools import lru_cache

import numpy as np
from numpy.typing import ArrayLike, NDArray
from opensimplex import OpenSimplex


@lru_cache(maxsize=8)
def _simplex(seed: int) -> OpenSimplex:
    return OpenSimplex(seed=seed)


def coherent_noise_grid(
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    seed: int = 0,
) -> NDArray[np.float64]:
    """Sample 2D coherent noise on the lattice spanned by two axes.

    Args:
        xs: 1D sample x coordinates (columns).
        ys: 1D sample y coordinates (rows).
        seed: Permutation seed of the noise field.

    Returns:
        Array of shape (len(ys), len(xs)), roughly in range [0, 1].
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    if xs.size == 0 or ys.size == 0:
        return np.zeros((ys.size, xs.size), dtype=np.float64)
    return (_simplex(seed).noise2array(xs, ys) + 1.0) / 2.0


def smoothstep(edge0: float, edge1: float, t: ArrayLike) -> NDArray[np.float64]:
    """Hermite interpolation from ``edge0`` to ``edge1``.

    Unlike a threshold smoothstep, ``t`` is the interpolation parameter and
    the edges are the output values, so ``smoothstep(1, 0, t)`` eases from 1
    down to 0.

    Args:
        edge0: Output at t <= 0.
        edge1: Output at t >= 1.
        t: Interpolation parameter, clamped to [0, 1].

    Returns:
        Interpolated values.
    """
    t = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    s = t * t * (3.0 - 2.0 * t)
    return edge0 + (edge1 - edge0) * s


def lerp(a: float, b: float, t: ArrayLike) -> NDArray[np.float64]:
    """Linear interpolation with t clamped to [0, 1]."""
    t = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    return a + (b - a) * t
