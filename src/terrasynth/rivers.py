"""Rivers: path planning with sinusoidal sway, and falloff carving."""

import math

import numpy as np
from numpy.typing import NDArray

from .config import CarveMode
from .noise import coherent_noise_grid, smoothstep
from .random_source import RandomSource

Point = tuple[float, float]
RiverPath = list[Point]  # (x, y) grid-space points, start to end


def plan_river_path(
    start: Point,
    end: Point,
    rng: RandomSource,
    curve_frequency: float,
    width: float,
) -> RiverPath:
    """Plan a river polyline from start to end.

    One point per unit of straight-line length plus the endpoint. Each point
    is pushed sideways by ``sin(t * pi * curve_frequency) * U * width / 2``
    with a fresh draw ``U`` per point, so the sway vanishes wherever the sine
    does.

    Args:
        start: Grid-space (x, y) start point.
        end: Grid-space (x, y) end point.
        rng: Random source of the current run.
        curve_frequency: Half-periods of sway over the whole path.
        width: River width in cells.

    Returns:
        List of (x, y) points, ``ceil(distance) + 1`` long.
    """
    sx, sy = float(start[0]), float(start[1])
    ex, ey = float(end[0]), float(end[1])
    length = math.hypot(ex - sx, ey - sy)
    steps = math.ceil(length)

    if steps == 0:
        return [(sx, sy)]

    # Unit perpendicular of the start->end direction
    px, py = -(ey - sy) / length, (ex - sx) / length

    t = np.arange(steps + 1, dtype=np.float64) / steps
    sway = np.sin(t * math.pi * curve_frequency) * rng.uniforms(steps + 1) * width * 0.5
    xs = (1.0 - t) * sx + t * ex + px * sway
    ys = (1.0 - t) * sy + t * ey + py * sway

    return list(zip(xs.tolist(), ys.tolist()))


def _point_cut(
    shape: tuple[int, int],
    point: Point,
    width: float,
    depth: float,
    height_scale: float,
    bank_noise_scale: float,
    bank_noise_amplitude: float,
    noise_seed: int,
) -> tuple[tuple[slice, slice], NDArray[np.float64], NDArray[np.bool_]] | None:
    """Compute the normalized cut one path point makes.

    Returns:
        (window slices, cut depths, in-river mask) or None when the point's
        box misses the grid.
    """
    height, width_cells = shape
    radius = math.ceil(width * 0.5)
    half_width = width * 0.5

    cx = int(round(point[0]))
    cy = int(round(point[1]))
    x0 = min(max(cx - radius, 0), width_cells - 1)
    x1 = min(max(cx + radius, 0), width_cells - 1)
    y0 = min(max(cy - radius, 0), height - 1)
    y1 = min(max(cy + radius, 0), height - 1)

    xs = np.arange(x0, x1 + 1, dtype=np.float64)
    ys = np.arange(y0, y1 + 1, dtype=np.float64)

    dx = xs[np.newaxis, :] - point[0]
    dy = ys[:, np.newaxis] - point[1]
    normalized = np.sqrt(dx * dx + dy * dy) / half_width
    inside = normalized <= 1.0
    if not inside.any():
        return None

    bank = (
        coherent_noise_grid(xs * bank_noise_scale, ys * bank_noise_scale, noise_seed)
        * bank_noise_amplitude
    )
    cut = (depth * smoothstep(1.0, 0.0, normalized) + bank) / height_scale
    np.maximum(cut, 0.0, out=cut)
    return (slice(y0, y1 + 1), slice(x0, x1 + 1)), cut, inside


def carve_river(
    heights: NDArray[np.float32],
    path: RiverPath,
    width: float,
    depth: float,
    height_scale: float,
    bank_noise_scale: float,
    bank_noise_amplitude: float,
    mode: CarveMode = CarveMode.CUMULATIVE,
    noise_seed: int = 0,
) -> NDArray[np.float32]:
    """Carve a river channel into a height grid in place.

    For every path point, cells within ``width / 2`` lose
    ``(depth * falloff + bank_noise) / height_scale``, clamped at 0. In
    CUMULATIVE mode points are carved one after another, so cells covered by
    several points are cut several times. DEEPEST mode applies each cell's
    largest single cut once.

    Args:
        heights: 2D height array, modified in place.
        path: River path in grid space.
        width: River width in cells.
        depth: Center depth in world units.
        height_scale: World units per normalized height unit.
        bank_noise_scale: Coordinate scale of bank noise.
        bank_noise_amplitude: Bank noise depth in world units.
        mode: How overlapping cuts combine.
        noise_seed: Coherent noise permutation seed.

    Returns:
        The same ``heights`` array.

    Raises:
        ValueError: If ``height_scale`` is not positive.
    """
    if not height_scale > 0:
        raise ValueError(f"height_scale must be positive, got {height_scale}")
    if heights.size == 0 or not path:
        return heights

    deepest = np.zeros(heights.shape, dtype=np.float64) if mode == CarveMode.DEEPEST else None

    for point in path:
        carved = _point_cut(
            heights.shape,
            point,
            width,
            depth,
            height_scale,
            bank_noise_scale,
            bank_noise_amplitude,
            noise_seed,
        )
        if carved is None:
            continue
        window, cut, inside = carved

        if deepest is not None:
            region = deepest[window]
            region[inside] = np.maximum(region[inside], cut[inside])
            continue

        region = heights[window]
        region[inside] = np.maximum(region[inside] - cut[inside], 0.0)

    if deepest is not None:
        np.maximum(heights - deepest, 0.0, out=heights, casting="unsafe")

    return heights
