# motion.py
"""
Per-sub-step motion of the walkers.

Two pieces live here:
- `StepGenerator` proposes a unit direction per walker, optionally blended
  with the outward radial direction while the outward boost is active.
- `resolve_wrap` applies toroidal wrapping to the proposed positions and
  reports which walkers crossed an edge, so the caller can suppress the
  cross-canvas segment for them.
"""
import logging
from typing import Tuple

import numpy as np
from numba import jit

# --- Data Contracts ---
#
# class StepGenerator:
#   - __init__(self, rng: np.random.Generator, boost_strength: float):
#     - rng: source of uniform randomness. Only `uniform(low, high, size)`
#       is used.
#     - boost_strength: outward bias weight in [0, 1].
#
#   - directions(self, positions, center, boosted) -> np.ndarray:
#     - Inputs: positions (N, 2) float64, center (cx, cy), boosted flag.
#     - Outputs: (N, 2) float64 array of unit vectors.
#     - Invariants: every row has length 1 within floating point error,
#       biased or not. No state is kept between calls.
#
# resolve_wrap(proposed, width, height) -> Tuple[np.ndarray, np.ndarray]:
#   - Inputs: proposed (N, 2) positions, canvas width and height > 0.
#   - Outputs: (wrapped positions (N, 2), wrapped mask (N,) bool).
#   - Invariants: 0 <= x < width and 0 <= y < height for every output row.
#     A row is flagged when either axis left the canvas. Unflagged rows are
#     returned unchanged.


class StepGenerator:
    """
    Produces random unit step directions, with a time-limited outward bias.
    """
    def __init__(self, rng: np.random.Generator, boost_strength: float):
        self.rng = rng
        self.boost_strength = float(boost_strength)

    def random_directions(self, count: int) -> np.ndarray:
        """Draws `count` headings uniformly from [0, 2*pi) and returns them as unit vectors."""
        angles = np.asarray(self.rng.uniform(0.0, 2.0 * np.pi, size=count), dtype=np.float64)
        return np.column_stack((np.cos(angles), np.sin(angles)))

    def directions(self, positions: np.ndarray, center: Tuple[float, float], boosted: bool) -> np.ndarray:
        """
        Proposes one step direction for every walker.

        Args:
            positions (np.ndarray): Current walker positions, shape (N, 2).
            center (Tuple[float, float]): Canvas center the bias points away from.
            boosted (bool): Whether the outward boost is active this frame.

        Returns:
            np.ndarray: Unit direction vectors, shape (N, 2).
        """
        directions = self.random_directions(positions.shape[0])
        if boosted and self.boost_strength > 0.0:
            directions = apply_outward_bias(directions, positions, center, self.boost_strength)
        return directions


def apply_outward_bias(
    directions: np.ndarray,
    positions: np.ndarray,
    center: Tuple[float, float],
    strength: float
) -> np.ndarray:
    """
    Blends each direction with the radial unit vector pointing away from center.

    The blend is `a * v + (1 - a) * u` with `a = 1 - strength`, followed by a
    renormalization. A walker sitting exactly on the center uses a radius of 1,
    which leaves its radial vector at zero. If a blend cancels out completely
    the unbiased direction is kept so the result is still a unit vector.
    """
    offsets = positions - np.asarray(center, dtype=np.float64)
    radius = np.hypot(offsets[:, 0], offsets[:, 1])
    radius[radius == 0.0] = 1.0
    radial = offsets / radius[:, np.newaxis]

    keep = 1.0 - strength
    blended = keep * directions + (1.0 - keep) * radial

    magnitude = np.hypot(blended[:, 0], blended[:, 1])
    cancelled = magnitude == 0.0
    magnitude[cancelled] = 1.0
    blended /= magnitude[:, np.newaxis]

    if np.any(cancelled):
        blended[cancelled] = directions[cancelled]
        logging.debug(f"Outward bias cancelled the step of {int(cancelled.sum())} walker(s); kept the random heading.")
    return blended


@jit(nopython=True)
def _wrap_axis_numba(value, size):
    """Folds one coordinate into [0, size)."""
    value = value - size * np.floor(value / size)
    # Rounding can land exactly on the upper bound (or just under 0)
    if value >= size or value < 0.0:
        value = 0.0
    return value


@jit(nopython=True)
def _wrap_positions_numba(proposed, width, height):
    """
    Numba-jitted toroidal wrap of proposed positions.

    Each axis is checked independently. A walker is flagged as wrapped when
    either of its coordinates was outside the canvas.
    """
    count = proposed.shape[0]
    result = proposed.copy()
    wrapped = np.zeros(count, dtype=np.bool_)
    for i in range(count):
        x = proposed[i, 0]
        y = proposed[i, 1]
        if x < 0.0 or x >= width:
            result[i, 0] = _wrap_axis_numba(x, width)
            wrapped[i] = True
        if y < 0.0 or y >= height:
            result[i, 1] = _wrap_axis_numba(y, height)
            wrapped[i] = True
    return result, wrapped


def resolve_wrap(proposed: np.ndarray, width: float, height: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Wraps proposed positions onto the canvas torus.

    Returns:
        Tuple[np.ndarray, np.ndarray]: The wrapped positions and a boolean
        mask of walkers whose sub-step crossed an edge.
    """
    proposed = np.ascontiguousarray(proposed, dtype=np.float64)
    return _wrap_positions_numba(proposed, float(width), float(height))
