# walker.py
"""
Manages the state of all walkers in the simulation.

This module defines the WalkerSet class, which owns walker positions,
previous positions and color tags in NumPy arrays, together with the shared
outward-boost frame counter. The set is rebuilt from scratch at the canvas
center whenever the canvas is (re)initialized or resized.
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from configuration import SimulationConfig
from constants import (
    HUE_STEP_DEGREES, NARROW_VIEWPORT_WALKER_SCALE, NARROW_VIEWPORT_WIDTH,
    PATH_LIGHTNESS, PATH_SATURATION,
)
from motion import StepGenerator, resolve_wrap
from render_commands import LineCommand
from utils import hsla_to_rgba

# --- Data Contracts ---
#
# class WalkerSet:
#   - __init__(self, config: SimulationConfig):
#     - Side Effects: Creates empty state arrays. Call rebuild() before
#       advance().
#     - Invariants:
#       - self.positions and self.previous_positions are (N, 2) float64.
#       - self.colors[i] == color_for(i, config.line_opacity) for all i.
#       - self.boost_frames_remaining never increases except on rebuild().
#
#   - rebuild(self, viewport_width: float, viewport_height: float) -> None:
#     - Side Effects: Discards all walkers and recreates them at the canvas
#       center. Resets the boost counter.
#     - Raises: ValueError for non-positive dimensions.
#
#   - advance(self, width, height, is_boosted, step_length, step_generator)
#       -> List[LineCommand]:
#     - Side Effects: Moves every walker sub_steps_per_frame times, then
#       decrements the boost counter by at most 1.
#     - Outputs: One segment per unwrapped sub-step, none for wrapped ones.
#     - Invariants: 0 <= x < width, 0 <= y < height afterwards.


@dataclass(frozen=True)
class Walker:
    """A read-only snapshot of one walker."""
    position: Tuple[float, float]
    previous_position: Tuple[float, float]
    color: Tuple[int, int, int, int]


def color_for(index: int, line_opacity: float) -> Tuple[int, int, int, int]:
    """Color tag for the walker created at `index`. Pure function of the index."""
    hue = (index * HUE_STEP_DEGREES) % 360
    return hsla_to_rgba(hue, PATH_SATURATION, PATH_LIGHTNESS, line_opacity)


def walker_count_for(config: SimulationConfig, viewport_width: float) -> int:
    """Number of walkers for a viewport; narrow viewports get fewer."""
    if viewport_width < NARROW_VIEWPORT_WIDTH:
        return max(1, int(config.walker_count * NARROW_VIEWPORT_WALKER_SCALE))
    return config.walker_count


class WalkerSet:
    """
    A container for all walkers, managing their state via NumPy arrays.
    """
    def __init__(self, config: SimulationConfig):
        self.config = config
        self.positions = np.zeros((0, 2), dtype=np.float64)
        self.previous_positions = np.zeros((0, 2), dtype=np.float64)
        self.colors: List[Tuple[int, int, int, int]] = []
        self.boost_frames_remaining = 0

    def __len__(self) -> int:
        return self.positions.shape[0]

    def __iter__(self) -> Iterator[Walker]:
        for i in range(len(self)):
            yield self.walker(i)

    def walker(self, index: int) -> Walker:
        """Returns a copy of the state of walker `index`."""
        return Walker(
            position=(float(self.positions[index, 0]), float(self.positions[index, 1])),
            previous_position=(
                float(self.previous_positions[index, 0]),
                float(self.previous_positions[index, 1])
            ),
            color=self.colors[index],
        )

    @property
    def is_boosted(self) -> bool:
        return self.boost_frames_remaining > 0

    def rebuild(self, viewport_width: float, viewport_height: float) -> None:
        """
        Discards all walkers and recreates them at the center of the canvas.

        Args:
            viewport_width (float): Canvas width in pixels.
            viewport_height (float): Canvas height in pixels.
        """
        if viewport_width <= 0 or viewport_height <= 0:
            msg = f"Canvas dimensions must be positive, got {viewport_width}x{viewport_height}."
            logging.error(msg)
            raise ValueError(msg)

        count = walker_count_for(self.config, viewport_width)
        center = (viewport_width / 2, viewport_height / 2)

        self.positions = np.tile(np.array(center, dtype=np.float64), (count, 1))
        self.previous_positions = self.positions.copy()
        self.colors = [color_for(i, self.config.line_opacity) for i in range(count)]
        self.boost_frames_remaining = self.config.outward_boost_frames

        logging.info(
            f"WalkerSet rebuilt with {count} walkers at ({center[0]:.1f}, {center[1]:.1f}) "
            f"for a {viewport_width}x{viewport_height} canvas."
        )

    def advance(
        self,
        width: float,
        height: float,
        is_boosted: bool,
        step_length: float,
        step_generator: StepGenerator
    ) -> List[LineCommand]:
        """
        Moves every walker through one frame worth of sub-steps, then
        consumes one boosted frame.

        Returns:
            List[LineCommand]: The visible segments, grouped walker by walker
            and in sub-step order within each walker.
        """
        center = (width / 2, height / 2)
        stroke_width = self.config.stroke_width
        per_walker: List[List[LineCommand]] = [[] for _ in range(len(self))]

        for _ in range(self.config.sub_steps_per_frame):
            directions = step_generator.directions(self.positions, center, is_boosted)
            proposed = self.positions + step_length * directions
            new_positions, wrapped = resolve_wrap(proposed, width, height)

            for i in np.flatnonzero(~wrapped):
                per_walker[i].append(LineCommand(
                    start=(float(self.positions[i, 0]), float(self.positions[i, 1])),
                    end=(float(new_positions[i, 0]), float(new_positions[i, 1])),
                    color=self.colors[i],
                    width=stroke_width,
                ))

            # Wrapped walkers jump without a trail, so their previous point
            # must not reach back across the canvas.
            self.previous_positions = np.where(wrapped[:, np.newaxis], new_positions, self.positions)
            self.positions = new_positions

        self.consume_boost_frame()
        # Later strokes cover earlier ones, so each walker's hops stay together
        return [segment for segments in per_walker for segment in segments]

    def consume_boost_frame(self) -> None:
        """Counts down one boosted frame. Stays at zero once reached."""
        if self.boost_frames_remaining > 0:
            self.boost_frames_remaining -= 1
            if self.boost_frames_remaining == 0:
                logging.info("Outward boost finished; walkers are now unbiased.")
