# simulation.py
"""
The simulation context and its per-frame tick.

This module defines the Simulation class, the single object that owns all
mutable state of the effect (walkers, boost counter, pause flag, pending
repaint). The host creates one, forwards resize and theme notifications to
it, and calls `tick()` once per animation frame to obtain the render
commands for that frame.
"""
import logging
from typing import List, Optional

import numpy as np

from compositor import TrailCompositor
from configuration import SimulationConfig
from constants import (
    STEP_MIN_LENGTH, STEP_MIN_SCALE, STEP_REFERENCE_DIMENSION,
    WATERMARK_FONT_SIZE, WATERMARK_RIGHT_OFFSET, WATERMARK_TEXT,
    WATERMARK_TOP_OFFSET,
)
from motion import StepGenerator
from render_commands import RenderCommand, TextCommand
from theme import Theme, ThemeProvider, resolve_theme
from walker import WalkerSet

# --- Data Contracts ---
#
# class Simulation:
#   - __init__(self, config: SimulationConfig, width: float, height: float,
#              theme_provider: ThemeProvider,
#              rng: Optional[np.random.Generator] = None):
#     - Side Effects: Builds the walker set for the canvas and schedules a
#       solid repaint for the first tick.
#     - Raises: ValueError for non-positive canvas dimensions.
#
#   - tick(self) -> List[RenderCommand]:
#     - Outputs, in order: [solid repaint if pending], fade fill, then
#       (unless paused) walker segments and the optional watermark.
#     - Side Effects: Moves walkers and consumes one boosted frame, unless
#       paused.
#
#   - resize(self, width: float, height: float) -> None:
#     - Side Effects: Rebuilds the walker set when the dimensions changed
#       and schedules a solid repaint.


def compute_step_length(config: SimulationConfig, width: float, height: float) -> float:
    """
    Step length in pixels for a canvas.

    With canvas scaling enabled the base length applies at a min-dimension of
    800px; smaller canvases shrink it, but never below 1.5px.
    """
    if not config.scale_step_to_canvas:
        return float(config.base_step_length)
    scale = min(width, height) / STEP_REFERENCE_DIMENSION
    return max(STEP_MIN_LENGTH, config.base_step_length * max(STEP_MIN_SCALE, scale))


class Simulation:
    """
    Owns the walker state and advances it one animation frame at a time.
    """
    def __init__(
        self,
        config: SimulationConfig,
        width: float,
        height: float,
        theme_provider: ThemeProvider,
        rng: Optional[np.random.Generator] = None
    ):
        self.config = config
        self.theme_provider = theme_provider
        # All randomness comes from one generator, seeded from the config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.step_generator = StepGenerator(self.rng, config.outward_boost_strength)
        self.compositor = TrailCompositor()
        self.walkers = WalkerSet(config)

        self.paused = False
        self.frame_count = 0
        self.width = 0.0
        self.height = 0.0
        self.step_length = 0.0
        self._last_is_dark: Optional[bool] = None
        self._repaint_pending = True

        self.reset(width, height)
        logging.info("Simulation initialized.")

    def reset(self, width: float, height: float) -> None:
        """(Re)initializes the canvas: rebuilds walkers and schedules a solid repaint."""
        self.walkers.rebuild(width, height)
        self.width = float(width)
        self.height = float(height)
        self.step_length = compute_step_length(self.config, self.width, self.height)
        self._repaint_pending = True
        logging.debug(f"Step length set to {self.step_length:.3f}px.")

    def resize(self, width: float, height: float) -> None:
        if (float(width), float(height)) == (self.width, self.height):
            logging.debug(f"Resize to unchanged canvas {width}x{height} ignored.")
            return
        logging.info(f"Canvas resized from {self.width:g}x{self.height:g} to {width}x{height}.")
        self.reset(width, height)

    def notify_theme_changed(self) -> None:
        """Schedules a solid repaint so the old base color does not linger for a frame."""
        self._repaint_pending = True

    def current_theme(self) -> Theme:
        """Reads the theme signal, scheduling a solid repaint when it flipped since the last read."""
        is_dark = bool(self.theme_provider.is_dark())
        if self._last_is_dark is not None and is_dark != self._last_is_dark:
            logging.info(f"Theme change observed ({'dark' if is_dark else 'light'}); repainting.")
            self.notify_theme_changed()
        self._last_is_dark = is_dark
        return resolve_theme(is_dark, self.config)

    def pause(self) -> None:
        self.paused = True
        logging.info("Simulation paused.")

    def resume(self) -> None:
        self.paused = False
        logging.info("Simulation resumed.")

    def toggle_pause(self) -> bool:
        if self.paused:
            self.resume()
        else:
            self.pause()
        return self.paused

    def tick(self) -> List[RenderCommand]:
        """
        Executes one animation frame.

        Returns:
            List[RenderCommand]: Commands to execute in order on the canvas.
        """
        theme = self.current_theme()
        commands: List[RenderCommand] = []

        if self._repaint_pending:
            commands.append(self.compositor.solid_repaint(theme))
            self._repaint_pending = False

        # Trails keep decaying even while paused
        commands.append(self.compositor.fade(theme))
        self.frame_count += 1

        if self.paused:
            return commands

        commands.extend(self.walkers.advance(
            self.width, self.height,
            self.walkers.is_boosted,
            self.step_length,
            self.step_generator
        ))

        if self.config.show_watermark:
            commands.append(TextCommand(
                text=WATERMARK_TEXT,
                position=(self.width - WATERMARK_RIGHT_OFFSET, WATERMARK_TOP_OFFSET),
                color=theme.watermark_color,
                size=WATERMARK_FONT_SIZE,
            ))

        return commands
