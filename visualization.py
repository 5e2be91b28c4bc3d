# visualization.py
"""
Pygame host for the trail effect.

`CommandRenderer` executes the render commands of a frame on a pygame
surface. `Visualizer` owns the window, turns pygame events into simulation
notifications (quit, pause, theme toggle, resize) and paces frames.
"""
import logging
from typing import Dict, Iterable, Optional, Tuple

import pygame

from constants import DEFAULT_WINDOW_SIZE, WINDOW_TITLE
from render_commands import FillCommand, LineCommand, RenderCommand, TextCommand
from theme import ToggleThemeProvider

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from simulation import Simulation


# --- Data Contracts ---
#
# class CommandRenderer:
#   - __init__(self, surface: pygame.Surface):
#     - surface: the persistent canvas. Content is never cleared between
#       frames except by the commands themselves.
#
#   - execute(self, commands: Iterable[RenderCommand]) -> None:
#     - Side Effects: Draws the commands onto the surface in order.
#       FillCommand alpha 255 replaces every pixel; lower alphas blend a
#       full-canvas overlay. Lines blend with their own alpha and get round
#       caps. Text is drawn with its baseline at the given position.
#
# class Visualizer:
#   - __init__(self, vis_params: Optional[dict] = None):
#     - Side Effects: Initializes pygame and opens the window.
#
#   - handle_events(self, simulation: "Simulation") -> bool:
#     - Outputs: False once the user has asked to quit.
#
#   - draw(self, simulation: "Simulation") -> None:
#     - Side Effects: Runs one simulation tick and presents it.


class CommandRenderer:
    """
    Draws simulation render commands onto a pygame surface.
    """
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._overlays: Dict[Tuple[int, int, int, int], pygame.Surface] = {}
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._stroke_layer = self._new_layer()
        self._has_strokes = False

    def _new_layer(self) -> pygame.Surface:
        return pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)

    def set_surface(self, surface: pygame.Surface) -> None:
        """Switches to a new canvas, e.g. after a resize. Cached overlays are dropped."""
        self.surface = surface
        self._overlays.clear()
        self._stroke_layer = self._new_layer()
        self._has_strokes = False

    def execute(self, commands: Iterable[RenderCommand]) -> None:
        for command in commands:
            if isinstance(command, LineCommand):
                self._stroke(command)
                continue
            # Strokes queued so far must land before anything drawn on top
            self._flush_strokes()
            if isinstance(command, FillCommand):
                self._fill(command)
            elif isinstance(command, TextCommand):
                self._text(command)
            else:
                raise TypeError(f"Unsupported render command: {command!r}")
        self._flush_strokes()

    def _fill(self, command: FillCommand) -> None:
        r, g, b, a = command.color
        if a >= 255:
            self.surface.fill((r, g, b))
            return
        if a <= 0:
            return
        # Motion-blur style fade: blit a cached translucent overlay
        overlay = self._overlays.get(command.color)
        if overlay is None:
            overlay = self._new_layer()
            overlay.fill((r, g, b, a))
            self._overlays[command.color] = overlay
        self.surface.blit(overlay, (0, 0))

    def _stroke(self, command: LineCommand) -> None:
        width = max(1, int(round(command.width)))
        pygame.draw.line(self._stroke_layer, command.color, command.start, command.end, width)
        if command.cap == "round" and width > 1:
            radius = width / 2
            pygame.draw.circle(self._stroke_layer, command.color, command.start, radius)
            pygame.draw.circle(self._stroke_layer, command.color, command.end, radius)
        self._has_strokes = True

    def _flush_strokes(self) -> None:
        if not self._has_strokes:
            return
        self.surface.blit(self._stroke_layer, (0, 0))
        self._stroke_layer.fill((0, 0, 0, 0))
        self._has_strokes = False

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(None, size)
            self._fonts[size] = font
        return font

    def _text(self, command: TextCommand) -> None:
        font = self._font(command.size)
        surf = font.render(command.text, True, command.color)
        x, y = command.position
        self.surface.blit(surf, (int(x), int(y) - font.get_ascent()))


class Visualizer:
    """
    Opens the window, handles input and presents simulation frames.
    """
    def __init__(self, vis_params: Optional[dict] = None):
        vis_params = vis_params if vis_params is not None else {}
        pygame.init()
        pygame.font.init()

        if vis_params.get('fullscreen', False):
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        else:
            width = vis_params.get('window_width', DEFAULT_WINDOW_SIZE[0])
            height = vis_params.get('window_height', DEFAULT_WINDOW_SIZE[1])
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        # The canvas keeps trails between frames; the screen only shows it
        self.canvas = pygame.Surface((width, height))
        self.renderer = CommandRenderer(self.canvas)
        self.theme_provider = ToggleThemeProvider(dark=vis_params.get('start_dark', True))

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    @property
    def width(self) -> int:
        return self.canvas.get_width()

    @property
    def height(self) -> int:
        return self.canvas.get_height()

    def _resize(self, width: int, height: int, simulation: "Simulation") -> None:
        self.screen = pygame.display.get_surface()
        self.canvas = pygame.Surface((width, height))
        self.renderer.set_surface(self.canvas)
        simulation.resize(width, height)

    def handle_events(self, simulation: "Simulation") -> bool:
        """
        Processes pending pygame events.

        Returns:
            bool: False if the simulation should exit, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    logging.info("ESC key pressed. Shutting down visualizer.")
                    return False
                if event.key == pygame.K_SPACE:
                    simulation.toggle_pause()
                elif event.key == pygame.K_t:
                    self.theme_provider.toggle()
                    simulation.notify_theme_changed()

            if event.type == pygame.VIDEORESIZE:
                if (event.w, event.h) != (self.width, self.height):
                    self._resize(event.w, event.h, simulation)
        return True

    def draw(self, simulation: "Simulation") -> None:
        """Runs one tick, draws its commands and presents the canvas."""
        self.renderer.execute(simulation.tick())
        self.screen.blit(self.canvas, (0, 0))
        pygame.display.flip()

    def wait_for_next_frame(self, frame_rate: int) -> float:
        """Caps the frame rate. Returns the milliseconds since the previous frame."""
        return self.clock.tick(frame_rate)

    def close(self):
        """Shuts down Pygame."""
        pygame.font.quit()
        pygame.quit()
        logging.info("Pygame shut down.")
