# compositor.py
"""
Trail persistence by translucent overwrite.

Each frame the whole canvas is painted with the theme background at a low
alpha before new segments are drawn. Repeating this makes older content decay
geometrically, which reads as fading trails. A solid (opaque) repaint clears
the canvas to the theme color when the theme changes or the canvas is reset.
"""
import math

from render_commands import FillCommand
from theme import Theme


def half_life_frames(alpha: int) -> float:
    """
    Number of frames after which faded content keeps half its intensity.

    Each fade multiplies prior content by (1 - alpha/255), so the half-life
    is ln(2) / -ln(1 - alpha/255).
    """
    if not 0 <= alpha <= 255:
        raise ValueError(f"alpha must be within [0, 255], got {alpha}.")
    if alpha == 0:
        return math.inf
    if alpha == 255:
        return 0.0
    return math.log(2) / -math.log(1 - alpha / 255)


class TrailCompositor:
    """Builds the fill commands that fade or reset the canvas."""

    def fade(self, theme: Theme) -> FillCommand:
        r, g, b = theme.background
        return FillCommand((r, g, b, theme.fade_alpha))

    def solid_repaint(self, theme: Theme) -> FillCommand:
        r, g, b = theme.background
        return FillCommand((r, g, b, 255))
