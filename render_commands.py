# render_commands.py
"""
Render commands emitted by the simulation each frame.

The simulation core only needs three drawing operations from its host: fill
the whole surface with an RGBA color, draw a line segment, and draw text.
Each tick returns an ordered list of these commands for the host to execute.
"""
from dataclasses import dataclass
from typing import Tuple, Union

RGBA = Tuple[int, int, int, int]
Point = Tuple[float, float]


@dataclass(frozen=True)
class FillCommand:
    """Fill the entire surface. Alpha 255 is a solid repaint, lower alphas fade."""
    color: RGBA


@dataclass(frozen=True)
class LineCommand:
    start: Point
    end: Point
    color: RGBA
    width: float
    cap: str = "round"


@dataclass(frozen=True)
class TextCommand:
    text: str
    position: Point
    color: Tuple[int, int, int]
    size: int


RenderCommand = Union[FillCommand, LineCommand, TextCommand]
