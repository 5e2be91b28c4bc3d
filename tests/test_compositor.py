import math

import pytest

from compositor import TrailCompositor, half_life_frames
from configuration import SimulationConfig
from render_commands import FillCommand
from theme import resolve_theme


@pytest.mark.parametrize("alpha, expected", [(5, 35), (6, 29)])
def test_half_life_of_default_fades(alpha, expected):
    assert abs(half_life_frames(alpha) - expected) <= 1


def test_half_life_extremes():
    assert half_life_frames(0) == math.inf
    assert half_life_frames(255) == 0.0


def test_half_life_rejects_out_of_range():
    with pytest.raises(ValueError):
        half_life_frames(300)


def test_fade_uses_theme_color_and_alpha():
    config = SimulationConfig()
    compositor = TrailCompositor()
    assert compositor.fade(resolve_theme(True, config)) == FillCommand((26, 26, 26, 6))
    assert compositor.fade(resolve_theme(False, config)) == FillCommand((255, 255, 255, 5))


def test_solid_repaint_is_opaque():
    theme = resolve_theme(True, SimulationConfig())
    assert TrailCompositor().solid_repaint(theme) == FillCommand((26, 26, 26, 255))
