import os

# Pygame surfaces are created off-screen in tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest

from configuration import SimulationConfig


class FixedHeadingRng:
    """Stands in for np.random.Generator, always drawing the same heading."""

    def __init__(self, heading: float = 0.0):
        self.heading = heading

    def uniform(self, low, high, size=None):
        return np.full(size, self.heading, dtype=np.float64)


@pytest.fixture
def fixed_heading():
    return FixedHeadingRng


@pytest.fixture
def unscaled_config():
    """Single walker, no boost, fixed 10px steps, one sub-step per frame."""
    return SimulationConfig(
        walker_count=1,
        base_step_length=10.0,
        sub_steps_per_frame=1,
        outward_boost_frames=0,
        scale_step_to_canvas=False,
        show_watermark=False,
    )
