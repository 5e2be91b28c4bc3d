# configuration.py
"""
Immutable simulation configuration.

`SimulationConfig` holds the tunable parameters of the effect. It is built
once from the "simulation_parameters" section of `config.json` and validated
on construction, so an invalid value stops the application before any
walker state exists.
"""
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

# --- Data Contracts ---
#
# class SimulationConfig (frozen):
#   - Fields (type, valid range):
#     - walker_count: int > 0
#     - base_step_length: float > 0
#     - sub_steps_per_frame: int >= 1
#     - stroke_width: float > 0
#     - line_opacity: float in [0, 1]
#     - fade_alpha_light: int in [0, 255]
#     - fade_alpha_dark: int in [0, 255]
#     - outward_boost_frames: int >= 0
#     - outward_boost_strength: float in [0, 1]
#     - target_frame_rate: int > 0
#     - scale_step_to_canvas: bool
#     - show_watermark: bool
#     - seed: Optional[int]
#   - Raises: ValueError on any out-of-range or mistyped field.
#
#   - from_dict(params: Dict[str, Any]) -> SimulationConfig:
#     - Missing keys take their defaults. Unknown keys raise ValueError.


def _fail(msg: str) -> None:
    logging.critical(f"Configuration error: {msg}")
    raise ValueError(f"Configuration error: {msg}")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class SimulationConfig:
    """Named parameters controlling density, speed, trail length and the outward boost."""

    walker_count: int = 200
    base_step_length: float = 2.0
    sub_steps_per_frame: int = 3
    stroke_width: float = 2.0
    line_opacity: float = 0.4
    fade_alpha_light: int = 5
    fade_alpha_dark: int = 6
    outward_boost_frames: int = 800
    outward_boost_strength: float = 0.20
    target_frame_rate: int = 90
    scale_step_to_canvas: bool = True
    show_watermark: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        if not _is_int(self.walker_count) or self.walker_count <= 0:
            _fail(f"walker_count must be a positive integer, got {self.walker_count!r}.")
        if not _is_number(self.base_step_length) or self.base_step_length <= 0:
            _fail(f"base_step_length must be a positive number, got {self.base_step_length!r}.")
        if not _is_int(self.sub_steps_per_frame) or self.sub_steps_per_frame < 1:
            _fail(f"sub_steps_per_frame must be an integer >= 1, got {self.sub_steps_per_frame!r}.")
        if not _is_number(self.stroke_width) or self.stroke_width <= 0:
            _fail(f"stroke_width must be a positive number, got {self.stroke_width!r}.")
        if not _is_number(self.line_opacity) or not 0.0 <= self.line_opacity <= 1.0:
            _fail(f"line_opacity must be within [0, 1], got {self.line_opacity!r}.")
        for name in ('fade_alpha_light', 'fade_alpha_dark'):
            value = getattr(self, name)
            if not _is_int(value) or not 0 <= value <= 255:
                _fail(f"{name} must be an integer within [0, 255], got {value!r}.")
        if not _is_int(self.outward_boost_frames) or self.outward_boost_frames < 0:
            _fail(f"outward_boost_frames must be an integer >= 0, got {self.outward_boost_frames!r}.")
        if not _is_number(self.outward_boost_strength) or not 0.0 <= self.outward_boost_strength <= 1.0:
            _fail(f"outward_boost_strength must be within [0, 1], got {self.outward_boost_strength!r}.")
        if not _is_int(self.target_frame_rate) or self.target_frame_rate <= 0:
            _fail(f"target_frame_rate must be a positive integer, got {self.target_frame_rate!r}.")
        for name in ('scale_step_to_canvas', 'show_watermark'):
            if not isinstance(getattr(self, name), bool):
                _fail(f"{name} must be a boolean, got {getattr(self, name)!r}.")
        if self.seed is not None and not _is_int(self.seed):
            _fail(f"seed must be an integer or null, got {self.seed!r}.")

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "SimulationConfig":
        """
        Builds a config from the "simulation_parameters" section.

        Args:
            params (Dict[str, Any]): Parameter names mapped to values.

        Returns:
            SimulationConfig: The validated configuration.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(params) - known)
        if unknown:
            _fail(f"unknown simulation parameter(s): {', '.join(unknown)}.")
        config = cls(**params)
        logging.debug(f"Simulation configuration: {config}")
        return config
