# theme.py
"""
Theme source for the trail effect.

The core never inspects the host to find out whether a dark or light look is
active. It asks an injected `ThemeProvider` once per frame and turns the
answer into a `Theme` (background color, fade alpha, watermark color).
"""
import logging
from dataclasses import dataclass
from typing import Protocol, Tuple

from configuration import SimulationConfig
from constants import (
    DARK_BACKGROUND_COLOR, DARK_WATERMARK_GRAY,
    LIGHT_BACKGROUND_COLOR, LIGHT_WATERMARK_GRAY,
)


@dataclass(frozen=True)
class Theme:
    """Colors applied by the trail compositor and the watermark."""
    is_dark: bool
    background: Tuple[int, int, int]
    fade_alpha: int
    watermark_color: Tuple[int, int, int]


class ThemeProvider(Protocol):
    """Anything that can report whether the dark theme is active."""

    def is_dark(self) -> bool:
        ...


class StaticThemeProvider:
    """A provider with a fixed answer."""

    def __init__(self, dark: bool = False):
        self._dark = dark

    def is_dark(self) -> bool:
        return self._dark


class ToggleThemeProvider:
    """A provider the host can flip, e.g. from a key binding."""

    def __init__(self, dark: bool = False):
        self._dark = dark

    def is_dark(self) -> bool:
        return self._dark

    def toggle(self) -> bool:
        self._dark = not self._dark
        logging.info(f"Theme switched to {'dark' if self._dark else 'light'}.")
        return self._dark


def resolve_theme(is_dark: bool, config: SimulationConfig) -> Theme:
    """Maps the boolean theme signal to the colors and fade alpha to draw with."""
    if is_dark:
        gray = DARK_WATERMARK_GRAY
        return Theme(True, DARK_BACKGROUND_COLOR, config.fade_alpha_dark, (gray, gray, gray))
    gray = LIGHT_WATERMARK_GRAY
    return Theme(False, LIGHT_BACKGROUND_COLOR, config.fade_alpha_light, (gray, gray, gray))
