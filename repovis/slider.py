"""Timeline position slider with a fading display and hover caption."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

Colour = Tuple[float, float, float]

_GAP = 35


@dataclass
class Bounds:
    """Axis-aligned rectangle."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


class PositionSlider:
    """Slider along the bottom of the display showing playback position."""

    def __init__(
        self,
        display_width: float,
        display_height: float,
        text_width: Callable[[str], float],
        percent: float = 0.0,
    ) -> None:
        self.text_width = text_width
        self.percent = percent
        self.colour: Colour = (1.0, 1.0, 1.0)
        self.mouseover = -1.0
        self.mouseover_elapsed = 1.0
        self.fade_time = 1.0
        self.alpha = 0.0
        self.capwidth = 0.0
        self.caption = ""
        self.display_width = display_width
        self.display_height = display_height
        self.bounds = Bounds(0.0, 0.0, 0.0, 0.0)
        self.resize(display_width, display_height)

    def resize(self, display_width: float, display_height: float) -> None:
        self.display_width = display_width
        self.display_height = display_height
        x1, y1 = _GAP, display_height - _GAP * 2
        x2, y2 = display_width - _GAP, display_height - _GAP
        self.bounds = Bounds(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    def set_colour(self, colour: Colour) -> None:
        self.colour = tuple(colour)

    def show(self) -> None:
        self.mouseover_elapsed = 0.0

    def mouse_over(self, x: float, y: float) -> Optional[float]:
        """Return the position under the pointer as a fraction, or None if outside."""
        if self.bounds.contains(x, y):
            self.mouseover_elapsed = 0.0
            self.mouseover = x
            return (x - self.bounds.min_x) / self.bounds.width
        self.mouseover = -1.0
        return None

    def click(self, x: float, y: float) -> Optional[float]:
        """Move the slider to the clicked position and return it, or None if outside."""
        percent = self.mouse_over(x, y)
        if percent is not None:
            self.percent = percent
        return percent

    def set_caption(self, caption: str) -> None:
        self.caption = caption
        self.capwidth = self.text_width(caption) if caption else 0.0

    def set_percent(self, percent: float) -> None:
        self.percent = percent

    def logic(self, dt: float) -> None:
        if self.mouseover < 0.0 and self.mouseover_elapsed < self.fade_time:
            self.mouseover_elapsed += dt

        if self.mouseover_elapsed < self.fade_time and self.alpha < 1.0:
            self.alpha = min(1.0, self.alpha + dt)
        elif self.mouseover_elapsed >= self.fade_time and self.alpha > 0.0:
            self.alpha = max(0.0, self.alpha - dt)

    def slider_x(self) -> float:
        """Horizontal position of the slider marker."""
        return self.bounds.min_x + self.bounds.width * self.percent

    def caption_x(self) -> Optional[float]:
        """Left edge of the hover caption, kept on screen, or None if none is shown."""
        if not self.caption or self.mouseover < 0.0:
            return None
        centred = max(1.0, self.mouseover - self.capwidth / 2.0)
        return min(self.display_width - self.capwidth - 1.0, centred)