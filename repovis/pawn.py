"""Movable, fading, named objects drawn in the visualisation."""

from __future__ import annotations

from typing import Optional, Tuple

from repovis.slider import Bounds

Vec2 = Tuple[float, float]
Colour = Tuple[float, float, float]

SHADOW_STRENGTH = 0.5


class Pawn:
    """A named object with a position, a fade-in and a temporarily shown name."""

    def __init__(self, name: str, pos: Vec2, tagid: int) -> None:
        self.name = name
        self.pos: Vec2 = (float(pos[0]), float(pos[1]))
        self.tagid = tagid
        self.hidden = False
        self.speed = 1.0
        self.selected = False
        self.mouseover = False
        self.shadow = False
        self.namewidth = 0.0
        self.shadow_offset: Vec2 = (2.0, 2.0)
        self.elapsed = 0.0
        self.fadetime = 1.0
        self.nametime = 5.0
        self.name_interval = 0.0
        self.name_colour: Colour = (1.0, 1.0, 1.0)
        self.graphic_ratio = 1.0
        self.size = 0.0
        self.dims: Vec2 = (0.0, 0.0)

    @property
    def colour(self) -> Colour:
        return (1.0, 1.0, 1.0)

    def show_name(self) -> None:
        """Start showing the name unless it is already being shown."""
        if self.name_interval <= 0.0:
            self.name_interval = self.nametime

    def logic(self, dt: float) -> None:
        self.elapsed += dt
        if not self.hidden and self.name_interval > 0.0:
            self.name_interval -= dt

    def set_graphic(self, width: Optional[float] = None, height: Optional[float] = None) -> None:
        """Use a graphic of the given pixel size, or none, to set the aspect ratio."""
        if width and height is not None:
            self.graphic_ratio = height / float(width)
        else:
            self.graphic_ratio = 1.0
        self.dims = (self.size, self.size * self.graphic_ratio)

    def quad_bounds(self) -> Bounds:
        """Rectangle covered by the pawn, centred on its position."""
        half_x = self.size * 0.5
        half_y = half_x * self.graphic_ratio
        x, y = self.pos
        return Bounds(x - half_x, y - half_y, x + half_x, y + half_y)

    def alpha(self) -> float:
        """Opacity while fading in."""
        return min(self.elapsed / self.fadetime, 1.0)

    def name_visible(self) -> bool:
        return not ((not self.selected and self.name_interval < 0.0) or self.hidden)

    def name_alpha(self) -> Optional[float]:
        """Opacity of the name label, or None when the name is not shown."""
        if not self.name_visible():
            return None
        done = self.nametime - self.name_interval
        if done < 1.0:
            return done
        if 1.0 < done < self.nametime - 1.0:
            return 1.0
        return self.nametime - done