"""Multi-line text box whose size follows its content."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Tuple, Union

Colour = Tuple[float, float, float]


class TextBox:
    """A box of text lines that positions itself to stay on screen."""

    def __init__(
        self,
        text_width: Callable[[str], float],
        font_size: int,
        display_width: float,
        display_height: float,
    ) -> None:
        self.text_width = text_width
        self.font_size = font_size
        self.display_width = display_width
        self.display_height = display_height
        self.content: List[str] = []
        self.shadow = (3.0, 3.0)
        self.colour: Colour = (0.7, 0.7, 0.7)
        self.corner = (0.0, 0.0)
        self.alpha = 1.0
        self.brightness = 1.0
        self.max_width_chars = 1024
        self.rect_width = 0
        self.rect_height = 0
        self.visible = False

    def hide(self) -> None:
        self.visible = False

    def show(self) -> None:
        self.visible = True

    def clear(self) -> None:
        self.content = []
        self.rect_width = 0
        self.rect_height = 2

    def add_line(self, line: str) -> None:
        """Append a line, truncating it to max_width_chars and growing the box."""
        if self.max_width_chars > 0 and len(line) > self.max_width_chars:
            line = line[: self.max_width_chars]
        width = int(self.text_width(line) + 6)
        self.rect_width = max(self.rect_width, width)
        self.rect_height += self.font_size + 4
        self.content.append(line)

    def set_text(self, text: Union[str, Iterable[str]]) -> None:
        """Replace the content with one string or a sequence of lines."""
        self.clear()
        if isinstance(text, str):
            self.add_line(text)
        else:
            for line in text:
                self.add_line(line)

    def set_pos(self, x: float, y: float, adjust: bool = False) -> None:
        """Place the box; with adjust, put it above the point and keep it on screen."""
        if not adjust:
            self.corner = (x, y)
            return

        fontheight = self.font_size + 4
        y -= self.rect_height

        if x + self.rect_width > self.display_width:
            if x - self.rect_width - fontheight > 0:
                x -= self.rect_width
            else:
                x = self.display_width - self.rect_width

        if y < 0:
            y += self.rect_height + fontheight
        if y + self.rect_height > self.display_height:
            y -= self.rect_height

        self.corner = (x, y)

    def line_positions(self) -> Iterator[Tuple[int, int, str]]:
        """Yield (x, y, line) where each visible line is drawn."""
        if not self.visible:
            return
        x = int(self.corner[0]) + 2
        y = int(self.corner[1]) + 3
        for line in self.content:
            yield x, y, line
            y += self.font_size + 4