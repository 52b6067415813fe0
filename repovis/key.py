"""Legend of file extensions with per-extension counts, fading and sliding entries."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

Colour = Tuple[float, float, float]
TextWidth = Callable[[str], float]

_WHITE: Colour = (1.0, 1.0, 1.0)


class FileKeyEntry:
    """One row of the file key: an extension, its colour and how many files use it."""

    def __init__(
        self,
        ext: str,
        colour: Colour,
        text_width: TextWidth,
        font_size: float,
        font_scale: float = 1.0,
    ) -> None:
        self.ext = ext
        self.colour = tuple(colour)
        self.pos_y = -1.0
        self.src_y = -1.0
        self.dest_y = -1.0
        self.move_elapsed = 1.0

        self.shadow = (3.0, 3.0)
        self.width = 90.0 * font_scale
        self.height = font_size + 4.0
        self.left_margin = font_size + 4.0
        self.count = 0
        self.brightness = 1.0
        self.alpha = 0.0
        self.show = True
        self.pos = (0.0, 0.0)

        limit = self.width - 15.0 * font_scale
        display_ext = ext
        truncated = False
        while display_ext and text_width(display_ext) > limit:
            display_ext = display_ext[:-1]
            truncated = True
        if truncated:
            display_ext += "..."
        self.display_ext = display_ext

    def set_show(self, show: bool) -> None:
        self.show = show

    def set_dest_y(self, dest_y: float) -> None:
        """Start sliding towards a new vertical position."""
        if dest_y == self.dest_y:
            return
        self.dest_y = dest_y
        self.src_y = self.pos_y
        self.move_elapsed = 0.0

    def colourize(self, colour_hash: Callable[[str], Colour]) -> None:
        """Recolour from the extension; files without an extension are white."""
        self.colour = _WHITE if not self.ext else tuple(colour_hash(self.ext))

    def inc(self) -> None:
        self.count += 1

    def dec(self) -> None:
        self.count -= 1

    def is_finished(self) -> bool:
        return self.count <= 0 and self.alpha <= 0.0

    def logic(self, dt: float) -> None:
        """Advance fading and movement by dt seconds."""
        if self.count <= 0 or not self.show:
            self.alpha = max(0.0, self.alpha - dt)
        elif self.alpha < 1.0:
            self.alpha = min(1.0, self.alpha + dt)

        if self.pos_y != self.dest_y:
            if self.pos_y < 0.0:
                self.pos_y = self.dest_y
            else:
                self.move_elapsed += dt
                if self.move_elapsed >= 1.0:
                    self.pos_y = self.dest_y
                else:
                    self.pos_y = self.src_y + (self.dest_y - self.src_y) * self.move_elapsed

        self.pos = (self.alpha * self.left_margin, self.pos_y)

    def __repr__(self) -> str:
        return f"FileKeyEntry(ext={self.ext!r}, count={self.count})"


def entry_sort_key(entry: FileKeyEntry) -> Tuple[int, str]:
    """Order by descending count, then by extension."""
    return (-entry.count, entry.ext)


class FileKey:
    """Key of all current file extensions, recalculated periodically."""

    def __init__(
        self,
        update_interval: float,
        text_width: TextWidth,
        font_size: float,
        font_scale: float = 1.0,
        display_height: float = 768.0,
    ) -> None:
        self.update_interval = update_interval
        self.interval_remaining = 1.0
        self.text_width = text_width
        self.font_size = font_size
        self.font_scale = font_scale
        self.display_height = display_height
        self.show = True
        self.entries: Dict[str, FileKeyEntry] = {}
        self.active_keys: List[FileKeyEntry] = []

    def set_show(self, show: bool) -> None:
        self.show = show
        for entry in self.active_keys:
            entry.set_show(show)
        self.interval_remaining = 0.0

    def clear(self) -> None:
        for entry in self.active_keys:
            entry.count = 0
        self.interval_remaining = 0.0

    def colourize(self, colour_hash: Callable[[str], Colour]) -> None:
        for entry in self.active_keys:
            entry.colourize(colour_hash)

    def inc(self, ext: str, colour: Colour) -> FileKeyEntry:
        """Count one more file with this extension, creating its entry if needed."""
        entry = self.entries.get(ext)
        if entry is None:
            entry = FileKeyEntry(ext, colour, self.text_width, self.font_size, self.font_scale)
            self.entries[ext] = entry
        entry.inc()
        return entry

    def dec(self, ext: str) -> None:
        """Count one fewer file with this extension; unknown extensions are ignored."""
        entry = self.entries.get(ext)
        if entry is not None:
            entry.dec()

    def _max_visible_entries(self) -> int:
        return max(0, int((self.display_height - 150.0) / 20.0))

    def _recalculate(self) -> None:
        active = [e for e in self.entries.values() if not e.is_finished()]
        finished = [e for e in self.entries.values() if e.is_finished()]

        active.sort(key=entry_sort_key)
        del active[self._max_visible_entries():]
        self.active_keys = active

        offset_y = self.font_size + 6.0
        key_y = offset_y
        for entry in active:
            if entry.count > 0:
                entry.set_dest_y(key_y)
            key_y += offset_y

        for entry in finished:
            del self.entries[entry.ext]

    def logic(self, dt: float) -> None:
        """Advance by dt seconds, rebuilding the visible list when the interval expires."""
        self.interval_remaining -= dt
        if self.interval_remaining <= 0.0:
            if self.show:
                self._recalculate()
            self.interval_remaining = self.update_interval

        for entry in self.active_keys:
            entry.logic(dt)