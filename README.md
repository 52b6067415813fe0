# repovis

State and geometry for an animated view of a repository's history. The
package holds the parts of such a view that do not depend on a graphics
library, so any renderer can draw from it. Callers supply text measurement
(a `text_width(text)` function), font sizes and display dimensions; no font
or window system is needed.

## Modules

- `repovis.key`: `FileKey`, `FileKeyEntry` and `entry_sort_key`. A legend
  of file extensions. `FileKey.inc(ext, colour)` and `FileKey.dec(ext)`
  keep a count per extension. Each time the update interval runs out,
  `FileKey.logic(dt)` rebuilds `active_keys`. It sorts by descending count
  and then by extension, keeps only as many rows as fit on the display,
  gives each row a target height and drops finished entries. Each entry
  fades in and out and slides to its row. An extension too wide for the
  key is shortened and ends in `...`. `colourize(colour_hash)` recolours
  the entries, and entries with no extension become white.
- `repovis.slider`: `PositionSlider` and `Bounds`. A timeline bar near
  the bottom of the display. `mouse_over(x, y)` and `click(x, y)` return
  the pointer's position along the bar as a fraction, or `None` when the
  pointer is outside it, and `click` also moves the slider there.
  `logic(dt)` fades the slider in after hover or `show()` and fades it out
  afterwards. `slider_x()` gives the marker position. `caption_x()` gives
  where the hover caption goes, kept on screen.
- `repovis.textbox`: `TextBox`. A multi-line box that grows to fit its
  lines. Lines longer than `max_width_chars` are truncated. `set_text`
  takes one string or a sequence of lines. `set_pos(x, y, adjust=True)`
  puts the box above the point and keeps it inside the display.
  `line_positions()` yields where each line is drawn while the box is
  visible.
- `repovis.pawn`: `Pawn` and `SHADOW_STRENGTH`. A named actor. `alpha()`
  fades it in, and `show_name()` starts a timed name label whose opacity
  `name_alpha()` reports. `quad_bounds()` returns a `Bounds` that uses the
  aspect ratio set by `set_graphic(width, height)`.
- `repovis.spline`: `SplineEdge`. A quadratic curve from one point to
  another through a control point, with colours blended along it. The more
  it bends, the more segments it gets, up to ten. `label_pos` is placed by
  `name_position`. `quads(radius)` returns one textured quad per segment.
- `repovis.logmill`: `LogMill`, `LogMillState`, `LogMillError` and
  `find_repository`. `find_repository(path)` walks up from a directory to
  the nearest `.git`, `.hg`, `.bzr` or `.svn` and returns
  `(directory, format)`, or `None`. It raises `OSError` if the path does
  not exist. `LogMill` tries the reader factories it is given in order, or
  only those of a named format, and keeps the first one whose
  `check_format()` succeeds. With a start timestamp it then skips to the
  first commit at or after that time. `run()` works in the calling thread,
  `start()` runs it in a background thread, and `get_log()` waits for the
  result and returns the log or raises `LogMillError` with the reason.

## Example

```python
from repovis.key import FileKey

def text_width(text):
    return 8.0 * len(text)

key = FileKey(0.5, text_width, 12.0, 1.0, 768)
key.inc(".py", (0.2, 0.6, 1.0))
key.inc(".py", (0.2, 0.6, 1.0))
key.inc(".md", (1.0, 0.8, 0.2))
key.logic(1.0)
print([(e.ext, e.count) for e in key.active_keys])  # [('.py', 2), ('.md', 1)]
```

## What it does not do

- It draws nothing. It computes positions, colours and opacities, and a
  renderer has to turn them into pixels.
- It contains no commit log readers. `LogMill` needs reader factories from
  the caller, each returning an object with `check_format()`,
  `is_finished()`, `next_commit()` and `buffer_commit(commit)`.
- It has no command-line program and no application loop.

## Tests

```
pip install -e .[test]
pytest
```