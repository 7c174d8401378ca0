# fractview

Pure-Python building blocks for a fractal explorer. The package needs no
libraries beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `fractview.viewport`

`Viewport(width, height, x_min=-2.0, x_max=2.0, y_min=-2.0, y_max=2.0, max_iter=100)`
maps window pixels to points of the complex plane. A width or height that is
not positive raises `ValueError`.

- `pixel_to_real(x)` and `pixel_to_imag(y)` give the coordinates under a
  pixel column or row.
- `zoom_at(scroll, x, y)` centres the view on the point under pixel (x, y).
  With `Scroll.UP` (button 4) the span shrinks by a factor of 1.48 and
  `max_iter` rises by 8; with `Scroll.DOWN` (button 5) the span grows by a
  factor of 1.5 and `max_iter` falls by 8. Any other button changes nothing.

### `fractview.image`

`Image(width, height)` is a 32 bits-per-pixel buffer stored as
little-endian 0xAARRGGBB words in a `bytearray` (`data`, with `size_line`
bytes per row).

- `put_pixel(x, y, color)` stores the low 32 bits of `color`;
  `get_pixel(x, y)` reads them back. Coordinates outside the image raise
  `IndexError`.
- `clear()` sets every pixel to zero.
- `rows()` yields the raw bytes of each row, top to bottom.
- `to_rgb_bytes()` returns packed R, G, B bytes with alpha dropped.

### `fractview.colors`

- `Palette().color(iterations, max_iter)` maps an iteration count to a
  0xAARRGGBB colour. A point that reached `max_iter` gets 0xFF508C7D and
  resets the alpha to 255; every other point lowers the alpha by 5 and takes
  red `iterations² × 0.8`, green `iterations² × 0.5`, blue `iterations`.
- `channel_shifts(red_mask, green_mask, blue_mask)` returns the shift and
  width of each mask as a six-value tuple.
- `good_color(color, depth, shifts)` converts a 0x00RRGGBB colour to a pixel
  value for a visual of `depth` bits; at 24 bits or more it is unchanged.

### `fractview.colornames`

`lookup_color(name)` returns the 0xRRGGBB value of a colour name, ignoring
case. `"none"` gives -1; an unknown name raises `KeyError`.

### `fractview.xpm`

- `read_xpm_file(path)` reads an XPM file into an `Image`.
- `xpm_to_image(lines)` builds an `Image` from the header line, the colour
  lines and the pixel rows. Pixels of colour `None` are stored as
  0xFF000000. Bad or short data raises `XpmError`, a `ValueError`.
- Helpers: `split_words(text)` splits on spaces and tabs,
  `strip_comments(text)` blanks C comments outside double quotes,
  `quoted_lines(text)` yields every double-quoted string, and
  `parse_color(name, extra=None)` reads `#RRGGBB` or a colour name
  (unknown names give 0).

## What the package does not do

It does not compute the Mandelbrot or Julia sets, open a window, handle
keyboard or mouse events, or provide a command to run. It supplies the
coordinate mapping, zooming, colouring, pixel buffer and XPM loading that
such a program would be built on.