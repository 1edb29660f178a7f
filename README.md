# pixedit

A small raster image editor built on pygame. Open an image, then paint on it
with a square pencil, sharpen it, resize it, show it rotated, or blank out
everything outside a rectangle you drag.

## Installation

```
pip install .
```

## Running the editor

```
pixedit [IMAGE] [--icons DIR]
```

- `IMAGE` is the image file to open. Any format pygame can load will do.
- `--icons DIR` names a directory holding the toolbar icons (`pensil.bmp`,
  `cursor.bmp`, `eraser.bmp`, `bucket.bmp`, `filter.bmp`, `group.bmp`,
  `resize.bmp`, `rotate.bmp`). Icons that are missing are skipped; without
  this option the toolbar slots are left as plain background.

If no image is given, or it cannot be loaded, a text box at the top of the
window asks for a path. Type it and press Enter. A red message says when the
file could not be loaded, and you can try again; once it loads, a green
message is shown for two seconds. Closing the window while the box is open
quits with status 1.

The window is 1920 by 1080 pixels. The toolbar holds eight icon slots
followed by nine colour swatches (red, green, blue, magenta, cyan, yellow,
white, grey, black). The image is drawn a third of the way across and a
quarter of the way down.

What the toolbar does:

- **Pencil** (first slot): afterwards, each click on the image paints a
  30 by 30 pixel square around the click in the current colour (red to begin
  with).
- **Colour swatches**: a click sets the pencil colour.
- **Filter** (fifth slot): sharpens the image with a 3x3 convolution.
- **Group** (sixth slot): afterwards, press the mouse button on one corner of
  the image and release it on the opposite corner; every pixel outside that
  rectangle is turned white.
- **Resize** (seventh slot): asks for a new height and then a new width in
  two text boxes and scales the image by nearest-neighbour sampling. After a
  resize, neither resize nor filter can be used again.
- **Rotate** (eighth slot): draws the image turned by 45 degrees about its
  centre. The picture kept for further edits is not rotated.

Using filter, resize or rotate switches the pencil off. Close the window to
quit.

## What it does not do

- Edited images cannot be saved; changes exist only in the open window.
- The cursor, eraser and bucket slots have no action.
- The colour filters in `pixedit.filters` and the box-blur kernel are
  library functions only; the window does not offer them.

## Using the library

An image is held as a `pixedit.matrix.MatrixPack`: three `Matrix` planes for
red, green and blue, indexed `pack[row, col]`, with values from 0.0 to 1.0
returned as `Triplet` objects.

```python
from pixedit.layout import sharpen_kernel
from pixedit.matrix import MatrixPack, Triplet
from pixedit.resize import resize
from pixedit.selection import crop, select
from pixedit.tools import convolution, rotate

pack = MatrixPack.zero(4, 4)
pack[1, 2] = Triplet(1.0, 0.5, 0.0)

bigger = resize(pack, 8, 8)       # new pack
turned = rotate(pack, 45)         # new pack
part = crop(pack, 0, 0, 2, 2)     # new 2x2 pack
convolution(pack, sharpen_kernel())   # in place
```

Other modules:

- `pixedit.tools`: `surface_to_pack` and `pack_to_surface` move pixels
  between a pygame surface and a pack; `get_pixel`, `set_pixel`,
  `mat_convolution` and `prevent_overflow` are the building blocks.
- `pixedit.selection`: `select` overwrites everything outside a rectangle in
  place; `crop` copies a rectangle into a new pack; `order_corners` and
  `is_in_selection` help with coordinates. Corners beyond the image raise
  `ValueError`.
- `pixedit.filters`: `grayscale`, `negative`, `black_and_white`, `peach`,
  `lighten`, `vintage`, `darken`, `contrast`, `blur` and `outline` each take
  `(pack, surface, trip)`, change the pygame surface in place, and set every
  entry of the pack to `trip`.
- `pixedit.color`: `color_pixel` paints the pencil square on a surface and
  its pack.
- `pixedit.loading`: `load_bmp` loads an image file, raising `OSError` on
  failure; `insert` pastes one onto a surface at its top-left corner.
- `pixedit.layout`: toolbar geometry (`place_rects`), the palette, the
  `sharpen_kernel` and `box_blur_kernel`, and `modify_image` /
  `resize_image`.
- `pixedit.textinput`: `TextBuffer` and small helpers for a length-limited
  line of text.

## Running the tests

```
pip install .[test]
pytest
```