# loresgfx

A small graphics library for low-resolution games. It is written in pure
software. It provides:

- images held in memory, either RGBA or indexed into a palette
- clipped blitting with blend modes
- drawing primitives
- "decorator" images that change another image as it is read
- sprite sheets with animation, bitmap fonts and pixel-perfect collision tests

## Install

```
pip install loresgfx
```

Install with the test extra to run the test suite:

```
pip install "loresgfx[test]"
python -m pytest
```

## Colours (`loresgfx.colour`)

- `Colour(r, g, b, a=255)` is a frozen RGBA colour with 8 bits per channel. A
  channel outside 0..255 raises `ValueError`.
- `FColour` holds float channels.
- `HColour` holds unbounded integer channels.

`FColour` and `HColour` both support `+`, `-` and `*`. You can multiply by
another colour of the same kind or by a number. Their `to_colour()` method
clamps the result back into 0..255. Use `FColour.from_colour(c)` and
`HColour.from_colour(c)` to convert a `Colour`.

```python
from loresgfx.colour import Colour, FColour, colour_to_normal, normal_to_colour

red = Colour(0xFF, 0, 0)
dim_red = (FColour.from_colour(red) * 0.5).to_colour()
n = colour_to_normal(Colour(0x80, 0x80, 0xFF))   # about (0, 0, 1)
c = normal_to_colour((1.0, 0.0, 0.0))            # Colour(255, 128, 128)
```

The module also provides:

- `UV(u, v)`, an integer offset that can be added to another `UV`.
- `approx_equal(a, b, epsilon=None)`, which compares numbers, vectors or colours.
- `zero_alpha(c)`, the default transparency test.

## Palettes and images (`loresgfx.palette`, `loresgfx.image`)

Every image implements the `Image` interface:

- `set_size(w, h)`, `load(path)`, `set_colour(x, y, c)`, `get_colour(x, y)` and `clear(c)`
- the properties `width` and `height`

Reading or writing outside the image raises `IndexError`.

- `Image32(w=0, h=0)` stores RGBA bytes.
  - `load` reads a PNG with Pillow and raises `OSError` if the file cannot be read.
  - `save(path)` writes a PNG. It raises `ValueError` for an empty image.
  - `data` returns the raw bytes.
- `Image8` stores 8-bit indices into `Image8.palette`. This is one `Palette`
  shared by all `Image8` instances.
  - `load` adds each colour it finds to the shared palette.
  - When loading, pixels with alpha below 128 or colour magenta become index 0,
    which means transparent.
- `Palette.add_colour(c)` returns the index of `c`, adding the colour if it is
  new. `get_index(c)` raises `ValueError` for a colour that is not in the
  palette. Any colour with alpha below 128 maps to index 0.

```python
from loresgfx.colour import Colour
from loresgfx.image import Image32

screen = Image32(128, 96)
screen.clear(Colour(0, 0, 0))
screen.set_colour(10, 10, Colour(0xFF, 0xFF, 0))
screen.save("screen.png")
```

## Blitting (`loresgfx.blend`)

- `blit(src, dest, x, y, blender=overwrite)` copies the whole source image.
- `blit_region(src, dest, dest_x, dest_y, src_x, src_y, src_w, src_h, blender=overwrite)`
  copies a rectangle of the source.

Both clip to the destination.

A blender is called as `blender(src_colour, dest_colour)`. It returns the new
destination colour, or `None` to leave the pixel unchanged. The provided
blenders are:

- `overwrite`
- `mask_zero_alpha`
- `mask(is_transparent)`, which builds a masking blender from a transparency test
- `add_blend`
- `sub_blend`, which gives dest − src
- `mult_blend`
- `alpha_blend`

The plain blend functions `calc_add_blend`, `calc_sub_blend`,
`calc_mult_blend` and `calc_alpha_blend` can be passed to `ImageCombine`.

## Filling and drawing (`loresgfx.filler`, `loresgfx.draw`)

`fill(im, filler)` sets each pixel to `filler(x, y, w, h)`. The fillers
provided are `solid_colour(c)`, `noise_colour` and `noise_greyscale`.

The drawing functions in `loresgfx.draw` are:

- `draw_point` ignores positions outside the image.
- `draw_line` draws a Bresenham line. The end with the larger major coordinate
  is not drawn.
- `draw_ellipse_outline` and `draw_ellipse_solid` draw axis-aligned ellipses.
- `draw_edge(src, dest, colour, Outline.INSIDE | Outline.OUTSIDE)` marks colour
  changes along every row and column of `src`.
- `make_sphere_normals(dest, convex=True)` fills an image with a hemisphere
  normal map. Pixels outside the circle get alpha 0.

```python
from loresgfx.blend import blit, mask_zero_alpha
from loresgfx.draw import draw_ellipse_solid, draw_line
from loresgfx.filler import fill, solid_colour

ball = Image32(16, 16)
fill(ball, solid_colour(Colour(0, 0, 0, 0)))
draw_ellipse_solid(ball, 8, 8, 6, 6, Colour(0xFF, 0, 0))
blit(ball, screen, 20, 20, mask_zero_alpha)
draw_line(screen, 0, 0, 127, 95, Colour(0xFF, 0xFF, 0xFF))
```

## Decorators (`loresgfx.decorators`)

A decorator wraps one child image. It computes its colours when they are read.

- `ImageRegion(child, x, y, w, h)` is a window onto the child.
  `set_region(x, y, w=None, h=None)` moves or resizes the window. Writes go
  through to the child.
- `ImageScale(child, scale_x, scale_y=None)` scales the child by nearest
  neighbour. Use `set_scale` to change the factors.
- `ImageColourTransform(child, mult, add)` multiplies each channel by an
  `FColour`, then adds a `Colour`.
- `ImageFilter(child, filter_)` takes the weighted mean over a list of
  `(UV, weight)` offsets. Offsets that fall outside the image are skipped.
- `ImageUVTransform(child, matrix)` reads the child through the inverse of a
  3×3 homogeneous matrix. A matrix that cannot be inverted raises `ValueError`.
  Texels that fall outside the child read as `Colour(1, 1, 1, 1)`.
- `ImageLighting(child)` lights a normal map. Its settable properties are
  `light_dir`, `ambient_colour`, `diffuse_colour` and `specular_colour`. It
  also has a `specular_power` attribute.
- `ImageNormalMap(child, rotation)` rotates the stored normals by a 3×3 matrix.

`IDENTITY_2D` is the identity matrix.

## Composites (`loresgfx.composite`)

`ImageComposite(*children)` holds several images. Plain operations go to
`children[active_child]`.

- `ImageCombine(blend_func, *children)` folds the children's colours from
  first to last.
- `ImageMask(src, mask, is_transparent=zero_alpha)` shows
  `transparent_colour` wherever the mask is transparent.
- `ImageSphereMap(normal_map, env_map)` looks up a spherical environment map
  by normal.

## Sprites (`loresgfx.sprite`)

- `SpriteSheet(image)`: call `set_num_cells(x, y)` to divide the image into a
  grid of cells.
  - `draw_cell(dest, cell, x, y, blender)` draws one cell onto another image.
  - `draw_into_cell(src, cell, blender)` draws an image into one cell.
  - A cell number out of range raises `IndexError`.
- `Sprite` animates through `min_cell..max_cell` with `update(dt)`. It either
  wraps at the end of the range or, when `bounce_mode` is set, turns round.
- `Font.draw(dest, x, y, text, blender)` draws text from a sheet whose first
  cell is the space character.
- `pixel_intersect(ss1, cell1, x1, y1, ss2, cell2, x2, y2)` returns one of the
  `PixIntResult` values: `YES_COLLIDE`, `NO_AND_DISJOINT` or
  `NO_AND_NOT_DISJOINT`.
- `DoubleBuffer(front, back)` swaps its `front` and `back` images on `flip()`.

```python
from loresgfx.sprite import Sprite, SpriteSheet

sheet = SpriteSheet(Image32(64, 16))
sheet.set_num_cells(4, 1)
walker = Sprite(sprite_sheet=sheet, cell_time=0.15)
walker.set_cell_range(0, 3)
walker.update(0.2)
walker.draw(screen, 10, 10, mask_zero_alpha)
```

## What it does not do

This is a library only. It opens no window and shows nothing on a display. It
reads no keyboard input and has no command-line program or demo. To see a
result, save an `Image32` as a PNG or hand its `data` bytes to a display
library of your choice.