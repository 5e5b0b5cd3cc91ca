# dithery

Turn images into pure black-and-white pictures with classic dithering
algorithms, either from Python or in a small desktop viewer.

Every algorithm works on the grey average of each pixel's red, green and
blue channels and writes back RGBA pixels that are either black (0) or white
(255). The alpha channel is kept as it was.

## Algorithms

| `DitherType`      | What it does                                                        |
|-------------------|---------------------------------------------------------------------|
| `NONE`            | Returns an unchanged copy of the image                              |
| `BASIC`           | Carries the whole rounding error along to the next pixel of the scan |
| `FLOYD_STEINBERG` | Spreads the error to the right and the row below (7, 5, 3, 1 / 16)  |
| `BAYER_2X2`       | Ordered dithering with a 2x2 threshold matrix                       |
| `BAYER_4X4`       | Ordered dithering with a 4x4 threshold matrix                       |
| `BAYER_8X8`       | Ordered dithering with an 8x8 threshold matrix                      |

## Installing

```
pip install .
```

## Using the viewer

The viewer is a Tk window, so it needs a Python built with `tkinter`.

```
dithery
dithery picture.png
```

Open an image (PNG, JPEG, GIF or any file Pillow can read), pick an
algorithm from the list, press **Dither**, and use **-** and **+** to zoom
in steps of 0.1x. Zooming out stops at 0.1x. The dithered result is shown
at full size until the zoom is changed again.

## Using the library

```python
from PIL import Image

from dithery.dither import DitherType, dither_image, floyd_steinberg_dither

with Image.open("picture.png") as source:
    result = dither_image(source, DitherType.BAYER_4X4)
result.save("picture-bayer.png")

floyd_steinberg_dither(Image.open("photo.jpg")).save("photo-fs.png")
```

The individual algorithms are also available as `basic_error_dither`,
`bayer2x2_dither`, `bayer4x4_dither` and `bayer8x8_dither`, and
`bayer_dither(image, matrix)` takes a square threshold matrix of your own
(a `ValueError` is raised for an empty or non-square one). The built-in
matrices are `BAYER_2X2`, `BAYER_4X4` and `BAYER_8X8`, and `find_closest`
picks the nearest of a sequence of levels.

Without the window, `dithery.viewer.ViewerState` holds what the viewer
shows: the loaded image, the current result, the chosen algorithm and the
zoom factor. `algorithm_choices()` lists the (label, `DitherType`) entries
the viewer offers.

```python
from dithery.viewer import ViewerState

state = ViewerState()
state.load("picture.png")
state.select_algorithm(2)   # index into algorithm_choices(): Floyd-Steinberg
state.apply_dither()
state.zoom_in()
print(state.scaling_text(), state.scaled_size())
```

`dithery.app.DitherWindow` holds the window's logic (open, zoom, select,
dither) independently of Tk, and `dithery.app.main` starts the viewer.

## What it does not do

- Output is always two levels, black and white; there is no colour or
  multi-level dithering.
- The viewer has no save command: to keep a result, use the library and
  Pillow's `Image.save`.

## Running the tests

```
pip install .[test]
pytest
```