"""Black-and-white dithering of images: error diffusion and ordered (Bayer) dithering."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import IntEnum
from itertools import chain

from PIL import Image

LEVELS: tuple[int, ...] = (0, 255)
"""Output grey levels every dithering algorithm quantises to."""

_SPREAD = 255 // len(LEVELS)

BAYER_2X2: tuple[tuple[float, ...], ...] = (
    (-0.375, 0.125),
    (0.375, -0.125),
)

BAYER_4X4: tuple[tuple[float, ...], ...] = (
    (-0.46875, 0.03125, -0.34375, 0.15625),
    (0.28125, -0.21875, 0.40625, -0.09375),
    (-0.28125, 0.21875, -0.40625, 0.09375),
    (0.46875, -0.03125, 0.34375, -0.15625),
)

BAYER_8X8: tuple[tuple[float, ...], ...] = (
    (-0.515625, -0.015625, -0.390625, 0.109375, -0.484375, 0.015625, -0.359375, 0.140625),
    (0.234375, -0.265625, 0.359375, -0.140625, 0.265625, -0.234375, 0.390625, -0.109375),
    (-0.328125, 0.171875, -0.453125, 0.046875, -0.296875, 0.203125, -0.421875, 0.078125),
    (0.421875, -0.078125, 0.296875, -0.203125, 0.453125, -0.046875, 0.328125, -0.171875),
    (-0.46875, 0.03125, -0.34375, 0.15625, -0.5, 0.0, -0.375, 0.125),
    (0.28125, -0.21875, 0.40625, -0.09375, 0.25, -0.25, 0.375, -0.125),
    (-0.28125, 0.21875, -0.40625, 0.09375, -0.3125, 0.1875, -0.4375, 0.0625),
    (0.46875, -0.03125, 0.515625, -0.15625, 0.4375, -0.0625, 0.3125, -0.1875),
)


class DitherType(IntEnum):
    """Available dithering algorithms."""

    NONE = 0
    BASIC = 1
    FLOYD_STEINBERG = 2
    BAYER_2X2 = 3
    BAYER_4X4 = 4
    BAYER_8X8 = 5


_Row = list[tuple[int, int]]


def find_closest(number: float, candidates: Sequence[float]) -> float:
    """Return the candidate nearest to ``number``; ties go to the earliest candidate."""
    if not candidates:
        raise ValueError("no candidates to choose from")
    return min(candidates, key=lambda candidate: abs(candidate - number))


def _grey_rows(image: Image.Image) -> tuple[tuple[int, int], list[_Row]]:
    """Convert to RGBA and return the size and rows of (grey level, alpha) pairs."""
    rgba = image.convert("RGBA")
    width, height = rgba.size
    data = rgba.tobytes()
    stride = width * 4
    rows = []
    for y in range(height):
        row = data[y * stride:(y + 1) * stride]
        rows.append([
            ((red + green + blue) // 3, alpha)
            for red, green, blue, alpha in zip(row[0::4], row[1::4], row[2::4], row[3::4])
        ])
    return rgba.size, rows


def _compose(size: tuple[int, int], rows: list[_Row]) -> Image.Image:
    """Build an RGBA image from rows of (grey level, alpha) pairs."""
    data = bytes(chain.from_iterable(
        (value, value, value, alpha) for row in rows for value, alpha in row
    ))
    return Image.frombytes("RGBA", size, data)


def basic_error_dither(image: Image.Image) -> Image.Image:
    """Carry the whole quantisation error to the next pixel in scan order."""
    size, rows = _grey_rows(image)
    error = 0
    result = []
    for row in rows:
        out_row = []
        for level, alpha in row:
            value = level + error
            closest = find_closest(value, LEVELS)
            error = value - closest
            out_row.append((closest, alpha))
        result.append(out_row)
    return _compose(size, result)


def floyd_steinberg_dither(image: Image.Image) -> Image.Image:
    """Spread the quantisation error to neighbours with Floyd-Steinberg weights."""
    size, rows = _grey_rows(image)
    width, height = size
    errors = [[0.0] * width for _ in rows]
    result = []
    for y, row in enumerate(rows):
        out_row = []
        for x, (level, alpha) in enumerate(row):
            value = level + errors[y][x]
            closest = find_closest(value, LEVELS)
            error = (value - closest) / 16
            if x + 1 < width:
                errors[y][x + 1] += error * 7
            if y + 1 < height:
                below = errors[y + 1]
                below[x] += error * 5
                if x > 0:
                    below[x - 1] += error * 3
                if x + 1 < width:
                    below[x + 1] += error
            out_row.append((closest, alpha))
        result.append(out_row)
    return _compose(size, result)


def bayer_dither(image: Image.Image, matrix: Sequence[Sequence[float]]) -> Image.Image:
    """Ordered dithering with a square threshold ``matrix`` tiled over the image."""
    grid = len(matrix)
    if grid == 0 or any(len(matrix_row) != grid for matrix_row in matrix):
        raise ValueError("Bayer matrix must be square and non-empty")
    size, rows = _grey_rows(image)
    result = []
    for y, row in enumerate(rows):
        thresholds = matrix[y % grid]
        result.append([
            (find_closest(level + _SPREAD * thresholds[x % grid], LEVELS), alpha)
            for x, (level, alpha) in enumerate(row)
        ])
    return _compose(size, result)


def bayer2x2_dither(image: Image.Image) -> Image.Image:
    """Ordered dithering with the 2x2 Bayer matrix."""
    return bayer_dither(image, BAYER_2X2)


def bayer4x4_dither(image: Image.Image) -> Image.Image:
    """Ordered dithering with the 4x4 Bayer matrix."""
    return bayer_dither(image, BAYER_4X4)


def bayer8x8_dither(image: Image.Image) -> Image.Image:
    """Ordered dithering with the 8x8 Bayer matrix."""
    return bayer_dither(image, BAYER_8X8)


_ALGORITHMS: dict[DitherType, Callable[[Image.Image], Image.Image]] = {
    DitherType.BASIC: basic_error_dither,
    DitherType.FLOYD_STEINBERG: floyd_steinberg_dither,
    DitherType.BAYER_2X2: bayer2x2_dither,
    DitherType.BAYER_4X4: bayer4x4_dither,
    DitherType.BAYER_8X8: bayer8x8_dither,
}


def dither_image(image: Image.Image, dither_type: DitherType | int) -> Image.Image:
    """Dither ``image`` with the chosen algorithm; ``NONE`` returns an unchanged copy."""
    algorithm = _ALGORITHMS.get(DitherType(dither_type))
    if algorithm is None:
        return image.copy()
    return algorithm(image)