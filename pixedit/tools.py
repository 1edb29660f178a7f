"""Conversion between surfaces and matrix packs, rotation and convolution."""

from __future__ import annotations

import math
from itertools import product

import pygame

from pixedit.matrix import Matrix, MatrixPack, Triplet

_PI = 3.141559


def get_pixel(surface: pygame.Surface, x: int, y: int) -> tuple[int, int, int]:
    """Return the RGB value of the pixel at column ``x``, row ``y``."""
    color = surface.get_at((x, y))
    return color.r, color.g, color.b


def set_pixel(surface: pygame.Surface, x: int, y: int,
              color: tuple[int, int, int]) -> None:
    """Set the pixel at column ``x``, row ``y`` to an RGB value."""
    surface.set_at((x, y), color)


def _to_byte(value: float) -> int:
    return max(0, min(255, int(value * 255)))


def surface_to_pack(surface: pygame.Surface) -> MatrixPack:
    """Read a surface into a pack indexed by (row, column)."""
    width, height = surface.get_size()
    pack = MatrixPack.zero(height, width)
    for x, y in product(range(width), range(height)):
        r, g, b = get_pixel(surface, x, y)
        pack[y, x] = Triplet(r / 255, g / 255, b / 255)
    return pack


def pack_to_surface(surface: pygame.Surface, pack: MatrixPack) -> None:
    """Write a pack onto a surface, truncating channels to bytes."""
    width, height = surface.get_size()
    for x, y in product(range(width), range(height)):
        trip = pack[y, x]
        set_pixel(surface, x, y,
                  (_to_byte(trip.r), _to_byte(trip.g), _to_byte(trip.b)))


def _is_black(trip: Triplet) -> bool:
    return trip.r == 0.0 and trip.g == 0.0 and trip.b == 0.0


def rotate(pack: MatrixPack, angle: float) -> MatrixPack:
    """Return a new pack rotated about its centre by ``angle`` degrees.

    Black holes left by the mapping are filled from the next row when
    that neighbour has no zero channel.
    """
    theta = (2 * _PI * angle) / 360.0
    cos_t = math.cos(-theta)
    sin_t = math.sin(-theta)
    rows, cols = pack.rows, pack.cols
    x0, y0 = rows // 2, cols // 2

    result = MatrixPack.zero(rows, cols)
    for x, y in product(range(rows), range(cols)):
        xoff, yoff = x - x0, y - y0
        x2 = int(xoff * cos_t - yoff * sin_t + x0)
        y2 = int(xoff * sin_t + yoff * cos_t + y0)
        if 0 <= x2 < rows and 0 <= y2 < cols:
            result[x2, y2] = pack[x, y]

    for x, y in product(range(rows - 1), range(cols)):
        if _is_black(result[x, y]):
            neighbour = result[x + 1, y]
            if neighbour.r != 0.0 and neighbour.g != 0.0 and neighbour.b != 0.0:
                result[x, y] = neighbour
    return result


def prevent_overflow(value: float) -> float:
    """Clamp ``value`` to the range 0.0 to 1.0."""
    if value > 1.0:
        return 1.0
    if value < 0.0:
        return 0.0
    return value


def mat_convolution(mat: Matrix, kernel: Matrix) -> Matrix:
    """Return ``mat`` convolved with ``kernel``, clamped, with smoothed edges.

    Samples in the first row and first column are left out of every sum,
    and the three outermost rows and columns copy their inner neighbours.
    """
    rows, cols = mat.rows, mat.cols
    if rows < 3 or cols < 3:
        raise ValueError("convolution needs a matrix of at least 3x3")
    half_r, half_c = kernel.rows // 2, kernel.cols // 2

    result = Matrix.zero(rows, cols)
    for i, j in product(range(rows), range(cols)):
        acc = 0.0
        for k, l in product(range(kernel.rows), range(kernel.cols)):
            x = i + k - half_r
            y = j + l - half_c
            if 0 < x < rows and 0 < y < cols:
                acc += mat[x, y] * kernel[k, l]
        result[i, j] = prevent_overflow(acc)

    for i in range(rows):
        value = result[i, 2]
        for j in (0, 1, 2):
            result[i, j] = value
        value = result[i, cols - 2]
        for j in (cols - 1, cols - 2, cols - 3):
            result[i, j] = value
    for j in range(cols):
        value = result[2, j]
        for i in (0, 1, 2):
            result[i, j] = value
        value = result[rows - 2, j]
        for i in (rows - 1, rows - 2, rows - 3):
            result[i, j] = value
    return result


def convolution(pack: MatrixPack, kernel: Matrix) -> None:
    """Convolve each channel of ``pack`` with ``kernel`` in place."""
    pack.r = mat_convolution(pack.r, kernel)
    pack.g = mat_convolution(pack.g, kernel)
    pack.b = mat_convolution(pack.b, kernel)