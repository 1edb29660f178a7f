"""Whole-image colour filters applied to a surface and its matrix pack."""

from __future__ import annotations

from collections.abc import Callable
from itertools import product

import pygame

from pixedit.matrix import MatrixPack, Triplet
from pixedit.tools import get_pixel, set_pixel

RGB = tuple[int, int, int]

_BLUR_RADIUS = 9


def shift_channel(c: int, n: int) -> int:
    """Add ``n`` to channel value ``c``, clamped to 0..255."""
    return max(0, min(255, c + n))


def contrast_curve(c: int, n: int) -> int:
    """Push a channel value towards black or white with a power curve.

    Dark values (up to 127) land on the curve's floor and light values
    on its mirror image, so for negative ``n`` dark goes to 0 and light
    goes to 255.
    """
    if not 0 <= c <= 255:
        raise ValueError("channel value must be between 0 and 255")
    if c > 127:
        return 255 - contrast_curve(255 - c, n)
    # The scaled base (2 * c) // 255 is zero for every dark value: zero to
    # the power zero is one, to a positive power zero, and to a negative
    # power an infinity that truncates to zero.
    return 1 if n == 0 else 0


def _apply(pack: MatrixPack, surface: pygame.Surface, trip: Triplet,
           transform: Callable[[int, int, int], RGB]) -> None:
    width, height = surface.get_size()
    for i, j in product(range(height), range(width)):
        set_pixel(surface, j, i, transform(*get_pixel(surface, j, i)))
        pack[i, j] = trip


def _shifter(dr: int, dg: int, db: int) -> Callable[[int, int, int], RGB]:
    def transform(r: int, g: int, b: int) -> RGB:
        return shift_channel(r, dr), shift_channel(g, dg), shift_channel(b, db)
    return transform


def black_and_white(pack: MatrixPack, surface: pygame.Surface,
                    trip: Triplet) -> None:
    """Turn each pixel black or white by its average brightness."""
    def transform(r: int, g: int, b: int) -> RGB:
        level = 0 if (r + g + b) // 3 < 127 else 255
        return level, level, level
    _apply(pack, surface, trip, transform)


def grayscale(pack: MatrixPack, surface: pygame.Surface, trip: Triplet) -> None:
    """Replace each pixel by the average of its channels."""
    def transform(r: int, g: int, b: int) -> RGB:
        average = (r + g + b) // 3
        return average, average, average
    _apply(pack, surface, trip, transform)


def negative(pack: MatrixPack, surface: pygame.Surface, trip: Triplet) -> None:
    """Invert every channel."""
    _apply(pack, surface, trip,
           lambda r, g, b: (255 - r, 255 - g, 255 - b))


def peach(pack: MatrixPack, surface: pygame.Surface, trip: Triplet) -> None:
    """Warm the image: more red, less blue."""
    _apply(pack, surface, trip, _shifter(50, 0, -50))


def lighten(pack: MatrixPack, surface: pygame.Surface, trip: Triplet) -> None:
    """Lighten the image, mostly through the green channel."""
    _apply(pack, surface, trip, _shifter(20, 60, 0))


def vintage(pack: MatrixPack, surface: pygame.Surface, trip: Triplet) -> None:
    """Give the image a green-tinted vintage look."""
    _apply(pack, surface, trip, _shifter(0, 120, 20))


def darken(pack: MatrixPack, surface: pygame.Surface, trip: Triplet) -> None:
    """Darken the image by lowering the red channel."""
    _apply(pack, surface, trip, _shifter(-100, 0, 0))


def contrast(pack: MatrixPack, surface: pygame.Surface, trip: Triplet) -> None:
    """Make dark channels darker and light channels lighter."""
    _apply(pack, surface, trip,
           lambda r, g, b: (contrast_curve(r, -50), contrast_curve(g, -50),
                            contrast_curve(b, -50)))


def box_average(surface: pygame.Surface, i: int, j: int, n: int) -> RGB:
    """Average colour of the window of radius ``n`` around row ``i``, column ``j``.

    The window is clipped to the surface and excludes its last row and
    column, as well as the last row and column of the surface.
    """
    width, height = surface.get_size()
    top, left = max(i - n, 0), max(j - n, 0)
    bottom, right = min(i + n, height - 1), min(j + n, width - 1)
    count = (bottom - top) * (right - left)
    if count <= 0:
        raise ValueError("averaging window is empty")
    sum_r = sum_g = sum_b = 0
    for row, col in product(range(top, bottom), range(left, right)):
        r, g, b = get_pixel(surface, col, row)
        sum_r += r
        sum_g += g
        sum_b += b
    return sum_r // count, sum_g // count, sum_b // count


def blur(pack: MatrixPack, surface: pygame.Surface, trip: Triplet) -> None:
    """Blur the image in place with a box average."""
    width, height = surface.get_size()
    for i, j in product(range(height), range(width)):
        set_pixel(surface, j, i, box_average(surface, i, j, _BLUR_RADIUS))
        pack[i, j] = trip


def outline(pack: MatrixPack, surface: pygame.Surface, trip: Triplet) -> None:
    """Emphasise edges by subtracting the local average from each pixel.

    The arithmetic works on the surface's packed 32-bit pixel values.
    """
    width, height = surface.get_size()
    for i, j in product(range(height), range(width)):
        packed = surface.get_at_mapped((j, i))
        average = surface.map_rgb(box_average(surface, i, j, _BLUR_RADIUS))
        value = (255 - (packed - average)) & 0xFFFFFFFF
        surface.set_at((j, i), surface.unmap_rgb(value))
        pack[i, j] = trip