"""Rectangular selection and cropping of matrix packs."""

from __future__ import annotations

from itertools import product

from pixedit.matrix import MatrixPack, Triplet

_OUTSIDE = Triplet(100, 100, 100)


def order_corners(x1: int, y1: int, x2: int, y2: int) -> tuple[int, int, int, int]:
    """Return the corners so that ``x1 <= x2`` and ``y1 <= y2``."""
    if x1 > x2:
        x1, x2 = x2, x1
    if y1 > y2:
        y1, y2 = y2, y1
    return x1, y1, x2, y2


def is_in_selection(x: int, y: int, x1: int, y1: int, x2: int, y2: int) -> bool:
    """Tell whether (x, y) lies inside the inclusive rectangle."""
    return x1 <= x <= x2 and y1 <= y <= y2


def _check_bounds(name: str, x1: int, y1: int, x2: int, y2: int,
                  width: int, height: int) -> None:
    for label, value, limit in (("x1", x1, width), ("x2", x2, width),
                                ("y1", y1, height), ("y2", y2, height)):
        if value < 0 or value > limit:
            raise ValueError(f"{name}: {label} out of range")


def select(pack: MatrixPack, x1: int, y1: int, x2: int, y2: int) -> MatrixPack:
    """Mark every pixel outside the rectangle in place and return ``pack``."""
    height, width = pack.rows, pack.cols
    _check_bounds("select", x1, y1, x2, y2, width, height)
    x1, y1, x2, y2 = order_corners(x1, y1, x2, y2)
    for x, y in product(range(width), range(height)):
        if not is_in_selection(x, y, x1, y1, x2, y2):
            pack[y, x] = _OUTSIDE
    return pack


def crop(pack: MatrixPack, x1: int, y1: int, x2: int, y2: int) -> MatrixPack:
    """Return a new pack holding the half-open rectangle [x1, x2) x [y1, y2)."""
    height, width = pack.rows, pack.cols
    _check_bounds("crop", x1, y1, x2, y2, width, height)
    x1, y1, x2, y2 = order_corners(x1, y1, x2, y2)
    result = MatrixPack.zero(y2 - y1, x2 - x1)
    for x, y in product(range(x1, x2), range(y1, y2)):
        result[y - y1, x - x1] = pack[y, x]
    return result