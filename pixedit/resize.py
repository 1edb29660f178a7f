"""Nearest-neighbour resizing of matrix packs."""

from __future__ import annotations

from itertools import product

from pixedit.matrix import MatrixPack


def resize(pack: MatrixPack, new_w: int, new_h: int) -> MatrixPack:
    """Return a ``new_w`` by ``new_h`` pack sampled from ``pack``.

    The first index of the result runs up to ``new_w`` and the second up
    to ``new_h``; samples that fall outside the source stay black.
    """
    if new_w < 0 or new_h < 0:
        raise ValueError("new size must be non-negative")
    rows, cols = pack.rows, pack.cols
    result = MatrixPack.zero(new_w, new_h)
    for x, y in product(range(new_w), range(new_h)):
        src_x = (x * cols) // new_w
        src_y = (y * rows) // new_h
        if src_x < rows and src_y < cols:
            result[x, y] = pack[src_x, src_y]
    return result