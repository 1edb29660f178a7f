"""Toolbar layout, palette, convolution kernels and image edit dispatch."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

import pygame

from pixedit.matrix import Matrix, MatrixPack, Triplet
from pixedit.resize import resize
from pixedit.tools import convolution, rotate

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
ICON_SIZE = 64
NB_ICONS = 8
NB_COLORS = 9
NB_RECTS = 18

IMAGE_ORIGIN = (WINDOW_WIDTH // 3, WINDOW_HEIGHT // 4)

_ICON_START_X = 50
_TOOLBAR_Y = 100
_ICON_STEP = 85
_PALETTE_GAP = 150
_COLOR_STEP = 100

ROTATION_ANGLE = 45

COLORS: tuple[tuple[int, int, int, int], ...] = (
    (255, 0, 0, 255),
    (0, 255, 0, 255),
    (0, 0, 255, 255),
    (255, 0, 255, 255),
    (0, 255, 255, 255),
    (255, 255, 0, 255),
    (255, 255, 255, 255),
    (127, 127, 127, 255),
    (0, 0, 0, 255),
)


class Tool(IntEnum):
    """Toolbar icons in the order they are placed."""

    PENCIL = 0
    CURSOR = 1
    ERASER = 2
    BUCKET = 3
    FILTER = 4
    GROUP = 5
    RESIZE = 6
    ROTATE = 7


class Mode(IntEnum):
    """Image modifications handled by :func:`modify_image`."""

    FILTER = 1
    ROTATE = 3


def place_rects() -> list[pygame.Rect]:
    """Return the toolbar rectangles: icons first, then palette slots.

    The final slot is the one the image is later drawn into.
    """
    rects: list[pygame.Rect] = []
    x = _ICON_START_X
    for _ in range(NB_ICONS):
        rects.append(pygame.Rect(x, _TOOLBAR_Y, ICON_SIZE, ICON_SIZE))
        x += _ICON_STEP
    x += _PALETTE_GAP
    for _ in range(NB_ICONS, NB_RECTS):
        rects.append(pygame.Rect(x, _TOOLBAR_Y, ICON_SIZE, ICON_SIZE))
        x += _COLOR_STEP
    return rects


def modify_image(pack: MatrixPack, kernel: Matrix, mode: int) -> MatrixPack:
    """Apply a filter (in place) or a rotation (to a new pack).

    Raises ValueError for an unknown mode.
    """
    if mode == Mode.FILTER:
        convolution(pack, kernel)
        return pack
    if mode == Mode.ROTATE:
        return rotate(pack, ROTATION_ANGLE)
    raise ValueError(f"unknown image mode: {mode}")


def resize_image(pack: MatrixPack, new_w: int, new_h: int) -> MatrixPack:
    """Return ``pack`` resized to the new dimensions."""
    return resize(pack, new_w, new_h)


def color_to_triplet(color: Sequence[int] | pygame.Color) -> Triplet:
    """Convert an 8-bit RGB(A) colour into a triplet of 0..1 channels."""
    return Triplet(color[0] / 255.0, color[1] / 255.0, color[2] / 255.0)


def _kernel(values: list[list[float]]) -> Matrix:
    rows, cols = len(values), len(values[0])
    return Matrix(rows, cols, [float(v) for row in values for v in row])


def sharpen_kernel() -> Matrix:
    """The 3x3 contrast-enhancing kernel used by the filter tool."""
    return _kernel([[0, -1, 0], [-1, 5, -1], [0, -1, 0]])


def box_blur_kernel() -> Matrix:
    """The 3x3 box blur kernel."""
    return _kernel([[0.1111111] * 3 for _ in range(3)])