"""Painting with the pencil tool."""

from __future__ import annotations

from itertools import product

import pygame

from pixedit.matrix import MatrixPack, Triplet
from pixedit.tools import set_pixel

_RADIUS = 15


def _to_byte(value: float) -> int:
    return max(0, min(255, int(value * 255)))


def color_pixel(pack: MatrixPack, surface: pygame.Surface, trip: Triplet,
                x: int, y: int) -> None:
    """Paint a square brush centred on (x, y) on both surface and pack.

    The brush covers columns ``x - 15`` to ``x + 14`` and rows ``y - 15``
    to ``y + 14``, clipped to the surface.
    """
    width, height = surface.get_size()
    color = (_to_byte(trip.r), _to_byte(trip.g), _to_byte(trip.b))
    columns = range(max(x - _RADIUS, 0), min(x + _RADIUS, width))
    rows = range(max(y - _RADIUS, 0), min(y + _RADIUS, height))
    for i, j in product(columns, rows):
        set_pixel(surface, i, j, color)
        pack[j, i] = trip