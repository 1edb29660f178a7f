"""Loading images from disk and pasting them onto a surface."""

from __future__ import annotations

import os

import pygame


def load_bmp(path: str | os.PathLike[str]) -> pygame.Surface:
    """Load an image file into a new surface.

    Raises OSError when the file cannot be opened or decoded.
    """
    try:
        return pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        raise OSError(f"Can't open {os.fspath(path)}") from exc


def insert(surface: pygame.Surface, path: str | os.PathLike[str]) -> pygame.Rect:
    """Paste the image at ``path`` onto ``surface`` at its top-left corner.

    Returns the area of ``surface`` that was covered.
    """
    image = load_bmp(path)
    return surface.blit(image, (0, 0))