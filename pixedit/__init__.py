"""A small raster image editor: pencil, sharpening, resize, rotation and selection."""

__version__ = "0.1.0"