[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixedit"
version = "0.1.0"
description = "A small raster image editor with pencil, sharpening, resize, rotation and selection"
requires-python = ">=3.10"
keywords = ["image", "editor", "raster", "bmp", "filters", "convolution", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixedit = "pixedit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixedit"]

[tool.pytest.ini_options]
addopts = "-ra"
