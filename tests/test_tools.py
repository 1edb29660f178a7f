import pygame
import pytest

from pixedit.matrix import Matrix, MatrixPack, Triplet
from pixedit.tools import (
    convolution,
    get_pixel,
    mat_convolution,
    pack_to_surface,
    prevent_overflow,
    rotate,
    set_pixel,
    surface_to_pack,
)


def _surface(w, h):
    return pygame.Surface((w, h), 0, 32)


def _pack(rows, cols):
    pack = MatrixPack.zero(rows, cols)
    for i in range(rows):
        for j in range(cols):
            pack[i, j] = Triplet((i + 1) / 20, (j + 1) / 20, 0.5)
    return pack


def _kernel(values):
    k = Matrix.zero(len(values), len(values[0]))
    for i, row in enumerate(values):
        for j, v in enumerate(row):
            k[i, j] = v
    return k


def _matrix(rows, cols):
    m = Matrix.zero(rows, cols)
    for i in range(rows):
        for j in range(cols):
            m[i, j] = ((i * cols + j) % 7) / 7
    return m


def test_set_get_pixel_round_trip():
    s = _surface(4, 3)
    set_pixel(s, 2, 1, (10, 20, 30))
    assert get_pixel(s, 2, 1) == (10, 20, 30)


def test_surface_to_pack_layout():
    s = _surface(3, 2)
    s.fill((0, 0, 0))
    set_pixel(s, 2, 1, (255, 0, 255))
    pack = surface_to_pack(s)
    assert (pack.rows, pack.cols) == (2, 3)
    assert pack[1, 2] == Triplet(1.0, 0.0, 1.0)
    assert pack[0, 0] == Triplet(0.0, 0.0, 0.0)


def test_pack_surface_round_trip_on_extremes():
    s = _surface(3, 2)
    s.fill((0, 0, 0))
    set_pixel(s, 0, 1, (255, 255, 0))
    set_pixel(s, 1, 0, (0, 255, 255))
    pack = surface_to_pack(s)
    out = _surface(3, 2)
    pack_to_surface(out, pack)
    assert all(get_pixel(out, x, y) == get_pixel(s, x, y)
               for x in range(3) for y in range(2))


def test_pack_to_surface_truncates():
    pack = MatrixPack.zero(1, 1)
    pack[0, 0] = Triplet(0.5, 1.0, 0.0)
    s = _surface(1, 1)
    pack_to_surface(s, pack)
    assert get_pixel(s, 0, 0) == (127, 255, 0)


def test_rotate_zero_is_identity():
    pack = _pack(5, 5)
    assert rotate(pack, 0) == pack


def test_rotate_keeps_shape_and_values():
    pack = MatrixPack.zero(6, 6)
    colour = Triplet(0.4, 0.6, 0.8)
    for i in range(6):
        for j in range(6):
            pack[i, j] = colour
    result = rotate(pack, 45)
    assert (result.rows, result.cols) == (6, 6)
    black = Triplet(0.0, 0.0, 0.0)
    values = {result[i, j] for i in range(6) for j in range(6)}
    assert values <= {colour, black}
    assert colour in values


@pytest.mark.parametrize("value,expected", [(1.5, 1.0), (-0.2, 0.0), (0.3, 0.3)])
def test_prevent_overflow(value, expected):
    assert prevent_overflow(value) == expected


def test_identity_kernel_keeps_interior():
    mat = _matrix(10, 10)
    kernel = _kernel([[0, 0, 0], [0, 1, 0], [0, 0, 0]])
    result = mat_convolution(mat, kernel)
    assert all(result[i, j] == mat[i, j]
               for i in range(3, 7) for j in range(3, 7))


def test_convolution_edges_copy_inner_values():
    mat = _matrix(9, 8)
    kernel = _kernel([[0, -1, 0], [-1, 5, -1], [0, -1, 0]])
    result = mat_convolution(mat, kernel)
    assert all(result[0, j] == result[2, j] == result[1, j] for j in range(8))
    assert all(result[8, j] == result[7, j] == result[6, j] for j in range(8))


def test_convolution_clamps_values():
    mat = _matrix(6, 6)
    kernel = _kernel([[5, 5, 5], [5, 5, 5], [5, 5, 5]])
    result = mat_convolution(mat, kernel)
    assert all(0.0 <= v <= 1.0 for v in result.data)
    negative = mat_convolution(mat, _kernel([[-1, -1, -1]] * 3))
    assert all(v == 0.0 for v in negative.data)


def test_convolution_too_small_raises():
    with pytest.raises(ValueError):
        mat_convolution(Matrix.zero(2, 5), _kernel([[1]]))


def test_pack_convolution_replaces_channels():
    pack = _pack(6, 7)
    kernel = _kernel([[0.1111111] * 3] * 3)
    expected_r = mat_convolution(pack.r, kernel)
    expected_g = mat_convolution(pack.g, kernel)
    convolution(pack, kernel)
    assert pack.r == expected_r
    assert pack.g == expected_g