import pytest

from pixedit.matrix import MatrixPack, Triplet
from pixedit.resize import resize


def _pack(rows, cols):
    pack = MatrixPack.zero(rows, cols)
    for i in range(rows):
        for j in range(cols):
            pack[i, j] = Triplet((i + 1) / 10, (j + 1) / 10, 0.5)
    return pack


def test_same_size_square_is_identity():
    pack = _pack(4, 4)
    assert resize(pack, 4, 4) == pack


def test_upscale_repeats_pixels():
    pack = _pack(2, 2)
    result = resize(pack, 4, 4)
    assert (result.rows, result.cols) == (4, 4)
    assert all(result[x, y] == pack[x // 2, y // 2]
               for x in range(4) for y in range(4))


def test_result_dimensions_follow_arguments():
    pack = _pack(2, 3)
    result = resize(pack, 6, 4)
    assert (result.rows, result.cols) == (6, 4)


def test_values_come_from_source_or_black():
    pack = _pack(2, 3)
    result = resize(pack, 6, 4)
    source = {pack[i, j] for i in range(2) for j in range(3)}
    black = Triplet(0.0, 0.0, 0.0)
    assert all(result[x, y] in source or result[x, y] == black
               for x in range(6) for y in range(4))


def test_negative_size_raises():
    with pytest.raises(ValueError):
        resize(_pack(2, 2), -1, 2)