import pytest

from pixedit.matrix import Matrix, MatrixPack, Triplet


def _identity(n):
    m = Matrix.zero(n, n)
    for i in range(n):
        m[i, i] = 1.0
    return m


def _sample(rows, cols):
    m = Matrix.zero(rows, cols)
    for i in range(rows):
        for j in range(cols):
            m[i, j] = i * 10 + j
    return m


def test_zero_is_all_zero():
    m = Matrix.zero(3, 4)
    assert (m.rows, m.cols) == (3, 4)
    assert all(m[i, j] == 0.0 for i in range(3) for j in range(4))


def test_set_get_round_trip():
    m = Matrix.zero(2, 3)
    m[1, 2] = 0.75
    assert m[1, 2] == 0.75
    assert m[0, 0] == 0.0


@pytest.mark.parametrize("key", [(2, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_bounds_raises(key):
    m = _sample(2, 3)
    before = list(m.data)
    with pytest.raises(IndexError):
        _ = m[key]
    with pytest.raises(IndexError):
        m[key] = 1.0
    assert list(m.data) == before
    assert m[1, 2] == 12.0


def test_fill_sets_every_element():
    m = _sample(3, 3)
    m.fill(0.25)
    assert all(v == 0.25 for v in m.data)


def test_matmul_identity_keeps_matrix():
    a = _sample(3, 3)
    assert a @ _identity(3) == a
    assert _identity(3) @ a == a


def test_matmul_shape():
    a = _sample(2, 3)
    b = _sample(3, 4)
    c = a @ b
    assert (c.rows, c.cols) == (2, 4)


def test_matmul_with_zero_matrix():
    a = _sample(3, 3)
    assert a @ Matrix.zero(3, 3) == Matrix.zero(3, 3)


def test_matmul_mismatch_raises():
    with pytest.raises(ValueError):
        _sample(2, 3) @ _sample(2, 3)


def test_format_text():
    m = Matrix.zero(2, 2)
    m[0, 0] = 1.5
    assert m.format() == "1.500000 0.000000 \n0.000000 0.000000 \n"


def test_bad_data_length_raises():
    with pytest.raises(ValueError):
        Matrix(2, 2, [1.0, 2.0, 3.0])


def test_pack_zero_and_round_trip():
    pack = MatrixPack.zero(3, 2)
    assert (pack.rows, pack.cols) == (3, 2)
    assert pack[2, 1] == Triplet(0.0, 0.0, 0.0)
    trip = Triplet(0.1, 0.2, 0.3)
    pack[2, 1] = trip
    assert pack[2, 1] == trip
    assert pack.r[2, 1] == trip.r
    assert pack.b[2, 1] == trip.b


def test_pack_fill():
    pack = MatrixPack.zero(2, 2)
    pack.fill(0.5)
    assert all(pack[i, j] == Triplet(0.5, 0.5, 0.5)
               for i in range(2) for j in range(2))


def test_pack_out_of_bounds():
    pack = MatrixPack.zero(2, 2)
    pack.fill(0.5)
    with pytest.raises(IndexError):
        _ = pack[2, 0]
    with pytest.raises(IndexError):
        pack[0, 2] = Triplet(1.0, 1.0, 1.0)
    assert all(pack[i, j] == Triplet(0.5, 0.5, 0.5)
               for i in range(2) for j in range(2))