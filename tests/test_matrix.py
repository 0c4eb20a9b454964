import io

import pytest

from seamdeck.cv.matrix import Matrix


def test_matrix_basic():
    mat = Matrix(5, 5)
    assert mat.width == 5
    assert mat.height == 5
    mat.fill(0)
    assert mat[2, 3] == 0
    mat[2, 3] = 42
    assert mat[2, 3] == 42
    mat.fill_border(2)
    assert mat[0, 0] == 2
    assert mat.max() == 42


def test_matrix_print_single():
    mat = Matrix(1, 1)
    mat[0, 0] = 42
    assert str(mat) == "1 1\n42 \n"


def test_write_to_stream():
    mat = Matrix(1, 1)
    mat[0, 0] = 42
    out = io.StringIO()
    mat.write(out)
    assert out.getvalue() == "1 1\n42 \n"


def test_init_catch_all():
    mat = Matrix(5, 3)
    for key in [(0, 0), (2, 4), (0, 4), (1, 0), (2, 0)]:
        assert mat[key] == 0


def test_print():
    mat = Matrix(5, 3)
    mat[1, 2] = 10
    assert str(mat) == "5 3\n0 0 0 0 0 \n0 0 10 0 0 \n0 0 0 0 0 \n"


def test_print_width():
    mat = Matrix(10, 1)
    mat[0, 5] = 2
    assert str(mat) == "10 1\n0 0 0 0 0 2 0 0 0 0 \n"


def test_print_height():
    mat = Matrix(1, 10)
    mat[4, 0] = 2
    expected = "1 10\n" + "0 \n" * 4 + "2 \n" + "0 \n" * 5
    assert str(mat) == expected


def test_dimensions():
    mat = Matrix(4, 4)
    assert (mat.width, mat.height) == (4, 4)
    m = Matrix(5, 1)
    assert (m.width, m.height) == (5, 1)


def test_at():
    mat = Matrix(3, 3)
    mat.fill(3)
    assert mat[1, 1] == 3


def test_fill_basic():
    mat = Matrix(5, 3)
    mat.fill(42)
    assert all(mat[r, c] == 42 for r in range(3) for c in range(5))


def test_fill_unit_matrix():
    mat = Matrix(1, 1)
    mat.fill(5)
    assert mat[0, 0] == 5


def test_fill_border():
    mat = Matrix(5, 5)
    mat.fill_border(1)
    for r in range(5):
        for c in range(5):
            expected = 1 if r in (0, 4) or c in (0, 4) else 0
            assert mat[r, c] == expected


@pytest.mark.parametrize("position", [(2, 2), (2, 4), (0, 0)])
def test_max(position):
    mat = Matrix(5, 3)
    mat.fill(42)
    mat[position] = 43
    assert mat.max() == 43


def test_max_negative():
    mat = Matrix(3, 3)
    mat.fill(-1)
    assert mat.max() == -1


def test_min_col_in_row():
    mat = Matrix(3, 10)
    mat.fill_border(2)
    mat[4, 1] = 3
    assert mat.column_of_min_value_in_row(1, 0, 3) == 1
    assert mat.column_of_min_value_in_row(4, 0, 3) == 0
    assert mat.column_of_min_value_in_row(9, 0, 3) == 0


def test_min_col_in_row_range():
    mat = Matrix(5, 10)
    mat.fill_border(1)
    assert mat.column_of_min_value_in_row(1, 1, 5) == 1
    assert mat.column_of_min_value_in_row(0, 2, 5) == 2
    assert mat.column_of_min_value_in_row(9, 2, 4) == 2
    mat[9, 4] = 0
    assert mat.column_of_min_value_in_row(9, 2, 5) == 4
    assert mat.column_of_min_value_in_row(9, 2, 4) == 2


def test_col_min_in_row_unit():
    mat = Matrix(1, 1)
    mat.fill(1)
    assert mat.column_of_min_value_in_row(0, 0, 1) == 0


def test_min_in_row():
    mat = Matrix(3, 10)
    mat.fill_border(2)
    mat[4, 1] = 3
    assert mat.min_value_in_row(1, 0, 3) == 0
    assert mat.min_value_in_row(4, 0, 3) == 2


def test_equality():
    a = Matrix(2, 2)
    b = Matrix(2, 2)
    assert a == b
    b[1, 1] = 7
    assert not a == b
    assert not Matrix(2, 3) == Matrix(3, 2)


@pytest.mark.parametrize("key", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range_raises(key):
    mat = Matrix(3, 3)
    mat.fill(7)
    with pytest.raises(IndexError):
        mat[key]
    assert mat[2, 2] == 7
    assert mat.max() == 7


def test_bad_key_raises():
    with pytest.raises(TypeError):
        Matrix(2, 2)[1]


def test_empty_column_range_raises():
    with pytest.raises(ValueError):
        Matrix(3, 3).column_of_min_value_in_row(0, 2, 2)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Matrix(-1, 2)