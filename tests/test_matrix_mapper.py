import pytest

from engine.matrix_mapper import flip_index, index_of, row_col, to_wire_order, xy_to_serpentine


def test_flip_index_is_involution():
    for i in range(25):
        assert flip_index(flip_index(i)) == i


def test_flip_index_is_bijection():
    assert sorted(flip_index(i) for i in range(25)) == list(range(25))


@pytest.mark.parametrize("logical,physical", [
    (0, 20),    # top-left -> bottom-left
    (4, 24),
    (12, 12),   # center row stays
    (20, 0),
    (7, 17),
])
def test_flip_index_mirrors_rows(logical, physical):
    assert flip_index(logical) == physical


@pytest.mark.parametrize("bad", [-1, 25, 100])
def test_flip_index_rejects_out_of_range(bad):
    with pytest.raises(IndexError):
        flip_index(bad)


def test_index_of_and_row_col_agree():
    for row in range(5):
        for col in range(5):
            assert row_col(index_of(row, col)) == (row, col)


def test_index_of_rejects_outside_matrix():
    with pytest.raises(IndexError):
        index_of(5, 0)


def test_to_wire_order_moves_top_row_to_bottom():
    buffer = ["top"] * 5 + [None] * 20
    wire = to_wire_order(buffer)
    assert wire[20:] == ["top"] * 5
    assert wire[:20] == [None] * 20


def test_to_wire_order_requires_25_cells():
    with pytest.raises(ValueError):
        to_wire_order([None] * 24)


def test_serpentine_reverses_odd_rows():
    assert xy_to_serpentine(0, 0) == 0
    assert xy_to_serpentine(4, 0) == 4
    assert xy_to_serpentine(0, 1) == 9
    assert xy_to_serpentine(4, 1) == 5
    assert xy_to_serpentine(2, 2) == 12
