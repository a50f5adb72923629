import pytest

from chipsum.coo import CooMatrix


def _sample():
    return CooMatrix(3, 3, [2, 0, 1, 0], [0, 1, 1, 0], [1.0, 2.0, 3.0, 4.0])


def test_constructor_sorts_by_row_then_column():
    m = _sample()
    keys = list(zip(m.rows, m.cols))
    assert keys == sorted(keys)
    assert len(m) == 4


def test_constructor_keeps_values_with_their_positions():
    m = _sample()
    triples = set(zip(m.rows, m.cols, m.values))
    assert triples == {(2, 0, 1.0), (0, 1, 2.0), (1, 1, 3.0), (0, 0, 4.0)}


def test_to_csr_row_map():
    assert _sample().to_csr().row_map == [0, 2, 3, 4]


def test_to_csr_matches_entries():
    m = _sample()
    dense = m.to_csr().to_dense()
    for r, c, v in zip(m.rows, m.cols, m.values):
        assert dense[r][c] == v
    assert sum(sum(row) for row in dense) == sum(m.values)


def test_insert_keeps_order_and_grows():
    m = _sample()
    m.insert(1, 0, 9.0)
    m.insert(2, 2, 5.0)
    keys = list(zip(m.rows, m.cols))
    assert keys == sorted(keys)
    assert len(m) == 6
    assert m.to_csr().to_dense()[1][0] == 9.0


def test_insert_into_empty_row():
    m = CooMatrix(3, 3)
    m.insert(2, 1, 7.0)
    m.insert(0, 2, 1.5)
    assert m.rows == [0, 2]
    assert m.cols == [2, 1]
    assert m.values == [1.5, 7.0]


def test_insert_duplicate_raises():
    m = _sample()
    with pytest.raises(ValueError):
        m.insert(0, 1, 8.0)


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0)])
def test_insert_out_of_range_raises(row, col):
    with pytest.raises(IndexError):
        _sample().insert(row, col, 1.0)


def test_empty_matrix_to_csr():
    csr = CooMatrix(3, 2).to_csr()
    assert csr.nnz == 0
    assert csr.row_map == [0, 0, 0, 0]


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        CooMatrix(2, 2, [0, 1], [0], [1.0, 2.0])


def test_out_of_range_entry_in_constructor_raises():
    with pytest.raises(ValueError):
        CooMatrix(2, 2, [0, 2], [0, 1], [1.0, 2.0])