"""Unit tests for the packed symmetric matrix."""

import numpy as np
import pytest

from graphs.errors import GraphError, MatrixIndexError
from graphs.symmat import SymMatrix, int_sum


class TestAllocation:
    """Storage size and initial values."""

    @pytest.mark.parametrize("size", [0, 1, 2, 5, 12])
    def test_packed_length(self, size):
        """Only the upper triangle (diagonal included) is allocated."""
        matrix = SymMatrix(size)
        assert len(matrix.values()) == size * (size + 1) // 2
        assert matrix.size == size

    def test_int_sum(self):
        assert [int_sum(n) for n in range(5)] == [0, 1, 3, 6, 10]

    def test_default_value_is_zero(self):
        matrix = SymMatrix(4)
        assert all(v == 0 for v in matrix.values())

    def test_filled(self):
        matrix = SymMatrix.filled(3, 7)
        assert matrix.values().tolist() == [7] * 6
        assert matrix.get(2, 0) == 7

    def test_filled_object_values(self):
        matrix = SymMatrix.filled(2, None, dtype=object)
        matrix.set(0, 1, "edge")
        assert matrix.get(1, 0) == "edge"
        assert matrix.get(0, 0) is None

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            SymMatrix(-1)


class TestAddressing:
    """Offset computation and symmetry."""

    def test_offsets_follow_row_major_upper_triangle(self):
        """Cells (i, j) with i <= j map to consecutive offsets row by row."""
        size = 4
        matrix = SymMatrix(size)
        offsets = [matrix.index(i, j) for i in range(size) for j in range(i, size)]
        assert offsets == list(range(int_sum(size)))

    def test_index_is_symmetric(self):
        matrix = SymMatrix(5)
        for i in range(5):
            for j in range(5):
                assert matrix.index(i, j) == matrix.index(j, i)

    def test_set_is_visible_from_both_sides(self):
        matrix = SymMatrix(5)
        for i in range(5):
            for j in range(i, 5):
                matrix.set(i, j, 10 * i + j)
        for i in range(5):
            for j in range(5):
                assert matrix.get(i, j) == matrix.get(j, i)
        assert matrix.get(3, 1) == 13

    def test_values_in_physical_order(self):
        matrix = SymMatrix(3)
        matrix.set(0, 1, 1)
        matrix.set(2, 1, 2)
        matrix.set(2, 2, 3)
        assert matrix.values().tolist() == [0, 1, 0, 0, 2, 3]

    def test_values_view_is_read_only(self):
        matrix = SymMatrix(2)
        with pytest.raises(ValueError):
            matrix.values()[0] = 1


class TestBounds:
    """Absent results for reads, errors for writes."""

    @pytest.mark.parametrize("cell", [(0, 3), (3, 0), (3, 3), (7, 1), (-1, 0)])
    def test_get_out_of_range_is_none(self, cell):
        matrix = SymMatrix(3)
        assert matrix.get(*cell) is None
        assert matrix.get_mut(*cell) is None

    def test_get_on_empty_matrix(self):
        assert SymMatrix(0).get(0, 0) is None

    def test_set_out_of_range_raises(self):
        matrix = SymMatrix(3)
        with pytest.raises(MatrixIndexError):
            matrix.set(1, 3, 1)
        with pytest.raises(GraphError):
            matrix.set(3, 3, 1)

    def test_row_out_of_range_raises(self):
        with pytest.raises(IndexError):
            SymMatrix(2).row(2)


class TestMutableAccess:
    """In-place updates through get_mut."""

    def test_get_mut_updates_in_place(self):
        matrix = SymMatrix(3)
        cell = matrix.get_mut(1, 1)
        cell[0] += 1
        cell[0] += 1
        assert matrix.get(1, 1) == 2

    def test_get_mut_shares_symmetric_slot(self):
        matrix = SymMatrix(3)
        matrix.get_mut(2, 0)[0] = 5
        assert matrix.get(0, 2) == 5


class TestBulkViews:
    """Diagonal, rows and dense expansion."""

    def _sample(self) -> SymMatrix:
        matrix = SymMatrix(4)
        for i in range(4):
            for j in range(i, 4):
                matrix.set(i, j, 10 * i + j)
        return matrix

    def test_diagonal(self):
        assert self._sample().diagonal().tolist() == [0, 11, 22, 33]

    def test_row(self):
        assert self._sample().row(2).tolist() == [2, 12, 22, 23]

    def test_to_dense_is_symmetric(self):
        dense = self._sample().to_dense()
        assert dense.shape == (4, 4)
        assert np.array_equal(dense, dense.T)
        assert dense[3, 1] == 13

    def test_empty_views(self):
        matrix = SymMatrix(0)
        assert matrix.diagonal().size == 0
        assert matrix.to_dense().shape == (0, 0)
