"""Test the matrix data model and its conversions to numpy, scipy and sympy."""
from fractions import Fraction
import numpy as np
import pytest
from scipy import sparse
from sympy import Matrix as SympyMatrix, Rational as SympyRational
import ratinterp as ri


def test_to_matrix():
    mat = ri.to_matrix([[1, '1/2'], [3, 4]])
    assert mat == [[Fraction(1), Fraction(1, 2)], [Fraction(3), Fraction(4)]]
    assert all(type(v) is Fraction for row in mat for v in row)


def test_to_matrix_rejects_ragged_rows():
    with pytest.raises(ValueError):
        ri.to_matrix([[1, 2], [3]])


def test_to_matrix_rejects_string_rows():
    with pytest.raises(ValueError):
        ri.to_matrix(['12', '34'])
    with pytest.raises(ValueError):
        ri.to_matrix([[1, 2], '34'])


def test_empty_matrix():
    assert ri.to_matrix([]) == []
    assert ri.is_rectangular([])
    assert ri.shape([]) == (0, 0)


def test_shape():
    assert ri.shape(ri.to_matrix([[1, 2, 3], [4, 5, 6]])) == (2, 3)


def test_copy_matrix_is_independent():
    mat = ri.to_matrix([[1, 2], [3, 4]])
    cpy = ri.copy_matrix(mat)
    cpy[0][0] = Fraction(9)
    assert mat[0][0] == 1


def test_numpy_conversion():
    mat = ri.from_numpy(np.array([[1, 2], [3, 4]]))
    assert mat == [[1, 2], [3, 4]]
    arr = ri.to_numpy(ri.to_matrix([[1, '1/2'], [0, -3]]))
    assert arr.dtype == float
    assert np.array_equal(arr, np.array([[1.0, 0.5], [0.0, -3.0]]))
    with pytest.raises(ValueError):
        ri.from_numpy(np.array([1, 2, 3]))


def test_sparse_conversion():
    mat = ri.from_sparse(sparse.csr_matrix(np.array([[0, 2], [3, 0], [0, 0]])))
    assert mat == [[0, 2], [3, 0], [0, 0]]
    assert all(type(v) is Fraction for row in mat for v in row)


def test_sympy_conversion():
    mat = ri.to_matrix([[1, '1/2'], [0, -3]])
    smat = ri.to_sympy(mat)
    assert smat == SympyMatrix([[1, SympyRational(1, 2)], [0, -3]])
    assert ri.from_sympy(smat) == mat
