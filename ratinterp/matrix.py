#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Vector and matrix data model for exact elimination

A Vector is a plain list of Fractions and a Matrix is a list of row Vectors.
All rows of a matrix have equal length; the empty matrix [] stands for a system
without equations. The helpers in this module convert between this model and
numpy arrays, scipy sparse matrices and sympy matrices.
"""

from fractions import Fraction
from typing import Iterable, List, Tuple
import numpy as np
from scipy import sparse
from sympy import Matrix as SympyMatrix

from .rational import Numeric, ZERO, to_rational, to_sympy_rational, to_vector

__all__ = [
    'Vector', 'Matrix', 'to_matrix', 'is_rectangular', 'shape', 'copy_matrix', 'from_numpy', 'to_numpy',
    'from_sparse', 'to_sympy', 'from_sympy'
]

Vector = List[Fraction]
Matrix = List[Vector]  # row vectors


def to_matrix(rows: Iterable[Iterable[Numeric]]) -> Matrix:
    """Convert nested row sequences into a Matrix

    Args:
        rows (iterable of iterables):
            The rows of the matrix, e.g. [[1, 2], ['1/2', 3]].

    Returns:
        (Matrix):
        A fresh list of Fraction rows.
    """
    rows = list(rows)
    if any(isinstance(r, str) for r in rows):
        raise ValueError("Matrix rows must be sequences of numbers, not strings")
    mat = [to_vector(r) for r in rows]
    if not is_rectangular(mat):
        raise ValueError("All rows of a matrix must have the same length, got lengths " +
                         str(sorted({len(r) for r in mat})))
    return mat


def is_rectangular(mat: Matrix) -> bool:
    if not mat:
        return True
    return all(len(row) == len(mat[0]) for row in mat)


def shape(mat: Matrix) -> Tuple[int, int]:
    """Number of rows and columns. The empty matrix has shape (0, 0)."""
    if not mat:
        return 0, 0
    return len(mat), len(mat[0])


def copy_matrix(mat: Matrix) -> Matrix:
    """Copy the row lists of a matrix. Fractions are immutable and shared."""
    return [list(row) for row in mat]


def from_numpy(arr: np.ndarray) -> Matrix:
    """Create a Matrix from a 2-D numpy array

    Integer arrays are converted exactly. Float entries are converted exactly,
    object arrays may hold Fractions or sympy Rationals.
    """
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got {arr.ndim} dimension(s)")
    return [[to_rational(v) for v in row] for row in arr]


def to_numpy(mat: Matrix) -> np.ndarray:
    """Convert to numpy float array."""
    rows, cols = shape(mat)
    result = np.zeros((rows, cols), dtype=float)
    for i, row in enumerate(mat):
        for j, val in enumerate(row):
            result[i, j] = float(val)
    return result


def from_sparse(sparse_matrix: sparse.spmatrix) -> Matrix:
    """Create a Matrix from a scipy sparse matrix, filling in the zeros."""
    rows, cols = sparse_matrix.shape
    mat = [[ZERO] * cols for _ in range(rows)]
    coo = sparse.coo_matrix(sparse_matrix)
    for i, j, v in zip(coo.row, coo.col, coo.data):
        mat[i][j] += to_rational(v)
    return mat


def to_sympy(mat: Matrix) -> SympyMatrix:
    """Convert to a sympy Matrix of Rationals."""
    rows, cols = shape(mat)
    return SympyMatrix(rows, cols, [to_sympy_rational(v) for row in mat for v in row])


def from_sympy(mat: SympyMatrix) -> Matrix:
    """Create a Matrix from a sympy Matrix with rational entries."""
    return [[to_rational(mat[i, j]) for j in range(mat.cols)] for i in range(mat.rows)]
