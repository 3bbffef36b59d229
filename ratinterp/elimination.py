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
"""Gaussian elimination over exact rationals (solve, eliminate, back_substitute)"""

from typing import List
import logging

from .matrix import Matrix, shape, to_matrix
from .rational import is_one, is_zero

__all__ = ['solve', 'eliminate', 'back_substitute', 'is_triangular', 'pivot_columns', 'rank']

LOG = logging.getLogger(__name__)


def solve(mat: Matrix) -> Matrix:
    """Transform a matrix into reduced row echelon form

    Forward elimination with partial pivoting is followed by back substitution.
    Singular, over- or underdetermined systems are no error: the result simply
    has fewer pivots than rows or columns.

    Example:
        solve([[1, 2, 3, 4], [4, 5, 6, 7], [7, 8, 9, 10]])
        -> [[1, 0, -1, -2], [0, 1, 2, 3], [0, 0, 0, 0]]

    Args:
        mat (list of lists of Fraction):
            A rectangular matrix of row vectors, possibly empty. Entries may be any value
            accepted by to_rational. The input is not modified.

    Returns:
        (list of lists of Fraction):
        The reduced row echelon form of mat.
    """
    return back_substitute(eliminate(mat))


def eliminate(mat: Matrix) -> Matrix:
    """Forward elimination: bring a matrix into row echelon form

    The pivot of each column is the first non-zero entry at or below the current row.
    The pivot row is normalized so that the pivot becomes one and the pivot column is
    cleared in all rows underneath. Columns without pivot are skipped.

    Args:
        mat (list of lists of Fraction):
            A rectangular matrix of row vectors, possibly empty. Entries may be any value
            accepted by to_rational. The input is not modified.

    Returns:
        (list of lists of Fraction):
        A matrix of the same shape in row echelon form with leading ones.
    """
    mat = to_matrix(mat)
    m, n = shape(mat)
    pivotal_column, current_row = 0, 0
    while current_row < m and pivotal_column < n:
        pivotal_row = next((i for i in range(current_row, m) if not is_zero(mat[i][pivotal_column])), None)
        if pivotal_row is None:
            pivotal_column += 1
            continue
        if pivotal_row != current_row:
            mat[current_row], mat[pivotal_row] = mat[pivotal_row], mat[current_row]
        pivot_row = mat[current_row]
        pivot = pivot_row[pivotal_column]
        for j in range(pivotal_column, n):
            pivot_row[j] /= pivot
        for i in range(current_row + 1, m):
            elim = mat[i][pivotal_column]
            if is_zero(elim):
                continue
            row = mat[i]
            for j in range(pivotal_column, n):
                row[j] -= elim * pivot_row[j]
        current_row += 1
        pivotal_column += 1
    LOG.debug('Eliminated %dx%d matrix, %d pivot(s) found.', m, n, current_row)
    return mat


def back_substitute(mat: Matrix) -> Matrix:
    """Backward elimination: reduce a row echelon matrix to reduced row echelon form

    Rows are processed from the last to the first. Every pivot (the leading entry
    of a row) must be one, as produced by eliminate. The pivot column is then cleared
    in all rows above.

    Args:
        mat (list of lists of Fraction):
            A matrix in row echelon form with leading ones. The input is not modified.

    Returns:
        (list of lists of Fraction):
        The reduced row echelon form of mat.
    """
    mat = to_matrix(mat)
    mat.reverse()
    m, n = shape(mat)
    pivotal_column = n
    for current_row in range(m):
        row = mat[current_row]
        found = next((j for j in range(pivotal_column) if not is_zero(row[j])), None)
        if found is None:
            continue
        pivotal_column = found
        if not is_one(row[pivotal_column]):
            raise ValueError("Matrix is not in row echelon form: leading entry " + str(row[pivotal_column]) +
                             " in column " + str(pivotal_column) + " is not one.")
        for i in range(current_row + 1, m):
            elim = mat[i][pivotal_column]
            if is_zero(elim):
                continue
            other = mat[i]
            for j in range(pivotal_column, n):
                other[j] -= elim * row[j]
    mat.reverse()
    return mat


def is_triangular(mat: Matrix) -> bool:
    """Check if a solved system has a non-zero pivot on every diagonal position

    The matrix must be non-empty and have more columns than rows. For every row i the
    entries left of column i must be zero and the entry in column i must not.
    """
    mat = to_matrix(mat)
    if not mat:
        return False
    if len(mat[0]) <= len(mat):
        return False
    return all(all(is_zero(row[k]) for k in range(i)) and not is_zero(row[i]) for i, row in enumerate(mat))


def pivot_columns(mat: Matrix) -> List[int]:
    """Columns that hold a pivot in the reduced row echelon form of mat"""
    pivots = []
    for row in solve(mat):
        lead = next((j for j, v in enumerate(row) if not is_zero(v)), None)
        if lead is not None:
            pivots.append(lead)
    return pivots


def rank(mat: Matrix) -> int:
    return len(pivot_columns(mat))
