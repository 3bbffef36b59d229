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
"""Polynomial interpolation through exact rational sample points"""

from fractions import Fraction
from typing import Iterable
import logging

from .elimination import is_triangular, solve
from .matrix import Matrix, Vector
from .rational import Numeric, ZERO, is_zero, rational_pow, to_rational, to_vector

__all__ = ['interpolate', 'vandermonde', 'trim_coefficients', 'evaluate', 'is_unique']

LOG = logging.getLogger(__name__)


def interpolate(xs: Iterable[Numeric], ys: Iterable[Numeric]) -> Vector:
    """Compute the polynomial of lowest degree that passes through the sample points

    For n points (x_i, y_i) the coefficients [a0, a1, ..., a(n-1)] of the unique polynomial
    p(x) = a0 + a1*x + ... + a(n-1)*x^(n-1) with p(x_i) = y_i are determined by solving
    the Vandermonde system exactly. Trailing zero coefficients are removed.

    Example:
        interpolate([1, 2, 3, 4], [1, 3, 5, 10]) -> [-4, 15/2, -3, 1/2]

    Args:
        xs (list of Fraction or numeric):
            The sample abscissae. Must be non-empty and pairwise distinct. Distinctness is
            not checked upfront, use is_unique before calling interpolate.

        ys (list of Fraction or numeric):
            The sample values, same length as xs.

    Returns:
        (list of Fraction):
        The coefficients, lowest degree first. The zero polynomial is returned as [0].
    """
    xs = to_vector(xs)
    ys = to_vector(ys)
    if not xs:
        raise ValueError("At least one sample point is required for interpolation.")
    if len(ys) != len(xs):
        raise ValueError("xs and ys must have the same length (" + str(len(xs)) + " != " + str(len(ys)) + ").")
    mat = vandermonde(xs)
    for row, y in zip(mat, ys):
        row.append(y)
    mat = solve(mat)
    if not is_triangular(mat):
        raise RuntimeError("Interpolation system is singular. The sample x-values must be pairwise distinct.")
    coeffs = trim_coefficients([row[-1] for row in mat])
    LOG.debug('Interpolated %d point(s), resulting degree %d.', len(xs), len(coeffs) - 1)
    return coeffs


def vandermonde(xs: Iterable[Numeric]) -> Matrix:
    """Square Vandermonde matrix, row i = [x_i^0, x_i^1, ..., x_i^(n-1)]"""
    xs = to_vector(xs)
    n = len(xs)
    return [[rational_pow(x, j) for j in range(n)] for x in xs]


def trim_coefficients(coeffs: Iterable[Numeric]) -> Vector:
    """Strip trailing zero coefficients. Never returns an empty vector."""
    coeffs = to_vector(coeffs)
    while coeffs and is_zero(coeffs[-1]):
        coeffs.pop()
    return coeffs or [ZERO]


def evaluate(coeffs: Iterable[Numeric], x: Numeric) -> Fraction:
    """Evaluate a0 + a1*x + ... + an*x^n exactly"""
    x = to_rational(x)
    return sum((a * rational_pow(x, i) for i, a in enumerate(to_vector(coeffs))), ZERO)


def is_unique(values: Iterable[Numeric]) -> bool:
    """Check that no value occurs twice"""
    values = sorted(to_vector(values))
    return all(a != b for a, b in zip(values, values[1:]))
