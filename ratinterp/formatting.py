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
"""Formatting of vectors and polynomials for display"""

from typing import Iterable

from .rational import MINUS_ONE, Numeric, is_one, is_positive, is_zero, to_vector

__all__ = ['format_vector', 'format_polynomial']


def format_vector(vec: Iterable[Numeric]) -> str:
    """Format a vector as '(a0 a1 ... an)'"""
    return '(' + ' '.join(str(v) for v in to_vector(vec)) + ')'


def format_polynomial(coeffs: Iterable[Numeric]) -> str:
    """Format coefficients [a0, ..., an] as 'f(x)=an*x^n+...+a1*x+a0'

    Zero terms are omitted and unit coefficients are implied on x terms,
    e.g. [-4, 15/2, -3, 1/2] -> 'f(x)=1/2*x^3-3*x^2+15/2*x-4'.
    """
    coeffs = to_vector(coeffs)
    terms = []
    for i in reversed(range(len(coeffs))):
        a = coeffs[i]
        if is_zero(a):
            continue
        term = ''
        if terms and is_positive(a):
            term += '+'
        if i == 0:
            term += str(a)
        elif a == MINUS_ONE:
            term += '-x'
        elif is_one(a):
            term += 'x'
        else:
            term += str(a) + '*x'
        if i > 1:
            term += '^' + str(i)
        terms.append(term)
    if not terms:
        return 'f(x)=0'
    return 'f(x)=' + ''.join(terms)
