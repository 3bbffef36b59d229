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
"""Exact rational scalars for interpolation and elimination

All arithmetic in ratinterp is carried out on fractions.Fraction. This module
converts the numeric types a user may hand in (int, str, float, numpy scalars,
sympy rationals) into Fractions and provides the small predicate set the
elimination routines rely on.
"""

from fractions import Fraction
from numbers import Integral
from typing import Iterable, List, Union
import math
import numpy as np
from sympy import Rational as SympyRational

__all__ = [
    'Numeric', 'ZERO', 'ONE', 'MINUS_ONE', 'to_rational', 'to_sympy_rational', 'to_vector',
    'is_zero', 'is_one', 'is_positive', 'rational_pow'
]

# Type alias for values that can be converted to Fraction
Numeric = Union[int, float, str, Fraction, SympyRational]

ZERO = Fraction(0)
ONE = Fraction(1)
MINUS_ONE = Fraction(-1)


def to_rational(value: Numeric) -> Fraction:
    """Convert a numeric value to a Fraction

    Accepted are Fractions, integers (including numpy integers), strings such as '3', '-7/2'
    or '1.25', sympy Rationals and floats. Floats are converted exactly, i.e. 0.1 becomes
    3602879701896397/36028797018963968. Use strings for decimal literals.

    Args:
        value: Value to convert.

    Returns:
        (Fraction):
        The value as exact rational.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert {type(value)} to Fraction")
    if isinstance(value, (Integral, np.integer)):
        return Fraction(int(value))
    if isinstance(value, SympyRational):
        return Fraction(int(value.p), int(value.q))
    if isinstance(value, str):
        return Fraction(value.strip())
    if isinstance(value, (float, np.floating)):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Cannot convert {value} to a rational number")
        return Fraction(value)
    raise TypeError(f"Cannot convert {type(value)} to Fraction")


def to_sympy_rational(value: Numeric) -> SympyRational:
    """Convert a value to a sympy Rational."""
    frac = to_rational(value)
    return SympyRational(frac.numerator, frac.denominator)


def to_vector(values: Iterable[Numeric]) -> List[Fraction]:
    """Convert an iterable of numeric values into a vector of Fractions."""
    return [to_rational(v) for v in values]


def is_zero(value: Fraction) -> bool:
    return value.numerator == 0


def is_one(value: Fraction) -> bool:
    return value.numerator == 1 and value.denominator == 1


def is_positive(value: Fraction) -> bool:
    return value.numerator > 0


def rational_pow(base: Fraction, exponent: int) -> Fraction:
    """Raise a rational to a non-negative integer power

    The zeroth power of zero is one, so that a sample at x=0 contributes
    the constant term of a Vandermonde row.

    Args:
        base (Fraction):
            The base.

        exponent (int):
            Non-negative integer exponent.

    Returns:
        (Fraction):
        base**exponent
    """
    if isinstance(exponent, bool) or not isinstance(exponent, (Integral, np.integer)) or exponent < 0:
        raise ValueError(f"Exponent must be a non-negative integer, got {exponent!r}")
    if exponent == 0:
        return ONE
    return to_rational(base)**int(exponent)
