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
"""Functions for parsing console input into commands, numbers and vectors"""

from fractions import Fraction
from typing import List
import re

from .matrix import Vector

__all__ = ['chop_command', 'parse_rational', 'parse_vector']

_RATIONAL = re.compile(r"^[+-]?(\d+(/\d+)?|\d*\.\d+|\d+\.\d*)$")


def chop_command(command: str) -> List[str]:
    """Split a command line into its arguments

    Arguments are separated by whitespace. A parenthesized vector literal is kept
    together as one argument, its entries joined by single blanks.

    Example:
        chop_command('itrp (1 2  3) p1') -> ['itrp', '(1 2 3)', 'p1']

    Args:
        command (str):
            One line of console input.

    Returns:
        (list of str):
        The arguments. An unterminated vector literal is returned as last argument.
    """
    res = []
    buf = []
    for s in command.split():
        if not buf:
            if s.startswith('(') and not s.endswith(')'):
                buf.append(s)
            else:
                res.append(s)
        else:
            buf.append(s)
            if s.endswith(')'):
                res.append(' '.join(buf))
                buf = []
    if buf:
        res.append(' '.join(buf))
    return res


def parse_rational(text: str) -> Fraction:
    """Parse an integer ('-3'), fraction ('7/2') or decimal ('0.25') literal"""
    text = text.strip()
    if not _RATIONAL.match(text):
        raise ValueError("invalid number '" + text + "'")
    try:
        return Fraction(text)
    except ZeroDivisionError:
        raise ValueError("invalid number '" + text + "'") from None


def parse_vector(token: str, polys) -> Vector:
    """Parse a vector literal or look up a stored vector

    Args:
        token (str):
            Either a literal like '(1 -2 3/4)' or the name of a stored polynomial.

        polys (PolynomialStore or dict):
            Named vectors that may be referenced by token.

    Returns:
        (list of Fraction):
        A fresh vector.
    """
    if not token:
        raise ValueError("empty vector argument")
    if not token.startswith('('):
        if token not in polys:
            raise ValueError("unknown name '" + token + "'")
        return list(polys[token])
    if not token.endswith(')'):
        raise ValueError("invalid vector '" + token + "'")
    return [parse_rational(s) for s in token[1:-1].split()]
