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
"""Plotting of interpolating polynomials (plot_polynomial)"""

from fractions import Fraction
import logging
import matplotlib.pyplot as plt
from matplotlib import use as set_matplotlib_backend

from .interpolation import evaluate
from .names import *
from .rational import to_vector

__all__ = ['plot_polynomial']


def plot_polynomial(coeffs, **kwargs):
    """Plot a polynomial and, optionally, the sample points it interpolates
    
    The polynomial is evaluated exactly at equidistant rational abscissae, only the results
    are converted to floats for drawing.
    
    Example:
        coeffs = interpolate([1, 2, 3, 4], [1, 3, 5, 10])
        plot_polynomial(coeffs, xs=[1, 2, 3, 4], ys=[1, 3, 5, 10])
    
    Args:
        coeffs (list of Fraction or numeric):
            Coefficients [a0, a1, ..., an] of the polynomial, lowest degree first.
            
        xs, ys (optional (list of Fraction or numeric)):
            Sample points that are marked in the plot. If no x_range is given, the plot
            spans the sample abscissae.
            
        x_range (optional (tuple)): (Default: range of xs, or (-1, 1))
            Lower and upper end of the plotted interval.
            
        points (optional (int)): (Default: 200)
            Number of intervals in which the x range is sampled.
            
        plt_backend (optional (str)):
            The matplotlib backend that should be used for plotting, e.g., 'agg' or 'template'
            for non-interactive environments.
            
        show (optional (bool)): (Default: True)
            Should matplotlib show the plot or should it stop after plot generation.

    Returns:
        (matplotlib.lines.Line2D):
        The line object of the plotted polynomial.
    """
    allowed_keys = {XS, YS, X_RANGE, POINTS, PLT_BACKEND, SHOW}
    for key in kwargs:
        if key not in allowed_keys:
            raise Exception("Key " + key + " is not supported.")
    coeffs = to_vector(coeffs)
    xs = to_vector(kwargs.get(XS, []))
    ys = to_vector(kwargs.get(YS, []))
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length.")

    if PLT_BACKEND in kwargs:
        set_matplotlib_backend(kwargs[PLT_BACKEND])
    show = kwargs.get(SHOW, True)
    points = int(kwargs.get(POINTS, 200))
    if points < 1:
        raise ValueError("points must be positive.")

    if X_RANGE in kwargs:
        lower, upper = to_vector(kwargs[X_RANGE])
    elif xs:
        lower, upper = min(xs), max(xs)
    else:
        lower, upper = Fraction(-1), Fraction(1)
    if lower == upper:
        lower, upper = lower - 1, upper + 1

    step = (upper - lower) / points
    x_space = [lower + k * step for k in range(points + 1)]
    y_space = [evaluate(coeffs, x) for x in x_space]

    line = plt.plot([float(x) for x in x_space], [float(y) for y in y_space], linewidth=1.0)[0]
    if xs:
        line.axes.plot([float(x) for x in xs], [float(y) for y in ys], 'o')
    line.axes.set_xlabel('x')
    line.axes.set_ylabel('f(x)')
    if show:
        try:
            plt.show()
        except UserWarning as e:
            if 'FigureCanvasTemplate is non-interactive' in str(e):
                logging.warning('warning: Interactive plot not supported in current execution environment.')
            else:
                raise
    return line
