#!/usr/bin/env python3

# Copyright (C) 2022 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Protocol, Tuple, Union, runtime_checkable

# Real numbers accepted as input:
# int and float (and any numbers.Real, e.g. fractions.Fraction),
# but not bool.
# They are always stored as finite float values.
Real = Union[int, float]

# A pair of coordinates, e.g. the two ordinates returned by Curve.y_from_x
# or the (x, y) tuple of a CurvePoint
Coordinates = Tuple[float, float]

# (gradient, intercept) of the line Y = gradient * X + intercept
LineCoefficients = Tuple[float, float]


@runtime_checkable
class Point(Protocol):
    """Generic point in the plane, with x and y accessors.

    CurvePoint satisfies it structurally:
    there is no inheritance between point kinds.
    """

    @property
    def x(self) -> float:
        ...

    @property
    def y(self) -> float:
        ...
