#!/usr/bin/env python3

# Copyright (C) 2022 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""CurvePoint dataclass.

Dataclass encapsulating a point (x, y) of a Weierstrass Curve,
together with the chord-and-tangent arithmetic of curve points.

There is no point at infinity:
operations whose result would be the point at infinity
(e.g. the sum of a point and its opposite)
raise DivisionByZero instead.
"""

import logging
from dataclasses import dataclass
from typing import Type, TypeVar

from dataclasses_json import DataClassJsonMixin

from weierstrass.alias import Coordinates, LineCoefficients, Real
from weierstrass.curve import Curve
from weierstrass.exceptions import DivisionByZero, TypeMismatch
from weierstrass.utils import float_from_real

logger = logging.getLogger(__name__)

_CurvePoint = TypeVar("_CurvePoint", bound="CurvePoint")


@dataclass(frozen=True)
class CurvePoint(DataClassJsonMixin):
    """Point (x, y) bound to a Weierstrass Curve.

    The point is checked to be on the curve at construction time,
    so that any existing CurvePoint is on its curve
    (within the curve membership tolerance).
    CurvePoints are immutable: all operations return new points.

    Two CurvePoints are equal if they have the same coordinates
    and equal curves.
    """

    curve: Curve
    x: float
    y: float

    def __init__(self, curve: Curve, x: Real, y: Real) -> None:

        if not isinstance(curve, Curve):
            raise TypeMismatch(f"not a Curve: {type(curve).__name__}")
        object.__setattr__(self, "curve", curve)
        object.__setattr__(self, "x", float_from_real(x, TypeMismatch))
        object.__setattr__(self, "y", float_from_real(y, TypeMismatch))

        self.curve.require_on_curve(self.x, self.y)

    @property
    def is_on_curve(self) -> bool:
        "Always True: points not on the curve cannot be instantiated."
        return True

    @property
    def point(self) -> Coordinates:
        "Return the (x, y) coordinates."
        return self.x, self.y

    @classmethod
    def from_x(
        cls: Type[_CurvePoint], curve: Curve, x: Real, high: bool = False
    ) -> _CurvePoint:
        """Return the point of the curve with abscissa x.

        Of the two ordinates, the lower one is used
        unless high is True.
        """
        y_minus, y_plus = curve.y_from_x(x)
        return cls(curve, x, y_plus if high else y_minus)

    def _require_same_curve(self, other: object) -> "CurvePoint":
        if not isinstance(other, CurvePoint):
            raise TypeMismatch(f"not a CurvePoint: {type(other).__name__}")
        if other.curve != self.curve:
            raise TypeMismatch(f"not a point on {self.curve}: {other}")
        return other

    def tangent(self) -> LineCoefficients:
        """Return the coefficients of the tangent at the point.

        The tuple (gradient, intercept) of the tangent equation
        Y = gradient * X + intercept
        is obtained by implicit differentiation of the curve equation.
        DivisionByZero is raised if the tangent is vertical.
        """
        a1, a3, a2, a4, _ = self.curve.coefficients
        x, y = self.x, self.y

        den = 2 * y + a1 * x + a3
        if den == 0:
            raise DivisionByZero(f"vertical tangent at ({x}, {y})")
        gradient = (3 * x * x + 2 * a2 * x - a1 * y + a4) / den
        intercept = -gradient * x + y
        return gradient, intercept

    def _chord_gradient(self, other: "CurvePoint") -> float:
        # points are assumed to be distinct
        if other.x == self.x:
            err_msg = f"vertical chord between ({self.x}, {self.y})"
            err_msg += f" and ({other.x}, {other.y})"
            raise DivisionByZero(err_msg)
        return (other.y - self.y) / (other.x - self.x)

    def add(self, other: "CurvePoint") -> "CurvePoint":
        """Return the sum of two points.

        The other point must be on the same curve.
        Coincident points are doubled.
        """

        other = self._require_same_curve(other)
        if self == other:
            logger.debug("adding a point to itself: doubling %s instead", self.point)
            return self.double()

        a1, a3, a2, _, _ = self.curve.coefficients
        gradient = self._chord_gradient(other)
        x3 = gradient * gradient + a1 * gradient - a2 - self.x - other.x
        y3 = -a1 * x3 - a3 - gradient * x3 + gradient * self.x - self.y
        return type(self)(self.curve, x3, y3)

    def double(self) -> "CurvePoint":
        "Return the double of the point."

        a1, a3, a2, _, _ = self.curve.coefficients
        gradient = self.tangent()[0]
        x3 = gradient * gradient + a1 * gradient - a2 - 2 * self.x
        y3 = -a1 * x3 - a3 - gradient * x3 + gradient * self.x - self.y
        return type(self)(self.curve, x3, y3)

    def negate(self) -> "CurvePoint":
        """Return the opposite point.

        The opposite is the other intersection of the curve
        with the vertical line through the point.
        """
        a1, a3, _, _, _ = self.curve.coefficients
        return type(self)(self.curve, self.x, -self.y - a1 * self.x - a3)

    def __add__(self, other: "CurvePoint") -> "CurvePoint":
        return self.add(other)

    def __neg__(self) -> "CurvePoint":
        return self.negate()
