#!/usr/bin/env python3

# Copyright (C) 2022 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Weierstrass Curve class.

The curve is the set of real points (x, y)
that are solutions to the general Weierstrass equation

    y^2 + a1*x*y + a3*y = x^3 + a2*x^2 + a4*x + a6

See https://crypto.stanford.edu/pbc/notes/elliptic/explicit.html
"""

import math
from dataclasses import dataclass
from typing import Tuple

from dataclasses_json import DataClassJsonMixin

from weierstrass.alias import Coordinates, Point, Real
from weierstrass.exceptions import (
    InvalidAbscissa,
    InvalidCoefficient,
    NoRealImage,
    PointNotOnCurve,
)
from weierstrass.utils import float_from_real, round_half_away


@dataclass(frozen=True)
class Curve(DataClassJsonMixin):
    """Cubic curve in general Weierstrass form over the reals.

    The coefficients are stored as finite floats;
    no other check is performed,
    i.e. singular curves are accepted.

    Curves are immutable and compare (and hash) by coefficients.
    """

    a1: float
    a3: float
    a2: float
    a4: float
    a6: float

    def __init__(self, a1: Real, a3: Real, a2: Real, a4: Real, a6: Real) -> None:

        for name_, value in zip(("a1", "a3", "a2", "a4", "a6"), (a1, a3, a2, a4, a6)):
            try:
                object.__setattr__(
                    self, name_, float_from_real(value, InvalidCoefficient)
                )
            except InvalidCoefficient as e:
                raise InvalidCoefficient(f"invalid {name_}: {value!r}") from e

    def __str__(self) -> str:
        result = "Y^2"
        result += f" + {self.a1} XY + {self.a3} Y"
        result += f" = X^3 + {self.a2} X^2 + {self.a4} X + {self.a6}"
        return result

    def __contains__(self, Q: object) -> bool:
        "Return True if Q is a Point on the curve."
        if not isinstance(Q, Point):
            return False
        return self.is_on_curve(Q.x, Q.y)

    @property
    def coefficients(self) -> Tuple[float, float, float, float, float]:
        "Return (a1, a3, a2, a4, a6)."
        return self.a1, self.a3, self.a2, self.a4, self.a6

    def _lhs(self, x: float, y: float) -> float:
        return y * y + self.a1 * x * y + self.a3 * y

    def _rhs(self, x: float) -> float:
        return ((x + self.a2) * x + self.a4) * x + self.a6

    def is_on_curve(self, x: float, y: float) -> bool:
        """Return True if (x, y) is on the curve.

        The two sides of the curve equation are compared
        after rounding to CURVE_MEMBERSHIP_DIGITS decimal digits,
        absorbing the noise of floating point arithmetic.
        Pairs for which either side is not finite are not on the curve.
        """
        lhs = round_half_away(self._lhs(x, y))
        rhs = round_half_away(self._rhs(x))
        if not (math.isfinite(lhs) and math.isfinite(rhs)):
            return False
        return lhs == rhs

    def require_on_curve(self, x: float, y: float) -> None:
        """Require (x, y) to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(x, y):
            raise PointNotOnCurve(f"point not on curve: ({x}, {y})")

    def y_from_x(self, x: Real) -> Coordinates:
        """Return the two ordinates associated to the abscissa x.

        The curve equation is solved as the quadratic in y

            y^2 + (a1*x + a3)*y - (x^3 + a2*x^2 + a4*x + a6) = 0

        and the (y_minus, y_plus) roots are returned in this order.
        The two roots coincide at a ramification point.
        """
        x = float_from_real(x, InvalidAbscissa)

        b = self.a1 * x + self.a3
        c = -self._rhs(x)
        discriminant = b * b - 4 * c
        if discriminant < 0:
            raise NoRealImage(f"no real ordinate for x-coordinate: {x}")
        # overflow in the polynomial evaluation
        if not math.isfinite(discriminant):
            raise InvalidAbscissa(f"x-coordinate out of range: {x}")

        root = math.sqrt(discriminant)
        return (-b - root) / 2, (-b + root) / 2
