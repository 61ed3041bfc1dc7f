#!/usr/bin/env python3

# Copyright (C) 2022 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Utility functions.

Conversion of real number representations to float
and the rounding policy used for curve membership.
"""

import math
import sys
from numbers import Real as _Real
from typing import Any, Type

from weierstrass.exceptions import WeierstrassValueError

# number of decimal digits kept when comparing the two sides
# of the curve equation
CURVE_MEMBERSHIP_DIGITS = 2
# bias added before rounding to counter float representation error,
# e.g. 1.005 is stored as 1.00499999999999989...
CURVE_MEMBERSHIP_EPSILON = sys.float_info.epsilon


def float_from_real(
    value: Any, err_cls: Type[Exception] = WeierstrassValueError
) -> float:
    """Return a finite float from a real number.

    Allowed real representations are int, float,
    and any other numbers.Real (e.g. fractions.Fraction).
    bool, None, strings, and complex numbers are not allowed,
    as are infinite or NaN values.

    err_cls is the exception class raised on failure.
    """

    # bool is a subclass of int, but True is not a coefficient
    if isinstance(value, bool) or not isinstance(value, _Real):
        raise err_cls(f"not a real number: {value!r}")
    try:
        float_ = float(value)
    except OverflowError as e:
        raise err_cls(f"not a finite real number: {value!r}") from e
    if not math.isfinite(float_):
        raise err_cls(f"not a finite real number: {value!r}")
    return float_


def round_half_away(num: float, digits: int = CURVE_MEMBERSHIP_DIGITS) -> float:
    """Round num to the given number of decimal digits.

    Halfway cases are rounded away from zero,
    after adding CURVE_MEMBERSHIP_EPSILON.
    Non-finite values are returned unchanged.
    """

    scale = 10 ** digits
    scaled = (num + CURVE_MEMBERSHIP_EPSILON) * scale
    if not math.isfinite(scaled):
        return scaled
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / scale
