#!/usr/bin/env python3

# Copyright (C) 2022 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `weierstrass.utils` module."

import math
from fractions import Fraction

import pytest

from weierstrass.exceptions import InvalidCoefficient, WeierstrassValueError
from weierstrass.utils import (
    CURVE_MEMBERSHIP_DIGITS,
    float_from_real,
    round_half_away,
)


def test_float_from_real() -> None:

    for value in (0, 1, -3, 0.5, -2.25, Fraction(1, 4)):
        float_ = float_from_real(value)
        assert isinstance(float_, float)
        assert float_ == value

    assert float_from_real(10 ** 20) == 1e20


def test_float_from_real_exceptions() -> None:

    for value in (None, "1", b"\x01", 1j, [1], True, False):
        with pytest.raises(WeierstrassValueError, match="not a real number: "):
            float_from_real(value)

    for value in (float("nan"), float("inf"), -float("inf"), 10 ** 400):
        with pytest.raises(WeierstrassValueError, match="not a finite real number: "):
            float_from_real(value)

    # the exception class can be chosen by the caller
    with pytest.raises(InvalidCoefficient, match="not a real number: "):
        float_from_real("1", InvalidCoefficient)


def test_round_half_away() -> None:

    assert CURVE_MEMBERSHIP_DIGITS == 2

    assert round_half_away(1.234) == 1.23
    assert round_half_away(1.236) == 1.24
    assert round_half_away(-1.236) == -1.24
    assert round_half_away(0) == 0

    # halfway cases
    assert round_half_away(0.125) == 0.13
    # 1.005 is actually stored as 1.00499999999999989...
    assert round_half_away(1.005) == 1.01
    assert round_half_away(2.5, 0) == 3
    assert round_half_away(-2.5, 0) == -3
    # unlike the builtin round
    assert round(2.5) == 2

    assert round_half_away(float("inf")) == float("inf")
    assert round_half_away(-float("inf")) == -float("inf")
    assert math.isnan(round_half_away(float("nan")))
