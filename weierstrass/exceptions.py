#!/usr/bin/env python3

# Copyright (C) 2022 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Exception classes.

The three base classes are only meant to discriminate between Exceptions
raised by weierstrass and those raised by other codebase:
users can still catch the regular ValueError, TypeError,
and ZeroDivisionError from which they are derived.

The leaf classes name the specific failure,
so that callers can handle each kind distinctly
(e.g. NoRealImage is an off-curve query, not a programming bug).
"""


class WeierstrassValueError(ValueError):
    pass


class WeierstrassTypeError(TypeError):
    pass


class WeierstrassZeroDivisionError(ZeroDivisionError):
    pass


class InvalidCoefficient(WeierstrassValueError):
    "A curve coefficient is missing or is not a finite real number."


class InvalidAbscissa(WeierstrassValueError):
    "The abscissa is not a finite real number."


class NoRealImage(WeierstrassValueError):
    "No real ordinate exists at the given abscissa."


class PointNotOnCurve(WeierstrassValueError):
    "The coordinate pair does not satisfy the curve equation."


class TypeMismatch(WeierstrassTypeError):
    "The argument is not of the expected type or not on the expected curve."


class DivisionByZero(WeierstrassZeroDivisionError):
    "The tangent or chord slope is undefined (vertical line)."
