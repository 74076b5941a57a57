#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fm (m being a prime),
together with a point at infinity INF.
The constants a, b must satisfy the relationship
4 a^3 + 27 b^2 ≠ 0 (mod m).

The free functions work on the raw (a, b, m) parameters
and do not check them: a non-prime m or a singular curve
will eventually surface as NonInvertibleElement.
CurveGroup bundles validated parameters.

Note that Python % with a positive modulus always
returns a value in [0, m), whatever the sign of the dividend.
"""

from dataclasses import InitVar, dataclass

from dataclasses_json import DataClassJsonMixin

from ecgroup.exceptions import ECGroupValueError, UnsupportedScalar
from ecgroup.number_theory import is_probable_prime, mod_inv, require_int64
from ecgroup.point import INF, Affine, Infinity, Point, require_point


def negate(Q: Point, m: int) -> Point:
    """Return the opposite point.

    The input point is not checked to be on the curve.
    """
    require_point(Q)
    if isinstance(Q, Infinity):
        return INF
    # % m is required so that a point with y == 0 is its own opposite
    return Affine(Q.x, (m - Q.y) % m)


def add(P: Point, Q: Point, a: int, m: int) -> Point:
    """Return the sum of two points.

    The points are assumed to be on curve:
    this is the affine group law, doubling included.
    """

    require_point(P)
    require_point(Q)

    if isinstance(P, Infinity):
        return Q
    if isinstance(Q, Infinity):
        return P

    # opposite points, or doubling of a point of order 2
    if P.x == Q.x and (P.y != Q.y or P.y == 0):
        return INF

    if P == Q:  # point doubling
        lam = (3 * P.x * P.x + a) * mod_inv(2 * P.y, m) % m
    else:
        lam = (Q.y - P.y) * mod_inv(Q.x - P.x, m) % m

    x = (lam * lam - P.x - Q.x) % m
    y = (lam * (P.x - x) - P.y) % m
    return Affine(x, y)


def multiply(n: int, Q: Point, a: int, m: int) -> Point:
    """Scalar multiplication of a curve point.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the n coefficient.

    The input point is assumed to be on curve.
    """

    if n < 0:
        raise UnsupportedScalar(f"negative n: {n}")

    result: Point = INF
    addend = Q
    while n > 0:
        # if least significant bit of n is 1, then add addend to result
        if n & 1:
            result = add(result, addend, a, m)
        # the doubling part of 'double & add'
        addend = add(addend, addend, a, m)
        n >>= 1
    return result


def curve_membership(x: int, y: int, a: int, b: int, m: int) -> bool:
    "Return True if (x, y) satisfies y^2 = x^3 + a*x + b (mod m)."

    return (y * y - ((x * x + a) * x + b)) % m == 0


@dataclass(frozen=True)
class CurveGroup(DataClassJsonMixin):
    """Finite group of the points of an elliptic curve over Fm.

    The group is defined by the point addition group law.
    Parameters are checked at construction unless
    check_validity is False.
    """

    a: int
    b: int
    m: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        require_int64(self.a, "a")
        require_int64(self.b, "b")
        require_int64(self.m, "m")

        if not is_probable_prime(self.m):
            raise ECGroupValueError(f"m is not prime: {self.m}")

        # short Weierstrass form requires characteristic other than 2 and 3
        if self.m < 5:
            raise ECGroupValueError(f"m must be at least 5: {self.m}")

        d = 4 * self.a * self.a * self.a + 27 * self.b * self.b
        if d % self.m == 0:
            raise ECGroupValueError("zero discriminant")

    def __str__(self) -> str:
        result = "Curve y^2 = x^3 + a*x + b (mod m)"
        result += f"\n a   = {self.a}"
        result += f"\n b   = {self.b}"
        result += f"\n m   = {self.m}"
        return result

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        require_point(Q)
        if isinstance(Q, Infinity):
            return True
        if not (0 <= Q.x < self.m and 0 <= Q.y < self.m):
            return False
        return curve_membership(Q.x, Q.y, self.a, self.b, self.m)

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECGroupValueError(f"point not on curve: {Q}")

    def negate(self, Q: Point) -> Point:
        return negate(Q, self.m)

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """
        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return add(Q1, Q2, self.a, self.m)

    def mult(self, n: int, Q: Point) -> Point:
        "Return n*Q; the input point must be on the curve."
        self.require_on_curve(Q)
        return multiply(n, Q, self.a, self.m)
