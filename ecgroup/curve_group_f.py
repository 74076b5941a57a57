#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurveGroup explorer functions.

These functions are meant to explore low-cardinality curve groups,
for didactical (and fun) reason only:
point enumeration is a brute force O(m^2) walk-through
and point orders are found by exhaustive search.
Production-size groups would need Schoof-like point counting.
"""

import logging
from math import isqrt
from typing import Dict, List

from ecgroup.curve_group import add, curve_membership, multiply
from ecgroup.exceptions import ECGroupValueError
from ecgroup.number_theory import require_int64
from ecgroup.point import INF, Affine, Point

logger = logging.getLogger(__name__)

MAX_EXPLORABLE_MODULUS = 10_000


def enumerate_points(a: int, b: int, m: int) -> List[Point]:
    """Return all group points, if m is low.

    Affine points come sorted by x, then by y;
    INF is the last one.
    """

    require_int64(a, "a")
    require_int64(b, "b")
    require_int64(m, "m")
    if m < 1:
        raise ECGroupValueError(f"non-positive modulus: {m}")
    if m > MAX_EXPLORABLE_MODULUS:
        err_msg = f"m is too big to enumerate all group points: {m}"
        raise ECGroupValueError(err_msg)

    points: List[Point] = [
        Affine(x, y)
        for x in range(m)
        for y in range(m)
        if curve_membership(x, y, a, b, m)
    ]
    points.append(INF)
    return points


def _hasse_bound(m: int) -> int:
    # |#E - (m + 1)| <= 2 sqrt(m), rounded up
    return m + 1 + 2 * (isqrt(m) + 1)


def order_of(Q: Point, a: int, m: int) -> int:
    """Return the smallest positive k such that k*Q is INF.

    Exhaustive search over 1*Q, 2*Q, 3*Q, ...
    The input point is assumed to be on curve.
    """

    max_order = _hasse_bound(m)
    k = 1
    while multiply(k, Q, a, m) != INF:
        k += 1
        if k > max_order:
            raise ECGroupValueError(f"no finite order for {Q} within {max_order}")
    return k


def point_orders(a: int, b: int, m: int) -> Dict[Point, int]:
    "Return the order of each group point, in enumeration order."

    return {Q: order_of(Q, a, m) for Q in enumerate_points(a, b, m)}


def find_generators(a: int, b: int, m: int) -> List[Point]:
    """Return the points generating the whole group.

    Those are the points whose order is equal to the number of points:
    the group is cyclic if and only if the result is not empty.
    """

    return select_generators(point_orders(a, b, m))


def select_generators(orders: Dict[Point, int]) -> List[Point]:
    """Return the points whose order is equal to the group order.

    The input maps every group point to its order, as point_orders does.
    """

    n_points = len(orders)
    for Q, order in orders.items():
        logger.debug("point %s: order = %d", Q, order)
    return [Q for Q, order in orders.items() if order == n_points]


def find_subgroup_points(G: Point, a: int, m: int) -> List[Point]:
    """Return all the points of the G-generated subgroup.

    The list is G, 2G, 3G, ..., INF.
    G is assumed to be on curve.
    """

    require_int64(m, "m")
    if m < 1:
        raise ECGroupValueError(f"non-positive modulus: {m}")
    if m > MAX_EXPLORABLE_MODULUS:
        err_msg = f"m is too big to count all subgroup points: {m}"
        raise ECGroupValueError(err_msg)

    max_order = _hasse_bound(m)
    points: List[Point] = [G]
    while points[-1] != INF:
        if len(points) >= max_order:
            raise ECGroupValueError(f"no finite order for {G} within {max_order}")
        points.append(add(points[-1], G, a, m))

    return points
