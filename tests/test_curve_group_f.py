#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgroup.curve_group_f` module."

import logging
from math import gcd

import pytest

from ecgroup.curve_group import CurveGroup, multiply
from ecgroup.curve_group_f import (
    MAX_EXPLORABLE_MODULUS,
    enumerate_points,
    find_generators,
    find_subgroup_points,
    order_of,
    point_orders,
    select_generators,
)
from ecgroup.exceptions import ArithmeticOverflow, ECGroupValueError
from ecgroup.point import INF, Affine
from tests.test_curve_group import low_card_curves

ec7_points = [
    Affine(0, 2),
    Affine(0, 5),
    Affine(1, 3),
    Affine(1, 4),
    Affine(3, 1),
    Affine(3, 6),
    Affine(4, 0),
    Affine(5, 3),
    Affine(5, 4),
    INF,
]


def test_enumerate_points() -> None:
    points = enumerate_points(4, 4, 7)
    assert points == ec7_points
    for Q in points[:-1]:
        assert (Q.y * Q.y - (Q.x**3 + 4 * Q.x + 4)) % 7 == 0

    for ec, _, n in low_card_curves.values():
        points = enumerate_points(ec.a, ec.b, ec.m)
        assert len(points) == n
        assert len(set(points)) == n
        assert points[-1] == INF
        assert points.count(INF) == 1
        assert all(ec.is_on_curve(Q) for Q in points)
        affine = [(Q.x, Q.y) for Q in points[:-1]]
        assert affine == sorted(affine)


def test_enumerate_points_exceptions() -> None:
    m = 10007
    assert m > MAX_EXPLORABLE_MODULUS
    err_msg = "m is too big to enumerate all group points: "
    with pytest.raises(ECGroupValueError, match=err_msg):
        enumerate_points(497, 1768, m)

    with pytest.raises(ArithmeticOverflow, match="b out of 64-bit range: "):
        enumerate_points(4, 2**63, 7)

    for m in (0, -7):
        with pytest.raises(ECGroupValueError, match="non-positive modulus: "):
            enumerate_points(1, 1, m)


def test_order_of() -> None:
    orders = [10, 10, 5, 5, 10, 10, 2, 5, 5, 1]
    for Q, order in zip(ec7_points, orders):
        assert order_of(Q, 4, 7) == order

    for ec, _, n in low_card_curves.values():
        for Q in enumerate_points(ec.a, ec.b, ec.m):
            order = order_of(Q, ec.a, ec.m)
            # Lagrange theorem
            assert n % order == 0
            assert multiply(order, Q, ec.a, ec.m) == INF
            for k in range(1, order):
                assert multiply(k, Q, ec.a, ec.m) != INF


def test_point_orders() -> None:
    orders = point_orders(4, 4, 7)
    assert list(orders) == ec7_points
    assert orders[INF] == 1
    assert orders[Affine(4, 0)] == 2
    assert orders[Affine(0, 2)] == 10


def test_find_generators() -> None:
    generators = find_generators(4, 4, 7)
    assert generators == [Affine(0, 2), Affine(0, 5), Affine(3, 1), Affine(3, 6)]

    for ec, G, n in low_card_curves.values():
        generators = find_generators(ec.a, ec.b, ec.m)
        assert INF not in generators
        assert G in generators
        assert order_of(G, ec.a, ec.m) == n
        # all test groups are cyclic: phi(n) generators
        phi = sum(1 for k in range(1, n + 1) if gcd(k, n) == 1)
        assert len(generators) == phi
        for k in range(1, n):
            Q = multiply(k, G, ec.a, ec.m)
            assert (Q in generators) == (gcd(k, n) == 1)


def test_find_generators_non_cyclic() -> None:
    # y^2 = x^3 - x (mod 7) has 8 points and a full 2-torsion
    # INF, (0, 0), (1, 0), (6, 0): the group is Z2 x Z4
    ec = CurveGroup(6, 0, 7)
    orders = point_orders(ec.a, ec.b, ec.m)
    assert len(orders) == 8
    assert max(orders.values()) == 4
    assert find_generators(ec.a, ec.b, ec.m) == []


def test_find_generators_logging(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="ecgroup.curve_group_f")
    find_generators(4, 4, 7)
    assert "point (0, 2): order = 10" in caplog.text
    assert "point (4, 0): order = 2" in caplog.text
    assert "point Point at infinity: order = 1" in caplog.text


def test_select_generators() -> None:
    orders = {Affine(1, 1): 3, Affine(1, 2): 3, INF: 1}
    assert select_generators(orders) == [Affine(1, 1), Affine(1, 2)]
    assert select_generators({INF: 1}) == [INF]
    assert select_generators({}) == []


def test_find_subgroup_points() -> None:
    points = find_subgroup_points(Affine(0, 2), 4, 7)
    assert len(points) == 10
    assert points[-1] == INF
    assert set(points) == set(ec7_points)

    points = find_subgroup_points(Affine(4, 0), 4, 7)
    assert points == [Affine(4, 0), INF]

    assert find_subgroup_points(INF, 4, 7) == [INF]

    ec = CurveGroup(497, 1768, 9739)
    G = Affine(1804, 5368)
    points = find_subgroup_points(G, ec.a, ec.m)
    assert len(points) == 9735


def test_find_subgroup_points_exceptions() -> None:
    err_msg = "m is too big to count all subgroup points: "
    with pytest.raises(ECGroupValueError, match=err_msg):
        # m (10007) is too big to count all subgroup points
        G = Affine(2, 3265)
        find_subgroup_points(G, 497, 10007)

    with pytest.raises(ECGroupValueError, match="non-positive modulus: "):
        find_subgroup_points(INF, 1, 0)
