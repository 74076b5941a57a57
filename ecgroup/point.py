#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points.

A Point is either an Affine point, i.e. a solution (x, y)
of the curve equation, or the Infinity point,
i.e. the identity element of the group.

Infinity carries no coordinates at all:
all Infinity instances are equal (and hash alike)
and there are no x/y attributes to be read by mistake.
INF is the instance to be used in practice.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ecgroup.exceptions import ECGroupTypeError, ECGroupValueError


@dataclass(frozen=True)
class Affine:
    x: int
    y: int

    is_infinity = False

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Infinity:
    is_infinity = True

    def __str__(self) -> str:
        return "Point at infinity"


Point = Union[Affine, Infinity]

INF = Infinity()


def require_point(Q: object) -> None:
    "Raise ECGroupTypeError if the input is not a Point."

    if not isinstance(Q, (Affine, Infinity)):
        raise ECGroupTypeError(f"not a point: {Q!r}")


# JSON representation: [x, y] for affine points, null for INF


def json_from_point(Q: Point) -> Optional[Sequence[int]]:
    require_point(Q)
    if isinstance(Q, Infinity):
        return None
    return [Q.x, Q.y]


def point_from_json(data: Optional[Sequence[int]]) -> Point:
    if data is None:
        return INF
    if len(data) != 2:
        raise ECGroupValueError(f"invalid point: {data}")
    return Affine(int(data[0]), int(data[1]))
