#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Summary of a low-cardinality curve group.

CurveReport collects the group points, their orders,
and the group generators; it can be rendered as text
or serialized to/from json.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Type, TypeVar

from dataclasses_json import DataClassJsonMixin, config

from ecgroup.curve_group import CurveGroup
from ecgroup.curve_group_f import point_orders, select_generators
from ecgroup.exceptions import ECGroupValueError
from ecgroup.point import Point, json_from_point, point_from_json


def _encode_points(points: Sequence[Point]) -> List[Optional[Sequence[int]]]:
    return [json_from_point(Q) for Q in points]


def _decode_points(data: Sequence[Optional[Sequence[int]]]) -> List[Point]:
    return [point_from_json(Q) for Q in data]


_CurveReport = TypeVar("_CurveReport", bound="CurveReport")


@dataclass(frozen=True)
class CurveReport(DataClassJsonMixin):
    curve: CurveGroup
    points: List[Point] = field(
        metadata=config(encoder=_encode_points, decoder=_decode_points)
    )
    orders: List[int]
    generators: List[Point] = field(
        metadata=config(encoder=_encode_points, decoder=_decode_points)
    )

    def __post_init__(self) -> None:
        if len(self.points) != len(self.orders):
            err_msg = "mismatch between number of points and orders: "
            err_msg += f"{len(self.points)} vs {len(self.orders)}"
            raise ECGroupValueError(err_msg)

    @classmethod
    def from_curve(cls: Type[_CurveReport], ec: CurveGroup) -> _CurveReport:
        "Return the report of the curve group, computing all point orders."

        orders = point_orders(ec.a, ec.b, ec.m)
        generators = select_generators(orders)
        return cls(ec, list(orders), list(orders.values()), generators)

    @property
    def group_order(self) -> int:
        return len(self.points)

    @property
    def is_cyclic(self) -> bool:
        return bool(self.generators)

    @property
    def description(self) -> str:
        lines = ["All points on the curve:"]
        lines.extend(str(Q) for Q in self.points)
        lines.append("")
        lines.append("Generators:")
        lines.extend(str(Q) for Q in self.generators)
        return "\n".join(lines)
