#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Command line explorer of low-cardinality curve groups."

import argparse
import logging
import sys
from typing import List, Optional

from ecgroup.curve_group import CurveGroup
from ecgroup.exceptions import ECGroupTypeError, ECGroupValueError
from ecgroup.report import CurveReport

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecgroup",
        description="List the points and the generators of y^2 = x^3 + a*x + b (mod m).",
    )
    parser.add_argument("-a", type=int, default=4, help="curve coefficient a")
    parser.add_argument("-b", type=int, default=4, help="curve coefficient b")
    parser.add_argument("-m", type=int, default=7, help="prime field modulus")
    parser.add_argument(
        "--json", action="store_true", help="print the report as json"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log the order of each point"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        ec = CurveGroup(args.a, args.b, args.m)
        report = CurveReport.from_curve(ec)
    except (ECGroupValueError, ECGroupTypeError) as e:
        logger.debug("aborting on %r", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(report.to_json(indent=2) if args.json else report.description)
    return 0


if __name__ == "__main__":
    sys.exit(main())
