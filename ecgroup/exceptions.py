#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecgroup from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError
from which the ecgroup versions are derived.
"""


class ECGroupValueError(ValueError):
    pass


class ECGroupTypeError(TypeError):
    pass


class NonInvertibleElement(ECGroupValueError):
    "The element shares a common factor with the modulus."


class ArithmeticOverflow(ECGroupValueError):
    "A curve parameter does not fit the signed 64-bit range."


class UnsupportedScalar(ECGroupValueError):
    "Scalar multiplication by a negative integer."
