#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Extended Euclidean algorithm implementation based on
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
"""

from ecgroup.exceptions import (
    ArithmeticOverflow,
    ECGroupValueError,
    NonInvertibleElement,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TRIAL_DIVISION_LIMIT = 2**32


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m).

    The result t is in [0, m) and a*t = 1 (mod m).
    m does not have to be a prime, but gcd(a, m) must be 1:
    NonInvertibleElement is raised otherwise.
    """

    if m < 1:
        raise ECGroupValueError(f"non-positive modulus: {m}")

    t, new_t = 0, 1
    r, new_r = m, a % m
    while new_r != 0:
        quotient = r // new_r
        t, new_t = new_t, t - quotient * new_t
        r, new_r = new_r, r - quotient * new_r

    # r is now gcd(a, m)
    if r != 1:
        raise NonInvertibleElement(f"No inverse for {a % m} mod {m}")
    return t + m if t < 0 else t


def is_probable_prime(n: int) -> bool:
    """Return True if n is prime.

    Trial division (6k +- 1 wheel) is deterministic for n < 2^32;
    above that the base-2 Fermat test will do
    as _probabilistic_ primality test.
    """

    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    if n >= TRIAL_DIVISION_LIMIT:
        return pow(2, n - 1, n) == 1

    i, w = 5, 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += w
        w = 6 - w
    return True


def require_int64(value: int, label: str) -> None:
    "Require the value to fit the signed 64-bit range."

    if not INT64_MIN <= value <= INT64_MAX:
        raise ArithmeticOverflow(f"{label} out of 64-bit range: {value}")
