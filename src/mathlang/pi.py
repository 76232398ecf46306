"""Hexadecimal digits of π by Bailey–Borwein–Plouffe digit extraction.

Independent of the evaluator; nothing here touches MathLang values.
"""

from __future__ import annotations

import math


def power_mod(a: int, b: int, m: int) -> int:
    """Compute ``a ** b % m``.

    Returns -1 if ``a < 0``, ``b < 0`` or ``m <= 0``.
    """
    if a < 0 or b < 0 or m <= 0:
        return -1
    if m == 1:
        return 0
    # right-to-left binary method
    result = 1
    base = a % m
    while b > 0:
        if b & 1:
            result = (result * base) % m
        b >>= 1
        base = (base * base) % m
    return result


def _pi_term(j: int, n: int) -> float:
    """Fractional part of ``16**n * S_j`` where ``S_j = sum 1 / (16**k (8k + j))``."""
    s = 0.0
    for k in range(n + 1):
        r = 8 * k + j
        s += power_mod(16, n - k, r) / r
        s -= math.floor(s)

    # tail: iterate until adding a term no longer changes t
    t = 0.0
    k = n + 1
    while True:
        r = 8 * k + j
        new_t = t + 16.0 ** (n - k) / r
        if new_t == t:
            break
        t = new_t
        k += 1

    return s + t


def pi_digit(n: int) -> int:
    """The *n*-th hexadecimal digit of π after the point (1-based).

    Returns -1 for negative *n*.  ``pi_digit(0)`` is the integer part, 3.
    """
    if n < 0:
        return -1
    n -= 1
    x = 4 * _pi_term(1, n) - 2 * _pi_term(4, n) - _pi_term(5, n) - _pi_term(6, n)
    x -= math.floor(x)
    return int(x * 16)


def compute_pi_in_hex(precision: int) -> list[int] | None:
    """The first *precision* hex digits of π's fractional part, most significant first.

    Returns ``None`` if *precision* is negative.
    """
    if precision < 0:
        return None
    return [pi_digit(i) for i in range(1, precision + 1)]
