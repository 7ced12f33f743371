"""Number-theoretic helpers for Baker-Campbell-Hausdorff coefficients."""

from __future__ import annotations

from fractions import Fraction
from math import comb, factorial
from typing import Sequence

PRIMES: tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 6767,
    71, 73, 79, 83, 89, 97,
)


def p_adic_expansion(n: int, p: int) -> list[int]:
    """Digits of `n` in base `p`, least significant first."""
    if p < 2:
        raise ValueError(f"base must be at least 2, got {p}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    digits = []
    while n:
        n, digit = divmod(n, p)
        digits.append(digit)
    return digits


def s_p(n: int, p: int) -> int:
    """Sum of the base-`p` digits of `n`."""
    return sum(p_adic_expansion(n, p))


def bch_denominator(n: int) -> int:
    """The common denominator factor of the degree-`n` BCH coefficients."""
    product = 1
    for p in PRIMES:
        if p >= n:
            continue
        digit_sum = s_p(n, p)
        power = 1
        while power * p <= digit_sum:
            power *= p
        product *= power
    return product


def goldberg_coeff_numerator(q: Sequence[int], a_first: bool) -> int | Fraction:
    """Numerator of the Goldberg coefficient for the partition `q`.

    The coefficient itself is this numerator divided by
    `n! * bch_denominator(n)`, where `n` is the sum of `q`. `a_first`
    tells whether the word starts with the first generator.
    """
    n = sum(q)
    m = len(q)
    d = factorial(n) * bch_denominator(n)
    c = [[Fraction(0)] * n for _ in range(n)]
    a_current = a_first if m % 2 else not a_first

    l = 0
    for i in reversed(range(m)):
        for r in range(1, q[i] + 1):
            l += 1
            h = Fraction(0)
            if i == m - 1:
                h = Fraction(d, factorial(l))
            elif a_current and i == m - 2:
                h = Fraction(d, factorial(r) * factorial(q[i + 1]))
            c[l - 1][0] = h
            for k in range(2, l):
                h = Fraction(0)
                for j in range(1, r + 1):
                    if l > j and c[l - j - 1][k - 2] != 0:
                        h += c[l - j - 1][k - 2] / factorial(j)
                if a_current and i <= m - 2:
                    for j in range(1, q[i + 1] + 1):
                        if l > r + j and c[l - r - j - 1][k - 2] != 0:
                            h += c[l - r - j - 1][k - 2] / (factorial(r) * factorial(j))
                c[l - 1][k - 1] = h
            c[l - 1][l - 1] = Fraction(d)
        a_current = not a_current

    total = sum(
        (c[n - 1][k - 1] / (k if k % 2 else -k) for k in range(1, n + 1)),
        Fraction(0),
    )
    return int(total) if total.denominator == 1 else total


def binomial(n: int, k: int) -> int:
    """The binomial coefficient "n choose k"; zero when `k > n`."""
    if k == 0:
        return 1
    if k > n:
        return 0
    return comb(n, k)