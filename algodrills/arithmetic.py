"""Divisors, primes and fast exponentiation."""

from __future__ import annotations

from collections.abc import Sequence


def divisors(num: int) -> list[int]:
    """Divisors of a positive integer, each small one followed by its partner."""
    if num < 1:
        raise ValueError("number must be positive")
    found = []
    i = 1
    while i * i <= num:
        if num % i == 0:
            found.append(i)
            partner = num // i
            if partner != i:
                found.append(partner)
        i += 1
    return found


def prime_factors(num: int) -> list[int]:
    """Distinct prime factors of a positive integer, in increasing order."""
    if num < 1:
        raise ValueError("number must be positive")
    factors = []
    i = 2
    while i * i <= num:
        if num % i == 0:
            factors.append(i)
            while num % i == 0:
                num //= i
        i += 1
    if num != 1:
        factors.append(num)
    return factors


def primes_below(num: int) -> list[int]:
    """All primes smaller than ``num`` by the sieve of Eratosthenes."""
    if num < 3:
        return []
    is_prime = bytearray([1]) * num
    is_prime[0] = is_prime[1] = 0
    i = 2
    while i * i < num:
        if is_prime[i]:
            is_prime[i * i :: i] = bytes(len(range(i * i, num, i)))
        i += 1
    return [n for n, flag in enumerate(is_prime) if flag]


def smallest_prime_factors(limit: int = 100_000) -> list[int]:
    """Smallest prime factor of every number below ``limit``; 0 for 0 and 1."""
    spf = list(range(max(limit, 0)))
    for n in range(min(2, len(spf))):
        spf[n] = 0
    i = 2
    while i * i < limit:
        if spf[i] == i:
            for j in range(i * i, limit, i):
                if spf[j] == j:
                    spf[j] = i
        i += 1
    return spf


def factorize(n: int, spf: Sequence[int]) -> list[int]:
    """Prime factors of ``n`` with multiplicity, using a smallest-factor table."""
    if n < 1 or n >= len(spf):
        raise ValueError("number outside the range of the factor table")
    factors = []
    while n != 1:
        factor = spf[n]
        factors.append(factor)
        n //= factor
    return factors


def _positive_power(x: float, n: int) -> float:
    if n == 0:
        return 1.0
    half = _positive_power(x, n // 2)
    if n % 2 == 0:
        return half * half
    return x * half * half


def power(x: float, n: int) -> float:
    """``x`` raised to the integer ``n`` by repeated squaring."""
    if n < 0:
        return 1.0 / _positive_power(x, -n)
    return _positive_power(x, n)