"""Modular arithmetic helpers and a prime sieve."""

from math import isqrt

MOD = 1_000_000_007


def powermod(base, exponent):
    """Return ``base ** exponent`` reduced modulo :data:`MOD`."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, MOD)


def power(base, exponent):
    """Return ``base ** exponent`` exactly."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return base**exponent


def modinv(a, m):
    """Return the multiplicative inverse of ``a`` modulo ``m``."""
    if m < 1:
        raise ValueError("modulus must be positive")
    try:
        return pow(a, -1, m)
    except ValueError:
        raise ValueError(f"{a} has no inverse modulo {m}") from None


def primes_below(limit):
    """Return all primes strictly less than ``limit``, in increasing order."""
    if limit <= 2:
        return []
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(limit - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, limit, i)))
    return [number for number, is_prime in enumerate(sieve) if is_prime]