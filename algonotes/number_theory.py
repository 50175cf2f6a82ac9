"""Greatest common divisors, modular powers and prime sieves."""

from __future__ import annotations

MOD = 10**9 + 7


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; gcd(0, 0) is 0."""
    a, b = abs(a), abs(b)
    while a:
        a, b = b % a, a
    return b


def lcm(a: int, b: int) -> int:
    """Least common multiple of ``a`` and ``b``; both zero is an error."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("lcm is undefined when both numbers are zero")
    return abs(a * b) // divisor


def mod_pow(base: int, exponent: int, modulus: int = MOD) -> int:
    """``base ** exponent % modulus`` by repeated squaring."""
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent % 2:
            result = result * base % modulus
        base = base * base % modulus
        exponent //= 2
    return result


def tower_mod_pow(a: int, b: int, c: int) -> int:
    """``a ** (b ** c) % (10**9 + 7)``, reducing the exponent modulo 10**9 + 6.

    The reduction relies on Fermat's little theorem, so the result is exact
    whenever ``a`` is not a multiple of the modulus.
    """
    if a < 0 or b < 0 or c < 0:
        raise ValueError("arguments must not be negative")
    exponent = mod_pow(b, c, MOD - 1)
    return mod_pow(a, exponent, MOD)


def sieve(limit: int) -> list[bool]:
    """Sieve of Eratosthenes: element i tells whether i is prime, for 0..limit."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    is_prime = [True] * (limit + 1)
    for small in range(min(2, limit + 1)):
        is_prime[small] = False
    for candidate in range(2, limit + 1):
        if is_prime[candidate]:
            for multiple in range(2 * candidate, limit + 1, candidate):
                is_prime[multiple] = False
    return is_prime


def primes_up_to(n: int) -> list[int]:
    """All primes p with 2 <= p <= n, in increasing order."""
    if n < 2:
        return []
    return [number for number, prime in enumerate(sieve(n)) if prime]