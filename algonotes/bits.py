"""Bit tricks on integers and ASCII letters."""

from __future__ import annotations

import string

_CASE_BIT = 0x20


def _check_shift(k: int) -> None:
    if k < 0:
        raise ValueError(f"bit position must not be negative, got {k}")


def is_odd(n: int) -> bool:
    """Whether the lowest bit of ``n`` is set."""
    return bool(n & 1)


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def is_bit_set(n: int, k: int) -> bool:
    """Whether bit ``k`` of ``n`` is set."""
    _check_shift(k)
    return bool(n & (1 << k))


def set_bit(n: int, k: int) -> int:
    """``n`` with bit ``k`` set."""
    _check_shift(k)
    return n | (1 << k)


def clear_bit(n: int, k: int) -> int:
    """``n`` with bit ``k`` cleared."""
    _check_shift(k)
    return n & ~(1 << k)


def divide_by_power_of_two(n: int, k: int) -> int:
    """``n`` divided by 2**k, rounding towards minus infinity."""
    _check_shift(k)
    return n >> k


def multiply_by_power_of_two(n: int, k: int) -> int:
    """``n`` multiplied by 2**k."""
    _check_shift(k)
    return n << k


def mod_power_of_two(n: int, k: int) -> int:
    """``n`` modulo 2**k."""
    _check_shift(k)
    return n & ((1 << k) - 1)


def to_binary(n: int, width: int = 11) -> str:
    """The lowest ``width`` bits of ``n``, most significant first."""
    if width < 0:
        raise ValueError(f"width must not be negative, got {width}")
    return "".join(str((n >> i) & 1) for i in reversed(range(width)))


def xor_swap(x: int, y: int) -> tuple[int, int]:
    """Swap two integers with three XORs and return them as (x, y)."""
    x ^= y
    y ^= x
    x ^= y
    return x, y


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def to_lower(char: str) -> str:
    """Lowercase an ASCII letter by setting its case bit; other characters pass through."""
    _check_char(char)
    if char not in string.ascii_letters:
        return char
    return chr(ord(char) | _CASE_BIT)


def to_upper(char: str) -> str:
    """Uppercase an ASCII letter by clearing its case bit; other characters pass through."""
    _check_char(char)
    if char not in string.ascii_letters:
        return char
    return chr(ord(char) & ~_CASE_BIT)