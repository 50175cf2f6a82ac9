"""Window sums, prefix sums, next greater element and common prefixes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def _window_sums(values: Sequence[int], k: int) -> list[int]:
    if not 1 <= k <= len(values):
        raise ValueError(f"window size {k} must be between 1 and {len(values)}")
    current = sum(values[:k])
    sums = [current]
    for entering, leaving in zip(values[k:], values):
        current += entering - leaving
        sums.append(current)
    return sums


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Largest sum of ``k`` consecutive elements."""
    return max(_window_sums(values, k))


def max_later_window_sum(values: Sequence[int], k: int) -> int:
    """Largest sum of ``k`` consecutive elements, leaving out the leading window.

    Only windows that start at index 1 or later are considered, so ``values``
    must be longer than ``k``.
    """
    if len(values) <= k:
        raise ValueError(f"need more than {k} values, got {len(values)}")
    return max(_window_sums(values, k)[1:])


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Prefix sums with a leading 0: result[i] is the sum of the first i values."""
    return list(accumulate(values, initial=0))


def range_sum(prefix: Sequence[int], left: int, right: int) -> int:
    """Sum of elements ``left``..``right`` (1-based, inclusive) from prefix sums."""
    n = len(prefix) - 1
    if not 1 <= left <= right <= n:
        raise ValueError(f"range {left}..{right} is not within 1..{n}")
    return prefix[right] - prefix[left - 1]


def next_greater_elements(values: Sequence[int]) -> list[int | None]:
    """For each element, the first later element that is strictly greater, or None."""
    result: list[int | None] = [None] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            result[pending.pop()] = value
        pending.append(index)
    return result


def longest_common_prefix(strings: Iterable[str]) -> str:
    """Longest prefix shared by every string; empty input gives ""."""
    items = list(strings)
    if not items:
        return ""
    first, last = min(items), max(items)
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]