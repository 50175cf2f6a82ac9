"""Binary searches and the two-pointer pair search."""

from __future__ import annotations

from collections.abc import Sequence


def lower_bound(values: Sequence[int], x: int) -> int:
    """Index of the first element of sorted ``values`` that is >= ``x``."""
    low, high = 0, len(values)
    while low < high:
        mid = low + (high - low) // 2
        if values[mid] >= x:
            high = mid
        else:
            low = mid + 1
    return low


def upper_bound(values: Sequence[int], x: int) -> int:
    """Index of the first element of sorted ``values`` that is > ``x``."""
    low, high = 0, len(values)
    while low < high:
        mid = low + (high - low) // 2
        if values[mid] > x:
            high = mid
        else:
            low = mid + 1
    return low


def find_position(values: Sequence[int], target: int) -> int | None:
    """Position of the first ``target`` once ``values`` is sorted, or None if absent."""
    ordered = sorted(values)
    index = lower_bound(ordered, target)
    if index < len(ordered) and ordered[index] == target:
        return index
    return None


def pair_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices (i, j), i < j, of two elements of sorted ``values`` adding to ``target``.

    Pointers start at both ends and close in; returns None when no pair is found.
    """
    front, back = 0, len(values) - 1
    while back > front:
        total = values[front] + values[back]
        if total > target:
            back -= 1
        elif total < target:
            front += 1
        else:
            return front, back
    return None