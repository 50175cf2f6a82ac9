"""Enumeration by backtracking: balanced parentheses and subsets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def balanced_parentheses(n: int) -> list[str]:
    """Every balanced string of ``n`` pairs, with "(" tried before ")"."""
    if n < 0:
        raise ValueError(f"pair count must not be negative, got {n}")

    def extend(prefix: str, opens: int, closes: int) -> Iterator[str]:
        if opens == 0 and closes == 0:
            yield prefix
            return
        if opens > 0:
            yield from extend(prefix + "(", opens - 1, closes)
        if closes > opens:
            yield from extend(prefix + ")", opens, closes - 1)

    return list(extend("", n, n))


def subsets(values: Sequence[T]) -> list[list[T]]:
    """All subsets of ``values`` in order, each element first left out, then taken."""

    def choose(index: int, chosen: list[T]) -> Iterator[list[T]]:
        if index == len(values):
            yield list(chosen)
            return
        yield from choose(index + 1, chosen)
        chosen.append(values[index])
        yield from choose(index + 1, chosen)
        chosen.pop()

    return list(choose(0, []))