"""Problems on sequences: distinct values, subarrays, rounds and elimination games."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise


def distinct_numbers(values: Iterable[int]) -> int:
    """Return how many different values occur in ``values``."""
    return len(set(values))


def maximum_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("maximum_subarray_sum needs at least one value")
    return best


def _positions(permutation: Iterable[int]) -> list[int]:
    """Return the 1-based position of each value of a permutation of 1..n.

    Index 0 of the result is unused and holds 0.
    """
    items = list(permutation)
    if sorted(items) != list(range(1, len(items) + 1)):
        raise ValueError("expected a permutation of 1..n")
    positions = [0] * (len(items) + 1)
    for position, value in enumerate(items, start=1):
        positions[value] = position
    return positions


def collecting_numbers(permutation: Iterable[int]) -> int:
    """Return how many left-to-right passes collect the numbers 1..n in order."""
    positions = _positions(permutation)
    sentinel = len(positions)
    return sum(
        1 for previous, current in pairwise([sentinel, *positions[1:]]) if previous > current
    )


def collecting_numbers_ii(
    permutation: Iterable[int], swaps: Iterable[tuple[int, int]]
) -> list[int]:
    """Report a running round count after each swap of two 1-based positions.

    The count starts at :func:`collecting_numbers` of the permutation. For
    each swap ``(a, b)``, taken with ``a <= b``, the count falls by one when
    the original value at ``a`` exceeds the one at ``b`` and rises by one
    otherwise; the arrangement itself is left as first given.
    """
    values = list(permutation)
    count = collecting_numbers(values)
    results = []
    for a, b in swaps:
        if a > b:
            a, b = b, a
        if not (1 <= a and b <= len(values)):
            raise IndexError(f"swap positions out of range: {a}, {b}")
        if values[a - 1] > values[b - 1]:
            count -= 1
        else:
            count += 1
        results.append(count)
    return results


def playlist(songs: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive songs with no repeat."""
    items = list(songs)
    last_seen: dict[int, int] = {}
    start = 0
    longest = 0
    for index, song in enumerate(items):
        previous = last_seen.get(song)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[song] = index
        longest = max(longest, index - start + 1)
    return longest


def josephus_every_second(n: int) -> list[int]:
    """Return the removal order of children 1..n in a circle where every
    second child is removed."""
    circle = list(range(1, n + 1))
    skip_first = True
    order: list[int] = []
    while circle:
        if skip_first:
            removed, kept = circle[1::2], circle[0::2]
            skip_first = len(circle) % 2 == 0
        else:
            removed, kept = circle[0::2], circle[1::2]
            skip_first = len(circle) % 2 == 1
        order.extend(removed)
        circle = kept
    return order


def josephus(n: int, k: int) -> list[int]:
    """Return the removal order of children 1..n in a circle where, each
    time, ``k`` children are skipped and the next one is removed."""
    circle = list(range(1, n + 1))
    counted = 0
    order: list[int] = []
    while circle:
        step = k % len(circle)
        kept = []
        for child in circle:
            counted += 1
            if counted > step:
                order.append(child)
                counted = 0
            else:
                kept.append(child)
        circle = kept
    return order