"""Assorted contest puzzles: division games, pair flips, permutations, calendars."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

_RESLI_LIMIT = 10**9


def game_of_division(values: Sequence[int], k: int) -> int | None:
    """Return the 1-based position of the first value whose difference from
    every other value is not divisible by ``k``, or None when there is none."""
    items = list(values)
    for i, value in enumerate(items):
        if all(abs(value - other) % k != 0 for j, other in enumerate(items) if j != i):
            return i + 1
    return None


def salahiano_arrays(pairs: Iterable[tuple[int, int]]) -> int | None:
    """Return how many pairs are flipped so that no value repeats in the first
    column, or None when the flips cannot be made.

    Pairs are ``(a, b)``. Flipping a pair swaps its two values, and is only
    done when the new first value is not yet used in the first column and the
    new second value is not yet used in the second.
    """
    items = list(pairs)
    first_counts: Counter[int] = Counter()
    second_counts: Counter[int] = Counter()
    first_positions: defaultdict[int, set[int]] = defaultdict(set)
    second_positions: defaultdict[int, set[int]] = defaultdict(set)

    impossible = False
    for index, (a, b) in enumerate(items):
        first_counts[a] += 1
        second_counts[b] += 1
        first_positions[a].add(index)
        second_positions[b].add(index)
        if first_counts[a] > 2 or second_counts[a] > 2:
            impossible = True
    if impossible:
        return None

    def try_flip(x: int, y: int) -> bool:
        a, b = items[x]
        if first_counts[b] != 0 or second_counts[a] != 0:
            return False
        first_counts[a] -= 1
        second_counts[b] -= 1
        first_counts[b] += 1
        second_counts[a] += 1
        second_positions[b].discard(x)
        second_positions[a].add(x)
        first_positions[b].add(x)
        first_positions[a].add(y)
        return True

    flips = 0
    for a, _ in items:
        holders = first_positions[a]
        if len(holders) != 2:
            continue
        x, y = sorted(holders)
        holders.clear()
        if try_flip(x, y) or try_flip(y, x):
            flips += 1
        else:
            return None
    return flips


def resli_pair(n: int) -> tuple[int, int]:
    """Return the pair ``(a, b)`` answering the beautiful-pair query for ``n``."""
    if n < _RESLI_LIMIT:
        return 2 * n + 1, 2
    return 999999999, 2


def ammar_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n: the even numbers ascending, then the odd ones."""
    return [*range(2, n + 1, 2), *range(1, n + 1, 2)]


def convert_date(
    calendars: Sequence[Sequence[int]],
    source: int,
    target: int,
    day: int,
    month: int,
    year: int,
) -> tuple[int, int, int]:
    """Convert a date between calendars given as lists of month lengths.

    ``source`` and ``target`` are 1-based calendar numbers. Both calendars
    count from the same first day. Returns ``(day, month, year)`` in the target.
    """
    for number in (source, target):
        if not 1 <= number <= len(calendars):
            raise IndexError(f"calendar {number} outside 1..{len(calendars)}")
    source_months = list(calendars[source - 1])
    target_months = list(calendars[target - 1])
    if not 1 <= month <= len(source_months):
        raise ValueError(f"month {month} outside 1..{len(source_months)}")
    target_year_length = sum(target_months)
    if target_year_length <= 0:
        raise ValueError("target calendar has an empty year")

    elapsed = sum(source_months) * (year - 1) + day + sum(source_months[: month - 1])
    new_year, new_day = divmod(elapsed, target_year_length)
    new_year += 1
    if new_day == 0:
        new_year -= 1
        new_day = target_year_length
    new_month = 1
    for length in target_months:
        if length >= new_day:
            break
        new_day -= length
        new_month += 1
    return new_day, new_month, new_year


def icpc_standing(p: int, s: int, r: int) -> bool:
    """Return whether the standing is possible for ``p`` problems, ``s`` solved
    and rank ``r``."""
    return s != p or r == 1