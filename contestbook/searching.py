"""Searching problems solved with sorted containers, two pointers and binary search."""

from __future__ import annotations

from collections.abc import Iterable

from sortedcontainers import SortedDict, SortedList


def _indexed_sorted(values: Iterable[int]) -> list[tuple[int, int]]:
    """Return ``(value, 1-based position)`` pairs sorted by value, then position."""
    return sorted((value, position) for position, value in enumerate(values, start=1))


def concert_tickets(prices: Iterable[int], offers: Iterable[int]) -> list[int]:
    """Sell tickets to customers in order.

    Each customer, offering at most some amount, gets the most expensive
    remaining ticket not above the offer. Returns the price each customer
    paid, or -1 for a customer who got no ticket.
    """
    available = SortedList(prices)
    paid = []
    for offer in offers:
        slot = available.bisect_right(offer)
        if slot == 0:
            paid.append(-1)
            continue
        paid.append(available.pop(slot - 1))
    return paid


def sum_of_two_values(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Find two distinct 1-based positions whose values add up to ``target``.

    Returns the pair of positions, or None when there is none.
    """
    ordered = _indexed_sorted(values)
    for i, (value, position) in enumerate(ordered):
        needed = target - value
        low, high = i + 1, len(ordered) - 1
        while low <= high:
            middle = (low + high) // 2
            candidate, other = ordered[middle]
            if candidate > needed:
                high = middle - 1
            elif candidate < needed:
                low = middle + 1
            else:
                return position, other
    return None


def sum_of_three_values(values: Iterable[int], target: int) -> tuple[int, int, int] | None:
    """Find three distinct 1-based positions whose values add up to ``target``.

    Returns the three positions, or None when there are none.
    """
    ordered = _indexed_sorted(values)
    for value, position in ordered:
        remainder = target - value
        if remainder <= 0:
            break
        left, right = 0, len(ordered) - 1
        while left < right:
            pair_sum = ordered[left][0] + ordered[right][0]
            if pair_sum <= remainder:
                if (
                    pair_sum == remainder
                    and ordered[left][1] != position
                    and ordered[right][1] != position
                ):
                    return ordered[left][1], ordered[right][1], position
                left += 1
            else:
                right -= 1
    return None


def sum_of_four_values(
    values: Iterable[int], target: int
) -> tuple[int, int, int, int] | None:
    """Find four distinct 1-based positions whose values add up to ``target``.

    Returns the four positions, or None when there are none.
    """
    ordered = _indexed_sorted(values)
    count = len(ordered)
    for first in range(count):
        for second in range(first + 1, count):
            remainder = target - ordered[second][0] - ordered[first][0]
            if remainder <= 0:
                break
            left, right = second + 1, count - 1
            while left < right:
                pair_sum = ordered[left][0] + ordered[right][0]
                if pair_sum <= remainder:
                    if pair_sum == remainder:
                        return (
                            ordered[left][1],
                            ordered[right][1],
                            ordered[second][1],
                            ordered[first][1],
                        )
                    left += 1
                else:
                    right -= 1
    return None


def _made_by(deadline: int, times: list[int], products: int) -> int:
    """Count products made by ``deadline``, stopping once ``products`` is reached."""
    made = 0
    for time in times:
        made += deadline // time
        if made >= products:
            break
    return made


def factory_machines(times: Iterable[int], products: int) -> int:
    """Return the shortest time in which machines with the given per-product
    times can together make ``products`` products."""
    machines = sorted(times)
    if not machines:
        raise ValueError("factory_machines needs at least one machine")
    low, high = 0, products * machines[-1] + 5
    while high - low > 1:
        middle = (low + high) // 2
        if _made_by(middle, machines, products) < products:
            low = middle + 1
        else:
            high = middle
    return low if _made_by(low, machines, products) >= products else high


def nearest_smaller_values(values: Iterable[int]) -> list[int]:
    """For each value, report the latest 1-based position seen so far of the
    largest earlier value smaller than it, or 0 when no earlier value is smaller."""
    latest = SortedDict()
    answers = []
    for position, value in enumerate(values, start=1):
        latest[value] = position
        slot = latest.bisect_left(value)
        if slot == 0:
            answers.append(0)
        else:
            answers.append(latest.peekitem(slot - 1)[1])
    return answers