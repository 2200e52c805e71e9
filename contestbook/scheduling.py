"""Scheduling problems: overlapping visits, room assignment, gaps and stacking."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable

from sortedcontainers import SortedList, SortedSet


def restaurant_customers(visits: Iterable[tuple[int, int]], inclusive: bool = True) -> int:
    """Return the most customers present at once.

    Visits are ``(arrival, departure)``. With ``inclusive`` a customer still
    counts at the departure moment; otherwise a customer leaving at a moment
    no longer overlaps one arriving then.
    """
    changes: Counter[int] = Counter()
    for arrival, departure in visits:
        changes[arrival] += 1
        changes[departure + 1 if inclusive else departure] -= 1
    best = present = 0
    for moment in sorted(changes):
        present += changes[moment]
        best = max(best, present)
    return best


def room_allocation(stays: Iterable[tuple[int, int]]) -> tuple[int, list[int]]:
    """Assign rooms to guests staying from ``arrival`` to ``departure`` inclusive.

    Returns the number of rooms used and, for each guest in input order, the
    1-based room given to them. A room is reused when its last guest left
    before the new guest arrives.
    """
    guests = sorted(
        (arrival, departure, index) for index, (arrival, departure) in enumerate(stays)
    )
    assigned = [0] * len(guests)
    occupied: list[tuple[int, int]] = []
    opened = 0
    for arrival, departure, index in guests:
        if occupied and occupied[0][0] < arrival:
            room = occupied[0][1]
            heapq.heapreplace(occupied, (departure, room))
        else:
            opened += 1
            room = opened
            heapq.heappush(occupied, (departure, room))
        assigned[index] = room
    return opened, assigned


def traffic_lights(length: int, positions: Iterable[int]) -> list[int]:
    """Add traffic lights one by one to a street from 0 to ``length``.

    After each light, report the length of the longest stretch without a light.
    Positions must lie in ``(0, length]``.
    """
    lights = SortedSet([0, length])
    gaps = SortedSet([(length, 0, length)])
    longest = []
    for position in positions:
        if not 0 < position <= length:
            raise ValueError(f"light position {position} outside (0, {length}]")
        slot = lights.bisect_left(position)
        upper = lights[slot]
        lower = lights[slot - 1]
        gaps.discard((upper - lower, lower, upper))
        gaps.add((upper - position, position, upper))
        gaps.add((position - lower, lower, position))
        lights.add(position)
        longest.append(gaps[-1][0])
    return longest


def towers(cubes: Iterable[int]) -> int:
    """Return how many towers are built when each cube in turn is placed on
    the tower whose top is the smallest cube larger than it, or starts a new one."""
    tops = SortedList()
    for cube in cubes:
        slot = tops.bisect_right(cube)
        if slot < len(tops):
            tops.pop(slot)
        tops.add(cube)
    return len(tops)