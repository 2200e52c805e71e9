"""Greedy and two-pointer solutions to classic assignment and ordering problems."""

from __future__ import annotations

from collections.abc import Iterable


def apartments(desired: Iterable[int], sizes: Iterable[int], tolerance: int) -> int:
    """Count applicants who get an apartment within ``tolerance`` of the size they want.

    Both lists are sorted. Each apartment in turn skips the applicants whose
    range lies wholly below it, then goes to the first remaining applicant if
    it fits that applicant's range.
    """
    wanted = sorted(desired)
    offered = sorted(sizes)
    count = 0
    i = 0
    for size in offered:
        if i >= len(wanted):
            break
        while i < len(wanted) and wanted[i] + tolerance < size:
            i += 1
        if i < len(wanted) and wanted[i] - tolerance <= size <= wanted[i] + tolerance:
            count += 1
            i += 1
    return count


def apartments_alternating(desired: Iterable[int], sizes: Iterable[int], tolerance: int) -> int:
    """Count matched applicants with a scan that alternates between skipping
    applicants and skipping apartments.

    After a mismatch, the applicants whose range lies below the current
    apartment are skipped first; on a second mismatch in a row the apartment
    itself is skipped.
    """
    wanted = sorted(desired)
    offered = sorted(sizes)
    count = 0
    i = j = 0
    skip_applicants = True
    while i < len(wanted) and j < len(offered):
        low, high = wanted[i] - tolerance, wanted[i] + tolerance
        if low <= offered[j] <= high:
            count += 1
            i += 1
            j += 1
            skip_applicants = True
            continue
        if skip_applicants:
            while i < len(wanted) and wanted[i] + tolerance < offered[j]:
                i += 1
            skip_applicants = False
        else:
            j += 1
            skip_applicants = True
    return count


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Return the fewest gondolas for children of the given weights.

    A gondola holds one or two children whose total weight is at most ``limit``.
    """
    ordered = sorted(weights)
    light, heavy = 0, len(ordered) - 1
    gondolas = 0
    while light <= heavy:
        if ordered[light] + ordered[heavy] <= limit:
            light += 1
        heavy -= 1
        gondolas += 1
    return gondolas


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most movies, given as ``(start, end)``, that can be watched in full.

    Movies are taken greedily by earliest ending time; the first one must
    start at time 0 or later.
    """
    watched = 0
    free_from = 0
    for end, start in sorted((end, start) for start, end in movies):
        if start >= free_from:
            watched += 1
            free_from = end
    return watched


def stick_lengths(lengths: Iterable[int]) -> int:
    """Return the least total cost to make every stick the same length.

    Changing a stick's length by one costs one; the target is the median.
    """
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("stick_lengths needs at least one stick")
    median = ordered[len(ordered) // 2]
    return sum(abs(median - length) for length in ordered)


def missing_coin_sum(coins: Iterable[int]) -> int:
    """Return the smallest positive sum that no subset of ``coins`` makes."""
    reachable = 0
    for coin in sorted(coins):
        if coin > reachable + 1:
            break
        reachable += coin
    return reachable + 1


def tasks_and_deadlines(tasks: Iterable[tuple[int, int]]) -> int:
    """Return the best total reward for tasks given as ``(duration, deadline)``.

    Tasks run back to back from time 0, shortest first; each earns its
    deadline minus its finishing time, which may be negative.
    """
    reward = 0
    clock = 0
    for duration, deadline in sorted(tasks):
        clock += duration
        reward += deadline - clock
    return reward


def reading_books(times: Iterable[int]) -> int:
    """Return the least time for two readers to each read every book.

    No book may be read by both readers at once.
    """
    durations = list(times)
    if not durations:
        raise ValueError("reading_books needs at least one book")
    longest_twice = 2 * max(durations)
    return longest_twice + max(0, sum(durations) - longest_twice)


def paint_strip(n: int) -> int:
    """Return the fewest first-type operations needed to paint a strip of ``n`` cells."""
    operations = 1
    covered = 1
    while covered < n:
        operations += 1
        covered = (covered + 1) * 2
    return operations