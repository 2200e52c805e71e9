"""Graph and grid search problems: connecting cities, counting rooms, finding paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

_WALL = "#"

# Each step from a cell towards its neighbour, with the move that leads back.
_STEPS = (((0, 1), "L"), ((0, -1), "R"), ((1, 0), "U"), ((-1, 0), "D"))


def building_roads(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the fewest new roads, each from city 1, that connect cities 1..n."""
    neighbours: dict[int, list[int]] = {city: [] for city in range(1, n + 1)}
    for a, b in roads:
        if a not in neighbours or b not in neighbours:
            raise ValueError(f"road ({a}, {b}) names a city outside 1..{n}")
        neighbours[a].append(b)
        neighbours[b].append(a)

    visited: set[int] = set()

    def visit(start: int) -> None:
        stack = [start]
        visited.add(start)
        while stack:
            for nxt in neighbours[stack.pop()]:
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append(nxt)

    if n < 1:
        return []
    visit(1)
    added = []
    for city in range(2, n + 1):
        if city not in visited:
            added.append((1, city))
            visit(city)
    return added


def counting_rooms(grid: Iterable[str]) -> int:
    """Return how many rooms a map holds: groups of non-wall cells joined side by side."""
    rows = list(grid)

    def is_floor(r: int, c: int) -> bool:
        return 0 <= r < len(rows) and 0 <= c < len(rows[r]) and rows[r][c] != _WALL

    seen: set[tuple[int, int]] = set()
    rooms = 0
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == _WALL or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                x, y = stack.pop()
                for (dx, dy), _ in _STEPS:
                    nxt = (x + dx, y + dy)
                    if nxt not in seen and is_floor(*nxt):
                        seen.add(nxt)
                        stack.append(nxt)
    return rooms


def labyrinth(grid: Iterable[str]) -> str | None:
    """Return a shortest path from ``A`` to ``B`` as moves ``L``, ``R``, ``U``, ``D``.

    Returns None when ``B`` cannot be reached.
    """
    rows = list(grid)
    start = end = None
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "A":
                start = (r, c)
            elif cell == "B":
                end = (r, c)
    if start is None or end is None:
        raise ValueError("the map needs both an 'A' and a 'B'")

    def is_floor(r: int, c: int) -> bool:
        return 0 <= r < len(rows) and 0 <= c < len(rows[r]) and rows[r][c] != _WALL

    parent: dict[tuple[int, int], tuple[tuple[int, int], str]] = {}
    reached = {end}
    queue = deque([end])
    while queue:
        x, y = queue.popleft()
        for (dx, dy), move in _STEPS:
            nxt = (x + dx, y + dy)
            if nxt in reached or not is_floor(*nxt):
                continue
            reached.add(nxt)
            parent[nxt] = ((x, y), move)
            queue.append(nxt)

    if start not in reached:
        return None
    moves = []
    cell = start
    while cell != end:
        cell, move = parent[cell]
        moves.append(move)
    return "".join(moves)