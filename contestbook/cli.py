"""Command line front end: read a problem's input in contest format and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from contestbook.graphs import building_roads, counting_rooms, labyrinth
from contestbook.greedy import (
    apartments,
    apartments_alternating,
    ferris_wheel,
    missing_coin_sum,
    movie_festival,
    paint_strip,
    reading_books,
    stick_lengths,
    tasks_and_deadlines,
)
from contestbook.puzzles import (
    ammar_permutation,
    convert_date,
    game_of_division,
    icpc_standing,
    resli_pair,
    salahiano_arrays,
)
from contestbook.scheduling import (
    restaurant_customers,
    room_allocation,
    towers,
    traffic_lights,
)
from contestbook.searching import (
    concert_tickets,
    factory_machines,
    nearest_smaller_values,
    sum_of_four_values,
    sum_of_three_values,
    sum_of_two_values,
)
from contestbook.sequences import (
    collecting_numbers,
    collecting_numbers_ii,
    distinct_numbers,
    josephus,
    josephus_every_second,
    maximum_subarray_sum,
    playlist,
)


class _Tokens:
    """Whitespace-separated tokens of a problem's input."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("input ended early") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]


_Handler = Callable[[_Tokens], list[str]]
_PROBLEMS: dict[str, _Handler] = {}


def _problem(name: str) -> Callable[[_Handler], _Handler]:
    def register(handler: _Handler) -> _Handler:
        _PROBLEMS[name] = handler
        return handler

    return register


def _joined(values) -> str:
    return " ".join(str(value) for value in values)


def _each_case(tokens: _Tokens, handler: _Handler) -> list[str]:
    lines: list[str] = []
    for _ in range(tokens.number()):
        lines.extend(handler(tokens))
    return lines


def _positions_or_missing(found) -> list[str]:
    return ["-1"] if found is None else [_joined(found)]


@_problem("apartments")
def _apartments(tokens: _Tokens) -> list[str]:
    n, m, k = tokens.numbers(3)
    desired, sizes = tokens.numbers(n), tokens.numbers(m)
    return [str(apartments(desired, sizes, k))]


@_problem("apartments-alternating")
def _apartments_alternating(tokens: _Tokens) -> list[str]:
    n, m, k = tokens.numbers(3)
    desired, sizes = tokens.numbers(n), tokens.numbers(m)
    return [str(apartments_alternating(desired, sizes, k))]


@_problem("ferris-wheel")
def _ferris_wheel(tokens: _Tokens) -> list[str]:
    n, limit = tokens.numbers(2)
    return [str(ferris_wheel(tokens.numbers(n), limit))]


@_problem("movie-festival")
def _movie_festival(tokens: _Tokens) -> list[str]:
    return [str(movie_festival(tokens.pairs(tokens.number())))]


@_problem("stick-lengths")
def _stick_lengths(tokens: _Tokens) -> list[str]:
    return [str(stick_lengths(tokens.numbers(tokens.number())))]


@_problem("missing-coin-sum")
def _missing_coin_sum(tokens: _Tokens) -> list[str]:
    return [str(missing_coin_sum(tokens.numbers(tokens.number())))]


@_problem("tasks-and-deadlines")
def _tasks_and_deadlines(tokens: _Tokens) -> list[str]:
    return [str(tasks_and_deadlines(tokens.pairs(tokens.number())))]


@_problem("reading-books")
def _reading_books(tokens: _Tokens) -> list[str]:
    return [str(reading_books(tokens.numbers(tokens.number())))]


@_problem("paint-strip")
def _paint_strip(tokens: _Tokens) -> list[str]:
    return _each_case(tokens, lambda t: [str(paint_strip(t.number()))])


@_problem("concert-tickets")
def _concert_tickets(tokens: _Tokens) -> list[str]:
    n, m = tokens.numbers(2)
    prices, offers = tokens.numbers(n), tokens.numbers(m)
    return [str(paid) for paid in concert_tickets(prices, offers)]


@_problem("sum-of-two-values")
def _sum_of_two_values(tokens: _Tokens) -> list[str]:
    n, target = tokens.numbers(2)
    return _positions_or_missing(sum_of_two_values(tokens.numbers(n), target))


@_problem("sum-of-three-values")
def _sum_of_three_values(tokens: _Tokens) -> list[str]:
    n, target = tokens.numbers(2)
    return _positions_or_missing(sum_of_three_values(tokens.numbers(n), target))


@_problem("sum-of-four-values")
def _sum_of_four_values(tokens: _Tokens) -> list[str]:
    n, target = tokens.numbers(2)
    return _positions_or_missing(sum_of_four_values(tokens.numbers(n), target))


@_problem("factory-machines")
def _factory_machines(tokens: _Tokens) -> list[str]:
    n, products = tokens.numbers(2)
    return [str(factory_machines(tokens.numbers(n), products))]


@_problem("nearest-smaller-values")
def _nearest_smaller_values(tokens: _Tokens) -> list[str]:
    return [_joined(nearest_smaller_values(tokens.numbers(tokens.number())))]


@_problem("distinct-numbers")
def _distinct_numbers(tokens: _Tokens) -> list[str]:
    return [str(distinct_numbers(tokens.numbers(tokens.number())))]


@_problem("maximum-subarray-sum")
def _maximum_subarray_sum(tokens: _Tokens) -> list[str]:
    return [str(maximum_subarray_sum(tokens.numbers(tokens.number())))]


@_problem("collecting-numbers")
def _collecting_numbers(tokens: _Tokens) -> list[str]:
    return [str(collecting_numbers(tokens.numbers(tokens.number())))]


@_problem("collecting-numbers-ii")
def _collecting_numbers_ii(tokens: _Tokens) -> list[str]:
    n, m = tokens.numbers(2)
    permutation = tokens.numbers(n)
    return [str(count) for count in collecting_numbers_ii(permutation, tokens.pairs(m))]


@_problem("playlist")
def _playlist(tokens: _Tokens) -> list[str]:
    return [str(playlist(tokens.numbers(tokens.number())))]


@_problem("josephus-i")
def _josephus_i(tokens: _Tokens) -> list[str]:
    return [_joined(josephus_every_second(tokens.number()))]


@_problem("josephus-ii")
def _josephus_ii(tokens: _Tokens) -> list[str]:
    n, k = tokens.numbers(2)
    return [_joined(josephus(n, k))]


@_problem("restaurant-customers")
def _restaurant_customers(tokens: _Tokens) -> list[str]:
    return [str(restaurant_customers(tokens.pairs(tokens.number())))]


@_problem("room-allocation")
def _room_allocation(tokens: _Tokens) -> list[str]:
    rooms, assigned = room_allocation(tokens.pairs(tokens.number()))
    return [str(rooms), _joined(assigned)]


@_problem("traffic-lights")
def _traffic_lights(tokens: _Tokens) -> list[str]:
    length, n = tokens.numbers(2)
    return [_joined(traffic_lights(length, tokens.numbers(n)))]


@_problem("towers")
def _towers(tokens: _Tokens) -> list[str]:
    return [str(towers(tokens.numbers(tokens.number())))]


def _read_grid(tokens: _Tokens) -> list[str]:
    n, m = tokens.numbers(2)
    rows = [tokens.word() for _ in range(n)]
    for row in rows:
        if len(row) != m:
            raise ValueError(f"grid row {row!r} is not {m} cells wide")
    return rows


@_problem("building-roads")
def _building_roads(tokens: _Tokens) -> list[str]:
    n, m = tokens.numbers(2)
    added = building_roads(n, tokens.pairs(m))
    return [str(len(added)), *(_joined(road) for road in added)]


@_problem("counting-rooms")
def _counting_rooms(tokens: _Tokens) -> list[str]:
    return [str(counting_rooms(_read_grid(tokens)))]


@_problem("labyrinth")
def _labyrinth(tokens: _Tokens) -> list[str]:
    path = labyrinth(_read_grid(tokens))
    if path is None:
        return ["NO"]
    return ["YES", str(len(path)), path]


@_problem("game-of-division")
def _game_of_division(tokens: _Tokens) -> list[str]:
    def one(t: _Tokens) -> list[str]:
        n, k = t.numbers(2)
        position = game_of_division(t.numbers(n), k)
        return ["NO"] if position is None else ["YES", str(position)]

    return _each_case(tokens, one)


@_problem("salahiano-arrays")
def _salahiano_arrays(tokens: _Tokens) -> list[str]:
    def one(t: _Tokens) -> list[str]:
        flips = salahiano_arrays(t.pairs(t.number()))
        return ["-1" if flips is None else str(flips)]

    return _each_case(tokens, one)


@_problem("resli-pair")
def _resli_pair(tokens: _Tokens) -> list[str]:
    return _each_case(tokens, lambda t: [_joined(resli_pair(t.number()))])


@_problem("ammar-permutation")
def _ammar_permutation(tokens: _Tokens) -> list[str]:
    return _each_case(tokens, lambda t: [_joined(ammar_permutation(t.number()))])


@_problem("calendars")
def _calendars(tokens: _Tokens) -> list[str]:
    calendars = [tokens.numbers(tokens.number()) for _ in range(tokens.number())]
    lines = []
    for query in range(1, tokens.number() + 1):
        source, target, day, month, year = tokens.numbers(5)
        converted = convert_date(calendars, source, target, day, month, year)
        lines.append(f"Query {query}: {_joined(converted)}")
    return lines


@_problem("icpc-standing")
def _icpc_standing(tokens: _Tokens) -> list[str]:
    lines = []
    for case in range(1, tokens.number() + 1):
        p, s, r = tokens.numbers(3)
        lines.append(f"Case {case}: {'Yes' if icpc_standing(p, s, r) else 'No'}")
    return lines


def solve(problem: str, text: str) -> str:
    """Solve ``problem`` for input ``text`` in contest format and return the output text."""
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    lines = handler(_Tokens(text))
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="contestbook", description="Solve a contest problem from its input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem to solve")
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = solve(args.problem, text)
    except (OSError, ValueError, IndexError) as error:
        print(f"contestbook: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0