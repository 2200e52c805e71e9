import io
import sys

import pytest

from contestbook.cli import main, solve
from contestbook.graphs import building_roads, counting_rooms, labyrinth
from contestbook.greedy import ferris_wheel, paint_strip
from contestbook.puzzles import ammar_permutation, convert_date, game_of_division
from contestbook.scheduling import room_allocation, traffic_lights
from contestbook.searching import concert_tickets, sum_of_two_values
from contestbook.sequences import distinct_numbers, josephus

LABYRINTH_MAP = ["########", "#.A#...#", "#.##.#B#", "#......#", "########"]


def test_distinct_numbers_matches_library():
    assert solve("distinct-numbers", "5\n2 3 2 2 3\n") == f"{distinct_numbers([2, 3, 2, 2, 3])}\n"


def test_ferris_wheel_matches_library():
    assert solve("ferris-wheel", "4 10\n7 2 3 9\n") == f"{ferris_wheel([7, 2, 3, 9], 10)}\n"


def test_concert_tickets_one_line_per_customer():
    output = solve("concert-tickets", "5 3\n5 3 7 8 5\n4 8 3\n")
    expected = concert_tickets([5, 3, 7, 8, 5], [4, 8, 3])
    assert output.splitlines() == [str(value) for value in expected]


def test_sum_of_two_values_found_matches_library():
    output = solve("sum-of-two-values", "4 8\n2 7 5 1\n")
    assert output == " ".join(map(str, sum_of_two_values([2, 7, 5, 1], 8))) + "\n"


def test_sum_of_two_values_missing_prints_minus_one():
    assert solve("sum-of-two-values", "3 100\n1 2 3\n") == "-1\n"


def test_labyrinth_reachable_reports_path():
    text = "5 8\n" + "\n".join(LABYRINTH_MAP) + "\n"
    lines = solve("labyrinth", text).splitlines()
    assert lines[0] == "YES"
    assert lines[2] == labyrinth(LABYRINTH_MAP)
    assert lines[1] == str(len(lines[2]))


def test_labyrinth_unreachable_prints_no():
    assert solve("labyrinth", "1 3\nA#B\n") == "NO\n"


def test_counting_rooms_matches_library():
    text = "5 8\n" + "\n".join(LABYRINTH_MAP) + "\n"
    assert solve("counting-rooms", text) == f"{counting_rooms(LABYRINTH_MAP)}\n"


def test_counting_rooms_rejects_wrong_row_width():
    with pytest.raises(ValueError):
        solve("counting-rooms", "2 3\n...\n..\n")


def test_building_roads_lists_new_roads():
    roads = [(1, 2), (3, 4)]
    lines = solve("building-roads", "4 2\n1 2\n3 4\n").splitlines()
    added = building_roads(4, roads)
    assert lines[0] == str(len(added))
    assert lines[1:] == [f"{a} {b}" for a, b in added]


def test_room_allocation_two_lines():
    lines = solve("room-allocation", "3\n1 2\n2 4\n4 4\n").splitlines()
    rooms, assigned = room_allocation([(1, 2), (2, 4), (4, 4)])
    assert lines == [str(rooms), " ".join(map(str, assigned))]


def test_traffic_lights_single_line():
    output = solve("traffic-lights", "8 3\n3 6 2\n")
    assert output == " ".join(map(str, traffic_lights(8, [3, 6, 2]))) + "\n"


def test_josephus_ii_single_line():
    output = solve("josephus-ii", "7 2\n")
    assert output.split() == [str(child) for child in josephus(7, 2)]
    assert sorted(map(int, output.split())) == list(range(1, 8))


def test_paint_strip_runs_every_case():
    lines = solve("paint-strip", "3\n1\n2\n4\n").splitlines()
    assert lines == [str(paint_strip(n)) for n in (1, 2, 4)]


def test_ammar_permutation_runs_every_case():
    lines = solve("ammar-permutation", "2\n3\n4\n").splitlines()
    assert lines == [" ".join(map(str, ammar_permutation(n))) for n in (3, 4)]


def test_game_of_division_yes_and_no_cases():
    lines = solve("game-of-division", "2\n3 2\n1 2 3\n2 1\n5 6\n").splitlines()
    first = game_of_division([1, 2, 3], 2)
    assert lines[0] == "YES"
    assert lines[1] == str(first)
    assert lines[2] == "NO"


def test_calendars_query_format():
    text = "2\n2 10 20\n3 5 5 5\n1\n1 2 5 2 1\n"
    output = solve("calendars", text)
    converted = convert_date([[10, 20], [5, 5, 5]], 1, 2, 5, 2, 1)
    assert output == "Query 1: " + " ".join(map(str, converted)) + "\n"


def test_icpc_standing_case_prefix():
    assert solve("icpc-standing", "2\n3 2 5\n3 3 1\n") == "Case 1: Yes\nCase 2: Yes\n"
    assert solve("icpc-standing", "1\n3 3 2\n") == "Case 1: No\n"


def test_unknown_problem_raises():
    with pytest.raises(ValueError):
        solve("no-such-problem", "1\n")


def test_truncated_input_raises():
    with pytest.raises(ValueError):
        solve("distinct-numbers", "5\n1 2\n")


def test_non_integer_token_raises():
    with pytest.raises(ValueError):
        solve("distinct-numbers", "2\n1 x\n")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("4 10\n7 2 3 9\n", encoding="utf-8")
    assert main(["ferris-wheel", str(path)]) == 0
    assert capsys.readouterr().out == solve("ferris-wheel", "4 10\n7 2 3 9\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1 1 2\n"))
    assert main(["distinct-numbers"]) == 0
    assert capsys.readouterr().out == solve("distinct-numbers", "3\n1 1 2\n")


def test_main_bad_input_returns_one(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("5\n1\n", encoding="utf-8")
    assert main(["distinct-numbers", str(path)]) == 1
    assert "input ended early" in capsys.readouterr().err


def test_main_missing_file_returns_one(tmp_path):
    assert main(["distinct-numbers", str(tmp_path / "absent.txt")]) == 1


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit) as raised:
        main(["no-such-problem"])
    assert raised.value.code == 2