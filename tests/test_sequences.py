import pytest

from contestbook.sequences import (
    collecting_numbers,
    collecting_numbers_ii,
    distinct_numbers,
    josephus,
    josephus_every_second,
    maximum_subarray_sum,
    playlist,
)


def test_distinct_numbers_counts_unique_values():
    assert distinct_numbers([2, 3, 2, 2, 3]) == len({2, 3})


def test_distinct_numbers_empty():
    assert distinct_numbers([]) == 0


def test_distinct_numbers_all_different():
    values = [5, 1, 9, 7]
    assert distinct_numbers(values) == len(values)


def test_maximum_subarray_sum_worked_example():
    assert maximum_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2]) == 9


def test_maximum_subarray_sum_all_positive_is_total():
    values = [4, 1, 7, 2]
    assert maximum_subarray_sum(values) == sum(values)


def test_maximum_subarray_sum_all_negative_is_largest():
    values = [-8, -3, -5]
    assert maximum_subarray_sum(values) == max(values)


def test_maximum_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        maximum_subarray_sum([])


def test_collecting_numbers_sorted_takes_one_round():
    assert collecting_numbers([1, 2, 3, 4, 5]) == 1


def test_collecting_numbers_reversed_takes_n_rounds():
    values = [6, 5, 4, 3, 2, 1]
    assert collecting_numbers(values) == len(values)


def test_collecting_numbers_bounds():
    result = collecting_numbers([4, 2, 1, 5, 3])
    assert 1 <= result <= 5


def test_collecting_numbers_rejects_non_permutation():
    with pytest.raises(ValueError):
        collecting_numbers([1, 1, 3])


def test_collecting_numbers_ii_steps_by_one():
    perm = [4, 2, 1, 5, 3]
    base = collecting_numbers(perm)
    results = collecting_numbers_ii(perm, [(2, 3)])
    assert len(results) == 1
    assert abs(results[0] - base) == 1


def test_collecting_numbers_ii_order_of_positions_irrelevant():
    perm = [4, 2, 1, 5, 3]
    assert collecting_numbers_ii(perm, [(1, 4), (5, 2)]) == collecting_numbers_ii(
        perm, [(4, 1), (2, 5)]
    )


def test_collecting_numbers_ii_no_swaps():
    assert collecting_numbers_ii([2, 1, 3], []) == []


def test_collecting_numbers_ii_out_of_range():
    with pytest.raises(IndexError):
        collecting_numbers_ii([1, 2, 3], [(1, 4)])


def test_playlist_all_distinct():
    songs = [3, 1, 4, 5, 9]
    assert playlist(songs) == len(songs)


def test_playlist_all_same():
    assert playlist([7, 7, 7, 7]) == 1


def test_playlist_empty():
    assert playlist([]) == 0


def test_playlist_window_has_no_repeats():
    songs = [1, 2, 1, 3, 2, 7, 4, 2]
    length = playlist(songs)
    windows = [songs[i : i + length] for i in range(len(songs) - length + 1)]
    assert any(len(set(w)) == length for w in windows)
    longer = [songs[i : i + length + 1] for i in range(len(songs) - length)]
    assert all(len(set(w)) < length + 1 for w in longer)


def test_josephus_every_second_worked_example():
    assert josephus_every_second(7) == [2, 4, 6, 1, 5, 3, 7]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 31])
def test_josephus_every_second_is_permutation(n):
    assert sorted(josephus_every_second(n)) == list(range(1, n + 1))


def test_josephus_worked_example():
    assert josephus(7, 2) == [3, 6, 2, 7, 5, 1, 4]


@pytest.mark.parametrize("n", [1, 2, 5, 8, 13])
def test_josephus_step_one_matches_every_second(n):
    assert josephus(n, 1) == josephus_every_second(n)


def test_josephus_step_zero_removes_in_order():
    assert josephus(6, 0) == list(range(1, 7))


@pytest.mark.parametrize("n,k", [(0, 3), (1, 5), (9, 4), (12, 100)])
def test_josephus_is_permutation(n, k):
    assert sorted(josephus(n, k)) == list(range(1, n + 1))