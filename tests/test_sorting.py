import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    counting_sort,
    insertion_sort,
    merge_sort,
    pigeonhole_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    sort_stack,
    tim_sort,
)


def _random_lists(low, high, seed):
    rng = random.Random(seed)
    return [
        [rng.randint(low, high) for _ in range(size)]
        for size in (0, 1, 2, 3, 7, 31, 32, 33, 65, 200)
    ]


DRIVER_ARRAYS = [
    [12, 11, 13, 5, 6, 7],
    [170, 45, 75, 90, 802, 24, 2, 66],
    [8, 3, 2, 7, 4, 6, 8],
    [2, 4, 1, 6, 9, 9, 9, 9, 9, 9],
    [5, 1, 4, 2, 8],
]


def test_source_sample_one():
    data = [7, 0, 2, 1, 3]
    expected = [0, 1, 2, 3, 7]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert pigeonhole_sort(data) == expected
    assert tim_sort(data) == expected
    assert radix_sort(data) == expected
    assert counting_sort(data) == expected


def test_source_sample_two():
    data = [10, 40, 3, 32]
    expected = [3, 10, 32, 40]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert pigeonhole_sort(data) == expected
    assert tim_sort(data) == expected
    assert radix_sort(data) == expected
    assert counting_sort(data) == expected


@pytest.mark.parametrize("data", DRIVER_ARRAYS)
def test_driver_arrays(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert pigeonhole_sort(data) == expected
    assert tim_sort(data) == expected
    assert radix_sort(data) == expected
    assert counting_sort(data) == expected


def test_general_sorts_with_negatives():
    data = [-2, 7, 15, -14, 0, 15, 0, 7, -7, -4, -13, 5, 8, -14, 12]
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert pigeonhole_sort(data) == expected
    assert tim_sort(data) == expected


def test_general_sorts_random():
    for data in _random_lists(-150, 150, seed=7):
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert insertion_sort(data) == expected
        assert selection_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected
        assert pigeonhole_sort(data) == expected
        assert tim_sort(data) == expected


def test_non_negative_sorts_random():
    for data in _random_lists(0, 5000, seed=11):
        expected = sorted(data)
        assert radix_sort(data) == expected
        assert counting_sort(data) == expected


def test_input_is_not_modified():
    data = [5, 3, 9, 1]
    bubble_sort(data)
    insertion_sort(data)
    selection_sort(data)
    merge_sort(data)
    quick_sort(data)
    pigeonhole_sort(data)
    tim_sort(data)
    radix_sort(data)
    counting_sort(data)
    assert data == [5, 3, 9, 1]


def test_accepts_any_iterable():
    expected = [1, 2, 3]
    assert bubble_sort(iter((3, 1, 2))) == expected
    assert insertion_sort(iter((3, 1, 2))) == expected
    assert selection_sort(iter((3, 1, 2))) == expected
    assert merge_sort(iter((3, 1, 2))) == expected
    assert quick_sort(iter((3, 1, 2))) == expected
    assert pigeonhole_sort(iter((3, 1, 2))) == expected
    assert tim_sort(iter((3, 1, 2))) == expected
    assert radix_sort(iter((3, 1, 2))) == expected
    assert counting_sort(iter((3, 1, 2))) == expected


def test_radix_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_counting_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


@pytest.mark.parametrize("run", [1, 2, 3, 5, 32, 100])
def test_tim_sort_run_lengths(run):
    for data in _random_lists(-50, 50, seed=run):
        assert tim_sort(data, run) == sorted(data)


def test_tim_sort_rejects_bad_run():
    with pytest.raises(ValueError):
        tim_sort([2, 1], 0)


def test_merge_sort_is_stable():
    pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]

    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

        def __gt__(self, other):
            return self.pair[0] > other.pair[0]

    result = [k.pair for k in merge_sort(Keyed(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def test_sort_stack_puts_largest_on_top():
    stack = [4, 1, 3, 2]
    result = sort_stack(stack)
    assert result == sorted(stack)
    assert result[-1] == max(stack)


def test_sort_stack_random_and_empty():
    for data in _random_lists(-20, 20, seed=3):
        assert sort_stack(data) == sorted(data)
    assert sort_stack([]) == []