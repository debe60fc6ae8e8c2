import random

import pytest

from dsakit.greedy import (
    Item,
    alternating_damage,
    collecting_rounds,
    distinct_count,
    doubled_pair_sum,
    fractional_knapsack,
)

SAMPLE_ITEMS = [Item(60, 10), Item(100, 20), Item(120, 30)]


def test_knapsack_worked_example():
    assert fractional_knapsack(50, SAMPLE_ITEMS) == pytest.approx(240.0)


def test_knapsack_order_of_items_does_not_matter():
    shuffled = SAMPLE_ITEMS[:]
    random.Random(7).shuffle(shuffled)
    assert fractional_knapsack(50, shuffled) == pytest.approx(
        fractional_knapsack(50, SAMPLE_ITEMS)
    )


def test_knapsack_everything_fits():
    total = sum(item.value for item in SAMPLE_ITEMS)
    assert fractional_knapsack(1000, SAMPLE_ITEMS) == pytest.approx(total)


def test_knapsack_zero_capacity():
    assert fractional_knapsack(0, SAMPLE_ITEMS) == 0.0


def test_knapsack_is_monotonic_in_capacity():
    results = [fractional_knapsack(c, SAMPLE_ITEMS) for c in range(0, 70, 5)]
    assert results == sorted(results)


def test_knapsack_rejects_non_positive_weight():
    with pytest.raises(ValueError):
        fractional_knapsack(10, [Item(5, 0)])


def test_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        fractional_knapsack(-1, SAMPLE_ITEMS)


def test_item_ratio():
    assert Item(60, 10).ratio == pytest.approx(60 / 10)


def test_doubled_pair_sum_single_kind_counts_once():
    values = [5, 1, 9, 3]
    assert doubled_pair_sum([1, 1, 1, 1], values) == sum(values)
    assert doubled_pair_sum([0, 0, 0, 0], values) == sum(values)


def test_doubled_pair_sum_empty():
    assert doubled_pair_sum([], []) == 0


def test_alternating_damage_equals_doubled_when_counts_differ():
    kinds = [0, 1, 1, 0, 1]
    values = [4, 7, 2, 8, 5]
    assert alternating_damage(kinds, values) == doubled_pair_sum(kinds, values)


def test_alternating_damage_drops_smallest_when_counts_equal():
    kinds = [0, 1, 1, 0]
    values = [4, 7, 2, 8]
    assert alternating_damage(kinds, values) == doubled_pair_sum(kinds, values) - min(values)


def test_alternating_damage_empty():
    assert alternating_damage([], []) == 0


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        doubled_pair_sum([0, 1], [3])
    with pytest.raises(ValueError):
        alternating_damage([0], [3, 4])


def test_collecting_rounds_example():
    assert collecting_rounds([4, 2, 1, 5, 3]) == 3


def test_collecting_rounds_sorted_and_reversed():
    assert collecting_rounds(list(range(1, 11))) == 1
    assert collecting_rounds(list(range(10, 0, -1))) == 10


def test_collecting_rounds_empty():
    assert collecting_rounds([]) == 0


def test_distinct_count_example():
    assert distinct_count([2, 3, 2, 2, 3]) == 2


def test_distinct_count_edges():
    assert distinct_count([]) == 0
    assert distinct_count([7] * 5) == 1
    assert distinct_count(range(12)) == 12