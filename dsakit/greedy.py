"""Greedy algorithms over items and number sequences."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """Something of a given ``value`` that takes up ``weight``."""

    value: float
    weight: float

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Return the largest value that fits in ``capacity`` when items may be split.

    Items are taken whole in order of falling value per weight, and the
    first one that does not fit is taken in part.
    """
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    candidates = list(items)
    for item in candidates:
        if item.weight <= 0:
            raise ValueError(f"item weight must be positive, got {item.weight}")

    remaining = capacity
    total = 0.0
    for item in sorted(candidates, key=lambda it: it.ratio, reverse=True):
        if item.weight <= remaining:
            remaining -= item.weight
            total += item.value
        else:
            total += item.value * (remaining / item.weight)
            break
    return total


def _split_by_kind(kinds: Sequence[int], values: Sequence[int]) -> tuple[list[int], list[int]]:
    if len(kinds) != len(values):
        raise ValueError("kinds and values must have the same length")
    ones = sorted((v for k, v in zip(kinds, values) if k), reverse=True)
    zeros = sorted((v for k, v in zip(kinds, values) if not k), reverse=True)
    return ones, zeros


def _paired_total(ones: list[int], zeros: list[int]) -> int:
    pairs = min(len(ones), len(zeros))
    doubled = sum(2 * (a + b) for a, b in zip(ones[:pairs], zeros[:pairs]))
    return doubled + sum(ones[pairs:]) + sum(zeros[pairs:])


def doubled_pair_sum(kinds: Sequence[int], values: Sequence[int]) -> int:
    """Pair the largest values of the two kinds and count each paired value twice.

    ``kinds`` marks each value as kind one (truthy) or kind zero (falsy).
    Values of the more numerous kind left without a partner count once.
    """
    ones, zeros = _split_by_kind(kinds, values)
    return _paired_total(ones, zeros)


def alternating_damage(kinds: Sequence[int], values: Sequence[int]) -> int:
    """Total of alternately used values of two kinds, each doubled after a switch.

    As :func:`doubled_pair_sum`, except that when both kinds are equally
    numerous the smallest value, used first, is not doubled.
    """
    ones, zeros = _split_by_kind(kinds, values)
    total = _paired_total(ones, zeros)
    if ones and len(ones) == len(zeros):
        total -= min(ones[-1], zeros[-1])
    return total


def collecting_rounds(numbers: Sequence[int]) -> int:
    """Count left-to-right passes needed to collect ``numbers`` in ascending order.

    Each pass picks up, in increasing order, the values that appear in the
    sequence at increasing positions.
    """
    ordered = sorted((value, position) for position, value in enumerate(numbers))
    if not ordered:
        return 0
    breaks = sum(
        1 for current, following in zip(ordered, ordered[1:]) if following[1] < current[1]
    )
    return breaks + 1


def distinct_count(numbers: Iterable[Hashable]) -> int:
    """Return how many different values occur in ``numbers``."""
    return len(set(numbers))