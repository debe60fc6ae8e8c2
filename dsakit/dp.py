"""Counting and optimisation problems solved by dynamic programming.

Counts are reported modulo ``MOD``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Optional

MOD = 10**9 + 7
BLOCKED = "*"


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(coin <= 0 for coin in values):
        raise ValueError("coin values must be positive")
    return values


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def array_descriptions(values: Sequence[int], upper: int) -> int:
    """Count arrays matching ``values`` with entries in ``1..upper``.

    A zero in ``values`` is unknown and may be filled with any value;
    neighbouring entries must differ by at most one.
    """
    if not values:
        raise ValueError("values must not be empty")

    def allowed(value: int) -> range:
        if value == 0:
            return range(1, upper + 1)
        return range(value, value + 1) if 1 <= value <= upper else range(0)

    # Two spare slots so that j - 1 and j + 1 are always in range.
    ways = [0] * (upper + 2)
    for j in allowed(values[0]):
        ways[j] = 1
    for value in values[1:]:
        following = [0] * (upper + 2)
        for j in allowed(value):
            following[j] = (ways[j - 1] + ways[j] + ways[j + 1]) % MOD
        ways = following
    return sum(ways[1 : upper + 1]) % MOD


def book_shop(budget: int, prices: Sequence[int], pages: Sequence[int]) -> int:
    """Return the most pages buyable within ``budget``, each book at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    _non_negative("budget", budget)
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for spent in range(budget, price - 1, -1):
            best[spent] = max(best[spent], best[spent - price] + count)
    return best[budget]


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``."""
    values = _positive_coins(coins)
    _non_negative("target", target)
    ways = [0] * (target + 1)
    ways[0] = 1
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - c] for c in values if c <= amount) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins summing to ``target``."""
    values = _positive_coins(coins)
    _non_negative("target", target)
    ways = [0] * (target + 1)
    ways[0] = 1
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def dice_combinations(total: int) -> int:
    """Count ordered throws of a six-sided die summing to ``total``."""
    _non_negative("total", total)
    ways = [0] * (total + 1)
    ways[0] = 1
    for amount in range(1, total + 1):
        ways[amount] = sum(ways[amount - face] for face in range(1, 7) if face <= amount) % MOD
    return ways[total]


def grid_paths(grid: Sequence[Sequence[str]]) -> int:
    """Count right/down paths across a square grid avoiding ``*`` cells."""
    size = len(grid)
    if size == 0:
        raise ValueError("grid must not be empty")
    if any(len(row) != size for row in grid):
        raise ValueError(f"grid must be {size}x{size}")
    if grid[-1][-1] == BLOCKED:
        return 0

    above = [0] * size
    for i, row in enumerate(grid):
        current = [0] * size
        for j, cell in enumerate(row):
            if cell == BLOCKED:
                continue
            if i == 0 and j == 0:
                current[j] = 1
            else:
                left = current[j - 1] if j > 0 else 0
                current[j] = (above[j] + left) % MOD
        above = current
    return above[-1]


def minimizing_coins(coins: Iterable[int], target: int) -> Optional[int]:
    """Return the fewest coins summing to ``target``, or None if none do."""
    values = _positive_coins(coins)
    _non_negative("target", target)
    fewest: list[float] = [0] + [math.inf] * target
    for amount in range(1, target + 1):
        best = min((fewest[amount - c] for c in values if c <= amount), default=math.inf)
        fewest[amount] = best + 1
    result = fewest[target]
    return None if math.isinf(result) else int(result)


def removing_digits(number: int) -> int:
    """Return the fewest steps to reach zero, each step subtracting one of the digits."""
    _non_negative("number", number)
    steps = [0] * (number + 1)
    for value in range(1, number + 1):
        digits = {int(d) for d in str(value)} - {0}
        steps[value] = min(steps[value - d] for d in digits) + 1
    return steps[number]