"""Searching in sorted sequences."""

from collections.abc import Sequence
from typing import Any

NOT_FOUND = -1


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of ``key`` in the ascending ``items``, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == key:
            return mid
        if value > key:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND


def ternary_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of ``key`` in the ascending ``items``, or -1 if absent.

    The range is cut into thirds at each step.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        third = (high - low) // 3
        mid1 = low + third
        mid2 = high - third
        if items[mid1] == key:
            return mid1
        if items[mid2] == key:
            return mid2
        if key < items[mid1]:
            high = mid1 - 1
        elif key > items[mid2]:
            low = mid2 + 1
        else:
            low, high = mid1 + 1, mid2 - 1
    return NOT_FOUND