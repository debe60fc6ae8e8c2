"""Classic comparison sorts.

Each function takes any iterable and returns a new ascending list,
leaving its argument unchanged.
"""

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops early once a pass makes no swaps."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with a binary max-heap built in place."""
    result = list(items)
    n = len(result)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, root)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix."""
    result: list[Any] = []
    for value in items:
        position = len(result)
        while position > 0 and result[position - 1] > value:
            position -= 1
        result.insert(position, value)
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    start, end = low, high
    while start < end:
        while start <= high and values[start] <= pivot:
            start += 1
        while values[end] > pivot:
            end -= 1
        if start < end:
            values[start], values[end] = values[end], values[start]
    values[low], values[end] = values[end], values[low]
    return end


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quick sort with the first element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pos = _partition(result, low, high)
            pending.append((low, pos - 1))
            pending.append((pos + 1, high))
    return result