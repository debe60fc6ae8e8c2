"""Graph traversals and shortest paths over adjacency matrices."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Optional


class NoPathError(Exception):
    """Raised when a destination cannot be reached from the source."""


def _check_square(adjacency: Sequence[Sequence[float]], size: int) -> None:
    if len(adjacency) != size or any(len(row) != size for row in adjacency):
        raise ValueError(f"adjacency matrix must be {size}x{size}")


def _start_index(labels: Sequence[Hashable], start: Hashable) -> int:
    try:
        return list(labels).index(start)
    except ValueError:
        raise ValueError(f"unknown start vertex {start!r}") from None


def bfs(
    labels: Sequence[Hashable], adjacency: Sequence[Sequence[int]], start: Hashable
) -> list[Hashable]:
    """Return the labels reached breadth-first from ``start``.

    Any non-zero matrix entry counts as an edge.
    """
    _check_square(adjacency, len(labels))
    origin = _start_index(labels, start)
    visited = [False] * len(labels)
    visited[origin] = True
    order = [origin]
    pending = deque([origin])
    while pending:
        vertex = pending.popleft()
        for neighbour, weight in enumerate(adjacency[vertex]):
            if weight != 0 and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                pending.append(neighbour)
    return [labels[i] for i in order]


def dfs(
    labels: Sequence[Hashable], adjacency: Sequence[Sequence[int]], start: Hashable
) -> list[Hashable]:
    """Return the labels reached depth-first from ``start``.

    Only matrix entries equal to 1 count as edges.
    """
    _check_square(adjacency, len(labels))
    origin = _start_index(labels, start)
    visited = [False] * len(labels)
    order: list[int] = []
    stack = [origin]
    while stack:
        vertex = stack.pop()
        if visited[vertex]:
            continue
        visited[vertex] = True
        order.append(vertex)
        neighbours = [
            i for i, weight in enumerate(adjacency[vertex]) if weight == 1 and not visited[i]
        ]
        stack.extend(reversed(neighbours))
    return [labels[i] for i in order]


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors found from one source vertex."""

    source: int
    distances: tuple[float, ...]
    predecessors: tuple[Optional[int], ...]

    def path_to(self, destination: int) -> list[int]:
        """Return the vertices from the source to ``destination``."""
        if not 0 <= destination < len(self.distances):
            raise IndexError(f"no vertex {destination}")
        if math.isinf(self.distances[destination]):
            raise NoPathError(f"no path from {self.source} to {destination}")
        path = [destination]
        while path[-1] != self.source:
            previous = self.predecessors[path[-1]]
            if previous is None:
                raise NoPathError(f"no path from {self.source} to {destination}")
            path.append(previous)
        path.reverse()
        return path


def dijkstra(adjacency: Sequence[Sequence[float]], source: int) -> ShortestPaths:
    """Find shortest paths from ``source`` in a directed weighted graph.

    A zero weight means there is no edge; negative weights are rejected.
    """
    size = len(adjacency)
    _check_square(adjacency, size)
    if not 0 <= source < size:
        raise IndexError(f"no vertex {source}")
    if any(weight < 0 for row in adjacency for weight in row):
        raise ValueError("edge weights must not be negative")

    distances: list[float] = [math.inf] * size
    predecessors: list[Optional[int]] = [None] * size
    settled = [False] * size
    distances[source] = 0

    current: Optional[int] = source
    while current is not None:
        settled[current] = True
        for node, weight in enumerate(adjacency[current]):
            if node == current or not weight:
                continue
            candidate = distances[current] + weight
            if candidate < distances[node]:
                distances[node] = candidate
                predecessors[node] = current
        current = min(
            (i for i in range(size) if not settled[i] and not math.isinf(distances[i])),
            key=lambda i: distances[i],
            default=None,
        )
    return ShortestPaths(source, tuple(distances), tuple(predecessors))