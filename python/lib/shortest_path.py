#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
shortest_path.py
----------------

Single‑source shortest paths (Dijkstra) over a graph whose vertices are the
dense integers ``0 .. n-1``.  The frontier is a ``RandomAccessPriorityQueue``
keyed by vertex id, so relaxing an edge is an in‑place decrease‑key rather
than a duplicate push.

>>> from shortest_path import dijkstra, path_to
>>> graph = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], []]
>>> distances, predecessors = dijkstra(graph, 0)
>>> distances
[0, 3, 1, 4]
>>> path_to(distances, predecessors, 3)
[0, 2, 1, 3]
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple, Union

from random_access_priority_queue import RandomAccessPriorityQueue

logger = logging.getLogger(__name__)

Number = Union[int, float]
Graph = Sequence[Sequence[Tuple[int, Number]]]


def dijkstra(
    graph: Graph, source: int
) -> Tuple[List[Number], List[Optional[int]]]:
    """
    Compute shortest distances from *source* to every vertex.

    Parameters
    ----------
    graph : Sequence[Sequence[Tuple[int, Number]]]
        ``graph[u]`` lists the ``(v, weight)`` edges leaving ``u``.
        Weights must be non‑negative.
    source : int
        Start vertex.

    Returns
    -------
    (distances, predecessors)
        ``distances[v]`` is ``math.inf`` and ``predecessors[v]`` is ``None``
        for vertices that cannot be reached.
    """
    n = len(graph)
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range for {n} vertices")

    distances: List[Number] = [math.inf] * n
    predecessors: List[Optional[int]] = [None] * n
    distances[source] = 0

    frontier: RandomAccessPriorityQueue[None, Number] = RandomAccessPriorityQueue(n)
    frontier.enqueue(source, None, 0)
    settled = 0

    while frontier:
        u, _ = frontier.dequeue()
        settled += 1
        for v, weight in graph[u]:
            if weight < 0:
                raise ValueError(f"negative edge weight {weight} on edge {u}->{v}")
            candidate = distances[u] + weight
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                if v in frontier:
                    frontier.update_value(v, None, candidate)
                else:
                    frontier.enqueue(v, None, candidate)

    logger.debug("dijkstra from %d settled %d of %d vertices", source, settled, n)
    return distances, predecessors


def path_to(
    distances: Sequence[Number], predecessors: Sequence[Optional[int]], target: int
) -> List[int]:
    """
    Return the vertices on the shortest path from the source to *target*,
    both included, or an empty list if *target* is unreachable.
    """
    if math.isinf(distances[target]):
        return []
    path = [target]
    while predecessors[path[-1]] is not None:
        path.append(predecessors[path[-1]])
    path.reverse()
    return path
