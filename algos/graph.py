"""Breadth-first search over a directed graph given as an adjacency mapping."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)

Graph = Mapping[str, Sequence[str]]


def default_graph() -> dict[str, list[str]]:
    """Return the small sample graph searched when no graph is given."""
    return {
        "A": ["B", "C"],
        "B": ["D", "E"],
        "C": [],
        "D": [],
        "E": ["F"],
        "F": [],
    }


def bfs(start: str, target: str, graph: Graph | None = None) -> str | None:
    """Search breadth-first from ``start``; return ``target`` if reachable, else None."""
    if graph is None:
        graph = default_graph()

    distances: dict[str, int] = {start: 0}
    queue: deque[str] = deque([start])

    while queue:
        node = queue.popleft()
        if node == target:
            logger.debug("found %s at distance %d", target, distances[node])
            return target
        for neighbour in graph.get(node, ()):
            if neighbour in distances:
                logger.debug("%s is already visited, skipping", neighbour)
                continue
            distances[neighbour] = distances[node] + 1
            queue.append(neighbour)
    return None