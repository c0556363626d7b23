"""Breadth-first and depth-first traversal of an undirected graph."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class TraversalResult:
    """Visit order and spanning-tree parents produced by a traversal."""

    start: int
    order: tuple[int, ...]
    parents: tuple[int | None, ...]

    def children(self, vertex: int) -> list[int]:
        """Children of ``vertex`` in the traversal tree, highest vertex first."""
        return [
            child
            for child in reversed(range(len(self.parents)))
            if self.parents[child] == vertex
        ]

    def format_tree(self, label: str) -> str:
        """Render the traversal tree as an adjacency list, one vertex per line."""
        lines = [f"{label} Tree (Adjacency List Representation):"]
        for vertex in range(len(self.parents)):
            kids = self.children(vertex)
            body = "".join(f"{kid} " for kid in kids) if kids else "No children"
            lines.append(f"{vertex}: {body}")
        return "\n".join(lines) + "\n"


class Graph:
    """Undirected graph on vertices ``0 .. vertices - 1`` stored as adjacency lists.

    A newly added neighbour is placed at the front of the list, so neighbours
    are reported most recent first.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("the number of vertices must not be negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].insert(0, v)
        self._adjacency[v].insert(0, u)

    def neighbors(self, vertex: int) -> list[int]:
        """Neighbours of ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> TraversalResult:
        """Breadth-first traversal from ``start``."""
        self._check(start)
        visited = [False] * self.vertices
        parents: list[int | None] = [None] * self.vertices
        order: list[int] = []
        queue = deque([start])
        visited[start] = True
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self._adjacency[current]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    parents[neighbor] = current
                    queue.append(neighbor)
        return TraversalResult(start, tuple(order), tuple(parents))

    def dfs(self, start: int) -> TraversalResult:
        """Depth-first traversal from ``start`` using an explicit stack.

        A vertex's parent is the first visited vertex that discovered it.
        """
        self._check(start)
        visited = [False] * self.vertices
        parents: list[int | None] = [None] * self.vertices
        order: list[int] = []
        stack = [start]
        while stack:
            current = stack.pop()
            if visited[current]:
                continue
            visited[current] = True
            order.append(current)
            for neighbor in self._adjacency[current]:
                if visited[neighbor]:
                    continue
                if parents[neighbor] is None and neighbor != start:
                    parents[neighbor] = current
                stack.append(neighbor)
        return TraversalResult(start, tuple(order), tuple(parents))


def _example_graph() -> Graph:
    graph = Graph(6)
    for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 4), (3, 5), (4, 5)]:
        graph.add_edge(u, v)
    return graph


def main(argv: list[str] | None = None) -> int:
    """Traverse the built-in example graph and print the order and tree."""
    parser = argparse.ArgumentParser(
        prog="traversal",
        description="Run BFS or DFS on a small example graph.",
    )
    parser.add_argument("algorithm", nargs="?", choices=["bfs", "dfs"], default="bfs")
    parser.add_argument("--start", type=int, default=0)
    args = parser.parse_args(argv)

    graph = _example_graph()
    try:
        if args.algorithm == "bfs":
            result = graph.bfs(args.start)
            header = f"Breadth-First Search starting from vertex {result.start}:\n"
            label = "BFS"
        else:
            result = graph.dfs(args.start)
            header = f"Depth-First Search starting from vertex {result.start}: "
            label = "DFS"
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    order = "".join(f"{vertex} " for vertex in result.order)
    sys.stdout.write(f"{header}{order}\n\n{result.format_tree(label)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())