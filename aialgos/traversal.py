"""Breadth-first and depth-first traversal of an undirected graph."""

from __future__ import annotations

import argparse

MAX_PENDING = 100

EXAMPLE_VERTICES = 5
EXAMPLE_EDGES = ((0, 1), (0, 2), (1, 3), (1, 4))


class UndirectedGraph:
    """Undirected graph on vertices 0..num_vertices-1; newest neighbours come first."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.num_vertices = num_vertices
        self._adjacent: list[list[int]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} is outside 0..{self.num_vertices - 1}")

    def add_edge(self, src: int, dest: int) -> None:
        """Join src and dest."""
        self._check(src)
        self._check(dest)
        self._adjacent[src].append(dest)
        self._adjacent[dest].append(src)

    def neighbors(self, vertex: int) -> list[int]:
        """Neighbours of vertex, most recently added first."""
        self._check(vertex)
        return self._adjacent[vertex][::-1]


def bfs(graph: UndirectedGraph, start: int) -> list[int]:
    """Vertices in breadth-first order from start."""
    graph._check(start)
    visited = {start}
    # The queue holds at most MAX_PENDING entries between times it runs empty.
    items = [start]
    head = 0
    order: list[int] = []
    while head < len(items):
        current = items[head]
        head += 1
        if head == len(items):
            items.clear()
            head = 0
        order.append(current)
        for adjacent in graph.neighbors(current):
            if adjacent not in visited:
                visited.add(adjacent)
                if len(items) < MAX_PENDING:
                    items.append(adjacent)
    return order


def dfs(graph: UndirectedGraph, start: int) -> list[int]:
    """Vertices in depth-first order from start, using an explicit stack."""
    graph._check(start)
    visited: set[int] = set()
    order: list[int] = []
    stack = [start]
    while stack:
        current = stack.pop()
        if current not in visited:
            order.append(current)
            visited.add(current)
        for adjacent in graph.neighbors(current):
            if adjacent not in visited and len(stack) < MAX_PENDING:
                stack.append(adjacent)
    return order


def _example_graph() -> UndirectedGraph:
    graph = UndirectedGraph(EXAMPLE_VERTICES)
    for src, dest in EXAMPLE_EDGES:
        graph.add_edge(src, dest)
    return graph


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Traverse the sample graph.")
    parser.add_argument("order", nargs="?", choices=("bfs", "dfs"), default="bfs")
    parser.add_argument("--start", type=int, default=0)
    args = parser.parse_args(argv)
    graph = _example_graph()
    if args.order == "bfs":
        visited = bfs(graph, args.start)
        prefix = "BFS Traversal: "
    else:
        visited = dfs(graph, args.start)
        prefix = ""
    print(prefix + "".join(f"{vertex} " for vertex in visited))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())