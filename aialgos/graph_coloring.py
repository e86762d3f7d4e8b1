"""Backtracking m-colouring of an undirected graph."""

from __future__ import annotations

import argparse

MAX_VERTICES = 100

EXAMPLE_VERTICES = 4
EXAMPLE_COLORS = 3
EXAMPLE_EDGES = ((0, 1), (0, 2), (1, 2), (1, 3), (2, 3))


def color_graph(num_vertices: int, edges, num_colors: int) -> list[int] | None:
    """Colour vertices 0..num_vertices-1 with colours 1..num_colors so that no edge joins equal colours.

    Returns the colour of each vertex, or None if no such colouring exists.
    Raises ValueError for a vertex count outside 0..MAX_VERTICES or an edge to an unknown vertex.
    """
    if not 0 <= num_vertices <= MAX_VERTICES:
        raise ValueError(f"vertex count must be within 0..{MAX_VERTICES}")
    adjacency: list[list[int]] = [[] for _ in range(num_vertices)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < num_vertices:
                raise ValueError(f"edge ({u}, {v}) names an unknown vertex")
        adjacency[u].append(v)
        adjacency[v].append(u)

    colors = [0] * num_vertices

    def assign(vertex: int) -> bool:
        if vertex == num_vertices:
            return True
        for color in range(1, num_colors + 1):
            if all(colors[other] != color for other in adjacency[vertex]):
                colors[vertex] = color
                if assign(vertex + 1):
                    return True
                colors[vertex] = 0
        return False

    return colors if assign(0) else None


def format_colors(colors) -> str:
    """One line per vertex naming its colour."""
    return "\n".join(
        f"Vertex {vertex} ---> Color {color}" for vertex, color in enumerate(colors)
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Colour the sample graph.")
    parser.add_argument("--colors", type=int, default=EXAMPLE_COLORS)
    args = parser.parse_args(argv)
    colors = color_graph(EXAMPLE_VERTICES, EXAMPLE_EDGES, args.colors)
    if colors is None:
        print("Solution does not exist.")
    else:
        print(format_colors(colors))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())