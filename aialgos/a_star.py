"""A* search on a grid of free (0) and blocked (non-zero) cells, moving in four directions."""

from __future__ import annotations

import argparse

Point = tuple[int, int]

_MOVES: tuple[Point, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

EXAMPLE_GRID = (
    (0, 1, 0, 0, 0),
    (0, 1, 0, 1, 0),
    (0, 0, 0, 1, 0),
    (0, 1, 1, 1, 0),
    (0, 0, 0, 0, 0),
)


def manhattan(a: Point, b: Point) -> int:
    """Manhattan distance between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _is_free(grid, point: Point) -> bool:
    row, col = point
    return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] == 0


def _trace(parent: dict[Point, Point], dest: Point) -> list[Point]:
    path = [dest]
    point = dest
    while parent[point] != point:
        point = parent[point]
        path.append(point)
    path.reverse()
    return path


def a_star_search(grid, start: Point, dest: Point) -> list[Point] | None:
    """Return the path from start to dest as a list of cells, or None if there is none.

    Raises ValueError if start or dest is off the grid or blocked.
    """
    start, dest = tuple(start), tuple(dest)
    if not _is_free(grid, start) or not _is_free(grid, dest):
        raise ValueError("Invalid start or destination")

    g_score: dict[Point, int] = {start: 0}
    f_score: dict[Point, int] = {start: 0}
    parent: dict[Point, Point] = {start: start}
    closed: set[Point] = set()
    open_list: list[Point] = [start]

    while open_list:
        lowest = min(range(len(open_list)), key=lambda i: f_score[open_list[i]])
        last = open_list.pop()
        if lowest < len(open_list):
            current, open_list[lowest] = open_list[lowest], last
        else:
            current = last
        closed.add(current)

        if current == dest:
            return _trace(parent, dest)

        for d_row, d_col in _MOVES:
            nxt = (current[0] + d_row, current[1] + d_col)
            if not _is_free(grid, nxt) or nxt in closed:
                continue
            g_new = g_score[current] + 1
            f_new = g_new + manhattan(nxt, dest)
            if nxt not in f_score or f_new < f_score[nxt]:
                open_list.append(nxt)
                f_score[nxt] = f_new
                g_score[nxt] = g_new
                parent[nxt] = current
    return None


def format_path(path) -> str:
    """Render a start-to-dest path from the destination back to the start."""
    return "Path: " + " <- ".join(f"({row},{col})" for row, col in reversed(path))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="A* search on the sample grid.")
    parser.add_argument("--start", type=int, nargs=2, default=(0, 0), metavar=("ROW", "COL"))
    parser.add_argument("--dest", type=int, nargs=2, default=(4, 4), metavar=("ROW", "COL"))
    args = parser.parse_args(argv)
    try:
        path = a_star_search(EXAMPLE_GRID, tuple(args.start), tuple(args.dest))
    except ValueError as exc:
        print(exc)
        return 0
    print(format_path(path) if path is not None else "No path found")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())