"""Backtracking solver for the N-queens puzzle."""

from __future__ import annotations

import argparse

DEFAULT_SIZE = 8


def is_safe(board, row: int, col: int) -> bool:
    """Whether a queen at (row, col) is unattacked by the queens in board[:row]."""
    return all(
        placed != col and abs(placed - col) != abs(r - row)
        for r, placed in enumerate(board[:row])
    )


def solve_n_queens(n: int = DEFAULT_SIZE) -> list[int] | None:
    """Return the first solution found as a list of column indices per row, or None."""
    if n < 0:
        raise ValueError("board size must not be negative")
    board: list[int] = []

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if is_safe(board, row, col):
                board.append(col)
                if place(row + 1):
                    return True
                board.pop()
        return False

    return list(board) if place(0) else None


def render_board(board) -> str:
    """Render the board with 'Q' for queens and '.' for empty squares."""
    size = len(board)
    return "\n".join(
        "".join("Q " if col == queen else ". " for col in range(size)) for queen in board
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Solve the N-queens puzzle.")
    parser.add_argument("n", type=int, nargs="?", default=DEFAULT_SIZE)
    args = parser.parse_args(argv)
    board = solve_n_queens(args.n)
    if board is None:
        print("No solution exists.")
    else:
        print(render_board(board))
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())