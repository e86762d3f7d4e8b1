"""Two-player tic-tac-toe on a board whose free slots are numbered 1 to 9."""

from __future__ import annotations

import sys


class TicTacToe:
    """Board state plus the player and marker whose turn it is."""

    def __init__(self, marker: str = "X") -> None:
        self.board: list[list[str]] = [
            [str(row * 3 + col + 1) for col in range(3)] for row in range(3)
        ]
        self.marker = marker
        self.player = 1

    def place_marker(self, slot: int) -> bool:
        """Put the current marker in slot 1..9; return False if the slot is invalid or taken."""
        if not 1 <= slot <= 9:
            return False
        row, col = divmod(slot - 1, 3)
        if self.board[row][col] in ("X", "O"):
            return False
        self.board[row][col] = self.marker
        return True

    def swap(self) -> None:
        """Hand the turn to the other player."""
        self.marker = "O" if self.marker == "X" else "X"
        self.player = 2 if self.player == 1 else 1

    def _lines(self):
        b = self.board
        yield from b
        yield from ([b[0][i], b[1][i], b[2][i]] for i in range(3))
        yield [b[0][0], b[1][1], b[2][2]]
        yield [b[0][2], b[1][1], b[2][0]]

    def check_winner(self) -> int:
        """The current player's number if any line is complete, otherwise 0."""
        if any(line[0] == line[1] == line[2] for line in self._lines()):
            return self.player
        return 0

    def render(self) -> str:
        """The board as printed between moves."""
        rows = "".join(" " + "".join(row) + "\n" for row in self.board)
        return "\n" + rows + "\n"


def play(read, write) -> int:
    """Run a game, reading lines with read() and emitting text with write(text).

    Returns the winning player's number, or 0 when the board fills without a winner.
    EOFError from read() propagates.
    """
    marker = ""
    while not marker:
        write("Player 1 choose your marker (X or O): ")
        marker = read().strip()[:1]
    game = TicTacToe(marker)

    moves = 0
    while moves < 9:
        write(f"Player {game.player} [{game.marker}] enter your slot (0-9): ")
        try:
            slot = int(read().strip())
        except ValueError:
            slot = 0
        if not game.place_marker(slot):
            write("Invalid move! Please try again.\n")
            continue
        moves += 1
        write(game.render())
        winner = game.check_winner()
        if winner:
            write(f"Player {winner} wins!\n")
            return winner
        game.swap()
    return 0


def _read_line() -> str:
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def main(argv=None) -> int:
    sys.stdout.write("\t\t\t Game Started\n")
    try:
        play(_read_line, sys.stdout.write)
    except EOFError:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())