import pytest

from aialgos.tic_tac_toe import TicTacToe, play


def _scripted(lines):
    feed = iter(lines)

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    out = []
    return read, out.append, out


def test_initial_render():
    assert TicTacToe().render() == "\n 123\n 456\n 789\n\n"


def test_place_marker_puts_marker():
    game = TicTacToe("X")
    assert game.place_marker(5) is True
    assert game.board[1][1] == "X"


def test_place_marker_rejects_taken_slot():
    game = TicTacToe("X")
    game.place_marker(1)
    game.swap()
    assert game.place_marker(1) is False
    assert game.board[0][0] == "X"


@pytest.mark.parametrize("slot", [0, 10, -3])
def test_place_marker_rejects_out_of_range(slot):
    game = TicTacToe()
    assert game.place_marker(slot) is False
    assert game.render() == TicTacToe().render()


def test_swap_toggles_player_and_marker():
    game = TicTacToe("O")
    game.swap()
    assert (game.player, game.marker) == (2, "X")
    game.swap()
    assert (game.player, game.marker) == (1, "O")


def test_no_winner_on_fresh_board():
    assert TicTacToe().check_winner() == 0


@pytest.mark.parametrize("slots", [(1, 2, 3), (1, 4, 7), (1, 5, 9), (3, 5, 7)])
def test_line_wins_for_current_player(slots):
    game = TicTacToe("X")
    game.swap()
    game.swap()
    game.swap()
    for slot in slots:
        game.place_marker(slot)
    assert game.check_winner() == game.player == 2


def test_play_first_player_wins():
    read, write, out = _scripted(["X\n", "1", "4", "2", "5", "3"])
    assert play(read, write) == 1
    assert out[-1] == "Player 1 wins!\n"


def test_play_second_player_wins():
    read, write, out = _scripted(["O", "1", "4", "2", "5", "9", "6"])
    assert play(read, write) == 2
    assert "Player 2 [X] enter your slot (0-9): " in out


def test_play_draw():
    read, write, out = _scripted(["X", "1", "2", "3", "5", "4", "6", "8", "7", "9"])
    assert play(read, write) == 0
    assert not any("wins" in text for text in out)


def test_play_rejects_invalid_moves():
    read, write, out = _scripted(["X", "0", "abc", "1", "1", "4", "2", "5", "3"])
    assert play(read, write) == 1
    assert out.count("Invalid move! Please try again.\n") == 3


def test_play_propagates_end_of_input():
    read, write, _ = _scripted(["X", "1"])
    with pytest.raises(EOFError):
        play(read, write)