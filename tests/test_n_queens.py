import pytest

from aialgos.n_queens import is_safe, main, render_board, solve_n_queens


def test_first_solution_for_eight():
    assert solve_n_queens(8) == [0, 4, 7, 5, 2, 6, 1, 3]


def test_default_size_is_eight():
    assert solve_n_queens() == solve_n_queens(8)


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 8])
def test_solutions_are_valid(n):
    board = solve_n_queens(n)
    assert len(board) == n
    assert sorted(board) == list(range(n))
    for row in range(n):
        assert is_safe(board, row, board[row])


@pytest.mark.parametrize("n", [2, 3])
def test_no_solution(n):
    assert solve_n_queens(n) is None


def test_negative_size_raises():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_is_safe():
    board = [0]
    assert is_safe(board, 1, 0) is False
    assert is_safe(board, 1, 1) is False
    assert is_safe(board, 1, 2) is True


def test_is_safe_ignores_rows_below():
    assert is_safe([0, 1, 2], 0, 5) is True


def test_render_board():
    assert render_board([0]) == "Q "
    text = render_board(solve_n_queens(8))
    lines = text.split("\n")
    assert len(lines) == 8
    assert all(line.count("Q") == 1 and len(line) == 16 for line in lines)


def test_main_no_solution(capsys):
    assert main(["3"]) == 0
    assert capsys.readouterr().out == "No solution exists.\n"


def test_main_prints_board(capsys):
    main(["4"])
    out = capsys.readouterr().out
    assert out == render_board(solve_n_queens(4)) + "\n\n"