"""
Tests for the TicTacToe board, game state types and win checker.
"""

import pytest

from logic.board import Board
from logic.errors import CellOccupiedError, OutOfRangeError
from logic.game_state import Cell, GameStatus, Move, Player, StatusKind
from logic.win_checker import WinChecker


def reachable_boards():
    """Every board reachable by legal play with O moving first (terminal boards included)."""
    seen = {}
    stack = [Board()]
    while stack:
        board = stack.pop()
        key = board.to_bytes()
        if key in seen:
            continue
        seen[key] = board
        if board.is_terminal():
            continue
        player = board.next_player(Player.O)
        for row, col in board.empty_cells():
            child = board.copy()
            child.apply_move(row, col, player)
            stack.append(child)
    return list(seen.values())


def test_new_board_is_empty():
    board = Board()
    assert all(board.cell_at(r, c) == Cell.EMPTY for r in range(3) for c in range(3))
    assert board.status() == GameStatus.in_progress()
    assert not board.is_full()


def test_empty_cells_row_major():
    board = Board()
    assert board.empty_cells() == [(r, c) for r in range(3) for c in range(3)]

    board.apply_move(0, 1, Player.O).apply_move(2, 0, Player.X)
    assert board.empty_cells() == [(0, 0), (0, 2), (1, 0), (1, 1), (1, 2), (2, 1), (2, 2)]
    assert all(isinstance(m, Move) for m in board.empty_cells())


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (1.5, 0), ("1", 1), (True, 0)])
def test_cell_at_out_of_range(row, col):
    with pytest.raises(OutOfRangeError):
        Board().cell_at(row, col)


def test_apply_move_sets_cell():
    board = Board()
    result = board.apply_move(1, 2, Player.X)
    assert result is board
    assert board.cell_at(1, 2) == Cell.X
    assert board.cell_at(1, 2).player == Player.X
    assert board.count(Player.X) == 1
    assert board.count(Player.O) == 0


def test_apply_move_on_occupied_cell_leaves_board_unchanged():
    board = Board.from_rows("O__", "_X_", "___")
    before = board.to_bytes()

    with pytest.raises(CellOccupiedError) as excinfo:
        board.apply_move(1, 1, Player.O)

    assert board.to_bytes() == before
    assert excinfo.value.occupant == "X"
    assert "already occupied" in str(excinfo.value)


def test_apply_move_out_of_range_leaves_board_unchanged():
    board = Board.from_rows("O__", "___", "___")
    before = board.to_bytes()
    with pytest.raises(OutOfRangeError):
        board.apply_move(3, 3, Player.X)
    assert board.to_bytes() == before


def test_clear_cell():
    board = Board.from_rows("O__", "___", "___")
    board.clear_cell(0, 0)
    assert board == Board()


@pytest.mark.parametrize("rows,winner", [
    (("XXX", "OO_", "___"), Player.X),
    (("OX_", "OX_", "O_X"), Player.O),
    (("XO_", "_XO", "__X"), Player.X),
    (("X_O", "XO_", "O__"), Player.O),
    (("_X_", "OXO", "_X_"), Player.X),
])
def test_winner_lines(rows, winner):
    board = Board.from_rows(*rows)
    assert board.winner() == winner
    assert board.status() == GameStatus.win(winner)


def test_winner_uses_first_line_in_order():
    # Unreachable in real play, but the line order decides: row 0 before row 1
    board = Board.from_rows("XXX", "OOO", "___")
    assert board.winner() == Player.X
    assert board.winning_line() == [(0, 0), (0, 1), (0, 2)]
    assert WinChecker().count_wins(board.grid) == (1, 1)


def test_winning_line_diagonal():
    board = Board.from_rows("O_X", "XO_", "X_O")
    assert board.winning_line() == [(0, 0), (1, 1), (2, 2)]


def test_no_winner():
    board = Board.from_rows("OX_", "_O_", "X__")
    assert board.winner() is None
    assert board.winning_line() is None
    assert board.status().kind == StatusKind.IN_PROGRESS


def test_full_board_without_line_is_draw():
    board = Board.from_rows("OXO", "OXX", "XOO")
    assert board.is_full()
    assert board.winner() is None
    assert board.status() == GameStatus.draw()
    assert board.status().message == "Tie"


def test_win_is_reported_before_draw():
    board = Board.from_rows("OXO", "XOX", "XOO")
    assert board.is_full()
    assert board.status() == GameStatus.win(Player.O)
    assert not WinChecker().check_draw(board.grid)


def test_win_with_empty_cells_left():
    board = Board.from_rows("OOO", "XX_", "___")
    status = board.status()
    assert status == GameStatus.win(Player.O)
    assert status.is_over
    assert status.message == "O Wins!"


def test_status_is_idempotent():
    board = Board.from_rows("OX_", "_O_", "X__")
    assert board.status() == board.status()
    before = board.to_bytes()
    board.status()
    assert board.to_bytes() == before


def test_next_player_alternates():
    board = Board()
    assert board.next_player(Player.O) == Player.O
    board.apply_move(0, 0, Player.O)
    assert board.next_player(Player.O) == Player.X
    board.apply_move(1, 1, Player.X)
    assert board.next_player(Player.O) == Player.O
    assert board.next_player(Player.X) == Player.X


def test_copy_is_independent():
    board = Board.from_rows("O__", "___", "___")
    clone = board.copy()
    clone.apply_move(1, 1, Player.X)
    assert board.cell_at(1, 1) == Cell.EMPTY
    assert clone != board


def test_from_rows_ignores_whitespace():
    assert Board.from_rows("X _ _", "_ O _", ". - _") == Board.from_rows("X__", "_O_", "___")


@pytest.mark.parametrize("rows", [("XX", "___", "___"), ("XX_", "___"), ("XZ_", "___", "___")])
def test_from_rows_rejects_bad_input(rows):
    with pytest.raises(ValueError):
        Board.from_rows(*rows)


def test_board_rejects_bad_grid():
    with pytest.raises(ValueError):
        Board([[0, 0], [0, 0]])
    with pytest.raises(ValueError):
        Board([[0, 0, 0], [0, 3, 0], [0, 0, 0]])


def test_str_and_repr():
    board = Board.from_rows("XO_", "___", "___")
    text = str(board)
    assert "X | O" in text
    assert repr(board) == "Board.from_rows('XO_', '___', '___')"


def test_player_and_cell_helpers():
    assert Player.X.opposite() == Player.O
    assert Player.O.opposite() == Player.X
    assert Player.O.cell == Cell.O
    assert Cell.EMPTY.player is None
    assert Cell.EMPTY.symbol == "_"


def test_every_reachable_board_has_a_single_status():
    checker = WinChecker()
    boards = reachable_boards()

    # Well-known count of distinct reachable positions
    assert len(boards) == 5478

    for board in boards:
        x_lines, o_lines = checker.count_wins(board.grid)
        assert not (x_lines and o_lines)

        status = board.status()
        if x_lines:
            assert status == GameStatus.win(Player.X)
        elif o_lines:
            assert status == GameStatus.win(Player.O)
        elif board.is_full():
            assert status == GameStatus.draw()
        else:
            assert status == GameStatus.in_progress()

        diff = board.count(Player.O) - board.count(Player.X)
        assert diff in (0, 1)
