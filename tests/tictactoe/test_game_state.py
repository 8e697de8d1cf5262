import pytest

from tictactoe.board import Mark, Outcome, Status, empty_board
from tictactoe.state import GameState, Session, Theme


def play(game, moves):
    return [game.apply_move(index) for index in moves]


@pytest.fixture
def game():
    return GameState()


def test_initial_state(game):
    assert game.board == empty_board()
    assert game.next_player is Mark.X
    assert game.outcome == Outcome.in_progress()
    assert game.winning_line == ()
    assert not game.is_over
    assert game.empty_cells() == list(range(9))


def test_accepted_move_places_mark_and_flips_turn(game):
    assert game.apply_move(4) is True

    assert game.board[4] is Mark.X
    assert game.next_player is Mark.O
    assert game.empty_cells() == [0, 1, 2, 3, 5, 6, 7, 8]


def test_turn_alternates(game):
    seen = []
    for index in [0, 4, 8, 2, 6]:
        seen.append(game.next_player)
        game.apply_move(index)

    assert seen == [Mark.X, Mark.O, Mark.X, Mark.O, Mark.X]
    assert [game.board[i] for i in [0, 4, 8, 2, 6]] == seen


def test_occupied_cell_is_ignored(game):
    game.apply_move(4)
    board, player = game.board, game.next_player

    assert game.apply_move(4) is False
    assert game.board == board
    assert game.next_player is player


@pytest.mark.parametrize("index", [-1, 9, 42, True, "4", None])
def test_invalid_index_is_ignored(game, index):
    assert game.apply_move(index) is False
    assert game.board == empty_board()
    assert game.next_player is Mark.X


def test_row_win_scenario(game):
    assert play(game, [0, 4, 1, 5, 2]) == [True] * 5

    assert game.outcome == Outcome.won(Mark.X, (0, 1, 2))
    assert game.winning_line == (0, 1, 2)
    assert game.is_over


def test_o_can_win(game):
    play(game, [0, 2, 1, 4, 8, 6])

    assert game.outcome.status is Status.WON
    assert game.outcome.winner is Mark.O
    assert game.outcome.line == (2, 4, 6)


def test_draw_scenario(game):
    # X O X / X O O / O X X
    assert play(game, [0, 1, 2, 4, 3, 5, 7, 6, 8]) == [True] * 9

    assert game.outcome == Outcome.draw()
    assert game.winning_line == ()
    assert game.is_over
    assert game.empty_cells() == []


def test_moves_after_win_are_ignored(game):
    play(game, [0, 3, 1, 6, 2])
    board, player = game.board, game.next_player

    assert game.apply_move(4) is False
    assert game.board == board
    assert game.next_player is player
    assert game.outcome.winner is Mark.X


def test_winning_move_on_last_cell_is_a_win(game):
    # O X X / X O X / O O X: the ninth move fills the board and completes column 2
    assert play(game, [1, 0, 2, 4, 3, 6, 5, 7, 8]) == [True] * 9

    assert game.outcome.status is Status.WON
    assert game.outcome.winner is Mark.X
    assert game.outcome.line == (2, 5, 8)


@pytest.mark.parametrize(
    "moves",
    [
        [],
        [4],
        [0, 4, 1, 5, 2],
        [0, 1, 2, 4, 3, 5, 7, 6, 8],
    ],
)
def test_reset_restores_initial_state(game, moves):
    play(game, moves)
    game.reset()

    assert game.board == empty_board()
    assert game.next_player is Mark.X
    assert game.outcome == Outcome.in_progress()
    assert game.apply_move(0) is True


def test_repr_shows_board(game):
    game.apply_move(0)

    assert repr(game) == "GameState(board='X........', next_player='O', status='in_progress')"


def test_session_forwards_events():
    session = Session()

    assert session.move(0) is True
    assert session.game.board[0] is Mark.X

    session.reset()
    assert session.game.board == empty_board()


def test_session_theme_is_independent_of_game():
    session = Session()
    session.move(4)

    assert session.theme is Theme.LIGHT
    assert session.toggle_theme() is Theme.DARK
    assert session.toggle_theme() is Theme.LIGHT
    assert session.set_theme("dark") is Theme.DARK

    session.reset()
    assert session.theme is Theme.DARK
    assert session.game.board == empty_board()


def test_session_rejects_unknown_theme():
    with pytest.raises(ValueError):
        Session(theme="blue")
