from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

from .board import (
    Board,
    Mark,
    Outcome,
    Status,
    apply_action,
    compute_outcome,
    empty_board,
    is_valid_index,
    legal_actions,
)


logger = logging.getLogger(__name__)

FIRST_PLAYER = Mark.X


class GameState:
    """
    Board, turn and outcome of a single game.

    The outcome is never set directly: it is recomputed from the board at the
    end of every accepted move and every reset.
    """

    def __init__(self) -> None:
        self._board: Board = empty_board()
        self._next_player: Mark = FIRST_PLAYER
        self._outcome: Outcome = compute_outcome(self._board)

    def __repr__(self) -> str:
        cells = "".join(mark.value or "." for mark in self._board)
        return f"GameState(board={cells!r}, next_player={self._next_player.value!r}, status={self._outcome.status.value!r})"

    @property
    def board(self) -> Board:
        return self._board

    @property
    def next_player(self) -> Mark:
        return self._next_player

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome.is_terminal

    @property
    def winning_line(self) -> Tuple[int, ...]:
        return self._outcome.line

    def empty_cells(self) -> List[int]:
        return legal_actions(self._board)

    def apply_move(self, index) -> bool:
        """
        Place the current player's mark at `index`.

        Out-of-range indices, occupied cells and finished games are ignored.
        Returns True when the move was accepted.
        """
        if self.is_over:
            logger.debug("Move %r ignored: game already finished.", index)
            return False
        if not is_valid_index(index):
            logger.debug("Move %r ignored: not a cell index.", index)
            return False
        if self._board[index] is not Mark.EMPTY:
            logger.debug("Move %r ignored: cell is occupied.", index)
            return False

        player = self._next_player
        self._board = apply_action(self._board, index, player)
        self._next_player = player.opposite()
        self._outcome = compute_outcome(self._board)

        if self._outcome.status is Status.WON:
            logger.info("%s wins on line %s.", self._outcome.winner.value, list(self._outcome.line))
        elif self._outcome.status is Status.DRAW:
            logger.info("Game over: draw.")
        else:
            logger.debug("%s played cell %d.", player.value, index)
        return True

    def reset(self) -> None:
        self._board = empty_board()
        self._next_player = FIRST_PLAYER
        self._outcome = compute_outcome(self._board)
        logger.info("Game reset.")


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class Session:
    """Single holder of the game and the cosmetic theme."""

    def __init__(self, theme: Theme = Theme.LIGHT, game: Optional[GameState] = None) -> None:
        self.game = game if game is not None else GameState()
        self.theme = Theme(theme)

    def move(self, index) -> bool:
        return self.game.apply_move(index)

    def reset(self) -> None:
        self.game.reset()

    def toggle_theme(self) -> Theme:
        self.theme = self.theme.toggled()
        logger.info("Theme switched to %s.", self.theme.value)
        return self.theme

    def set_theme(self, theme) -> Theme:
        self.theme = Theme(theme)
        logger.info("Theme set to %s.", self.theme.value)
        return self.theme
