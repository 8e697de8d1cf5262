from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class Mark(str, Enum):
    EMPTY = ""
    X = "X"
    O = "O"

    def opposite(self) -> Mark:
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("an empty cell has no opposite")


class Status(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


Board = Tuple[Mark, ...]
Line = Tuple[int, int, int]

BOARD_SIZE = 9
# Rows, then columns, then diagonals. The first matching line wins.
WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[Mark] = None
    line: Tuple[int, ...] = ()

    @classmethod
    def in_progress(cls) -> Outcome:
        return cls(Status.IN_PROGRESS)

    @classmethod
    def draw(cls) -> Outcome:
        return cls(Status.DRAW)

    @classmethod
    def won(cls, winner: Mark, line: Line) -> Outcome:
        return cls(Status.WON, winner, tuple(line))

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS


def empty_board() -> Board:
    return (Mark.EMPTY,) * BOARD_SIZE


def is_valid_index(index) -> bool:
    # bool is an int subclass; True must not address cell 1.
    return type(index) is int and 0 <= index < BOARD_SIZE


def legal_actions(board: Board) -> List[int]:
    return [i for i, value in enumerate(board) if value is Mark.EMPTY]


def apply_action(board: Board, action: int, mark: Mark) -> Board:
    cells = list(board)
    cells[action] = mark
    return tuple(cells)


def winning_line(board: Board) -> Optional[Line]:
    for line in WIN_LINES:
        i, j, k = line
        if board[i] is not Mark.EMPTY and board[i] == board[j] == board[k]:
            return line
    return None


def compute_outcome(board: Board) -> Outcome:
    """
    Derive the result of a board.

    Checks the winning lines in WIN_LINES order, so a board that holds more
    than one complete line (unreachable through legal play) reports the
    earliest one. A full board with no line is a draw.
    """
    line = winning_line(board)
    if line is not None:
        return Outcome.won(board[line[0]], line)
    if all(value is not Mark.EMPTY for value in board):
        return Outcome.draw()
    return Outcome.in_progress()

