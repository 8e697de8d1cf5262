from .board import WIN_LINES, Mark, Outcome, Status, compute_outcome
from .state import GameState, Session, Theme

__version__ = "1.0.0"
