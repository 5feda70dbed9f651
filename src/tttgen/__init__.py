"""tttgen package.

Perfect-play tic-tac-toe: an exhaustive minimax solver and a generator that
unrolls the solver's decisions into a standalone program.

Convenience imports are exposed for common workflows.
"""

from .game_basics import INVALID_MOVE, Board, Move, Outcome, Symbol
from .generator import generate_program, generate_turn
from .solver import ScoredMove, best_move, best_move_and_score, move_scores

__all__ = [
    "Board",
    "Move",
    "INVALID_MOVE",
    "Outcome",
    "Symbol",
    "ScoredMove",
    "best_move",
    "best_move_and_score",
    "move_scores",
    "generate_program",
    "generate_turn",
]
