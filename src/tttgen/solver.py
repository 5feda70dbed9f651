"""
Exact game-theoretic solver: plain minimax over the full game tree.

Scores are in {-1, 0, +1} from the point of view of ``maximizer``.
Tie-break policy:
- Cells are scanned in row-major order.
- The maximizing side only replaces its choice on a strictly greater score,
  the minimizing side on a strictly smaller one, so the first optimal cell wins.

There is no pruning and no memoization; the generator depends on the exact
move this search picks, so the traversal is kept literal.
"""
from __future__ import annotations

from typing import NamedTuple, Optional

import numpy as np

from .game_basics import BOARD_SIZE, INVALID_MOVE, Board, Move, Symbol


class ScoredMove(NamedTuple):
    move: Move
    score: int


def _terminal_score(board: Board, maximizer: Symbol) -> Optional[int]:
    w = board.winner()
    if w == maximizer:
        return 1
    if w == maximizer.invert():
        return -1
    if board.is_full():
        return 0
    return None


def best_move_and_score(board: Board, to_move: Symbol, maximizer: Symbol) -> ScoredMove:
    """Best move for ``to_move`` and its score for ``maximizer``.

    Terminal boards return ``INVALID_MOVE`` with the terminal score.
    """
    terminal = _terminal_score(board, maximizer)
    if terminal is not None:
        return ScoredMove(INVALID_MOVE, terminal)

    maximizing = to_move == maximizer
    best: Optional[ScoredMove] = None
    # At least one empty cell exists here, otherwise the board was full above.
    for mv in board.empty_cells():
        child = board.with_symbol(mv.row, mv.col, to_move)
        score = best_move_and_score(child, to_move.invert(), maximizer).score
        if best is None:
            best = ScoredMove(mv, score)
        elif maximizing and score > best.score:
            best = ScoredMove(mv, score)
        elif not maximizing and score < best.score:
            best = ScoredMove(mv, score)
    assert best is not None
    return best


def best_move(board: Board, to_move: Symbol, maximizer: Symbol) -> Move:
    return best_move_and_score(board, to_move, maximizer).move


def move_scores(board: Board, to_move: Symbol, maximizer: Symbol) -> np.ndarray:
    """Score of every legal move as a 3x3 grid; illegal cells are NaN.

    A terminal board has no legal moves, so the whole grid is NaN.
    """
    grid = np.full((BOARD_SIZE, BOARD_SIZE), np.nan)
    if _terminal_score(board, maximizer) is not None:
        return grid
    for mv in board.empty_cells():
        child = board.with_symbol(mv.row, mv.col, to_move)
        grid[mv.row, mv.col] = best_move_and_score(child, to_move.invert(), maximizer).score
    return grid
