"""
Decision-tree specializer: compile perfect play into a straight-line program.

The generator walks every game the human can force from a position. At each
human move it asks the solver for the computer's reply, exactly as the live
driver would, and emits a branch that prints the resulting boards and either
ends the game or nests the next turn's branch chain inside it.

Emission is depth-first and row-major, so the generated if/else-if chain
lists cells in the order (0,0), (0,1), ..., (2,2) at every level.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Optional, TextIO, Union

from .emitter import Emitter
from .game_basics import BOARD_SIZE, SYMBOL_GLYPHS, Board, Move, Outcome, Symbol
from .solver import best_move_and_score
from .targets import Target, get_target

TIE_MESSAGE = "Tie!"
LOSE_MESSAGE = "You lose!"
WIN_MESSAGE = "You win!"


def outcome_message(outcome: Outcome, auto_symbol: Symbol) -> Optional[str]:
    """Message shown to the human for a finished game; None while in progress."""
    if outcome is Outcome.TIE:
        return TIE_MESSAGE
    if outcome.winner is None:
        return None
    return LOSE_MESSAGE if outcome.winner == auto_symbol else WIN_MESSAGE


def computer_move_message(move: Move) -> str:
    return f"Computer's move: {move.row},{move.col}"


def banner(auto_symbol: Symbol) -> str:
    human = SYMBOL_GLYPHS[auto_symbol.invert()]
    computer = SYMBOL_GLYPHS[auto_symbol]
    return f"You are {human}, the computer is {computer}."


@dataclass
class GenerationStats:
    branches: int = 0
    rejected: int = 0
    decisions: int = 0
    max_depth: int = 0
    outcomes: Counter = field(default_factory=Counter)

    def as_dict(self) -> Dict[str, object]:
        return {
            "branches": self.branches,
            "rejected": self.rejected,
            "decisions": self.decisions,
            "max_depth": self.max_depth,
            "outcomes": dict(sorted(self.outcomes.items())),
        }


def _finish(target: Target, em: Emitter, stats: GenerationStats, message: str) -> None:
    target.say(em, message)
    stats.outcomes[message] += 1


def generate_turn(
    board: Board,
    auto_symbol: Symbol,
    em: Emitter,
    target: Target,
    stats: Optional[GenerationStats] = None,
    depth: int = 0,
) -> GenerationStats:
    """Emit one human turn (and everything after it) for ``board``.

    The human plays ``auto_symbol.invert()``. Every cell gets a branch; taken
    cells reject the input and loop, free cells play the solver's reply and
    either end the game or recurse one level deeper.
    """
    if stats is None:
        stats = GenerationStats()
    stats.max_depth = max(stats.max_depth, depth + 1)
    user_symbol = auto_symbol.invert()

    target.turn_open(em)
    with em.indented():
        target.fetch_input(em)
        for idx in range(BOARD_SIZE * BOARD_SIZE):
            cell = Move(*divmod(idx, BOARD_SIZE))
            target.branch_open(em, cell, first=idx == 0)
            with em.indented():
                if not board.is_move_possible(cell.row, cell.col):
                    target.reject(em)
                    stats.rejected += 1
                else:
                    stats.branches += 1
                    _emit_reply(board.with_symbol(cell.row, cell.col, user_symbol),
                                auto_symbol, em, target, stats, depth)
                    target.end_game(em)
            target.branch_close(em)
        target.default_open(em)
        with em.indented():
            target.reject(em)
        target.branch_close(em)
    target.turn_close(em)
    return stats


def _emit_reply(
    user_board: Board,
    auto_symbol: Symbol,
    em: Emitter,
    target: Target,
    stats: GenerationStats,
    depth: int,
) -> None:
    target.say(em, user_board.render())
    # A finished board yields INVALID_MOVE, announced as -1,-1 and leaving the board as is.
    reply = best_move_and_score(user_board, auto_symbol, auto_symbol)
    stats.decisions += 1
    logging.debug("depth=%d board=%s reply=%s score=%d",
                  depth, user_board.serialize(), reply.move, reply.score)
    target.say(em, computer_move_message(reply.move))
    auto_board = user_board.with_symbol(reply.move.row, reply.move.col, auto_symbol)
    target.say(em, auto_board.render())

    message = outcome_message(auto_board.outcome(), auto_symbol)
    if message is not None:
        _finish(target, em, stats, message)
    else:
        generate_turn(auto_board, auto_symbol, em, target, stats, depth + 1)


def generate_program(
    stream: TextIO,
    target: Union[str, Target] = "python",
    auto_symbol: Symbol = Symbol.SELF,
) -> GenerationStats:
    """Write a complete program that plays perfectly as ``auto_symbol``.

    The human moves first. Returns counters describing the emitted tree.
    """
    if isinstance(target, str):
        target = get_target(target)
    em = Emitter(stream)
    logging.info("Generating %s program (computer plays %s)…",
                 target.name, SYMBOL_GLYPHS[auto_symbol])
    target.prelude(em, banner(auto_symbol))
    stats = generate_turn(Board.empty(), auto_symbol, em, target)
    target.epilogue(em)
    logging.info(
        "Generated %d lines: %d branches, %d solver calls, depth %d, outcomes=%s",
        em.lines_written,
        stats.branches,
        stats.decisions,
        stats.max_depth,
        dict(stats.outcomes),
    )
    return stats
