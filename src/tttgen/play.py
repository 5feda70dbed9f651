"""
Interactive console game against the live solver.

This is the runtime twin of the generated program: for the same sequence of
legal moves both print the same transcript (prompts aside). The one exception
is a game ended by the human's move. There the generated program also
announces the solver's `-1,-1` reply and reprints the board, while this
driver stops as soon as the board is finished.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from .game_basics import Board, Move, Outcome, Symbol
from .generator import banner, computer_move_message, outcome_message
from .solver import best_move
from .targets import INPUT_PROMPT, INVALID_INPUT

InputFn = Callable[[str], str]


def parse_move(text: str) -> Optional[Move]:
    """Parse ``"r,c"``; None when it is not two comma-separated integers."""
    parts = text.split(",")
    if len(parts) != 2:
        return None
    try:
        return Move(int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def read_move(board: Board, input_fn: InputFn = input, out: TextIO = sys.stdout) -> Move:
    while True:
        mv = parse_move(input_fn(INPUT_PROMPT))
        if mv is None or not board.is_move_possible(mv.row, mv.col):
            print(INVALID_INPUT, file=out)
            continue
        return mv


def _report(board: Board, auto_symbol: Symbol, out: TextIO) -> Outcome:
    print(board.render(), file=out)
    outcome = board.outcome()
    message = outcome_message(outcome, auto_symbol)
    if message is not None:
        print(message, file=out)
    return outcome


def play_game(
    input_fn: InputFn = input,
    out: TextIO = sys.stdout,
    auto_symbol: Symbol = Symbol.SELF,
) -> Outcome:
    """Play one game, human first, and return how it ended.

    ``input_fn`` receives the prompt and returns one line; it may raise
    EOFError, which propagates to the caller.
    """
    user_symbol = auto_symbol.invert()
    board = Board.empty()
    print(banner(auto_symbol), file=out)
    while True:
        mv = read_move(board, input_fn, out)
        board = board.with_symbol(mv.row, mv.col, user_symbol)
        outcome = _report(board, auto_symbol, out)
        if outcome.is_over:
            return outcome

        reply = best_move(board, auto_symbol, auto_symbol)
        logging.debug("human=%s reply=%s", mv, reply)
        print(computer_move_message(reply), file=out)
        board = board.with_symbol(reply.row, reply.col, auto_symbol)
        outcome = _report(board, auto_symbol, out)
        if outcome.is_over:
            return outcome
