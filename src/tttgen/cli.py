from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from .export import GenerateArgs, run_generate
from .game_basics import SYMBOL_GLYPHS, Board, Symbol
from .generator import generate_program
from .play import play_game
from .solver import best_move_and_score, move_scores
from .targets import TARGETS


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tttgen", description="Perfect tic-tac-toe: play, solve, generate")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_play = sub.add_parser("play", help="Play against the live solver (you are O, you move first)")
    p_play.add_argument(
        "--computer",
        choices=["X", "O"],
        default="X",
        help="Symbol the computer plays (default: X)",
    )

    p_sol = sub.add_parser("solve", help="Best move and per-cell scores for a board")
    p_sol.add_argument("--board", required=True, help="Board string, e.g., 110220000 (0=empty,1=X,2=O)")
    p_sol.add_argument(
        "--to-move",
        type=int,
        choices=[1, 2],
        default=None,
        help="Side to move (1=X, 2=O); inferred from piece counts if omitted",
    )

    p_gen = sub.add_parser("generate", help="Emit a program that plays perfectly without searching")
    p_gen.add_argument(
        "--target",
        choices=sorted(TARGETS),
        default="python",
        help="Output language (default: python)",
    )
    p_gen.add_argument(
        "--computer",
        choices=["X", "O"],
        default="X",
        help="Symbol the generated program plays (default: X)",
    )
    dest = p_gen.add_mutually_exclusive_group()
    dest.add_argument("--out", type=Path, default=None, help="Output file (default: $TTTGEN_OUT_DIR/...)")
    dest.add_argument("--stdout", action="store_true", help="Write the program to stdout, no manifest")

    return p


def _symbol_for(glyph: str) -> Symbol:
    return Symbol.SELF if glyph == "X" else Symbol.OPPONENT


def _infer_to_move(board: Board) -> Symbol:
    x = board.cells.count(Symbol.SELF)
    o = board.cells.count(Symbol.OPPONENT)
    return Symbol.SELF if x == o else Symbol.OPPONENT


def _format_scores(grid: np.ndarray) -> str:
    rows = []
    for row in grid:
        rows.append(" ".join("  ." if np.isnan(v) else f"{int(v):+3d}" for v in row))
    return "\n".join(rows)


def _cmd_solve(ns: argparse.Namespace) -> int:
    try:
        board = Board.from_string(ns.board)
    except ValueError as e:
        logging.error("%s", e)
        return 2
    to_move = Symbol(ns.to_move) if ns.to_move is not None else _infer_to_move(board)
    res = best_move_and_score(board, to_move, to_move)
    logging.info(
        "to_move=%s outcome=%s value=%d best=%s",
        SYMBOL_GLYPHS[to_move],
        board.outcome().value,
        res.score,
        res.move if res.move.is_valid else None,
    )
    print(board.render())
    print(_format_scores(move_scores(board, to_move, to_move)))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import PackageNotFoundError, version as _ver

            print(_ver("tttgen"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    if ns.cmd == "play":
        try:
            outcome = play_game(auto_symbol=_symbol_for(ns.computer))
        except (EOFError, KeyboardInterrupt):
            logging.warning("Input closed; game abandoned.")
            return 1
        logging.debug("outcome=%s", outcome.value)
        return 0

    if ns.cmd == "solve":
        return _cmd_solve(ns)

    if ns.cmd == "generate":
        auto_symbol = _symbol_for(ns.computer)
        try:
            if ns.stdout:
                generate_program(sys.stdout, ns.target, auto_symbol)
                return 0
            out = run_generate(GenerateArgs(
                out=ns.out,
                target=ns.target,
                auto_symbol=auto_symbol,
                verbose=ns.verbose,
                cli_argv=list(argv) if argv is not None else sys.argv[1:],
            ))
        except ValueError as e:
            logging.error("%s", e)
            return 2
        logging.info("Generated program: %s", out)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
