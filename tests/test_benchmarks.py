import io

import pytest

from tttgen.emitter import Emitter
from tttgen.game_basics import Board, Symbol
from tttgen.generator import generate_turn
from tttgen.solver import best_move_and_score
from tttgen.targets import PythonTarget

try:
    import pytest_benchmark  # noqa: F401
    HAS_BENCH = True
except ImportError:
    HAS_BENCH = False


@pytest.mark.skipif(not HAS_BENCH, reason="pytest-benchmark not installed")
def test_benchmark_solver_midgame(benchmark):
    board = Board.from_string("200010000")
    res = benchmark(best_move_and_score, board, Symbol.SELF, Symbol.SELF)
    assert res.move.is_valid


@pytest.mark.skipif(not HAS_BENCH, reason="pytest-benchmark not installed")
def test_benchmark_generate_turn_midgame(benchmark):
    board = Board.from_string("210000000")

    def _generate():
        buf = io.StringIO()
        generate_turn(board, Symbol.SELF, Emitter(buf), PythonTarget())
        return buf.getvalue()

    text = benchmark(_generate)
    assert text.startswith("while True:\n")
