"""
Game basics: symbols, moves, the immutable board, winner/tie checks.
Notes:
- A board is a tuple of 9 symbols in row-major order: 0=empty, 1=X (self), 2=O (opponent).
- Boards are values: updating a cell returns a new board, the receiver is untouched.
- Out-of-range access never raises; reads give Symbol.INVALID, writes are no-ops.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, NamedTuple, Optional, Tuple

BOARD_SIZE = 3
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

# Scan order matters for which line is reported: rows, columns, then diagonals.
WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6]
]


class Symbol(IntEnum):
    INVALID = -1
    EMPTY = 0
    SELF = 1
    OPPONENT = 2

    def invert(self) -> "Symbol":
        """Swap the two players; any other symbol maps to itself."""
        if self is Symbol.SELF:
            return Symbol.OPPONENT
        if self is Symbol.OPPONENT:
            return Symbol.SELF
        return self

    @property
    def is_player(self) -> bool:
        return self in (Symbol.SELF, Symbol.OPPONENT)


SYMBOL_GLYPHS = {Symbol.EMPTY: " ", Symbol.SELF: "X", Symbol.OPPONENT: "O"}


class Move(NamedTuple):
    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


INVALID_MOVE = Move(-1, -1)


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    TIE = "tie"
    SELF_WINS = "self_wins"
    OPPONENT_WINS = "opponent_wins"

    @classmethod
    def won_by(cls, symbol: Symbol) -> "Outcome":
        if symbol == Symbol.SELF:
            return cls.SELF_WINS
        if symbol == Symbol.OPPONENT:
            return cls.OPPONENT_WINS
        raise ValueError(f"Not a player symbol: {symbol!r}")

    @property
    def winner(self) -> Optional[Symbol]:
        if self is Outcome.SELF_WINS:
            return Symbol.SELF
        if self is Outcome.OPPONENT_WINS:
            return Symbol.OPPONENT
        return None

    @property
    def is_over(self) -> bool:
        return self is not Outcome.IN_PROGRESS


def _index(row: int, col: int) -> Optional[int]:
    if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
        return row * BOARD_SIZE + col
    return None


@dataclass(frozen=True)
class Board:
    cells: Tuple[Symbol, ...] = (Symbol.EMPTY,) * BOARD_CELLS

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_CELLS:
            raise ValueError(f"A board has {BOARD_CELLS} cells, got {len(self.cells)}")

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse the 9-digit form, e.g. ``"110220000"`` (0=empty, 1=X, 2=O)."""
        raw = text.strip()
        if len(raw) != BOARD_CELLS or any(c not in "012" for c in raw):
            raise ValueError(f"Invalid board string {text!r}. Must be 9 chars of 0/1/2.")
        return cls(tuple(Symbol(int(c)) for c in raw))

    def serialize(self) -> str:
        return ''.join(str(int(cell)) for cell in self.cells)

    def get(self, row: int, col: int) -> Symbol:
        idx = _index(row, col)
        if idx is None:
            return Symbol.INVALID
        return self.cells[idx]

    def with_symbol(self, row: int, col: int, sym: Symbol) -> "Board":
        idx = _index(row, col)
        if idx is None:
            return Board(self.cells)
        lst = list(self.cells)
        lst[idx] = sym
        return Board(tuple(lst))

    def is_move_possible(self, row: int, col: int) -> bool:
        return self.get(row, col) == Symbol.EMPTY

    def empty_cells(self) -> Iterator[Move]:
        for idx, cell in enumerate(self.cells):
            if cell == Symbol.EMPTY:
                yield Move(*divmod(idx, BOARD_SIZE))

    def winner(self) -> Symbol:
        """First completed line in scan order, or EMPTY if there is none.

        EMPTY covers both a tie and a game still in progress; use
        ``outcome()`` to tell them apart.
        """
        cells = self.cells
        for a, b, c in WIN_PATTERNS:
            v = cells[a]
            if v != Symbol.EMPTY and v == cells[b] and v == cells[c]:
                return v
        return Symbol.EMPTY

    def is_full(self) -> bool:
        return Symbol.EMPTY not in self.cells

    def outcome(self) -> Outcome:
        w = self.winner()
        if w != Symbol.EMPTY:
            return Outcome.won_by(w)
        if self.is_full():
            return Outcome.TIE
        return Outcome.IN_PROGRESS

    def render(self) -> str:
        rows = [
            "|".join(SYMBOL_GLYPHS[self.cells[r * BOARD_SIZE + c]] for c in range(BOARD_SIZE))
            for r in range(BOARD_SIZE)
        ]
        separator = "+".join("-" * BOARD_SIZE)
        return f"\n{separator}\n".join(rows)

    def __str__(self) -> str:
        return self.render()
