"""
Output dialects for the generated program.

A target only knows how to spell the pieces of the unrolled decision tree
(loops, branches, printed text); the generator decides what goes where.
"""
from __future__ import annotations

from typing import Dict, Type

from .emitter import Emitter
from .game_basics import Move

INPUT_PROMPT = "Enter row,column: "
INVALID_INPUT = "Invalid move"
MOVE_NOT_POSSIBLE = "Move is not possible"


class Target:
    name = ""
    suffix = ""

    def prelude(self, em: Emitter, banner: str) -> None:
        raise NotImplementedError

    def epilogue(self, em: Emitter) -> None:
        raise NotImplementedError

    def turn_open(self, em: Emitter) -> None:
        raise NotImplementedError

    def fetch_input(self, em: Emitter) -> None:
        raise NotImplementedError

    def turn_close(self, em: Emitter) -> None:
        raise NotImplementedError

    def branch_open(self, em: Emitter, move: Move, first: bool) -> None:
        raise NotImplementedError

    def default_open(self, em: Emitter) -> None:
        raise NotImplementedError

    def branch_close(self, em: Emitter) -> None:
        raise NotImplementedError

    def say(self, em: Emitter, text: str) -> None:
        """Print ``text`` followed by a newline; multi-line text is split per line."""
        raise NotImplementedError

    def reject(self, em: Emitter) -> None:
        """Tell the player the cell is taken and ask again."""
        raise NotImplementedError

    def end_game(self, em: Emitter) -> None:
        raise NotImplementedError


class PythonTarget(Target):
    name = "python"
    suffix = ".py"

    PRELUDE = '''\
"""Tic-tac-toe against a precomputed perfect player.

Generated by tttgen. Every reply below was chosen ahead of time by
exhaustive minimax search; nothing is searched at runtime.
"""
import sys


def get_input():
    while True:
        try:
            line = input({prompt!r})
        except EOFError:
            sys.exit(1)
        try:
            r, c = (int(part) for part in line.split(","))
        except ValueError:
            print({invalid!r})
            continue
        if r < 0 or c < 0 or r > 2 or c > 2:
            print({invalid!r})
            continue
        return r, c


def main():
'''

    EPILOGUE = '''

if __name__ == "__main__":
    main()
'''

    def prelude(self, em: Emitter, banner: str) -> None:
        em.raw(self.PRELUDE.format(prompt=INPUT_PROMPT, invalid=INVALID_INPUT))
        em.level = 1
        self.say(em, banner)

    def epilogue(self, em: Emitter) -> None:
        em.level = 0
        em.raw(self.EPILOGUE)

    def turn_open(self, em: Emitter) -> None:
        em.line("while True:")

    def fetch_input(self, em: Emitter) -> None:
        em.line("r, c = get_input()")

    def turn_close(self, em: Emitter) -> None:
        pass

    def branch_open(self, em: Emitter, move: Move, first: bool) -> None:
        keyword = "if" if first else "elif"
        em.line(f"{keyword} (r, c) == ({move.row}, {move.col}):")

    def default_open(self, em: Emitter) -> None:
        em.line("else:")

    def branch_close(self, em: Emitter) -> None:
        pass

    def say(self, em: Emitter, text: str) -> None:
        for part in text.split("\n"):
            em.line(f"print({part!r})")

    def reject(self, em: Emitter) -> None:
        self.say(em, MOVE_NOT_POSSIBLE)
        em.line("continue")

    def end_game(self, em: Emitter) -> None:
        em.line("break")


def c_string(text: str) -> str:
    """Quote ``text`` as a C string literal that is safe as a printf format."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("%", "%%")
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


class CTarget(Target):
    name = "c"
    suffix = ".c"

    PRELUDE = '''\
/* Tic-tac-toe against a precomputed perfect player, generated by tttgen. */
#include <stdio.h>
#include <stdlib.h>

typedef struct {{ int r, c; }} Move;

Move get_input(void) {{
    int r, c;
    while (1) {{
        r = -1;
        c = -1;
        printf({prompt});
        fflush(stdout);
        int n = scanf("%d,%d", &r, &c);
        if (n == EOF) {{
            exit(1);
        }}
        int ch;
        while ((ch = getchar()) != '\\n' && ch != EOF) {{
        }}
        if (n != 2 || r < 0 || c < 0 || r > 2 || c > 2) {{
            printf({invalid});
            continue;
        }}
        break;
    }}
    return (Move){{.r = r, .c = c}};
}}

int main(void) {{
'''

    EPILOGUE = '''\
    return 0;
}
'''

    def prelude(self, em: Emitter, banner: str) -> None:
        em.raw(self.PRELUDE.format(
            prompt=c_string(INPUT_PROMPT),
            invalid=c_string(INVALID_INPUT + "\n"),
        ))
        em.level = 1
        self.say(em, banner)
        em.line("Move input = (Move){.r = -1, .c = -1};")

    def epilogue(self, em: Emitter) -> None:
        em.level = 0
        em.raw(self.EPILOGUE)

    def turn_open(self, em: Emitter) -> None:
        em.line("while (1) {")

    def fetch_input(self, em: Emitter) -> None:
        em.line("input = get_input();")

    def turn_close(self, em: Emitter) -> None:
        em.line("}")

    def branch_open(self, em: Emitter, move: Move, first: bool) -> None:
        keyword = "if" if first else "else if"
        em.line(f"{keyword} (input.r == {move.row} && input.c == {move.col}) {{")

    def default_open(self, em: Emitter) -> None:
        em.line("else {")

    def branch_close(self, em: Emitter) -> None:
        em.line("}")

    def say(self, em: Emitter, text: str) -> None:
        for part in text.split("\n"):
            em.line(f"printf({c_string(part + chr(10))});")

    def reject(self, em: Emitter) -> None:
        self.say(em, MOVE_NOT_POSSIBLE)
        em.line("continue;")

    def end_game(self, em: Emitter) -> None:
        em.line("break;")


TARGETS: Dict[str, Type[Target]] = {
    PythonTarget.name: PythonTarget,
    CTarget.name: CTarget,
}


def get_target(name: str) -> Target:
    try:
        return TARGETS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown target: {name!r} (choose from {', '.join(sorted(TARGETS))})"
        ) from None
