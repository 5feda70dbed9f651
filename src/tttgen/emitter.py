"""
Append-only text sink for generated programs.

Lines are written in the order they are emitted and never revisited;
the generator relies on this for its depth-first, row-major layout.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, TextIO


class Emitter:
    def __init__(self, stream: TextIO, indent_unit: str = "    ") -> None:
        self.stream = stream
        self.indent_unit = indent_unit
        self.level = 0
        self.lines_written = 0

    def line(self, text: str = "") -> None:
        if text:
            self.stream.write(self.indent_unit * self.level + text + "\n")
        else:
            self.stream.write("\n")
        self.lines_written += 1

    def raw(self, text: str) -> None:
        """Write preformatted text verbatim (used for preludes)."""
        self.stream.write(text)
        self.lines_written += text.count("\n")

    @contextmanager
    def indented(self) -> Iterator[None]:
        self.level += 1
        try:
            yield None
        finally:
            self.level -= 1
