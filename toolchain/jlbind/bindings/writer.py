"""
Append-only Output Sink for Generated Code.

CodeWriter collects generated lines in call order. Indentation is tracked as a
plain integer depth (in columns) that is only changed by opening and closing
guard blocks, so every opened block is closed exactly once and at the depth it
was opened.
"""

import contextlib
from typing import Iterator, List

from .formatting import indent


class CodeWriter:
    """
    Append-only buffer of generated lines.

    Attributes:
        base: Indentation (in columns) of top-level statements.
        step: Extra indentation (in columns) inside a guard block.
        depth: Current indentation in columns.
    """

    def __init__(self, base: int = 2, step: int = 2):
        self.base = base
        self.step = step
        self.depth = base
        self._lines: List[str] = []
        self._open: List[int] = []

    def line(self, statement: str) -> None:
        """Append one statement at the current depth."""
        self._lines.append(indent(self.depth) + statement)

    def extend(self, other: "CodeWriter") -> None:
        """Append every line of a closed writer, preserving order."""
        if other.is_open:
            raise RuntimeError("Cannot splice a writer with an unclosed block")
        self._lines.extend(other.lines)

    def open_block(self, header: str) -> None:
        self.line(header)
        self._open.append(self.depth)
        self.depth += self.step

    def close_block(self, footer: str = "end") -> None:
        if not self._open:
            raise RuntimeError("close_block() without a matching open_block()")
        self.depth = self._open.pop()
        self.line(footer)

    @contextlib.contextmanager
    def block(self, header: str, footer: str = "end") -> Iterator["CodeWriter"]:
        self.open_block(header)
        try:
            yield self
        finally:
            self.close_block(footer)

    @property
    def is_open(self) -> bool:
        return len(self._open) > 0

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def text(self) -> str:
        """Return the generated chunk, one statement per line."""
        if self.is_open:
            raise RuntimeError(f"{len(self._open)} block(s) left open")
        return "".join(f"{line}\n" for line in self._lines)

    def __len__(self) -> int:
        return len(self._lines)
