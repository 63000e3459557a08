from __future__ import annotations

from typing import Iterable, Iterator, Optional


class Cursor:
    """
    Pull-based reader with exactly one character of lookahead.

    Works over any iterable of single characters (a str, a generator,
    a decoding stream wrapper...). No random access.
    """

    __slots__ = ("_it", "current", "line", "column")

    def __init__(self, data: Iterable[str]) -> None:
        self._it: Iterator[str] = iter(data)
        self.current: Optional[str] = None
        # position of `current`; advance() bumps it before the first read
        self.line = 1
        self.column = 0
        self.advance()

    def advance(self) -> None:
        if self.current == "\n":
            self.line += 1
            self.column = 1
        elif self.current is not None or self.column == 0:
            self.column += 1
        self.current = next(self._it, None)

    @property
    def exhausted(self) -> bool:
        return self.current is None

    def position(self) -> tuple[int, int]:
        return self.line, self.column
