from __future__ import annotations

from enum import Enum, IntEnum
from typing import List, Optional


class ExitCode(IntEnum):
    OK = 0
    PARSE_ERROR = 1
    ERROR = 2


class ErrorKind(str, Enum):
    UNTERMINATED_SECTION_HEADER = "unterminated_section_header"
    DUPLICATE_KEY = "duplicate_key"
    SECTION_PATH_CONFLICT = "section_path_conflict"


class ParseError(Exception):
    """
    Base for all fatal parse failures.

    line/column are 1-based and point at the offending position when known.
    `source` is filled in by callers that know where the text came from.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.source = source

    def location(self) -> str:
        parts: List[str] = []
        if self.source:
            parts.append(self.source)
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)

    def __str__(self) -> str:
        loc = self.location()
        return f"{loc}: {self.message}" if loc else self.message


class UnterminatedSectionHeader(ParseError):
    kind = ErrorKind.UNTERMINATED_SECTION_HEADER


class DuplicateKey(ParseError):
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: str, **kwargs) -> None:
        super().__init__(f"Duplicate key: {key!r}", **kwargs)
        self.key = key


class SectionPathConflict(ParseError):
    kind = ErrorKind.SECTION_PATH_CONFLICT

    def __init__(self, path: List[str], **kwargs) -> None:
        dotted = ".".join(path)
        super().__init__(
            f"Section path conflict: {dotted!r} already holds a non-section value",
            **kwargs,
        )
        self.path = list(path)


class ConfigError(Exception):
    """Invalid or unreadable CLI config file."""
