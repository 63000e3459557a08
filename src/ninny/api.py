from __future__ import annotations

from pathlib import Path
from typing import TextIO, Union

from ninny.core.errors import ParseError
from ninny.core.models import Document
from ninny.core.scanner import parse


def loads(text: str) -> Document:
    """
    Parse a complete document.

    Returns the root mapping (key -> Value/Section). Raises a ParseError
    subclass on the first fatal problem; nothing is returned partially.
    """
    return parse(text)


def load(fp: TextIO) -> Document:
    return loads(fp.read())


def load_path(path: Union[str, Path]) -> Document:
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    try:
        return loads(text)
    except ParseError as e:
        e.source = str(p)
        raise
