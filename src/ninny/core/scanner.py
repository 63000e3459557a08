from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from ninny.core.cursor import Cursor
from ninny.core.errors import DuplicateKey, SectionPathConflict, UnterminatedSectionHeader
from ninny.core.models import Document, Item, Section, Value

log = logging.getLogger(__name__)


COMMENT_MARKERS = frozenset(";#")
QUOTES = frozenset("\"'")
LINE_ENDS = frozenset("\r\n")

KEY_END = frozenset("=")
TITLE_END = frozenset("].")
NO_END: FrozenSet[str] = frozenset()

# \<c> substitutions; anything else maps to itself
ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
}


class Parser:
    """
    Single-pass scanner over a character stream.

    One Parser per document: create it, call parse() once, drop it.
    """

    def __init__(self, data: Iterable[str]) -> None:
        self.cursor = Cursor(data)

    # ----------------------------
    # Token-level
    # ----------------------------

    def skip_whitespace(self) -> None:
        cur = self.cursor
        while cur.current is not None and cur.current.isspace():
            cur.advance()

    def skip_comment(self) -> None:
        cur = self.cursor
        while cur.current is not None:
            c = cur.current
            cur.advance()
            if c == "\n":
                break

    def scan_run(self, terminators: FrozenSet[str]) -> Tuple[bool, str]:
        """
        Read up to an unescaped terminator (found=True, terminator left unconsumed),
        a line end / EOF, or an unquoted comment marker (found=False).

        Once a quote has been seen, the first comment marker is only remembered:
        whether it starts a comment is decided after the whole run is read.
        """
        cur = self.cursor
        buf: List[str] = []
        escape = False
        seen_quote = False
        comment_at: Optional[int] = None
        found = False

        while True:
            c = cur.current

            if escape:
                if c is None or c in LINE_ENDS:
                    break
                buf.append(ESCAPES.get(c, c))
                escape = False
                cur.advance()
                continue

            if c is None or c in LINE_ENDS:
                break
            if c == "\\":
                escape = True
                cur.advance()
                continue
            if c in terminators:
                found = True
                break
            if c in COMMENT_MARKERS:
                if not seen_quote:
                    break
                if comment_at is None:
                    comment_at = len(buf)
            elif c in QUOTES:
                seen_quote = True

            buf.append(c)
            cur.advance()

        # dangling backslash is kept as-is
        if escape:
            buf.append("\\")

        text = "".join(buf).strip()
        if len(text) >= 2 and text[0] in QUOTES and text[0] == text[-1]:
            text = text[1:-1]
        elif comment_at is not None:
            text = "".join(buf[:comment_at]).strip()

        return found, text

    # ----------------------------
    # Structural
    # ----------------------------

    def scan_key_value(self) -> Tuple[str, str]:
        has_value, key = self.scan_run(KEY_END)

        if not has_value:
            # valueless keys are flags, same as npm's `ini`
            return key, "true"

        self.cursor.advance()  # '='
        _, value = self.scan_run(NO_END)
        return key, value

    def scan_section_title(self) -> List[str]:
        cur = self.cursor
        cur.advance()  # '['

        path: List[str] = []
        while True:
            found, segment = self.scan_run(TITLE_END)
            if not found:
                line, column = cur.position()
                if cur.exhausted:
                    where = "end of file"
                elif cur.current in COMMENT_MARKERS:
                    where = "comment"
                else:
                    where = "end of line"
                raise UnterminatedSectionHeader(
                    f"Unclosed section header. Expected ']', found {where}.",
                    line=line,
                    column=column,
                )

            path.append(segment)
            end = cur.current
            cur.advance()
            if end == "]":
                return path

    def scan_section_body(self) -> Dict[str, Item]:
        cur = self.cursor
        section: Dict[str, Item] = {}

        self.skip_whitespace()
        while cur.current is not None:
            c = cur.current
            if c == "[":
                break

            if c in COMMENT_MARKERS:
                self.skip_comment()
            else:
                line, column = cur.position()
                key, value = self.scan_key_value()
                if key in section:
                    raise DuplicateKey(key, line=line, column=column)
                section[key] = Value(value)

            self.skip_whitespace()

        return section

    # ----------------------------
    # Driver
    # ----------------------------

    def parse(self) -> Document:
        root: Document = self.scan_section_body()

        while not self.cursor.exhausted:
            line, column = self.cursor.position()
            path = self.scan_section_title()
            body = self.scan_section_body()

            target = _resolve_section(root, path, line=line, column=column)
            for key in body:
                if key in target.entries:
                    log.debug("[%s] %r overwritten by later section body", ".".join(path), key)
            target.entries.update(body)

        return root


def _resolve_section(root: Document, path: List[str], *, line: int, column: int) -> Section:
    """Walk `path` from the root, creating missing sections along the way."""
    entries = root
    section: Optional[Section] = None

    for i, segment in enumerate(path):
        item = entries.get(segment)
        if item is None:
            item = Section()
            entries[segment] = item
            log.debug("created section %s", ".".join(path[: i + 1]))
        elif not isinstance(item, Section):
            raise SectionPathConflict(path[: i + 1], line=line, column=column)
        section = item
        entries = item.entries

    if section is None:
        raise ValueError("section path must have at least one segment")
    return section


def parse(data: Iterable[str]) -> Document:
    return Parser(data).parse()
