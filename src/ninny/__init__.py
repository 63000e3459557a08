"""ninny: INI-style config parser with dotted, nested sections."""

from ninny.api import load, load_path, loads
from ninny.core.errors import (
    DuplicateKey,
    ErrorKind,
    ParseError,
    SectionPathConflict,
    UnterminatedSectionHeader,
)
from ninny.core.models import Array, Document, Item, Section, Value, lookup, to_plain

__version__ = "0.1.0"

__all__ = [
    "loads",
    "load",
    "load_path",
    "Item",
    "Value",
    "Array",
    "Section",
    "Document",
    "to_plain",
    "lookup",
    "ParseError",
    "ErrorKind",
    "UnterminatedSectionHeader",
    "DuplicateKey",
    "SectionPathConflict",
]
