from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union


# ================================
# Items
# ================================


@dataclass
class Value:
    """A plain string value (`key = value`)."""

    text: str


@dataclass
class Array:
    """
    Ordered list of string values.

    Reserved: the scanner never produces this. It exists so consumers can
    handle it today and a repeated-key (`key[] = ...`) syntax has somewhere to land.
    """

    items: List[str] = field(default_factory=list)


@dataclass
class Section:
    """Named table of items. Grows every time its header path is seen again."""

    entries: Dict[str, "Item"] = field(default_factory=dict)

    def __getitem__(self, key: str) -> "Item":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: Any = None) -> Any:
        return self.entries.get(key, default)


Item = Union[Value, Array, Section]

# The document root: section-shaped, but not wrapped in an Item.
Document = Dict[str, Item]


# ================================
# Helpers
# ================================


def item_kind(item: Item) -> str:
    return type(item).__name__


def to_plain(tree: Mapping[str, Item]) -> Dict[str, Any]:
    """
    Convert a parsed tree to builtin types.

      Value   -> str
      Array   -> list[str]
      Section -> dict
    """
    out: Dict[str, Any] = {}
    for k, v in tree.items():
        out[k] = _plain_item(v)
    return out


def _plain_item(item: Item) -> Any:
    if isinstance(item, Value):
        return item.text
    if isinstance(item, Array):
        return list(item.items)
    if isinstance(item, Section):
        return to_plain(item.entries)
    raise TypeError(f"not an Item: {item!r}")


def lookup(tree: Mapping[str, Item], path: List[str]) -> Item:
    """Walk `path` through nested sections. Raises KeyError if any segment is missing."""
    if not path:
        raise KeyError("empty path")

    cur: Mapping[str, Item] = tree
    for i, seg in enumerate(path):
        item = cur[seg]
        if i == len(path) - 1:
            return item
        if not isinstance(item, Section):
            raise KeyError(".".join(path[: i + 1]))
        cur = item.entries
    raise KeyError(".".join(path))  # pragma: no cover
