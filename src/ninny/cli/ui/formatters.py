from __future__ import annotations

import json
from typing import List, Mapping, Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme
from rich.tree import Tree

from ninny.core.config import RenderConfig, UIConfig
from ninny.core.errors import ParseError
from ninny.core.models import Array, Item, Section, Value, item_kind, to_plain

THEME = Theme(
    {
        "ok": "bold green",
        "warn": "bold yellow",
        "err": "bold red",
        "muted": "dim",
        "path": "cyan",
        "key": "bold",
        "value": "green",
        "section": "bold magenta",
        "kind": "dim italic",
    }
)


def _keys(m: Mapping[str, Item], sort_keys: bool) -> List[str]:
    return sorted(m) if sort_keys else list(m)


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


# ----------------------------
# Rich tree
# ----------------------------

def _leaf_label(key: str, item: Item, *, show_types: bool) -> str:
    if isinstance(item, Value):
        text = f"[key]{escape(key)}[/key] = [value]{escape(_short(repr(item.text)))}[/value]"
    else:
        items = ", ".join(repr(x) for x in item.items)  # type: ignore[union-attr]
        text = f"[key]{escape(key)}[/key] = [value]{escape(_short('[' + items + ']'))}[/value]"
    if show_types:
        text += f"  [kind]({item_kind(item)})[/kind]"
    return text


def _add_entries(node: Tree, entries: Mapping[str, Item], *, sort_keys: bool, show_types: bool) -> None:
    for k in _keys(entries, sort_keys):
        item = entries[k]
        if isinstance(item, Section):
            child = node.add(f"[section]\\[{escape(k)}][/section]")
            _add_entries(child, item.entries, sort_keys=sort_keys, show_types=show_types)
        else:
            node.add(_leaf_label(k, item, show_types=show_types))


def render_tree(
    doc: Mapping[str, Item],
    *,
    title: str = "document",
    sort_keys: bool = True,
    show_types: bool = False,
) -> Tree:
    tree = Tree(f"[path]{escape(title)}[/path]", guide_style="dim")
    _add_entries(tree, doc, sort_keys=sort_keys, show_types=show_types)
    return tree


# ----------------------------
# Text formats
# ----------------------------

def render_plain(doc: Mapping[str, Item], *, indent: int = 4, sort_keys: bool = False) -> str:
    """
    Brace-nested listing:

      {
          key: value
          section: {
              inner: value
          }
      }
    """
    lines: List[str] = []

    def _walk(m: Mapping[str, Item], level: int) -> None:
        pad = " " * (indent * level)
        for k in _keys(m, sort_keys):
            item = m[k]
            if isinstance(item, Section):
                lines.append(f"{pad}{k}: {{")
                _walk(item.entries, level + 1)
                lines.append(f"{pad}}}")
            elif isinstance(item, Array):
                lines.append(f"{pad}{k}: [{', '.join(item.items)}]")
            else:
                lines.append(f"{pad}{k}: {item.text}")

    lines.append("{")
    _walk(doc, 1)
    lines.append("}")
    return "\n".join(lines)


def render_json(doc: Mapping[str, Item], *, indent: int = 4, sort_keys: bool = True) -> str:
    return json.dumps(to_plain(doc), indent=indent, sort_keys=sort_keys, ensure_ascii=False)


def render_yaml(doc: Mapping[str, Item], *, indent: int = 2, sort_keys: bool = True) -> str:
    return yaml.safe_dump(
        to_plain(doc),
        indent=max(indent, 2),
        sort_keys=sort_keys,
        default_flow_style=False,
        allow_unicode=True,
    ).rstrip("\n")


# ----------------------------
# Dispatch
# ----------------------------

def render_document(
    console: Console,
    doc: Mapping[str, Item],
    *,
    render: RenderConfig,
    ui: Optional[UIConfig] = None,
    title: str = "document",
) -> None:
    ui = ui or UIConfig()
    fmt = render.format

    if fmt == "tree":
        console.print(
            render_tree(doc, title=title, sort_keys=render.sort_keys, show_types=ui.show_types)
        )
        return

    if fmt == "plain":
        text = render_plain(doc, indent=render.indent, sort_keys=render.sort_keys)
    elif fmt == "json":
        text = render_json(doc, indent=render.indent, sort_keys=render.sort_keys)
    else:
        text = render_yaml(doc, indent=render.indent, sort_keys=render.sort_keys)

    # machine formats: no markup, no highlighting, no wrapping
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


# ----------------------------
# Errors
# ----------------------------

def render_parse_error(console: Console, err: ParseError, *, verbose: bool = False) -> None:
    loc = err.location()
    prefix = f"[path]{escape(loc)}[/path]: " if loc else ""
    console.print(f"{prefix}[err]error[/err]: {escape(err.message)}")
    if verbose:
        console.print(f"[muted]  kind: {err.kind.value}[/muted]")
