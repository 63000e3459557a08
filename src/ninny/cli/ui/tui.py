from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static, Tree
from textual.widgets.tree import TreeNode

from ninny.core.config import UIConfig
from ninny.core.models import Array, Item, Section, item_kind


def _short(s: Optional[str], n: int = 160) -> str:
    s = s or ""
    return s if len(s) <= n else s[:n] + "…"


def _leaf_text(key: str, item: Item, show_types: bool) -> Text:
    if isinstance(item, Array):
        shown = "[" + ", ".join(item.items) + "]"
    else:
        shown = item.text  # type: ignore[union-attr]
    label = Text.assemble((key, "bold"), " = ", (_short(shown), "green"))
    if show_types:
        label.append(f"  ({item_kind(item)})", style="dim italic")
    return label


def populate(node: TreeNode, entries: Mapping[str, Item], *, show_types: bool = False) -> None:
    """Mirror a parsed tree into textual tree nodes (sections first, then leaves)."""
    sections = sorted(k for k, v in entries.items() if isinstance(v, Section))
    leaves = sorted(k for k, v in entries.items() if not isinstance(v, Section))

    for k in sections:
        sec = entries[k]
        child = node.add(Text(f"[{k}]", style="bold magenta"), data=k, expand=True)
        populate(child, sec.entries, show_types=show_types)  # type: ignore[union-attr]

    for k in leaves:
        node.add_leaf(_leaf_text(k, entries[k], show_types), data=k)


@dataclass(frozen=True)
class BrowserData:
    title: str
    document: Mapping[str, Item]
    ui_config: Optional[UIConfig] = None


class DocumentBrowser(App):
    """Read-only tree view of a parsed document."""

    CSS = """
    Screen { overflow: hidden; }
    #doc_tree { height: 1fr; }
    #status { height: 1; padding: 0 1; color: $text-muted; }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True, priority=False),
        Binding("e", "expand_all", "Expand all", show=True, priority=False),
        Binding("c", "collapse_all", "Collapse all", show=True, priority=False),
    ]

    def __init__(self, data: BrowserData, **kwargs):
        super().__init__(**kwargs)
        self.data = data

    def compose(self) -> ComposeResult:
        yield Header()
        yield Tree(self.data.title, id="doc_tree")
        yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.title = f"ninny: {self.data.title}"
        tree = self.query_one("#doc_tree", Tree)
        show_types = bool(self.data.ui_config and self.data.ui_config.show_types)
        populate(tree.root, self.data.document, show_types=show_types)
        tree.root.expand()
        self.set_focus(tree)

    def on_tree_node_highlighted(self, event: Tree.NodeHighlighted) -> None:
        parts = []
        node = event.node
        while node is not None and node.data is not None:
            parts.append(str(node.data))
            node = node.parent
        self.query_one("#status", Static).update(Text(".".join(reversed(parts)) or "-"))

    def action_expand_all(self) -> None:
        self.query_one("#doc_tree", Tree).root.expand_all()

    def action_collapse_all(self) -> None:
        root = self.query_one("#doc_tree", Tree).root
        for child in root.children:
            child.collapse_all()


def run_browser(
    *,
    title: str,
    document: Mapping[str, Item],
    ui_config: Optional[UIConfig] = None,
) -> None:
    DocumentBrowser(BrowserData(title=title, document=document, ui_config=ui_config)).run()
