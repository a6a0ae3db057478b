from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import ListItem, Static
from rich.text import Text

from .datamodels import Article

STAR_ON = "★"
STAR_OFF = "☆"


# --- UI Widgets ---
class ArticleItem(ListItem):
    def __init__(
        self,
        article: Article,
        title: Text,
        content: Text,
        starred: bool = False,
        expanded: bool = False,
    ):
        super().__init__()
        self.article = article
        self.title_text = title
        self.content_text = content
        self.starred = starred
        self.expanded = expanded
        self.set_class(starred, "starred")
        self.set_class(expanded, "expanded")

    def compose(self) -> ComposeResult:
        with Horizontal(classes="article-header"):
            yield Static(self.title_text, classes="article-title")
            yield Static(STAR_ON if self.starred else STAR_OFF, classes="article-star")
        yield Static(self.content_text, classes="article-content")
        if self.expanded:
            yield Static(
                Text.assemble(("Full Content:\n", "bold"), self.article.content),
                classes="article-full",
            )


class EmptyState(Static):
    def show(self, message: str, hint: str) -> None:
        self.update(Text.assemble((message, "bold"), "\n", (hint, "dim")))
        self.display = True


class StatusBar(Static):
    loading_status = reactive("")
    keybinding_hint = reactive("")

    def on_mount(self) -> None:
        self.update_display()

    def set_keybindings(self, hint: str) -> None:
        """Set the keybinding hint text."""
        self.keybinding_hint = hint

    def update_display(self) -> None:
        """Update the status bar display."""
        status_items = []
        if self.loading_status:
            status_items.append(self.loading_status)

        if self.keybinding_hint:
            status_items.append(self.keybinding_hint)

        self.update(" | ".join(status_items))

    def watch_loading_status(self, loading_status: str) -> None:
        self.update_display()

    def watch_keybinding_hint(self, keybinding_hint: str) -> None:
        self.update_display()
