from __future__ import annotations

import logging
from typing import Any, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.worker import Worker, WorkerState
from textual.widgets import Button, Header, Input, ListView, Static
from rich.text import Text

from .config import DEFAULT_THEME, ui_setting
from .controller import ViewController
from .filtering import EMPTY_HINT
from .highlight import to_text
from .screens import ErrorScreen
from .sources.base import ArticleSource
from .stars import StarStore
from .widgets import ArticleItem, EmptyState, StatusBar

logger = logging.getLogger("articles")


class ArticleApp(App):
    TITLE = "Articles"
    SUB_TITLE = "Search, highlight and star"

    CSS_PATH = "app.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("s", "toggle_star", "Star"),
        Binding("f", "toggle_starred_only", "Starred only"),
        Binding("/", "focus_search", "Search"),
        Binding("escape", "focus_list", "Back to list", show=False),
    ]

    def __init__(
        self,
        source: ArticleSource,
        star_store: StarStore,
        theme: Optional[str] = None,
        config: Optional[dict[str, Any]] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.source = source
        self.star_store = star_store
        self.config = config or {}
        self._theme_name = theme or DEFAULT_THEME
        self.highlight_style = ui_setting(self.config, "highlight_style")
        self.controller: Optional[ViewController] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            with Horizontal(id="toolbar"):
                yield Input(placeholder="Search articles...", id="search")
                yield Button("All", id="filter-all", classes="filter-button active")
                yield Button("★ Starred", id="filter-starred", classes="filter-button")
            yield Static("Loading articles...", id="result-count")
            yield ListView(id="articles-list")
            yield EmptyState(id="empty-state")
        yield StatusBar()

    def on_mount(self) -> None:
        if self._theme_name not in self.available_themes:
            logger.warning(
                "Theme '%s' not found, falling back to %s", self._theme_name, DEFAULT_THEME
            )
            self._theme_name = DEFAULT_THEME
        self.theme = self._theme_name
        self.query_one("#empty-state", EmptyState).display = False
        status_bar = self.query_one(StatusBar)
        status_bar.set_keybindings(
            ui_setting(self.config, "statusbar_keybindings").format(color="$accent")
        )
        status_bar.loading_status = f"Loading articles from {self.source.name}..."
        self.run_worker(
            self.source.get_articles,
            name="articles_loader",
            thread=True,
            exit_on_error=False,
        )

    async def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if getattr(event.worker, "name", None) != "articles_loader":
            return
        if event.state in (WorkerState.SUCCESS, WorkerState.ERROR):
            self.query_one(StatusBar).loading_status = ""
        if event.state is WorkerState.SUCCESS:
            articles = getattr(event.worker, "result", None) or ()
            logger.info("Loaded %d articles from %s", len(articles), self.source.name)
            self.controller = ViewController(articles, self.star_store)
            await self._refresh_articles()
            self.query_one("#articles-list", ListView).focus()
        elif event.state is WorkerState.ERROR:
            error = getattr(event.worker, "error", None)
            logger.error("Article loader failed: %s", error)
            self.push_screen(
                ErrorScreen(
                    "Could not load articles",
                    f"{error or 'Unknown error'}\n\n"
                    "Check the `source` settings in `~/.config/articles/config.json`.",
                )
            )

    async def _refresh_articles(self) -> None:
        """Rebuild the list from the controller's current view."""
        if self.controller is None:
            return
        view = self.controller.view
        articles_list = self.query_one("#articles-list", ListView)

        current = articles_list.highlighted_child
        current_id = current.article.id if isinstance(current, ArticleItem) else None
        old_index = articles_list.index or 0

        await articles_list.clear()
        await articles_list.extend(
            ArticleItem(
                article,
                title=to_text(self.controller.highlight(article.title), self.highlight_style),
                content=to_text(
                    self.controller.highlight(article.content), self.highlight_style
                ),
                starred=self.controller.is_starred(article.id),
                expanded=self.controller.is_expanded(article.id),
            )
            for article in view.articles
        )

        if view.articles:
            ids = [a.id for a in view.articles]
            if current_id in ids:
                articles_list.index = ids.index(current_id)
            else:
                articles_list.index = min(old_index, len(ids) - 1)
        articles_list.display = bool(view.articles)

        empty_state = self.query_one("#empty-state", EmptyState)
        if view.empty_message:
            empty_state.show(view.empty_message, EMPTY_HINT)
        else:
            empty_state.display = False

        self.query_one("#result-count", Static).update(Text(view.status))
        starred_only = view.state.starred_only
        self.query_one("#filter-all", Button).set_class(not starred_only, "active")
        self.query_one("#filter-starred", Button).set_class(starred_only, "active")

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search" and self.controller is not None:
            self.controller.set_query(event.value)
            await self._refresh_articles()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search":
            self.action_focus_list()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if self.controller is None:
            return
        if event.button.id == "filter-all":
            self.controller.set_starred_only(False)
        elif event.button.id == "filter-starred":
            self.controller.set_starred_only(True)
        else:
            return
        await self._refresh_articles()

    async def on_list_view_selected(self, event: ListView.Selected) -> None:
        if self.controller is not None and isinstance(event.item, ArticleItem):
            self.controller.toggle_expand(event.item.article.id)
            await self._refresh_articles()

    async def action_toggle_star(self) -> None:
        if self.controller is None:
            return
        item = self.query_one("#articles-list", ListView).highlighted_child
        if not isinstance(item, ArticleItem):
            return
        self.controller.toggle_star(item.article.id)
        await self._refresh_articles()

    async def action_toggle_starred_only(self) -> None:
        if self.controller is None:
            return
        self.controller.set_starred_only(not self.controller.state.starred_only)
        await self._refresh_articles()

    def action_focus_search(self) -> None:
        """Focus the search input."""
        self.query_one("#search", Input).focus()

    def action_focus_list(self) -> None:
        self.query_one("#articles-list", ListView).focus()
