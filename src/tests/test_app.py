from __future__ import annotations

import asyncio

from textual.widgets import Input, ListView

from article_tui.app import ArticleApp
from article_tui.errors import SourceError
from article_tui.screens import ErrorScreen
from article_tui.sources.base import ArticleSource
from article_tui.sources.builtin import BuiltinSource
from article_tui.stars import StarStore
from article_tui.storage import MemoryStore
from article_tui.widgets import ArticleItem, EmptyState


class FailingSource(ArticleSource):
    name = "failing"

    def get_articles(self):
        raise SourceError("feed is down")


async def wait_for_articles(app, pilot):
    await app.workers.wait_for_complete()
    await pilot.pause(0.1)
    await pilot.pause()


def test_app_search_star_and_expand():
    store = MemoryStore()

    async def scenario():
        app = ArticleApp(BuiltinSource({}), StarStore(store))
        async with app.run_test() as pilot:
            await wait_for_articles(app, pilot)
            assert app.controller is not None
            assert [item.article.id for item in app.query(ArticleItem)] == [1, 2, 3, 4, 5]

            app.query_one("#articles-list", ListView).focus()
            await pilot.press("down")
            await pilot.press("s")
            await pilot.pause()
            assert store.data["starredArticleIds"] == "[2]"
            assert [item.article.id for item in app.query(ArticleItem)][0] == 2

            await pilot.press("enter")
            await pilot.pause()
            assert app.controller.state.expanded_article_id == 2
            assert app.controller.starred == {2}

            await pilot.press("f")
            await pilot.pause()
            assert [item.article.id for item in app.query(ArticleItem)] == [2]

            await pilot.press("f")
            await pilot.pause()
            app.query_one("#search", Input).value = "xyz123"
            await pilot.pause()
            assert app.controller.view.articles == ()
            assert len(app.query(ArticleItem)) == 0
            assert app.query_one("#empty-state", EmptyState).display

    asyncio.run(scenario())


def test_app_shows_error_screen_when_source_fails():
    async def scenario():
        app = ArticleApp(FailingSource({}), StarStore(MemoryStore()))
        async with app.run_test() as pilot:
            await wait_for_articles(app, pilot)
            assert isinstance(app.screen, ErrorScreen)
            assert app.controller is None

    asyncio.run(scenario())


def test_app_falls_back_from_unknown_theme():
    async def scenario():
        app = ArticleApp(
            BuiltinSource({}), StarStore(MemoryStore()), theme="no-such-theme"
        )
        async with app.run_test() as pilot:
            await wait_for_articles(app, pilot)
            assert app.theme == "textual-dark"

    asyncio.run(scenario())
