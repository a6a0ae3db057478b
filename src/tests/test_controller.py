from __future__ import annotations

import pytest

from article_tui.controller import ViewController, ViewState
from article_tui.sources.builtin import SAMPLE_ARTICLES
from article_tui.stars import StarStore
from article_tui.storage import MemoryStore

ENERGY = 2


def ids(view):
    return [a.id for a in view.articles]


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def controller(store):
    return ViewController(SAMPLE_ARTICLES, StarStore(store))


def test_initial_view(controller):
    assert controller.state == ViewState()
    assert ids(controller.view) == [1, 2, 3, 4, 5]
    assert controller.view.matcher is None
    assert controller.view.status == "5 articles found"
    assert controller.view.empty_message is None


def test_query_filters_and_highlights(controller):
    view = controller.set_query("intelligence")
    assert ids(view) == [1]
    assert view.status == '1 article found for "intelligence"'
    matched = [s.text for s in controller.highlight(SAMPLE_ARTICLES[0].title) if s.matched]
    assert matched == ["Intelligence"]


def test_ai_query_highlights_ai_in_content(controller):
    controller.set_query("AI")
    segments = controller.highlight(SAMPLE_ARTICLES[0].content)
    assert [s.text for s in segments if s.matched] == ["AI"]


def test_clearing_query_restores_everything(controller):
    controller.set_query("xyz")
    view = controller.set_query("   ")
    assert view.matcher is None
    assert ids(view) == [1, 2, 3, 4, 5]


def test_matcher_rebuilt_only_when_text_changes(controller):
    controller.set_query("solar")
    first = controller.matcher
    controller.set_query("solar")
    assert controller.matcher is first
    controller.set_query("wind")
    assert controller.matcher is not first


def test_star_then_starred_only_then_unstar(controller, store):
    controller.toggle_star(ENERGY)
    assert store.data["starredArticleIds"] == "[2]"

    assert ids(controller.set_starred_only(True)) == [ENERGY]
    assert controller.view.status == "1 article found • filtering: Starred"

    assert ids(controller.set_starred_only(False)) == [2, 1, 3, 4, 5]
    assert ids(controller.toggle_star(ENERGY)) == [1, 2, 3, 4, 5]
    assert store.data["starredArticleIds"] == "[]"


def test_no_match_query(controller):
    view = controller.set_query("xyz123")
    assert view.articles == ()
    assert view.status == '0 articles found for "xyz123"'
    assert view.empty_message == 'No articles found matching "xyz123"'


def test_starred_only_with_nothing_starred(controller):
    view = controller.set_starred_only(True)
    assert view.articles == ()
    assert view.empty_message == "No articles found in Starred"


def test_expand_is_mutually_exclusive(controller):
    controller.toggle_expand(1)
    assert controller.is_expanded(1)
    controller.toggle_expand(3)
    assert controller.state.expanded_article_id == 3
    assert not controller.is_expanded(1)
    controller.toggle_expand(3)
    assert controller.state.expanded_article_id is None


def test_star_does_not_touch_expansion(controller):
    controller.toggle_expand(4)
    controller.toggle_star(4)
    assert controller.state.expanded_article_id == 4
    assert controller.is_starred(4)
    controller.toggle_star(4)
    assert controller.state.expanded_article_id == 4


def test_unknown_id_is_ignored(controller, store):
    view = controller.toggle_star(999)
    assert 999 not in controller.starred
    assert ids(view) == [1, 2, 3, 4, 5]
    assert store.data == {}


def test_stars_survive_a_new_session(store):
    ViewController(SAMPLE_ARTICLES, StarStore(store)).toggle_star(5)
    again = ViewController(SAMPLE_ARTICLES, StarStore(store))
    assert again.starred == {5}
    assert ids(again.view) == [5, 1, 2, 3, 4]


def test_loaded_ids_not_in_collection_are_dropped():
    store = MemoryStore({"starredArticleIds": "[3, 42]"})
    controller = ViewController(SAMPLE_ARTICLES, StarStore(store))
    assert controller.starred == {3}


def test_corrupt_storage_starts_empty():
    store = MemoryStore({"starredArticleIds": "{oops"})
    controller = ViewController(SAMPLE_ARTICLES, StarStore(store))
    assert controller.starred == frozenset()
    assert ids(controller.view) == [1, 2, 3, 4, 5]


def test_query_and_stars_combine(controller):
    controller.toggle_star(5)
    view = controller.set_query("healthcare cybersecurity")
    assert ids(view) == [5, 1, 4]


def test_actions_return_the_current_view(controller):
    assert controller.set_query("solar") is controller.view
    assert controller.set_starred_only(True) is controller.view
    assert controller.toggle_expand(2) is controller.view
    assert controller.toggle_star(2) is controller.view
    assert ids(controller.view) == [ENERGY]
