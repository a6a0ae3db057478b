#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
import sys

from .app import ArticleApp
from .config import STORAGE_PATH, load_config, setup_logging
from .errors import SourceError
from .sources.manager import SOURCES, get_source
from .stars import StarStore
from .storage import JsonFileStore

logger = logging.getLogger("articles")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Article browser TUI")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--theme", type=str, help="Set theme for this run")
    parser.add_argument(
        "--source", choices=sorted(SOURCES), help="Where to load articles from"
    )
    parser.add_argument("--articles", metavar="PATH", help="JSON file of articles")
    parser.add_argument("--feed", metavar="URL", help="RSS or Atom feed URL")
    return parser


def apply_overrides(config: dict, args: argparse.Namespace) -> dict:
    """Fold command line options into the loaded config."""
    sources = config.setdefault("sources", {})
    if args.articles:
        sources.setdefault("json", {})["path"] = args.articles
        config["source"] = "json"
    if args.feed:
        sources.setdefault("rss", {})["url"] = args.feed
        config["source"] = "rss"
    if args.source:
        config["source"] = args.source
    if args.theme:
        config["theme"] = args.theme
    return config


# --- Entrypoint ---
def main() -> None:
    args = build_parser().parse_args()

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    config = apply_overrides(load_config(), args)
    try:
        source = get_source(config)
    except SourceError as e:
        print(f"Invalid source configuration: {e}", file=sys.stderr)
        sys.exit(2)

    star_store = StarStore(JsonFileStore(STORAGE_PATH))
    logger.info("Using source: %s", source.name)

    try:
        app = ArticleApp(
            source=source, star_store=star_store, theme=config.get("theme"), config=config
        )
        app.run()
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        print(f"Application crashed: {e}", file=sys.stderr)


if __name__ == "__main__":
    main()
