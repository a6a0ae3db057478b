from __future__ import annotations

import json
import logging
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Configuration ---
CONFIG_DIR = os.path.expanduser("~/.config/articles")
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.json")
STORAGE_PATH = os.path.join(CONFIG_DIR, "storage.json")
DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.json"

STARRED_KEY = "starredArticleIds"
DEFAULT_THEME = "textual-dark"
DEFAULT_SOURCE = "builtin"

HTTP_TIMEOUT = 15
RETRY_ATTEMPTS = 4
REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:115.0) "
        "Gecko/20100101 Firefox/115.0"
    )
}

# Default UI settings
UI_DEFAULTS = {
    "highlight_style": "bold black on yellow",
    "statusbar_keybindings": (
        "[b {color}]/[/] search  [b {color}]s[/] star  "
        "[b {color}]f[/] starred only  [b {color}]enter[/] expand"
    ),
}

# --- Logging ---
logger = logging.getLogger("articles")


def setup_logging(debug: bool = False) -> Optional[str]:
    """Configure logging.

    Without ``debug`` everything is discarded so nothing writes over the TUI.
    """
    if not debug:
        logging.basicConfig(level=logging.CRITICAL, handlers=[logging.NullHandler()])
        return None

    ts = datetime.now().strftime("%Y%m%dT%H%M%S")
    pid = os.getpid()
    debug_path = f"/tmp/articles_debug_{ts}_{pid}.log"

    logging.basicConfig(
        level=logging.DEBUG,
        filename=debug_path,
        filemode="a",
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    logger.debug("Debug logging enabled to %s", debug_path)
    return debug_path


def ensure_config_file_exists() -> None:
    """Copy the default config file if the user's config file is not found."""
    if not os.path.exists(CONFIG_PATH):
        logger.info("Config file not found at %s, creating default.", CONFIG_PATH)
        try:
            os.makedirs(os.path.dirname(CONFIG_PATH), exist_ok=True)
            shutil.copy(DEFAULT_CONFIG_PATH, CONFIG_PATH)
        except OSError as e:
            logger.error("Failed to create default config file: %s", e)


def load_config() -> Dict[str, Any]:
    """Load the main configuration file."""
    ensure_config_file_exists()
    try:
        with open(CONFIG_PATH, "r", encoding="utf-8") as f:
            config = json.load(f)
            logger.info("Loaded config from %s", CONFIG_PATH)
    except (OSError, ValueError) as e:
        logger.error("Failed to load config from %s: %s", CONFIG_PATH, e)
        return {}
    if not isinstance(config, dict):
        logger.error("Ignoring config at %s: top level is not an object", CONFIG_PATH)
        return {}
    return config


def ui_setting(config: Dict[str, Any], name: str) -> str:
    """Return a ``ui`` setting from config, falling back to UI_DEFAULTS."""
    return config.get("ui", {}).get(name, UI_DEFAULTS[name])
