import os
import logging
from functools import lru_cache
from typing import List, Tuple

from ..core.config import LAUNCHER_CONFIG

logger = logging.getLogger("EmojiSearch")

EMOJI_FILE = os.path.join(os.path.dirname(__file__), "emojis.txt")

# Short names people actually type, checked before the full catalog
COMMON_ALIASES = [
    ("smile", "😊"), ("happy", "😊"), ("laugh", "😂"), ("heart", "❤️"), ("love", "❤️"),
    ("kiss", "😘"), ("cool", "😎"), ("thinking", "🤔"), ("thumbsup", "👍"), ("like", "👍"),
    ("ok", "👌"), ("clap", "👏"), ("pray", "🙏"), ("wave", "👋"), ("muscle", "💪"),
    ("eyes", "👀"), ("cat", "🐱"), ("dog", "🐶"), ("car", "🚗"), ("plane", "✈️"),
    ("rocket", "🚀"), ("computer", "💻"), ("phone", "📱"), ("camera", "📷"), ("music", "🎵"),
    ("game", "🎮"), ("food", "🍕"), ("coffee", "☕"), ("beer", "🍺"), ("fire", "🔥"),
    ("star", "⭐"), ("money", "💰"), ("clock", "⏰"), ("email", "📧"), ("book", "📖"),
]


@lru_cache(maxsize=1)
def load_emoji_catalog(path: str = EMOJI_FILE) -> Tuple[Tuple[str, str], ...]:
    """Load (name, glyph) pairs from the catalog file.

    Each line holds a glyph, whitespace, then the emoji's name.
    """
    catalog = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                parts = line.strip().split(None, 1)
                if len(parts) != 2:
                    continue
                glyph, name = parts
                catalog.append((name, glyph))
    except OSError as e:
        logger.warning(f"Error loading emoji data: {e}")
    return tuple(catalog)


def search_emojis(query: str) -> List[Tuple[str, str]]:
    """
    Search emojis by alias and by catalog name.

    Args:
        query: Non-empty search text

    Returns:
        List of (name, glyph) tuples, aliases first
    """
    config = LAUNCHER_CONFIG["emoji"]
    query_lower = query.lower()

    results = [
        (alias, glyph) for alias, glyph in COMMON_ALIASES if query_lower in alias
    ][: config["alias_limit"]]

    catalog_results = [
        (name, glyph)
        for name, glyph in load_emoji_catalog()
        if query_lower in name.lower()
    ][: config["catalog_limit"]]

    for name, glyph in catalog_results:
        if not any(existing == glyph for _, existing in results):
            results.append((name, glyph))

    return results[: config["max_results"]]
