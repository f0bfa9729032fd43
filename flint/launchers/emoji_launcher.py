# pyright: reportUnknownMemberType=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

from typing import List, Optional

from ..core.config import PLACEHOLDERS
from ..core.launcher_registry import PrefixLauncher
from ..core.search_models import EmojiSearchResult, SearchResult
from ..utils.emoji_search import search_emojis


class EmojiLauncher(PrefixLauncher):
    prefix = "e:"
    placeholder = PLACEHOLDERS["emoji"]

    @property
    def name(self):
        return "emoji"

    def search(self, argument: str) -> Optional[List[SearchResult]]:
        return [EmojiSearchResult(name, glyph) for name, glyph in search_emojis(argument)]
