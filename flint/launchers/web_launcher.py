# pyright: reportUnknownMemberType=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

from typing import List, Optional

from ..core.config import PLACEHOLDERS
from ..core.launcher_registry import PrefixLauncher
from ..core.search_models import SearchResult, WebSearchResult


class WebLauncher(PrefixLauncher):
    """'@ query' searches the web."""

    prefix = "@"
    placeholder = PLACEHOLDERS["web"]

    @property
    def name(self):
        return "web"

    def search(self, argument: str) -> Optional[List[SearchResult]]:
        return [WebSearchResult(argument)]
