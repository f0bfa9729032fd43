# pyright: reportUnknownMemberType=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

from typing import List, Optional

from ..core.launcher_registry import LauncherInterface
from ..core.search_models import SearchResult, UrlSearchResult
from ..utils.utils import looks_like_url, normalize_url


class UrlLauncher(LauncherInterface):
    """Offers to open queries that look like web addresses."""

    @property
    def name(self):
        return "url"

    def classify(self, query: str) -> Optional[List[SearchResult]]:
        if not looks_like_url(query):
            return None
        return [UrlSearchResult(normalize_url(query.strip()))]
