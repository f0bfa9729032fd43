# pyright: reportUnknownMemberType=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

from typing import List, Optional

from ..core.config import PLACEHOLDERS
from ..core.launcher_registry import PrefixLauncher
from ..core.search_models import FileSearchResult, SearchResult
from ..utils.file_search import search_files


class FileLauncher(PrefixLauncher):
    """Finds files by name in the user's well-known directories."""

    prefix = "file:"
    placeholder = PLACEHOLDERS["file"]

    def __init__(self, search_dirs: Optional[List[str]] = None):
        self.search_dirs = search_dirs

    @property
    def name(self):
        return "file"

    def search(self, argument: str) -> Optional[List[SearchResult]]:
        return [FileSearchResult(path) for path in search_files(argument, self.search_dirs)]
