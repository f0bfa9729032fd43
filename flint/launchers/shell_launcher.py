# pyright: reportUnknownMemberType=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

from typing import List, Optional

from ..core.config import PLACEHOLDERS
from ..core.launcher_registry import PrefixLauncher
from ..core.search_models import CommandSearchResult, SearchResult


class ShellLauncher(PrefixLauncher):
    """'$ command' runs the command through the shell."""

    prefix = "$"
    placeholder = PLACEHOLDERS["shell"]

    @property
    def name(self):
        return "shell"

    def search(self, argument: str) -> Optional[List[SearchResult]]:
        return [CommandSearchResult(argument)]
