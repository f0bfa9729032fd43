"""Core launcher components."""

from .config import LAUNCHER_CONFIG, SEARCH_ENGINES, configure_logging
from .search_models import (
    ResultType,
    AppEntry,
    SearchResult,
    AppSearchResult,
    CalculationSearchResult,
    CommandSearchResult,
    WebSearchResult,
    UrlSearchResult,
    FileSearchResult,
    EmojiSearchResult,
    CurrencySearchResult,
)
from .launcher_registry import LauncherInterface, PrefixLauncher, LauncherRegistry

__all__ = [
    "LAUNCHER_CONFIG",
    "SEARCH_ENGINES",
    "configure_logging",
    "ResultType",
    "AppEntry",
    "SearchResult",
    "AppSearchResult",
    "CalculationSearchResult",
    "CommandSearchResult",
    "WebSearchResult",
    "UrlSearchResult",
    "FileSearchResult",
    "EmojiSearchResult",
    "CurrencySearchResult",
    "LauncherInterface",
    "PrefixLauncher",
    "LauncherRegistry",
]
