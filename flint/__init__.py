__version__ = "0.1.0"
__description__ = "Keyboard-driven query launcher core: apps, calculator, currency, URLs, files and emoji"

from .core.launcher import Launcher
from .core.launcher_search import LauncherSearch
from .core.search_models import ResultType, SearchResult

__all__ = [
    "Launcher",
    "LauncherSearch",
    "ResultType",
    "SearchResult",
]
