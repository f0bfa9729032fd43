# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from typing_extensions import final

from .launcher_navigation import ResultNavigator
from .launcher_registry import LauncherInterface, LauncherRegistry
from .launcher_search import LauncherSearch
from .process_launcher import execute_result
from .search_models import AppEntry, SearchResult

logger = logging.getLogger("Launcher")


@final
class Launcher:
    """Query box state: the current query, its results and the selection.

    Args:
        apps: Application inventory; scanned from the system if omitted
        launchers: Interpreters in priority order; the default chain if omitted
    """

    def __init__(
        self,
        apps: Optional[Sequence[AppEntry]] = None,
        launchers: Optional[Iterable[LauncherInterface]] = None,
    ):
        if apps is None:
            from ..utils.app_inventory import build_inventory

            apps = build_inventory()

        if launchers is None:
            from ..launchers import default_launchers

            launchers = default_launchers()

        self.launcher_registry = LauncherRegistry()
        for launcher in launchers:
            self.launcher_registry.register(launcher)

        self.search = LauncherSearch(self.launcher_registry, apps)
        self.navigation = ResultNavigator()
        self.query = ""

    @property
    def apps(self):
        return self.search.apps

    @property
    def results(self):
        return self.navigation.results

    @property
    def selected(self):
        return self.navigation.selected

    def set_query(self, text: str) -> List[SearchResult]:
        """Resolve the query now and show its results."""
        # Any background query still running is now stale
        self.search.cancel()
        self.query = text
        results = self.search.resolve(text)
        self.navigation.set_results(results)
        return results

    def submit_query(
        self, text: str, callback: Optional[Callable[[List[SearchResult]], None]] = None
    ) -> int:
        """Resolve the query in the background; only the latest query is shown.

        Returns:
            The generation number of this query
        """
        self.query = text

        def on_results(query: str, results: List[SearchResult]) -> None:
            self.navigation.set_results(results)
            if callback is not None:
                callback(results)

        return self.search.submit(text, on_results)

    def select_next(self):
        return self.navigation.select_next()

    def select_prev(self):
        return self.navigation.select_prev()

    def select_by_index(self, index: int) -> bool:
        return self.navigation.select_by_index(index)

    def get_selected(self) -> Optional[SearchResult]:
        return self.navigation.get_selected()

    def activate_selected(self) -> bool:
        """Run the action of the selected result."""
        result = self.navigation.get_selected()
        if result is None:
            return False
        logger.info("Activating %s: %s", result.result_type.value, result.title)
        return execute_result(result)

    def close(self) -> None:
        """Stop background work and release interpreter resources."""
        self.search.shutdown()
        for launcher in self.launcher_registry.get_all_launchers():
            self.launcher_registry.unregister(launcher.name)
