# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from .config import LAUNCHER_CONFIG
from .launcher_registry import LauncherRegistry
from .search_models import AppEntry, AppSearchResult, SearchResult, WebSearchResult
from ..utils.fuzzy_search import rank_apps

logger = logging.getLogger("LauncherSearch")

ResultCallback = Callable[[str, List[SearchResult]], None]


class LauncherSearch:
    """Turns query text into results.

    The registry's interpreters get the first chance; otherwise the app
    inventory is fuzzy-ranked, and a web search is offered when nothing
    matches at all.
    """

    def __init__(self, registry: LauncherRegistry, apps: Sequence[AppEntry]):
        self.registry = registry
        self.apps = tuple(apps)

        search_config = LAUNCHER_CONFIG["search"]
        self._ranker_pool = ThreadPoolExecutor(
            max_workers=search_config["ranker_workers"], thread_name_prefix="flint-rank"
        )
        self._resolver_pool = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="flint-resolve"
        )

        # Reentrant so a result callback may submit or cancel
        self._lock = threading.RLock()
        self._generation = 0
        self._timer: Optional[threading.Timer] = None
        self._closed = False

    def get_filtered_apps(self, filter_text: str) -> List[AppEntry]:
        """Get fuzzy-ranked apps for the query."""
        max_results = LAUNCHER_CONFIG["search"]["max_results"]
        return rank_apps(filter_text, self.apps, max_results, executor=self._ranker_pool)

    def resolve(self, query: str) -> List[SearchResult]:
        """Resolve a query to its result list. Never raises."""
        if not query.strip():
            return []

        launcher_name, results = self.registry.classify(query)
        if results:
            logger.debug("Query %r handled by %s", query, launcher_name)
            return results
        if launcher_name is not None:
            logger.debug("Query %r claimed by %s without results", query, launcher_name)

        try:
            apps = self.get_filtered_apps(query)
        except Exception:
            logger.exception("App ranking failed for %r", query)
            apps = []
        if apps:
            return [AppSearchResult(app) for app in apps]

        return [WebSearchResult(query)]

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def submit(self, query: str, callback: ResultCallback) -> int:
        """
        Resolve a query in the background after the debounce delay.

        The callback receives (query, results) only if no newer query was
        submitted (and cancel() was not called) in the meantime.

        Returns:
            The generation number assigned to this query
        """
        delay = LAUNCHER_CONFIG["search"]["debounce_delay"] / 1000.0

        with self._lock:
            if self._closed:
                raise RuntimeError("LauncherSearch is shut down")
            self._generation += 1
            generation = self._generation
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(
                delay, self._dispatch, args=(generation, query, callback)
            )
            timer.daemon = True
            self._timer = timer

        timer.start()
        return generation

    def cancel(self) -> None:
        """Supersede any pending or running query."""
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation and not self._closed

    def _dispatch(self, generation: int, query: str, callback: ResultCallback) -> None:
        if not self._is_current(generation):
            logger.debug("Dropping superseded query %r (generation %d)", query, generation)
            return
        try:
            self._resolver_pool.submit(self._run, generation, query, callback)
        except RuntimeError:
            # Pool already shut down
            logger.debug("Search pool closed, dropping query %r", query)

    def _run(self, generation: int, query: str, callback: ResultCallback) -> None:
        if not self._is_current(generation):
            logger.debug("Dropping superseded query %r (generation %d)", query, generation)
            return

        results = self.resolve(query)

        # Held across the check and the publish so cancel() cannot slip in between
        with self._lock:
            if generation != self._generation or self._closed:
                logger.debug("Discarding stale results for %r (generation %d)", query, generation)
                return
            try:
                callback(query, results)
            except Exception:
                logger.exception("Result callback failed for %r", query)

    def shutdown(self) -> None:
        """Cancel pending work and stop the worker pools."""
        with self._lock:
            self._closed = True
        self.cancel()
        self._resolver_pool.shutdown(wait=False)
        self._ranker_pool.shutdown(wait=False)
