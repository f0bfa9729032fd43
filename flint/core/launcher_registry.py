# pyright: reportUnknownMemberType=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .search_models import CommandSearchResult, SearchResult

logger = logging.getLogger("LauncherRegistry")


class LauncherInterface(ABC):
    """Abstract interface that all query interpreters must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique name of this launcher."""
        pass

    @abstractmethod
    def classify(self, query: str) -> Optional[List[SearchResult]]:
        """Interpret the full query text.

        Args:
            query: The raw query as typed

        Returns:
            The final results for this query, or None/empty to let the next
            launcher try.
        """
        pass

    def claims(self, query: str) -> bool:
        """Whether the query belongs to this launcher even when it finds nothing.

        A claimed query skips the remaining launchers and goes straight to
        the app search.
        """
        return False

    def cleanup(self) -> None:
        """Clean up resources when launcher is being unregistered."""
        pass


class PrefixLauncher(LauncherInterface):
    """Launcher triggered by a fixed prefix such as 'file:' or '$'.

    An empty argument after the prefix yields a single placeholder result.
    """

    prefix = ""
    placeholder = ""

    def claims(self, query: str) -> bool:
        return query.startswith(self.prefix)

    def classify(self, query: str) -> Optional[List[SearchResult]]:
        if not query.startswith(self.prefix):
            return None
        argument = query[len(self.prefix):].strip()
        if not argument:
            return [CommandSearchResult(self.placeholder, placeholder=True)]
        return self.search(argument)

    @abstractmethod
    def search(self, argument: str) -> Optional[List[SearchResult]]:
        """Produce results for the non-empty, trimmed argument."""
        pass


class LauncherRegistry:
    """Ordered registry of query interpreters. The first one to answer wins."""

    def __init__(self):
        self._launchers: List[LauncherInterface] = []

    def register(self, launcher: LauncherInterface, position: Optional[int] = None) -> None:
        """Register a launcher, appended at the lowest priority unless a position is given."""
        if any(existing.name == launcher.name for existing in self._launchers):
            raise ValueError(f"Launcher '{launcher.name}' is already registered")

        if position is None:
            self._launchers.append(launcher)
        else:
            self._launchers.insert(position, launcher)

    def unregister(self, name: str) -> None:
        """Unregister a launcher by name."""
        for launcher in self._launchers:
            if launcher.name == name:
                launcher.cleanup()
                self._launchers.remove(launcher)
                return

    def get_launcher(self, name: str) -> Optional[LauncherInterface]:
        """Get launcher instance by name."""
        for launcher in self._launchers:
            if launcher.name == name:
                return launcher
        return None

    def classify(self, query: str) -> Tuple[Optional[str], List[SearchResult]]:
        """Run the launchers in priority order.

        Returns:
            Tuple of (launcher_name_or_none, results). The name is set with
            empty results when a launcher claimed the query but found nothing.
        """
        for launcher in self._launchers:
            try:
                results = launcher.classify(query)
                if results:
                    return launcher.name, list(results)
                if launcher.claims(query):
                    return launcher.name, []
            except Exception:
                logger.exception("Launcher '%s' failed on %r", launcher.name, query)
        return None, []

    def get_all_launchers(self) -> List[LauncherInterface]:
        """Get all registered launchers in priority order."""
        return list(self._launchers)

    def list_launchers(self) -> List[str]:
        """Get launcher names in priority order."""
        return [launcher.name for launcher in self._launchers]

    def __len__(self) -> int:
        return len(self._launchers)
