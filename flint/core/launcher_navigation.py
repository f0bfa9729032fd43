import logging
import threading
from typing import Optional, Sequence, Tuple

from .search_models import SearchResult

logger = logging.getLogger("LauncherNavigation")


class ResultNavigator:
    """Tracks the current result list and which entry is selected.

    Results may be replaced from a search worker while the caller moves
    the selection, so every read and update happens under one lock.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.results: Tuple[SearchResult, ...] = ()
        self.selected: Optional[int] = None

    def set_results(self, results: Sequence[SearchResult]) -> None:
        """Replace the result list, keeping the selection when it is still valid."""
        with self._lock:
            self.results = tuple(results)
            if not self.results:
                self.selected = None
            elif self.selected is None or self.selected >= len(self.results):
                self.selected = 0

    def select_next(self) -> Optional[int]:
        """Select the next item, wrapping to the first."""
        with self._lock:
            if not self.results:
                return None
            if self.selected is None:
                self.selected = 0
            else:
                self.selected = (self.selected + 1) % len(self.results)
            return self.selected

    def select_prev(self) -> Optional[int]:
        """Select the previous item, wrapping to the last."""
        with self._lock:
            if not self.results:
                return None
            if self.selected is None:
                self.selected = len(self.results) - 1
            else:
                self.selected = (self.selected - 1) % len(self.results)
            return self.selected

    def select_by_index(self, index: int) -> bool:
        """Select a specific item. Out-of-range indices are ignored."""
        with self._lock:
            if 0 <= index < len(self.results):
                self.selected = index
                return True
            count = len(self.results)
        logger.debug("Ignoring selection of index %d (%d results)", index, count)
        return False

    def get_selected(self) -> Optional[SearchResult]:
        with self._lock:
            if self.selected is None:
                return None
            return self.results[self.selected]

    def snapshot(self) -> Tuple[Tuple[SearchResult, ...], Optional[int]]:
        """Return the result list and selection as one consistent pair."""
        with self._lock:
            return self.results, self.selected

    def __len__(self) -> int:
        with self._lock:
            return len(self.results)
