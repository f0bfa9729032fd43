# pyright: reportUnknownMemberType=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

import logging
from typing import List, Optional

from ..core.launcher_registry import LauncherInterface
from ..core.search_models import CalculationSearchResult, SearchResult
from ..utils.calculator import evaluate_calculator, is_calculation

logger = logging.getLogger("CalcLauncher")


class CalcLauncher(LauncherInterface):
    @property
    def name(self):
        return "calculator"

    def classify(self, query: str) -> Optional[List[SearchResult]]:
        if not is_calculation(query):
            return None

        result, error = evaluate_calculator(query)
        if error:
            logger.debug("Calculator declined %r: %s", query, error)
            return None

        return [CalculationSearchResult(query.strip(), result)]
