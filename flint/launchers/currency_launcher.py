# pyright: reportUnknownMemberType=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

import logging
from typing import List, Optional

from ..core.launcher_registry import LauncherInterface
from ..core.search_models import CurrencySearchResult, SearchResult
from ..utils.currency import convert_currency, parse_currency_query

logger = logging.getLogger("CurrencyLauncher")


class CurrencyLauncher(LauncherInterface):
    """Converts amounts between currencies, e.g. '10 usd to eur'.

    The rate lookup blocks for at most the configured timeout.
    """

    def __init__(self, session=None):
        # requests.Session (or anything with a compatible get()); None uses requests directly
        self.session = session

    @property
    def name(self):
        return "currency"

    def classify(self, query: str) -> Optional[List[SearchResult]]:
        # Cheap grammar check first so ordinary queries never hit the network
        if parse_currency_query(query) is None:
            return None

        conversion = convert_currency(query, session=self.session)
        if conversion is None:
            logger.debug("No conversion available for %r", query)
            return None

        return [
            CurrencySearchResult(
                conversion.from_code,
                conversion.to_code,
                conversion.amount,
                conversion.converted,
            )
        ]

    def cleanup(self) -> None:
        if self.session is not None and hasattr(self.session, "close"):
            self.session.close()
