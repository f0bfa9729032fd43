import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ResultType(Enum):
    """Types of search results."""

    APP = "app"
    CALCULATION = "calculation"
    COMMAND = "command"
    WEB_SEARCH = "web_search"
    URL = "url"
    FILE = "file"
    EMOJI = "emoji"
    CURRENCY = "currency"


@dataclass(frozen=True)
class AppEntry:
    """One launchable target from the application inventory."""

    name: str
    identity: str
    exec_command: str
    match_indices: Tuple[int, ...] = ()


@dataclass(frozen=True)
class SearchResult:
    """Base class for search results."""

    result_type = None

    @property
    def title(self) -> str:
        raise NotImplementedError

    @property
    def clipboard_text(self) -> Optional[str]:
        """Text copied when the result is activated, if its action is a copy."""
        return None


@dataclass(frozen=True)
class AppSearchResult(SearchResult):
    """Search result for applications."""

    app: AppEntry
    result_type = ResultType.APP

    @property
    def title(self) -> str:
        return self.app.name


@dataclass(frozen=True)
class CalculationSearchResult(SearchResult):
    """Search result for an evaluated arithmetic expression."""

    expression: str
    value: str
    result_type = ResultType.CALCULATION

    @property
    def title(self) -> str:
        return f"{self.expression} = {self.value}"

    @property
    def clipboard_text(self) -> Optional[str]:
        return self.value


@dataclass(frozen=True)
class CommandSearchResult(SearchResult):
    """Search result for shell commands.

    Placeholders carry a hint text instead of a runnable command.
    """

    command: str
    placeholder: bool = False
    result_type = ResultType.COMMAND

    @property
    def title(self) -> str:
        return self.command


@dataclass(frozen=True)
class WebSearchResult(SearchResult):
    """Search result that opens a web search for the query."""

    query: str
    result_type = ResultType.WEB_SEARCH

    @property
    def title(self) -> str:
        return f"Search DuckDuckGo: {self.query}"


@dataclass(frozen=True)
class UrlSearchResult(SearchResult):
    """Search result that opens a URL in the browser."""

    url: str
    result_type = ResultType.URL

    @property
    def title(self) -> str:
        return f"Open: {self.url}"


@dataclass(frozen=True)
class FileSearchResult(SearchResult):
    """Search result for a file in one of the user directories."""

    path: str
    result_type = ResultType.FILE

    @property
    def title(self) -> str:
        file_name = os.path.basename(self.path) or "Unknown"
        parent_dir = os.path.basename(os.path.dirname(self.path))
        return f"{file_name} ({parent_dir})"


@dataclass(frozen=True)
class EmojiSearchResult(SearchResult):
    """Search result for an emoji glyph."""

    name: str
    glyph: str
    result_type = ResultType.EMOJI

    @property
    def title(self) -> str:
        return f"{self.glyph} :{self.name}"

    @property
    def clipboard_text(self) -> Optional[str]:
        return self.glyph


@dataclass(frozen=True)
class CurrencySearchResult(SearchResult):
    """Search result for a currency conversion."""

    from_code: str
    to_code: str
    amount: float
    converted: float
    result_type = ResultType.CURRENCY

    @property
    def title(self) -> str:
        title = f"{self.amount:g} {self.from_code} = {self.converted:.2f} {self.to_code}"
        # Same-currency conversions never hit the rates service
        if self.from_code == self.to_code:
            return title
        return f"{title} (Live)"

    @property
    def clipboard_text(self) -> Optional[str]:
        return repr(self.converted)
