"""Query interpreters, tried in order until one produces results."""

from .file_launcher import FileLauncher
from .emoji_launcher import EmojiLauncher
from .currency_launcher import CurrencyLauncher
from .url_launcher import UrlLauncher
from .calc_launcher import CalcLauncher
from .shell_launcher import ShellLauncher
from .web_launcher import WebLauncher


def default_launchers():
    """Build the interpreters in priority order."""
    return [
        FileLauncher(),
        EmojiLauncher(),
        CurrencyLauncher(),
        UrlLauncher(),
        CalcLauncher(),
        ShellLauncher(),
        WebLauncher(),
    ]


__all__ = [
    "FileLauncher",
    "EmojiLauncher",
    "CurrencyLauncher",
    "UrlLauncher",
    "CalcLauncher",
    "ShellLauncher",
    "WebLauncher",
    "default_launchers",
]
