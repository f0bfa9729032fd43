import logging
import os

APPNAME = "flint"

LAUNCHER_CONFIG = {
    # Search and Filtering
    "search": {
        "max_results": 8,  # Maximum number of app results to show
        "name_match_bonus": 100,  # Added to name matches so they outrank command matches
        "debounce_delay": 80,  # milliseconds to wait before resolving a query
        "ranker_workers": None,  # None lets ThreadPoolExecutor decide
        "slow_search_ms": 50,  # Log searches slower than this
    },
    # Currency conversion
    "currency": {
        "primary_url": "https://api.exchangerate-api.com/v4/latest/{}",
        "fallback_url": "https://api.frankfurter.app/latest?from={}",
        "timeout": float(os.environ.get("FLINT_CURRENCY_TIMEOUT", "3.0")),  # seconds
    },
    # URL detection
    "url": {
        "common_tlds": [
            "com", "org", "net", "io", "co", "me", "dev", "app", "tech", "xyz",
            "us", "uk", "ca", "au", "de", "fr", "jp", "in", "br", "ru",
        ],
    },
    # Calculator detection
    "calculator": {
        "min_length": 2,
        "max_length": 50,
        "operators": "+-*/%^",
        "allowed_letters": "eEpPiI",  # Reserved for the pi and e constants
    },
    # File search
    "files": {
        "per_directory_limit": 5,
        "max_results": 8,
        # XDG user-dir keys, scanned in this order
        "user_dirs": ["DOWNLOAD", "DOCUMENTS", "DESKTOP", "PICTURES", "MUSIC", "VIDEOS"],
    },
    # Emoji search
    "emoji": {
        "alias_limit": 3,
        "catalog_limit": 2,
        "max_results": 5,
    },
    # Desktop Application Loading
    "desktop_apps": {
        "system_dirs": ["/usr/share/applications", "/usr/local/share/applications"],
        "extension": ".desktop",
    },
    # Advanced Options
    "advanced": {
        "log_level": os.environ.get("FLINT_LOG_LEVEL", "WARNING"),
    },
}

# Placeholder hints shown when a trigger prefix has no argument yet
PLACEHOLDERS = {
    "file": "Search files...",
    "emoji": "Search emojis...",
    "shell": "Enter command...",
    "web": "Search the web...",
}

# =================================
# WEB SEARCH CONFIGURATION
# =================================

# Search engine presets
SEARCH_ENGINES = {
    "gg": "https://www.google.com/search?q={}",
    "sp": "https://www.startpage.com/sp/search?query={}",
    "bs": "https://search.brave.com/search?q={}",
    "dg": "https://duckduckgo.com/?q={}",
    "bg": "https://www.bing.com/search?q={}",
    "ec": "https://www.ecosia.org/search?q={}",
}

# Default search engine (must be a key from SEARCH_ENGINES)
DEFAULT_SEARCH_ENGINE = "dg"

# Program used to open URLs and files (None = xdg-open, or open on macOS)
URL_OPENER = None

# Common currency names mapped to ISO codes. Anything else that is exactly
# three characters long is treated as a literal code.
CURRENCY_ALIASES = {
    "usd": "USD",
    "dollar": "USD",
    "dollars": "USD",
    "eur": "EUR",
    "euro": "EUR",
    "euros": "EUR",
    "gbp": "GBP",
    "pound": "GBP",
    "pounds": "GBP",
    "sterling": "GBP",
    "jpy": "JPY",
    "yen": "JPY",
    "cad": "CAD",
    "aud": "AUD",
    "chf": "CHF",
    "cny": "CNY",
    "yuan": "CNY",
    "renminbi": "CNY",
    "inr": "INR",
    "rupee": "INR",
    "rupees": "INR",
}

# Well-known utilities that are always part of the inventory
COMMON_APPS = {
    "linux": [
        ("Firefox", "firefox"),
        ("Terminal", "gnome-terminal"),
        ("Files", "nautilus"),
        ("Text Editor", "gedit"),
        ("Calculator", "gnome-calculator"),
        ("Settings", "gnome-control-center"),
    ],
    "windows": [
        ("Notepad", "notepad.exe"),
        ("Calculator", "calc.exe"),
        ("Paint", "mspaint.exe"),
        ("Command Prompt", "cmd.exe"),
        ("PowerShell", "powershell.exe"),
        ("File Explorer", "explorer.exe"),
        ("Task Manager", "taskmgr.exe"),
        ("Control Panel", "control.exe"),
        ("System Configuration", "msconfig.exe"),
        ("Registry Editor", "regedit.exe"),
        ("Windows Media Player", "wmplayer.exe"),
        ("WordPad", "write.exe"),
        ("Snipping Tool", "snippingtool.exe"),
        ("Sticky Notes", "stikynot.exe"),
    ],
}


def configure_logging(level=None):
    """Configure root logging for the launcher.

    Args:
        level: Level name or number; defaults to the configured log level
    """
    if level is None:
        level = LAUNCHER_CONFIG["advanced"]["log_level"]
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )


def set_search_engine(name: str):
    """Select the engine used for web searches.

    Args:
        name: A key from SEARCH_ENGINES (e.g. 'gg', 'dg')
    """
    global DEFAULT_SEARCH_ENGINE
    if name not in SEARCH_ENGINES:
        raise ValueError(f"Unknown search engine '{name}'")
    DEFAULT_SEARCH_ENGINE = name


def get_search_url(query: str) -> str:
    """Build the web search URL for a query using the default engine."""
    from urllib.parse import quote

    return SEARCH_ENGINES[DEFAULT_SEARCH_ENGINE].format(quote(query, safe=""))
