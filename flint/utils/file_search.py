"""File name search across the well-known user directories."""

import os
import re
import logging
from typing import Dict, List, Optional

from ..core.config import LAUNCHER_CONFIG

logger = logging.getLogger("FileSearch")

# Used when ~/.config/user-dirs.dirs does not name a directory
DEFAULT_USER_DIRS = {
    "DOWNLOAD": "~/Downloads",
    "DOCUMENTS": "~/Documents",
    "DESKTOP": "~/Desktop",
    "PICTURES": "~/Pictures",
    "MUSIC": "~/Music",
    "VIDEOS": "~/Videos",
}

_USER_DIR_LINE = re.compile(r'^XDG_([A-Z]+)_DIR="?([^"]*)"?\s*$')


def read_user_dirs(config_path: Optional[str] = None) -> Dict[str, str]:
    """Parse the XDG user-dirs file into {KEY: absolute path}."""
    if config_path is None:
        config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
        config_path = os.path.join(config_home, "user-dirs.dirs")

    user_dirs = {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            for line in f:
                match = _USER_DIR_LINE.match(line.strip())
                if not match:
                    continue
                key, value = match.groups()
                value = value.replace("$HOME", os.path.expanduser("~"))
                user_dirs[key] = value
    except OSError:
        pass
    return user_dirs


def get_search_dirs() -> List[str]:
    """User directories to search, in scan order."""
    configured = read_user_dirs()
    dirs = []
    for key in LAUNCHER_CONFIG["files"]["user_dirs"]:
        path = configured.get(key) or os.path.expanduser(DEFAULT_USER_DIRS[key])
        dirs.append(path)
    return dirs


def search_files(query: str, search_dirs: Optional[List[str]] = None) -> List[str]:
    """
    Find entries whose name contains the query, ignoring case.

    Each directory contributes at most a handful of matches; the combined
    list is ordered by name length (shortest first) and truncated.

    Args:
        query: Non-empty search text
        search_dirs: Directories to scan (defaults to the user directories)

    Returns:
        Matching paths
    """
    config = LAUNCHER_CONFIG["files"]
    query_lower = query.lower()
    results = []

    for dir_path in search_dirs if search_dirs is not None else get_search_dirs():
        try:
            with os.scandir(dir_path) as entries:
                found = 0
                for entry in entries:
                    if query_lower in entry.name.lower():
                        results.append(entry.path)
                        found += 1
                        if found >= config["per_directory_limit"]:
                            break
        except OSError as e:
            logger.debug("Skipping %s: %s", dir_path, e)
            continue

    results.sort(key=lambda path: len(os.path.basename(path)))
    return results[: config["max_results"]]
