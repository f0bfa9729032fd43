"""
Application inventory: the launchable entries the fuzzy ranker searches.

Built once per process from a fixed table of common utilities plus a scan of
the platform's application directories. Scanning never raises; anything
unreadable is skipped.
"""

import os
import sys
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ..core.config import COMMON_APPS, LAUNCHER_CONFIG
from ..core.search_models import AppEntry

logger = logging.getLogger("AppInventory")


def _common_apps(platform: str) -> List[AppEntry]:
    return [
        AppEntry(name=name, identity=name, exec_command=exec_cmd)
        for name, exec_cmd in COMMON_APPS[platform]
    ]


def get_desktop_dirs() -> List[Path]:
    """Directories holding .desktop files, user directory first."""
    xdg_data_home = os.environ.get("XDG_DATA_HOME") or "~/.local/share"
    dirs = [Path(xdg_data_home).expanduser() / "applications"]
    dirs.extend(Path(d) for d in LAUNCHER_CONFIG["desktop_apps"]["system_dirs"])
    return dirs


def get_program_dirs() -> List[Path]:
    """Windows program-install directories."""
    return [
        Path(os.environ.get("PROGRAMFILES", "C:\\Program Files")),
        Path(os.environ.get("PROGRAMFILES(X86)", "C:\\Program Files (x86)")),
        Path(os.environ.get("LOCALAPPDATA", "C:\\Users\\Default\\AppData\\Local")),
    ]


def scan_linux_apps(desktop_dirs: Optional[Iterable[Path]] = None) -> List[AppEntry]:
    """Collect one entry per .desktop file.

    The file stem is both name and identity; the full path is the command,
    resolved again by the launcher when the entry is activated.
    """
    extension = LAUNCHER_CONFIG["desktop_apps"]["extension"]
    apps = []

    for dir_path in desktop_dirs if desktop_dirs is not None else get_desktop_dirs():
        try:
            entries = list(dir_path.iterdir())
        except OSError as e:
            logger.debug("Skipping %s: %s", dir_path, e)
            continue

        for path in entries:
            if path.suffix != extension or not path.stem:
                continue
            apps.append(AppEntry(name=path.stem, identity=path.stem, exec_command=str(path)))

    return apps


def scan_windows_apps(program_dirs: Optional[Iterable[Path]] = None) -> List[AppEntry]:
    """Collect executables one level below each program directory.

    Every subfolder contributes "<folder> - <exe>" entries for the
    executables directly inside it, plus an entry opening the folder itself.
    """
    apps = []

    for program_path in program_dirs if program_dirs is not None else get_program_dirs():
        try:
            folders = [p for p in program_path.iterdir() if p.is_dir()]
        except OSError as e:
            logger.debug("Skipping %s: %s", program_path, e)
            continue

        for folder in folders:
            folder_name = folder.name
            try:
                sub_entries = list(folder.iterdir())
            except OSError as e:
                logger.debug("Skipping %s: %s", folder, e)
                sub_entries = []

            for sub_path in sub_entries:
                if sub_path.suffix.lower() != ".exe" or not sub_path.stem:
                    continue
                apps.append(
                    AppEntry(
                        name=f"{folder_name} - {sub_path.stem}",
                        identity=folder_name,
                        exec_command=str(sub_path),
                    )
                )

            apps.append(
                AppEntry(
                    name=folder_name,
                    identity=folder_name,
                    exec_command=f'explorer "{folder}"',
                )
            )

    return apps


def dedup_adjacent(apps: List[AppEntry]) -> List[AppEntry]:
    """Drop entries whose name equals the one right before them."""
    unique_apps: List[AppEntry] = []
    for app in apps:
        if unique_apps and unique_apps[-1].name == app.name:
            continue
        unique_apps.append(app)
    return unique_apps


def build_inventory(platform: Optional[str] = None) -> List[AppEntry]:
    """
    Build the application inventory for this platform.

    Args:
        platform: 'linux' or 'windows'; detected from sys.platform if omitted

    Returns:
        Entries sorted by name with adjacent duplicates removed
    """
    if platform is None:
        platform = "windows" if sys.platform.startswith("win") else "linux"

    apps = _common_apps(platform)
    try:
        if platform == "windows":
            apps.extend(scan_windows_apps())
        else:
            apps.extend(scan_linux_apps())
    except Exception:
        logger.exception("Application scan failed, using built-in entries only")

    apps.sort(key=lambda app: app.name)
    apps = dedup_adjacent(apps)

    logger.info("Loaded %d apps", len(apps))
    return apps
