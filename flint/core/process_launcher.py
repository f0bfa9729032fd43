# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

import os
import re
import sys
import shlex
import logging
import subprocess
import configparser
from typing import List, Optional, Tuple

from .config import URL_OPENER, get_search_url
from .search_models import ResultType, SearchResult
from ..utils.clipboard import copy_to_clipboard
from ..utils.deps import first_available
from ..utils.utils import clean_env

logger = logging.getLogger("ProcessLauncher")

IS_WINDOWS = sys.platform.startswith("win")


def launch_detached(cmd: List[str], working_dir: Optional[str] = None) -> bool:
    """
    Spawns the process detached from the launcher.
    """
    kwargs = {}
    if IS_WINDOWS:
        kwargs["creationflags"] = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(
            subprocess, "CREATE_NEW_PROCESS_GROUP", 0
        )
    else:
        # New session so the child survives the launcher closing
        kwargs["start_new_session"] = True

    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            cwd=working_dir or None,
            env=clean_env(),
            **kwargs,
        )
        logger.info("Process spawned: %s", " ".join(cmd))
        return True
    except (OSError, ValueError) as e:
        logger.exception('Could not launch "%s": %s', cmd, e)
        return False


def read_desktop_exec(desktop_file_path: str) -> Optional[Tuple[List[str], Optional[str]]]:
    """
    Parse the Exec line of a .desktop file.

    Returns:
        (argv, working_dir) or None if the file has no usable Exec entry
    """
    config = configparser.ConfigParser(interpolation=None)
    try:
        config.read(desktop_file_path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError) as e:
        logger.warning("Could not load desktop file %s: %s", desktop_file_path, e)
        return None

    if not config.has_section("Desktop Entry"):
        return None
    entry = config["Desktop Entry"]

    app_exec = entry.get("Exec")
    if not app_exec:
        logger.warning("Desktop file has no executable: %s", desktop_file_path)
        return None

    app_exec = re.sub(r"\%[uUfFdDnNickvm]", "", app_exec).strip()
    try:
        cmd = shlex.split(app_exec)
    except ValueError as e:
        logger.warning("Malformed Exec in %s: %s", desktop_file_path, e)
        return None
    if not cmd:
        return None
    return cmd, entry.get("Path")


def launch_app(exec_command: str) -> bool:
    """Launch an inventory entry.

    Desktop-file paths are resolved to their Exec line; anything else is
    handed to the shell.
    """
    if IS_WINDOWS:
        return launch_detached(["cmd", "/C", "start", "", exec_command])

    if exec_command.endswith(".desktop") and os.path.isfile(exec_command):
        parsed = read_desktop_exec(exec_command)
        if parsed is not None:
            cmd, working_dir = parsed
            return launch_detached(cmd, working_dir)

    return launch_detached(["sh", "-c", exec_command])


def run_shell(command: str) -> bool:
    """Run a shell command line."""
    if IS_WINDOWS:
        return launch_detached(["cmd", "/C", "start", "cmd", "/C", command])
    return launch_detached(["sh", "-c", command])


def open_url(url: str) -> bool:
    """Open a URL (or a path) with the desktop's default handler."""
    if IS_WINDOWS:
        return launch_detached(["cmd", "/C", "start", "", url])

    opener = URL_OPENER or first_available(["xdg-open", "open"])
    if opener is None:
        logger.error("No URL opener found (install xdg-utils)")
        return False
    return launch_detached([opener, url])


def open_path(path: str) -> bool:
    """Open a file with its default application."""
    return open_url(path)


def open_web_search(query: str) -> bool:
    """Search the web for the query with the default search engine."""
    return open_url(get_search_url(query))


def execute_result(result: SearchResult) -> bool:
    """
    Perform the action behind a result.

    Returns:
        True if an action was started, False otherwise
    """
    result_type = result.result_type

    if result_type == ResultType.APP:
        return launch_app(result.app.exec_command)
    if result_type == ResultType.COMMAND:
        if result.placeholder:
            return False
        return run_shell(result.command)
    if result_type == ResultType.WEB_SEARCH:
        return open_web_search(result.query)
    if result_type == ResultType.URL:
        return open_url(result.url)
    if result_type == ResultType.FILE:
        return open_path(result.path)
    if result.clipboard_text is not None:
        return copy_to_clipboard(result.clipboard_text)

    logger.warning("No action for result type %s", result_type)
    return False
