"""Clipboard backend for Linux (X11/Wayland) and Windows."""

import sys
import logging
import subprocess
from enum import Enum
from typing import List, Optional

from .deps import check_command_exists
from .utils import clean_env

logger = logging.getLogger("Clipboard")


class ClipboardBackend(Enum):
    """Available clipboard backends."""

    WL_CLIPBOARD = "wl-clipboard"  # Use wl-clipboard (Wayland only)
    XCLIP = "xclip"  # Use xclip (X11 only)
    XSEL = "xsel"  # Use xsel (X11 only)
    WINDOWS = "clip"  # Use clip.exe


BACKEND_COMMANDS = {
    ClipboardBackend.WL_CLIPBOARD: ["wl-copy"],
    ClipboardBackend.XCLIP: ["xclip", "-selection", "clipboard"],
    ClipboardBackend.XSEL: ["xsel", "--input", "--clipboard"],
    ClipboardBackend.WINDOWS: ["clip"],
}


def detect_backend() -> Optional[ClipboardBackend]:
    """Pick the clipboard backend for this system."""
    if sys.platform.startswith("win"):
        return ClipboardBackend.WINDOWS
    for backend in (ClipboardBackend.WL_CLIPBOARD, ClipboardBackend.XCLIP, ClipboardBackend.XSEL):
        if check_command_exists(BACKEND_COMMANDS[backend][0]):
            return backend
    return None


class ClipboardManager:
    """Manager for clipboard copy operations."""

    def __init__(self, backend: Optional[ClipboardBackend] = None):
        """Initialize the clipboard manager.

        Args:
            backend: The clipboard backend to use, detected if omitted
        """
        self.backend = backend if backend is not None else detect_backend()

    def _command(self) -> Optional[List[str]]:
        if self.backend is None:
            return None
        return BACKEND_COMMANDS[self.backend]

    def copy(self, text: str) -> bool:
        """Copy text to clipboard.

        Args:
            text: The text to copy

        Returns:
            True if successful, False otherwise
        """
        if not text:
            return False

        command = self._command()
        if command is None:
            logger.warning("No clipboard utility found (install wl-clipboard or xclip)")
            return False

        try:
            result = subprocess.run(
                command,
                input=text,
                capture_output=True,
                text=True,
                timeout=5,
                env=clean_env(),
            )
            return result.returncode == 0
        except FileNotFoundError:
            logger.warning("%s not found", command[0])
            return False
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning(f"Error copying with {command[0]}: {e}")
            return False


# Singleton instance
_clipboard_manager: Optional[ClipboardManager] = None


def get_clipboard() -> ClipboardManager:
    """Get the singleton clipboard manager instance.

    Returns:
        The clipboard manager instance
    """
    global _clipboard_manager
    if _clipboard_manager is None:
        _clipboard_manager = ClipboardManager()
    return _clipboard_manager


def copy_to_clipboard(text: str) -> bool:
    """Copy text to clipboard.

    Args:
        text: The text to copy

    Returns:
        True if successful, False otherwise
    """
    return get_clipboard().copy(text)
