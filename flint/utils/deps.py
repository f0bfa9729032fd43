import shutil
from typing import List, Optional


def check_command_exists(command: str) -> bool:
    """Check if a command is available on the system.

    Args:
        command: The command to check (e.g., "xdg-open", "wl-copy")

    Returns:
        True if the command exists, False otherwise
    """
    return shutil.which(command) is not None


def first_available(commands: List[str]) -> Optional[str]:
    """Return the first command from the list that is installed.

    Args:
        commands: Candidate commands in order of preference

    Returns:
        The first available command, or None
    """
    for cmd in commands:
        if check_command_exists(cmd):
            return cmd
    return None
