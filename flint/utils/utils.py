import os
from typing import Dict

from ..core.config import LAUNCHER_CONFIG


def looks_like_url(text: str) -> bool:
    """Check whether the text is something the browser should open directly."""
    text = text.strip()

    if "://" in text:
        return text.startswith("http://") or text.startswith("https://")

    if "." in text and not any(c.isspace() for c in text):
        domain_part = text.split("/", 1)[0]
        parts = domain_part.split(".")
        if len(parts) >= 2:
            last_part = parts[-1]
            return (
                last_part in LAUNCHER_CONFIG["url"]["common_tlds"]
                or len(last_part) == 2
            )

    return False


def normalize_url(text: str) -> str:
    """Prefix https:// when the text carries no scheme."""
    if "://" in text:
        return text
    return f"https://{text}"


def clean_env() -> Dict[str, str]:
    """Environment for child processes."""
    env = dict(os.environ.items())
    env.pop("LD_PRELOAD", None)  # Remove LD_PRELOAD for child processes
    return env
