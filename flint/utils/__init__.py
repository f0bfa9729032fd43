"""Utility modules for flint functionality."""

from .calculator import is_calculation, sanitize_expr, evaluate_calculator
from .utils import looks_like_url, normalize_url, clean_env
from .deps import check_command_exists, first_available
from .currency import parse_currency_query, convert_currency
from .fuzzy_search import fuzzy_indices, rank_apps
from .app_inventory import build_inventory
from .file_search import search_files
from .emoji_search import search_emojis
from .clipboard import copy_to_clipboard

__all__ = [
    "is_calculation",
    "sanitize_expr",
    "evaluate_calculator",
    "looks_like_url",
    "normalize_url",
    "clean_env",
    "check_command_exists",
    "first_available",
    "parse_currency_query",
    "convert_currency",
    "fuzzy_indices",
    "rank_apps",
    "build_inventory",
    "search_files",
    "search_emojis",
    "copy_to_clipboard",
]
