"""
Subsequence fuzzy matching and app ranking using RapidFuzz.

The query must appear in order inside the target. RapidFuzz's LCSseq gives
both the subsequence test (similarity equals the query length) and the
alignment, from which the matched character positions are read back.
Scores reward word starts and contiguous runs, and penalise gaps.
"""

import time
import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from rapidfuzz.distance import LCSseq

from ..core.config import LAUNCHER_CONFIG
from ..core.search_models import AppEntry

logger = logging.getLogger("FuzzySearch")

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1
BONUS_BOUNDARY = 8
BONUS_CAMEL = 7
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

# Apps scored per task on the ranking pool
CHUNK_SIZE = 64


def _fold(text: str, ignore_case: bool) -> str:
    """Lower-case without changing the length, so indices stay valid."""
    if not ignore_case:
        return text
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def _char_bonus(text: str, idx: int) -> int:
    if idx == 0:
        return BONUS_BOUNDARY
    prev, cur = text[idx - 1], text[idx]
    if not prev.isalnum():
        return BONUS_BOUNDARY if cur.isalnum() else 0
    if prev.islower() and cur.isupper():
        return BONUS_CAMEL
    if not prev.isdigit() and cur.isdigit():
        return BONUS_CAMEL
    return 0


def score_indices(text: str, indices: Sequence[int]) -> int:
    """Score an in-order match of characters at the given positions."""
    score = 0
    prev = None
    for n, idx in enumerate(indices):
        bonus = _char_bonus(text, idx)
        if n == 0:
            bonus *= BONUS_FIRST_CHAR_MULTIPLIER
        score += SCORE_MATCH + bonus
        if prev is not None:
            gap = idx - prev - 1
            if gap == 0:
                score += BONUS_CONSECUTIVE
            else:
                score += SCORE_GAP_START + SCORE_GAP_EXTENSION * (gap - 1)
        prev = idx
    return score


def fuzzy_indices(text: str, pattern: str) -> Optional[Tuple[int, List[int]]]:
    """
    Match pattern as a subsequence of text.

    Smart case: the match is case-insensitive unless the pattern contains
    an upper-case character.

    Args:
        text: The string searched in (app name or command)
        pattern: The query

    Returns:
        (score, matched character indices into text), or None if the pattern
        is not a subsequence of the text
    """
    if not pattern or len(pattern) > len(text):
        return None

    ignore_case = not any(c.isupper() for c in pattern)
    target = _fold(text, ignore_case)
    needle = _fold(pattern, ignore_case)

    if LCSseq.similarity(needle, target) < len(needle):
        return None

    indices: List[int] = []
    for opcode in LCSseq.opcodes(needle, target):
        if opcode.tag == "equal":
            indices.extend(range(opcode.dest_start, opcode.dest_end))

    if len(indices) != len(needle):
        return None
    return score_indices(text, indices), indices


def _score_app(query: str, app: AppEntry, name_bonus: int) -> Optional[Tuple[int, AppEntry]]:
    match = fuzzy_indices(app.name, query)
    if match is not None:
        score, indices = match
        return score + name_bonus, replace(app, match_indices=tuple(indices))

    match = fuzzy_indices(app.exec_command, query)
    if match is not None:
        return match[0], replace(app, match_indices=())

    return None


def _score_chunk(query: str, apps: Sequence[AppEntry], name_bonus: int) -> List[Tuple[int, AppEntry]]:
    scored = []
    for app in apps:
        result = _score_app(query, app, name_bonus)
        if result is not None:
            scored.append(result)
    return scored


def rank_apps(
    query: str,
    apps: Sequence[AppEntry],
    max_results: Optional[int] = None,
    executor: Optional[Executor] = None,
) -> List[AppEntry]:
    """
    Rank inventory entries against the query.

    Name matches get a fixed bonus so they always outrank matches found only
    in the command. Chunks are scored in parallel; results come back in
    inventory order, so equal scores keep that order after the stable sort.

    Args:
        query: Search query
        apps: The immutable inventory
        max_results: Maximum number of results (defaults to the configured 8)
        executor: Pool to score on; a temporary one is used if omitted

    Returns:
        Copies of the matching entries, best first, with match_indices set for
        name matches
    """
    start_time = time.time()
    config = LAUNCHER_CONFIG["search"]
    if max_results is None:
        max_results = config["max_results"]
    name_bonus = config["name_match_bonus"]

    if not query or not apps:
        return []

    chunks = [apps[i:i + CHUNK_SIZE] for i in range(0, len(apps), CHUNK_SIZE)]

    def run(pool: Executor) -> List[Tuple[int, AppEntry]]:
        scored = []
        for chunk_result in pool.map(lambda chunk: _score_chunk(query, chunk, name_bonus), chunks):
            scored.extend(chunk_result)
        return scored

    if executor is None:
        with ThreadPoolExecutor(max_workers=config["ranker_workers"]) as pool:
            scored = run(pool)
    else:
        scored = run(executor)

    scored.sort(key=lambda item: item[0], reverse=True)
    results = [app for _, app in scored[:max_results]]

    duration_ms = (time.time() - start_time) * 1000
    if duration_ms > config["slow_search_ms"]:
        logger.warning(
            f"Slow search '{query}': {duration_ms:.2f}ms ({len(results)} results from {len(apps)} apps)"
        )
    else:
        logger.debug(f"Search '{query}': {duration_ms:.2f}ms ({len(results)} results)")

    return results
