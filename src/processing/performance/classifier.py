"""Per-story and building pass/fail verdicts for a performance level."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple

from config.performance_config import FAIL_MARKER, normalize_direction, normalize_performance

from .models import ResultRow, StoryPerformance
from .story_aggregator import aggregate_by_story, group_rows_by_story

logger = logging.getLogger(__name__)


def story_fails(rows: Iterable[ResultRow], performance) -> bool:
    """A story fails when any of its rows carries the failing marker."""
    return any(row.outcome(performance) == FAIL_MARKER for row in rows)


def classify_story_performance(
    filtered_rows: Iterable[ResultRow],
    performance,
    direction=None,
) -> List[StoryPerformance]:
    """Return one StoryPerformance per story in ``filtered_rows``.

    Empty when the performance level is unselected or unknown, or when there
    are no rows. ``direction`` only decides which drift pair the results
    expose; every statistic is computed regardless.
    """
    filtered_rows = list(filtered_rows or ())
    if not filtered_rows or not performance:
        return []

    level = normalize_performance(performance)
    if level is None:
        logger.warning(
            "Unknown performance level %r; no outcome column to read",
            performance,
            extra={"event": "classify.unknown_level"},
        )
        return []

    groups = group_rows_by_story(filtered_rows)
    statistics = aggregate_by_story(filtered_rows)
    pinned_direction = normalize_direction(direction)

    return [
        StoryPerformance(
            story=story,
            passed=not story_fails(rows, level),
            statistics=statistics[story],
            direction=pinned_direction,
        )
        for story, rows in groups.items()
    ]


def building_passes(performances: Iterable[StoryPerformance]) -> bool:
    """The building fails as soon as one story fails."""
    return all(performance.passed for performance in performances)


_BASEMENT_PATTERN = re.compile(r"^(?:bodrum|basement)(?:\s*kat)?\s*(\d+)?$|^b(\d+)$", re.IGNORECASE)
_GROUND_PATTERN = re.compile(r"^(?:zemin(?:\s*kat)?|ground(?:\s*floor)?|gf)$", re.IGNORECASE)
_FLOOR_PATTERNS = (
    re.compile(r"^(?:kat|level|floor|story|storey)\s*(\d+)$", re.IGNORECASE),
    re.compile(r"^(\d+)\s*\.?\s*kat$", re.IGNORECASE),
    re.compile(r"^(\d+)$"),
)


def story_sort_key(label: Optional[str]) -> Tuple[int, float, str]:
    """Sort key placing basements first, then ground, then floors by number.

    Deeper basements ("Bodrum 2") come before shallower ones. Labels that do
    not look like a story fall back to lexicographic order after the rest.
    """
    text = (label or "").strip() if isinstance(label, str) else ""

    basement = _BASEMENT_PATTERN.match(text)
    if basement:
        depth = basement.group(1) or basement.group(2)
        return (0, -int(depth) if depth else -1, text)

    if _GROUND_PATTERN.match(text):
        return (1, 0, text)

    for pattern in _FLOOR_PATTERNS:
        floor = pattern.match(text)
        if floor:
            return (2, int(floor.group(1)), text)

    return (3, 0, text)


def sort_story_performances(performances: Iterable[StoryPerformance]) -> List[StoryPerformance]:
    """Return performances in display order (see ``story_sort_key``)."""
    return sorted(performances, key=lambda performance: story_sort_key(performance.story))
