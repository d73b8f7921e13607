"""Group filtered result rows by story and reduce them to extremal statistics."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Sequence

import pandas as pd

from config.performance_config import STATISTIC_FIELDS
from utils.data_utils import parse_numeric_optional

from .models import ResultRow, StoryStatistics

STORY_KEY = "story"


def group_rows_by_story(rows: Iterable[ResultRow]) -> Dict[str, List[ResultRow]]:
    """Group rows by story label, keeping the first-seen order of stories.

    Rows without a story label are left out of every group.
    """
    groups: Dict[str, List[ResultRow]] = {}
    for row in rows:
        story = row.story
        if not story or not isinstance(story, str):
            continue
        groups.setdefault(story, []).append(row)
    return groups


def _statistics_frame(rows: Sequence[ResultRow]) -> pd.DataFrame:
    data = {STORY_KEY: [row.story for row in rows]}
    for name in STATISTIC_FIELDS:
        data[name] = [parse_numeric_optional(getattr(row, name)) for row in rows]
    frame = pd.DataFrame(data, columns=[STORY_KEY, *STATISTIC_FIELDS])
    # Missing values become NaN and drop out of max()
    frame[list(STATISTIC_FIELDS)] = frame[list(STATISTIC_FIELDS)].apply(pd.to_numeric, errors="coerce")
    return frame


def _optional(value) -> float | None:
    if value is None:
        return None
    number = float(value)
    if math.isnan(number):
        return None
    return number


def _from_series(series: pd.Series) -> StoryStatistics:
    return StoryStatistics(**{name: _optional(series.get(name)) for name in STATISTIC_FIELDS})


def aggregate_story_statistics(rows: Sequence[ResultRow]) -> StoryStatistics:
    """Reduce one story group to the maximum of each per-row statistic.

    The ``avg_*`` fields are already averaged per row; the group value is the
    largest of those averages. Missing values are skipped, and a statistic
    with no values at all is None.
    """
    if not rows:
        return StoryStatistics()
    frame = _statistics_frame(rows)
    return _from_series(frame[list(STATISTIC_FIELDS)].max(axis=0, skipna=True))


def aggregate_by_story(rows: Iterable[ResultRow]) -> Dict[str, StoryStatistics]:
    """Return statistics for every story in ``rows``, in first-seen order."""
    groups = group_rows_by_story(rows)
    if not groups:
        return {}

    grouped_rows = [row for group in groups.values() for row in group]
    frame = _statistics_frame(grouped_rows)
    maxima = frame.groupby(STORY_KEY, sort=False)[list(STATISTIC_FIELDS)].max()

    return {story: _from_series(maxima.loc[story]) for story in groups}
