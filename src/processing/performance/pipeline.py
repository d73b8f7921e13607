"""Filter, classify and colorize result rows in one synchronous pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from utils.error_handling import timed

from .classifier import building_passes, classify_story_performance, sort_story_performances
from .color_mapper import colorize
from .completeness import is_filter_selection_complete
from .models import FilterCriteria, ResultRow, StoryPerformance
from .row_filter import filter_result_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PerformanceEvaluation:
    """Everything the results view needs for one filter state."""

    criteria: FilterCriteria
    filtered_rows: List[ResultRow] = field(default_factory=list)
    complete: bool = False
    stories: List[StoryPerformance] = field(default_factory=list)
    colors: Dict[str, str] = field(default_factory=dict)
    building_passed: Optional[bool] = None

    @property
    def failing_stories(self) -> List[str]:
        return [performance.story for performance in self.stories if performance.failed]


@timed
def evaluate_performance(
    rows: Iterable[ResultRow],
    criteria: FilterCriteria,
    current_version: bool = False,
) -> PerformanceEvaluation:
    """Run the filter and, when the selection is complete, the verdict stages.

    ``current_version`` is copied onto every StoryPerformance; whether the
    rows belong to the current version is the caller's knowledge.
    """
    criteria = criteria or FilterCriteria()
    filtered = filter_result_rows(rows, criteria)
    complete = is_filter_selection_complete(criteria)

    if not complete:
        return PerformanceEvaluation(criteria=criteria, filtered_rows=filtered, complete=False)

    stories = [
        StoryPerformance(
            story=performance.story,
            passed=performance.passed,
            statistics=performance.statistics,
            direction=performance.direction,
            is_current_version=current_version,
        )
        for performance in classify_story_performance(filtered, criteria.performance, criteria.direction)
    ]
    stories = sort_story_performances(stories)
    passed = building_passes(stories) if stories else None

    logger.debug(
        "Evaluated %d stories from %d rows",
        len(stories),
        len(filtered),
        extra={
            "event": "performance.evaluated",
            "earthquake": criteria.earthquake,
            "performance": criteria.performance,
            "direction": criteria.direction,
            "building_passed": passed,
        },
    )

    return PerformanceEvaluation(
        criteria=criteria,
        filtered_rows=filtered,
        complete=True,
        stories=stories,
        colors=colorize(stories),
        building_passed=passed,
    )
