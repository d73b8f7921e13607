"""Structural performance evaluation and filtering.

Filters per-load-combination result rows by earthquake level and direction,
reduces them to per-story statistics, decides pass/fail verdicts for a
performance level and maps verdicts to display colors.
"""

from .classifier import (
    building_passes,
    classify_story_performance,
    sort_story_performances,
    story_sort_key,
)
from .color_mapper import colorize
from .completeness import is_filter_selection_complete
from .loader import load_results_dataset
from .models import FilterCriteria, ResultRow, ResultsDataset, StoryPerformance, StoryStatistics
from .pipeline import PerformanceEvaluation, evaluate_performance
from .row_filter import filter_result_rows
from .selection import FilterSelection
from .story_aggregator import aggregate_by_story, aggregate_story_statistics, group_rows_by_story

__all__ = [
    "FilterCriteria",
    "FilterSelection",
    "PerformanceEvaluation",
    "ResultRow",
    "ResultsDataset",
    "StoryPerformance",
    "StoryStatistics",
    "aggregate_by_story",
    "aggregate_story_statistics",
    "building_passes",
    "classify_story_performance",
    "colorize",
    "evaluate_performance",
    "filter_result_rows",
    "group_rows_by_story",
    "is_filter_selection_complete",
    "load_results_dataset",
    "sort_story_performances",
    "story_sort_key",
]
