"""Tabular (pandas) views of filtered rows and story verdicts for export."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from config.performance_config import (
    COMBINATION_COLUMN,
    EARTHQUAKE_COLUMN,
    OUTCOME_COLUMNS,
    STATISTIC_COLUMNS,
    STORY_COLUMN,
    FAIL_MARKER,
    PASS_MARKER,
)

from .models import ResultRow, StoryPerformance

ROW_COLUMNS = [
    EARTHQUAKE_COLUMN,
    COMBINATION_COLUMN,
    STORY_COLUMN,
    *OUTCOME_COLUMNS.values(),
    *STATISTIC_COLUMNS.values(),
]

STORY_COLUMNS = ["Story", "Status", "Max Drift", "Avg Drift", "Max N/N0", "Avg N/N0", "Current Version"]


def rows_to_frame(rows: Iterable[ResultRow]) -> pd.DataFrame:
    """Return rows as a DataFrame with source column names first."""
    records = [row.to_record() for row in rows]
    if not records:
        return pd.DataFrame(columns=ROW_COLUMNS)
    df = pd.DataFrame.from_records(records)
    extra_columns = [col for col in df.columns if col not in ROW_COLUMNS]
    return df.reindex(columns=ROW_COLUMNS + extra_columns)


def performances_to_frame(performances: Iterable[StoryPerformance]) -> pd.DataFrame:
    """Summary table with one line per story."""
    data = [
        {
            "Story": performance.story,
            "Status": PASS_MARKER if performance.passed else FAIL_MARKER,
            "Max Drift": performance.max_drift,
            "Avg Drift": performance.avg_drift,
            "Max N/N0": performance.max_n_n0,
            "Avg N/N0": performance.avg_n_n0,
            "Current Version": performance.is_current_version,
        }
        for performance in performances
    ]
    return pd.DataFrame(data, columns=STORY_COLUMNS)
