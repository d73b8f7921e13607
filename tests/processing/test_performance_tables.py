"""Tests for processing.performance.tables."""

import pandas as pd
import pytest

from processing.performance import FilterCriteria, evaluate_performance
from processing.performance.tables import ROW_COLUMNS, STORY_COLUMNS, performances_to_frame, rows_to_frame


def test_rows_to_frame_uses_source_columns(example_rows):
    df = rows_to_frame(example_rows)
    assert list(df.columns[: len(ROW_COLUMNS)]) == ROW_COLUMNS
    assert df["Bina_kat"].tolist() == ["Kat 1", "Kat 1", "Bodrum"]
    assert df["Bina_max_x_drift"].tolist() == pytest.approx([0.003, 0.006, 0.001])


def test_rows_to_frame_empty():
    df = rows_to_frame([])
    assert df.empty
    assert list(df.columns) == ROW_COLUMNS


def test_performances_to_frame(example_rows):
    evaluation = evaluate_performance(
        example_rows, FilterCriteria(earthquake="DD-2", performance="SH", direction="X")
    )
    df = performances_to_frame(evaluation.stories)
    assert list(df.columns) == STORY_COLUMNS
    assert df["Story"].tolist() == ["Bodrum", "Kat 1"]
    assert df["Status"].tolist() == ["Sağlıyor", "Sağlamıyor"]
    assert df.loc[1, "Max Drift"] == pytest.approx(0.006)
    assert pd.isna(df.loc[0, "Max N/N0"])
