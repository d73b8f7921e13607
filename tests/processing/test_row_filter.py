"""Tests for processing.performance.row_filter."""

import pytest

from processing.performance import FilterCriteria, ResultRow, filter_result_rows
from processing.performance.row_filter import matches_direction, matches_earthquake


def test_empty_criteria_returns_all_rows_in_order(mixed_rows):
    result = filter_result_rows(mixed_rows, FilterCriteria())
    assert result == mixed_rows
    assert result is not mixed_rows


def test_performance_only_criteria_does_not_drop_rows(mixed_rows):
    result = filter_result_rows(mixed_rows, FilterCriteria(performance="SH"))
    assert result == mixed_rows


def test_earthquake_filter_is_exact(mixed_rows):
    result = filter_result_rows(mixed_rows, FilterCriteria(earthquake="DD-2"))
    assert [row.earthquake for row in result] == ["DD-2", "DD-2", "DD-2"]


def test_earthquake_filter_is_case_sensitive(row_factory):
    rows = [row_factory(earthquake="dd-2"), row_factory(earthquake="DD-2 "), row_factory(earthquake="DD-2")]
    result = filter_result_rows(rows, FilterCriteria(earthquake="DD-2"))
    assert result == [rows[2]]


def test_unknown_earthquake_value_matches_nothing(mixed_rows):
    assert filter_result_rows(mixed_rows, FilterCriteria(earthquake="DD-9")) == []


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("X", ["G+Q+0.3Dx+", "G+Q+Dx-", "G+Q+Dx+"]),
        ("Y", ["G+Q+Dy-", "G+Q+Dy+"]),
    ],
)
def test_direction_filter_uses_combination_tokens(mixed_rows, direction, expected):
    result = filter_result_rows(mixed_rows, FilterCriteria(direction=direction))
    assert [row.load_combination for row in result] == expected


def test_earthquake_and_direction_are_combined(mixed_rows):
    result = filter_result_rows(mixed_rows, FilterCriteria(earthquake="DD-2", direction="Y"))
    assert [(row.story, row.load_combination) for row in result] == [
        ("Zemin", "G+Q+Dy-"),
        ("Kat 1", "G+Q+Dy+"),
    ]


def test_missing_combination_never_matches_active_direction():
    rows = [ResultRow(story="Kat 1", earthquake="DD-1"), ResultRow(story="Kat 2", load_combination="Dx+")]
    assert filter_result_rows(rows, FilterCriteria(direction="X")) == [rows[1]]
    assert filter_result_rows(rows, FilterCriteria(direction="Y")) == []


def test_combination_without_sign_does_not_match(row_factory):
    rows = [row_factory(combination="G+Q+Dx"), row_factory(combination="G+Q+Ex+")]
    assert filter_result_rows(rows, FilterCriteria(direction="X")) == []


def test_filter_is_subsequence_of_unfiltered(mixed_rows):
    everything = filter_result_rows(mixed_rows, FilterCriteria())
    for criteria in (
        FilterCriteria(earthquake="DD-1"),
        FilterCriteria(direction="X"),
        FilterCriteria(earthquake="DD-2", performance="KH", direction="Y"),
    ):
        result = filter_result_rows(mixed_rows, criteria)
        positions = [everything.index(row) for row in result]
        assert positions == sorted(positions)


def test_empty_input_returns_empty_list():
    assert filter_result_rows([], FilterCriteria(earthquake="DD-1")) == []
    assert filter_result_rows(None, FilterCriteria()) == []


def test_matches_helpers_treat_unselected_as_wildcard(row_factory):
    row = row_factory(earthquake="DD-3", combination="Dy+")
    assert matches_earthquake(row, None)
    assert matches_direction(row, None)
    assert matches_direction(row, "Z")
