"""Tests for performance models and results loading."""

import logging

import pytest

from config.performance_config import Direction, EarthquakeLevel, PerformanceLevel
from processing.performance import FilterCriteria, ResultRow, ResultsDataset, StoryStatistics, load_results_dataset


class TestResultRowFromRecord:
    def test_reads_source_columns(self):
        row = ResultRow.from_record(
            {
                "Bina_analiz_deprem": "DD-1",
                "Bina_yuk_kombinasyon": "G+Q+Dy+",
                "Bina_kat": "Kat 3",
                "Bina_SH": "Sağlıyor",
                "Bina_KH": "Sağlamıyor",
                "Bina_max_x_drift": 0.002,
                "Bina_avg_y_drift": "0.0015",
                "Bina_max_n_n0": True,
                "Bina_eleman": "C12",
            }
        )
        assert row.earthquake == "DD-1"
        assert row.load_combination == "G+Q+Dy+"
        assert row.story == "Kat 3"
        assert row.outcome("SH") == "Sağlıyor"
        assert row.outcome(PerformanceLevel.KH) == "Sağlamıyor"
        assert row.outcome("GO") is None
        assert row.max_x_drift == pytest.approx(0.002)
        assert row.avg_y_drift == pytest.approx(0.0015)
        assert row.max_n_n0 is None
        assert row.extra == {"Bina_eleman": "C12"}

    def test_missing_columns_become_none(self):
        row = ResultRow.from_record({})
        assert row.story is None
        assert row.load_combination is None
        assert row.max_y_drift is None

    def test_to_record_round_trips_source_names(self):
        record = {"Bina_kat": "Zemin", "Bina_SH": "Sağlıyor", "Bina_max_x_drift": 0.001, "Note": "x"}
        exported = ResultRow.from_record(record).to_record()
        assert exported["Bina_kat"] == "Zemin"
        assert exported["Bina_SH"] == "Sağlıyor"
        assert exported["Bina_max_x_drift"] == pytest.approx(0.001)
        assert exported["Note"] == "x"

    def test_outcome_for_unknown_level(self):
        assert ResultRow.from_record({"Bina_SH": "Sağlıyor"}).outcome("XX") is None


class TestFilterCriteria:
    def test_known_strings_become_enums(self):
        criteria = FilterCriteria(earthquake="DD-3", performance="GO", direction="X")
        assert criteria.earthquake is EarthquakeLevel.DD3
        assert criteria.performance is PerformanceLevel.GO
        assert criteria.direction is Direction.X

    def test_unknown_strings_are_kept(self):
        criteria = FilterCriteria(earthquake="DD-7")
        assert criteria.earthquake == "DD-7"
        assert criteria.is_empty is False

    def test_is_empty(self):
        assert FilterCriteria().is_empty is True
        assert FilterCriteria(performance="SH").is_empty is False


def test_statistics_drift_for_direction():
    stats = StoryStatistics(max_x_drift=0.1, avg_x_drift=0.05, max_y_drift=0.2, avg_y_drift=0.15)
    assert stats.drift_for("X") == (0.1, 0.05)
    assert stats.drift_for(Direction.Y) == (0.2, 0.15)
    assert stats.drift_for(None) == (None, None)


class TestLoadResultsDataset:
    def test_loads_rows_from_mapping(self):
        dataset = load_results_dataset({"rows": [{"Bina_kat": "Kat 1"}, {"Bina_kat": "Kat 2"}]})
        assert isinstance(dataset, ResultsDataset)
        assert [row.story for row in dataset.rows] == ["Kat 1", "Kat 2"]

    def test_loads_rows_from_list(self):
        assert len(load_results_dataset([{"Bina_kat": "Kat 1"}])) == 1

    @pytest.mark.parametrize("payload", [None, {}, {"rows": None}, {"rows": "oops"}, 42])
    def test_payload_without_rows_gives_empty_dataset(self, payload):
        assert len(load_results_dataset(payload)) == 0

    def test_skips_records_that_are_not_mappings(self, caplog):
        caplog.set_level(logging.WARNING)
        dataset = load_results_dataset({"rows": [{"Bina_kat": "Kat 1"}, "junk", None]})
        assert [row.story for row in dataset.rows] == ["Kat 1"]
        assert "2 error(s)" in caplog.text
