"""Value types for result rows, filter criteria and story verdicts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from config.performance_config import (
    COMBINATION_COLUMN,
    EARTHQUAKE_COLUMN,
    OUTCOME_COLUMNS,
    STATISTIC_COLUMNS,
    STORY_COLUMN,
    Direction,
    EarthquakeLevel,
    PerformanceLevel,
    get_direction_config,
    normalize_direction,
    normalize_earthquake,
    normalize_performance,
)
from utils.data_utils import parse_numeric_optional, parse_text_optional

_KNOWN_COLUMNS = frozenset(
    [EARTHQUAKE_COLUMN, COMBINATION_COLUMN, STORY_COLUMN]
    + list(OUTCOME_COLUMNS.values())
    + list(STATISTIC_COLUMNS.values())
)


@dataclass(frozen=True)
class ResultRow:
    """One analysis case for one story under one load combination."""

    story: Optional[str] = None
    earthquake: Optional[str] = None
    load_combination: Optional[str] = None
    outcomes: Mapping[str, Optional[str]] = field(default_factory=dict)  # level value -> marker
    max_x_drift: Optional[float] = None
    avg_x_drift: Optional[float] = None
    max_y_drift: Optional[float] = None
    avg_y_drift: Optional[float] = None
    max_n_n0: Optional[float] = None
    avg_n_n0: Optional[float] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ResultRow":
        """Build a row from a results-dataset record keyed by source column names."""
        outcomes = {
            level.value: parse_text_optional(record.get(column))
            for level, column in OUTCOME_COLUMNS.items()
        }
        statistics = {
            name: parse_numeric_optional(record.get(column))
            for name, column in STATISTIC_COLUMNS.items()
        }
        extra = {key: value for key, value in record.items() if key not in _KNOWN_COLUMNS}
        return cls(
            story=parse_text_optional(record.get(STORY_COLUMN)),
            earthquake=parse_text_optional(record.get(EARTHQUAKE_COLUMN)),
            load_combination=parse_text_optional(record.get(COMBINATION_COLUMN)),
            outcomes=outcomes,
            extra=extra,
            **statistics,
        )

    def outcome(self, performance) -> Optional[str]:
        level = normalize_performance(performance)
        if level is None:
            return None
        return self.outcomes.get(level.value)

    def to_record(self) -> Dict[str, Any]:
        """Return the row keyed by source column names (for tabular export)."""
        record: Dict[str, Any] = {
            EARTHQUAKE_COLUMN: self.earthquake,
            COMBINATION_COLUMN: self.load_combination,
            STORY_COLUMN: self.story,
        }
        for level, column in OUTCOME_COLUMNS.items():
            record[column] = self.outcomes.get(level.value)
        for name, column in STATISTIC_COLUMNS.items():
            record[column] = getattr(self, name)
        record.update(self.extra)
        return record


@dataclass(frozen=True)
class FilterCriteria:
    """Three independently optional selections; all None means no filtering.

    Known strings are normalized to their enum members. Unknown values are
    kept verbatim so they match nothing rather than silently widening the
    selection.
    """

    earthquake: Optional[str] = None
    performance: Optional[str] = None
    direction: Optional[str] = None

    def __post_init__(self) -> None:
        for name, normalize in (
            ("earthquake", normalize_earthquake),
            ("performance", normalize_performance),
            ("direction", normalize_direction),
        ):
            value = getattr(self, name)
            normalized = normalize(value)
            if normalized is not None:
                object.__setattr__(self, name, normalized)

    @property
    def is_empty(self) -> bool:
        return not self.earthquake and not self.performance and not self.direction


@dataclass(frozen=True)
class StoryStatistics:
    """Per-story extremal values; None means no data, not zero."""

    max_x_drift: Optional[float] = None
    avg_x_drift: Optional[float] = None
    max_y_drift: Optional[float] = None
    avg_y_drift: Optional[float] = None
    max_n_n0: Optional[float] = None
    avg_n_n0: Optional[float] = None

    def drift_for(self, direction) -> Tuple[Optional[float], Optional[float]]:
        """Return (max, avg) drift for a direction, or (None, None) when unpinned."""
        config = get_direction_config(direction)
        if config is None:
            return None, None
        return getattr(self, config.max_drift_field), getattr(self, config.avg_drift_field)


@dataclass(frozen=True)
class StoryPerformance:
    """Verdict and statistics for one story under the active criteria."""

    story: str
    passed: bool
    statistics: StoryStatistics = field(default_factory=StoryStatistics)
    direction: Optional[Direction] = None
    is_current_version: bool = False

    @property
    def failed(self) -> bool:
        return not self.passed

    @property
    def max_drift(self) -> Optional[float]:
        return self.statistics.drift_for(self.direction)[0]

    @property
    def avg_drift(self) -> Optional[float]:
        return self.statistics.drift_for(self.direction)[1]

    @property
    def max_n_n0(self) -> Optional[float]:
        return self.statistics.max_n_n0

    @property
    def avg_n_n0(self) -> Optional[float]:
        return self.statistics.avg_n_n0


@dataclass(frozen=True)
class ResultsDataset:
    """Result rows of one project version, loaded wholesale."""

    rows: Tuple[ResultRow, ...] = ()

    @classmethod
    def from_rows(cls, rows: Iterable[ResultRow]) -> "ResultsDataset":
        return cls(rows=tuple(rows))

    def __len__(self) -> int:
        return len(self.rows)


__all__ = [
    "ResultRow",
    "FilterCriteria",
    "StoryStatistics",
    "StoryPerformance",
    "ResultsDataset",
    "EarthquakeLevel",
    "PerformanceLevel",
    "Direction",
]
