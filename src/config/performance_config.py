"""Shared enums and constants for seismic performance evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class EarthquakeLevel(str, Enum):
    DD1 = "DD-1"
    DD2 = "DD-2"
    DD3 = "DD-3"


class PerformanceLevel(str, Enum):
    """Codified damage acceptance criteria, each with its own outcome column."""

    SH = "SH"  # Sınırlı Hasar
    KH = "KH"  # Kontrollü Hasar
    GO = "GO"  # Göçmenin Önlenmesi


class Direction(str, Enum):
    X = "X"
    Y = "Y"


# Outcome markers written by the analysis export
PASS_MARKER = "Sağlıyor"
FAIL_MARKER = "Sağlamıyor"

PASS_COLOR = "#4ade80"
FAIL_COLOR = "#ef4444"


@dataclass(frozen=True)
class DirectionConfig:
    """Load combination tokens and drift fields for one horizontal axis."""

    direction: Direction
    tokens: Tuple[str, ...]
    max_drift_field: str
    avg_drift_field: str


DIRECTION_CONFIGS: Dict[Direction, DirectionConfig] = {
    Direction.X: DirectionConfig(
        direction=Direction.X,
        tokens=("Dx+", "Dx-"),
        max_drift_field="max_x_drift",
        avg_drift_field="avg_x_drift",
    ),
    Direction.Y: DirectionConfig(
        direction=Direction.Y,
        tokens=("Dy+", "Dy-"),
        max_drift_field="max_y_drift",
        avg_drift_field="avg_y_drift",
    ),
}


# Source column names in the results dataset
EARTHQUAKE_COLUMN = "Bina_analiz_deprem"
COMBINATION_COLUMN = "Bina_yuk_kombinasyon"
STORY_COLUMN = "Bina_kat"

OUTCOME_COLUMNS: Dict[PerformanceLevel, str] = {
    level: f"Bina_{level.value}" for level in PerformanceLevel
}

STATISTIC_COLUMNS: Dict[str, str] = {
    "max_x_drift": "Bina_max_x_drift",
    "avg_x_drift": "Bina_avg_x_drift",
    "max_y_drift": "Bina_max_y_drift",
    "avg_y_drift": "Bina_avg_y_drift",
    "max_n_n0": "Bina_max_n_n0",
    "avg_n_n0": "Bina_avg_n_n0",
}

STATISTIC_FIELDS: Tuple[str, ...] = tuple(STATISTIC_COLUMNS)


def _normalize(enum_cls, value):
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    for member in enum_cls:
        if member.value == cleaned:
            return member
    return None


def normalize_earthquake(value) -> Optional[EarthquakeLevel]:
    """Return the EarthquakeLevel for ``value`` or None when unselected/unknown."""
    return _normalize(EarthquakeLevel, value)


def normalize_performance(value) -> Optional[PerformanceLevel]:
    """Return the PerformanceLevel for ``value`` or None when unselected/unknown."""
    return _normalize(PerformanceLevel, value)


def normalize_direction(value) -> Optional[Direction]:
    """Return the Direction for ``value`` or None when unselected/unknown."""
    return _normalize(Direction, value)


def get_direction_config(direction) -> Optional[DirectionConfig]:
    normalized = normalize_direction(direction)
    if normalized is None:
        return None
    return DIRECTION_CONFIGS[normalized]


def outcome_column(performance) -> Optional[str]:
    """Return the outcome column for a performance level, or None if unknown."""
    level = normalize_performance(performance)
    if level is None:
        return None
    return OUTCOME_COLUMNS[level]
