"""Toggle-driven filter selection that re-evaluates on every change."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional

from config.performance_config import (
    normalize_direction,
    normalize_earthquake,
    normalize_performance,
)

from .models import FilterCriteria, ResultRow
from .pipeline import PerformanceEvaluation, evaluate_performance

logger = logging.getLogger(__name__)


class FilterSelection:
    """Holds the current FilterCriteria for a set of result rows.

    Each dimension moves between unselected and one value; choosing the
    active value again clears it. Every transition re-runs the pipeline and
    stores the result in ``evaluation``.
    """

    def __init__(self, rows: Iterable[ResultRow] = (), current_version: bool = False) -> None:
        self._rows = tuple(rows)
        self.current_version = current_version
        self.criteria = FilterCriteria()
        self.evaluation: PerformanceEvaluation = evaluate_performance(self._rows, self.criteria, current_version)

    # ---- Data -----------------------------------------------------------

    @property
    def rows(self) -> tuple:
        return self._rows

    def set_rows(self, rows: Iterable[ResultRow], current_version: Optional[bool] = None) -> PerformanceEvaluation:
        """Swap in rows of another version, keeping the selection."""
        self._rows = tuple(rows)
        if current_version is not None:
            self.current_version = current_version
        return self._refresh()

    # ---- Toggles --------------------------------------------------------

    def toggle_earthquake(self, value) -> PerformanceEvaluation:
        return self._toggle("earthquake", normalize_earthquake(value))

    def toggle_performance(self, value) -> PerformanceEvaluation:
        return self._toggle("performance", normalize_performance(value))

    def toggle_direction(self, value) -> PerformanceEvaluation:
        return self._toggle("direction", normalize_direction(value))

    def reset(self) -> PerformanceEvaluation:
        self.criteria = FilterCriteria()
        return self._refresh()

    @property
    def is_complete(self) -> bool:
        return self.evaluation.complete

    # ---- Internals ------------------------------------------------------

    def _toggle(self, dimension: str, value) -> PerformanceEvaluation:
        if value is None:
            logger.debug("Ignoring unknown %s value", dimension, extra={"event": "selection.ignored"})
            return self.evaluation
        current = getattr(self.criteria, dimension)
        new_value = None if current == value else value
        self.criteria = replace(self.criteria, **{dimension: new_value})
        return self._refresh()

    def _refresh(self) -> PerformanceEvaluation:
        self.evaluation = evaluate_performance(self._rows, self.criteria, self.current_version)
        return self.evaluation
