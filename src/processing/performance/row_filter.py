"""Row filtering by earthquake level and load direction."""

from __future__ import annotations

from typing import Iterable, List, Optional

from config.performance_config import get_direction_config

from .models import FilterCriteria, ResultRow


def matches_earthquake(row: ResultRow, earthquake: Optional[str]) -> bool:
    """Exact, case-sensitive comparison; an unselected level matches every row."""
    if not earthquake:
        return True
    return row.earthquake == earthquake


def matches_direction(row: ResultRow, direction: Optional[str]) -> bool:
    """True when the load combination label carries one of the direction tokens.

    An unselected or unrecognised direction matches every row. A row without
    a label never matches an active direction.
    """
    if not direction:
        return True
    config = get_direction_config(direction)
    if config is None:
        return True
    label = row.load_combination
    if not label:
        return False
    return any(token in label for token in config.tokens)


def filter_result_rows(rows: Iterable[ResultRow], criteria: FilterCriteria) -> List[ResultRow]:
    """Return rows matching the earthquake and direction criteria, in input order.

    The performance level does not take part here; it only chooses which
    outcome column the classifier reads.
    """
    if rows is None:
        return []
    if criteria is None or criteria.is_empty:
        return list(rows)

    return [
        row
        for row in rows
        if matches_earthquake(row, criteria.earthquake)
        and matches_direction(row, criteria.direction)
    ]
