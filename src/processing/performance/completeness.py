"""Gate deciding whether a filter selection is complete enough to show verdicts."""

from __future__ import annotations

from .models import FilterCriteria


def is_filter_selection_complete(criteria: FilterCriteria) -> bool:
    """True iff earthquake, performance and direction are all selected."""
    if criteria is None:
        return False
    return (
        criteria.earthquake is not None
        and criteria.performance is not None
        and criteria.direction is not None
    )
