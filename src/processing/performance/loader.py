"""Build ResultsDataset objects from raw results payloads."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from utils.error_handling import ErrorCollector

from .models import ResultRow, ResultsDataset

logger = logging.getLogger(__name__)


def load_results_dataset(payload: Any) -> ResultsDataset:
    """Return the rows held by a results payload.

    Accepts ``{"rows": [...]}`` or a bare list of records. Records that are
    not mappings are skipped and reported in the log; anything else that
    carries no rows yields an empty dataset.
    """
    if isinstance(payload, Mapping):
        records = payload.get("rows")
    else:
        records = payload

    if not isinstance(records, (list, tuple)):
        if payload is not None:
            logger.warning(
                "Results payload has no row list",
                extra={"event": "results.no_rows", "payload_type": type(payload).__name__},
            )
        return ResultsDataset()

    collector = ErrorCollector("results load")
    rows = []
    for index, record in enumerate(records):
        with collector.catch(f"row {index}"):
            if not isinstance(record, Mapping):
                raise TypeError(f"expected a mapping, got {type(record).__name__}")
            rows.append(ResultRow.from_record(record))

    if collector.has_errors:
        logger.warning(collector.get_summary(), extra={"event": "results.skipped_rows", "skipped": len(collector.errors)})

    logger.debug("Loaded %d result rows", len(rows), extra={"event": "results.loaded"})
    return ResultsDataset.from_rows(rows)
