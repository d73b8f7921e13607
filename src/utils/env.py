"""Environment switches for the TPS client and its scripts."""

import os
from functools import lru_cache


@lru_cache
def is_dev_mode() -> bool:
    """True when TPS_ENV (or, failing that, TPS_DEV_MODE) names a dev value."""
    value = os.environ.get("TPS_ENV") or os.environ.get("TPS_DEV_MODE")
    if not value:
        return False
    return value.strip().lower() in {"dev", "development", "1", "true", "yes"}


__all__ = ["is_dev_mode"]
