"""Story color tokens for the 3D model view."""

from __future__ import annotations

from typing import Dict, Iterable

from config.performance_config import FAIL_COLOR, PASS_COLOR

from .models import StoryPerformance


def verdict_color(passed: bool) -> str:
    return PASS_COLOR if passed else FAIL_COLOR


def colorize(performances: Iterable[StoryPerformance]) -> Dict[str, str]:
    """Map each story to the pass or fail color of its verdict."""
    return {performance.story: verdict_color(performance.passed) for performance in performances}
