"""Processing module for result evaluation.

Key components:
- performance: filtering, per-story aggregation, pass/fail verdicts and
  color mapping for seismic performance results
"""
