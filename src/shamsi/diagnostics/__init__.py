"""Diagnostics package.

- round_trip, pretty_month, nowruz_table: always available, print to stdout
- drift_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["round_trip", "pretty_month", "nowruz_table", "drift_scatter"]
