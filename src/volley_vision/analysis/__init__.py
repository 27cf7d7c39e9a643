"""Pure analysis logic: rep recording, per-rep metrics and session stats.

This module contains NO I/O operations.
"""

from volley_vision.analysis.metrics import (
    aggregate_stats,
    build_report,
    compute_all_metrics,
    compute_metrics,
)
from volley_vision.analysis.recorder import TrailRecorder

__all__ = [
    "TrailRecorder",
    "compute_metrics",
    "compute_all_metrics",
    "aggregate_stats",
    "build_report",
]
