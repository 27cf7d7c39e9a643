"""Per-rep measurements and cross-rep statistics.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from volley_vision.core.types import (
    Direction,
    Metrics,
    NetGeometry,
    Rep,
    RepRow,
    SessionReport,
    SessionSummary,
)
from volley_vision.vision.geometry import (
    DEFAULT_NET_HEIGHT_M,
    meters_above_net,
    meters_horizontal_distance,
)

MIN_POINTS_FOR_METRICS = 2


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards +inf."""
    return math.floor(value + 0.5)


def travel_direction(start_x: float, end_x: float) -> Direction:
    """Direction of travel from ``start_x`` to ``end_x``."""
    if end_x > start_x:
        return Direction.RIGHT
    if end_x < start_x:
        return Direction.LEFT
    return Direction.NONE


def compute_metrics(
    rep: Rep,
    geometry: NetGeometry | None,
    net_height_m: float | None = None,
) -> Metrics:
    """Compute peak height, above-net offset, width and direction for a rep.

    Width and direction use only the first and last clicked points, which
    approximates how far the set travelled rather than its path length.

    Args:
        rep: Rep with its clicked points
        geometry: Calibration geometry, or None if calibration is incomplete
        net_height_m: Net height added to the peak offset; defaults to the
            height the geometry was derived against

    Returns:
        Metrics; every field is None when the rep has fewer than two points
    """
    if len(rep.points) < MIN_POINTS_FOR_METRICS:
        return Metrics()

    if net_height_m is None:
        net_height_m = geometry.net_height_m if geometry is not None else DEFAULT_NET_HEIGHT_M

    offsets = [
        offset
        for offset in (meters_above_net(geometry, p) for p in rep.points)
        if offset is not None
    ]

    peak_height_m: float | None = None
    above_net_cm: int | None = None
    if offsets:
        peak_above_m = max(offsets)
        peak_height_m = net_height_m + peak_above_m
        above_net_cm = round_half_up(peak_above_m * 100)

    start, end = rep.points[0], rep.points[-1]

    return Metrics(
        peak_height_m=peak_height_m,
        above_net_cm=above_net_cm,
        width_m=meters_horizontal_distance(geometry, start, end),
        direction=travel_direction(start.x, end.x),
    )


def compute_all_metrics(reps: Sequence[Rep], geometry: NetGeometry | None) -> list[Metrics]:
    """Compute metrics for every rep and store them on the reps.

    Args:
        reps: Reps in recording order
        geometry: Calibration geometry

    Returns:
        Metrics in the same order as ``reps``
    """
    results = []
    for rep in reps:
        rep.metrics = compute_metrics(rep, geometry)
        results.append(rep.metrics)
    return results


def aggregate_stats(metrics: Sequence[Metrics]) -> SessionSummary:
    """Summarize a list of rep metrics.

    Reps without a value are left out of the matching average instead of
    counting as zero. The best rep is the first one holding the highest peak.

    Args:
        metrics: Per-rep metrics in rep order

    Returns:
        SessionSummary
    """
    best_index: int | None = None
    best_peak: float | None = None
    for i, m in enumerate(metrics):
        if m.peak_height_m is None:
            continue
        if best_peak is None or m.peak_height_m > best_peak:
            best_peak = m.peak_height_m
            best_index = i

    peaks = [m.peak_height_m for m in metrics if m.peak_height_m is not None]
    widths = [m.width_m for m in metrics if m.width_m is not None]

    return SessionSummary(
        rep_count=len(metrics),
        measured_rep_count=len(peaks),
        best_rep_index=best_index,
        best_peak_m=best_peak,
        average_peak_m=float(np.mean(peaks)) if peaks else None,
        average_width_m=float(np.mean(widths)) if widths else None,
    )


def build_report(reps: Sequence[Rep], geometry: NetGeometry | None) -> SessionReport:
    """Compute metrics for all reps and assemble the end-of-session report.

    Args:
        reps: Completed reps in recording order
        geometry: Calibration geometry

    Returns:
        SessionReport with one row per rep and the summary
    """
    metrics = compute_all_metrics(reps, geometry)
    rows = [
        RepRow(rep_number=i + 1, color=rep.color, metrics=m)
        for i, (rep, m) in enumerate(zip(reps, metrics))
    ]
    net_height_m = geometry.net_height_m if geometry is not None else DEFAULT_NET_HEIGHT_M

    return SessionReport(
        net_height_m=net_height_m,
        rows=rows,
        summary=aggregate_stats(metrics),
    )
