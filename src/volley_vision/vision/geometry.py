"""Net geometry: pixel-to-metre scale and the net tape reference line.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from volley_vision.core.exceptions import CalibrationError, DegenerateCalibrationError
from volley_vision.core.logging import get_logger
from volley_vision.core.types import (
    CalibrationCorner,
    NetGeometry,
    Point,
    RepPoint,
    TapeLine,
)

logger = get_logger(__name__)

DEFAULT_NET_HEIGHT_M = 2.43


def derive_geometry(
    corners: Mapping[CalibrationCorner, Point],
    net_height_m: float = DEFAULT_NET_HEIGHT_M,
) -> NetGeometry:
    """Build the px/m scale and the tape line from the four net corners.

    The scale averages the pixel net height at both antennas to soften
    perspective error. The tape line runs through the two top corners.

    Args:
        corners: All four calibration corners
        net_height_m: Real-world net height in metres

    Returns:
        Derived NetGeometry

    Raises:
        CalibrationError: If a corner is missing or the net height is not a
            positive finite number
        DegenerateCalibrationError: If the top corners share an x coordinate
            or the net has zero pixel height
    """
    if not math.isfinite(net_height_m) or net_height_m <= 0:
        raise CalibrationError(f"Net height must be a positive number of metres, got {net_height_m}")

    missing = [c.name for c in CalibrationCorner if c not in corners]
    if missing:
        raise CalibrationError(f"Missing calibration corners: {', '.join(missing)}")

    lb = corners[CalibrationCorner.LEFT_BOTTOM]
    lt = corners[CalibrationCorner.LEFT_TOP]
    rb = corners[CalibrationCorner.RIGHT_BOTTOM]
    rt = corners[CalibrationCorner.RIGHT_TOP]

    h_left = abs(lt.y - lb.y)
    h_right = abs(rt.y - rb.y)
    h_avg = (h_left + h_right) / 2

    if h_avg == 0:
        raise DegenerateCalibrationError("Net has zero pixel height; click bottom and top apart")

    pixels_per_meter = h_avg / net_height_m

    dx = rt.x - lt.x
    if dx == 0:
        raise DegenerateCalibrationError(
            "Top corners share the same x coordinate; the tape line is vertical"
        )

    slope = (rt.y - lt.y) / dx
    intercept = lt.y - slope * lt.x

    if not all(math.isfinite(v) for v in (pixels_per_meter, slope, intercept)):
        raise DegenerateCalibrationError("Calibration produced a non-finite scale or tape line")

    geometry = NetGeometry(
        pixels_per_meter=pixels_per_meter,
        top_line=TapeLine(slope=slope, intercept=intercept),
        net_height_m=net_height_m,
    )

    logger.info(
        "Calibration complete: h_left=%.1f px, h_right=%.1f px, h_avg=%.1f px, "
        "%.2f px/m, tape y = %.4f*x + %.2f",
        h_left,
        h_right,
        h_avg,
        pixels_per_meter,
        slope,
        intercept,
    )

    return geometry


def meters_above_net(geometry: NetGeometry | None, point: Point | RepPoint) -> float | None:
    """Metres ``point`` sits above (+) or below (-) the net tape.

    Pixel y grows downward, so a point with a smaller y than the tape at the
    same x is above the net.

    Args:
        geometry: Derived geometry, or None before calibration completes
        point: Pixel point

    Returns:
        Signed offset in metres, or None without geometry
    """
    if geometry is None:
        return None
    return geometry.meters_above_net(point.x, point.y)


def meters_horizontal_distance(
    geometry: NetGeometry | None,
    p1: Point | RepPoint,
    p2: Point | RepPoint,
) -> float | None:
    """Horizontal screen distance between two points in metres.

    Only the x displacement of the two endpoints counts; perspective and
    depth are ignored.
    """
    if geometry is None:
        return None
    return geometry.meters_horizontal_distance(p1, p2)
