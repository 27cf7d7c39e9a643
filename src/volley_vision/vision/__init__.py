"""Net calibration and pixel-to-metre geometry."""

from volley_vision.vision.calibration import NetCalibrator
from volley_vision.vision.geometry import (
    derive_geometry,
    meters_above_net,
    meters_horizontal_distance,
)

__all__ = [
    "NetCalibrator",
    "derive_geometry",
    "meters_above_net",
    "meters_horizontal_distance",
]
