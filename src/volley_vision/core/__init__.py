"""Core infrastructure: config, types, exceptions, and logging."""

from volley_vision.core.config import Settings, get_settings
from volley_vision.core.exceptions import (
    CalibrationError,
    DegenerateCalibrationError,
    EventError,
    VolleyVisionError,
)
from volley_vision.core.logging import configure_logging, get_logger, setup_logging
from volley_vision.core.types import (
    CalibrationCorner,
    CalibrationState,
    Direction,
    Metrics,
    NetGeometry,
    Point,
    Rep,
    RepPoint,
    SessionMode,
    SessionReport,
    SessionSummary,
    TapeLine,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "Point",
    "CalibrationCorner",
    "CalibrationState",
    "SessionMode",
    "Direction",
    "TapeLine",
    "NetGeometry",
    "RepPoint",
    "Rep",
    "Metrics",
    "SessionSummary",
    "SessionReport",
    # Exceptions
    "VolleyVisionError",
    "CalibrationError",
    "DegenerateCalibrationError",
    "EventError",
    # Logging
    "setup_logging",
    "configure_logging",
    "get_logger",
]
