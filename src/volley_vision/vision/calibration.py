"""Four-click net calibration for pixel-to-metre conversion."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from volley_vision.core.config import NetSettings
from volley_vision.core.exceptions import DegenerateCalibrationError
from volley_vision.core.logging import get_logger
from volley_vision.core.types import (
    CalibrationCorner,
    CalibrationState,
    NetGeometry,
    Point,
)
from volley_vision.vision.geometry import derive_geometry

logger = get_logger(__name__)

PROMPTS = {
    CalibrationState.AWAITING_LEFT_BOTTOM: "click the BOTTOM of the net at the LEFT antenna",
    CalibrationState.AWAITING_LEFT_TOP: "click the TOP of the net at the LEFT antenna",
    CalibrationState.AWAITING_RIGHT_BOTTOM: "click the BOTTOM of the net at the RIGHT antenna",
    CalibrationState.AWAITING_RIGHT_TOP: "click the TOP of the net at the RIGHT antenna",
}


class NetCalibrator:
    """State machine collecting the four net corners.

    Transitions:
        AWAITING_LEFT_BOTTOM → AWAITING_LEFT_TOP → AWAITING_RIGHT_BOTTOM
        → AWAITING_RIGHT_TOP → COMPLETE

    Each accepted click fills the corner for the current state. Entering
    COMPLETE derives the NetGeometry once; further clicks are ignored until
    ``reset()``.
    """

    def __init__(self, settings: NetSettings | None = None) -> None:
        """Initialize calibrator with settings.

        Args:
            settings: Net settings (uses defaults if None)
        """
        self.settings = settings or NetSettings()
        self._state = CalibrationState.AWAITING_LEFT_BOTTOM
        self._corners: dict[CalibrationCorner, Point] = {}
        self._geometry: NetGeometry | None = None

    @property
    def state(self) -> CalibrationState:
        """Current calibration state."""
        return self._state

    @property
    def step(self) -> int:
        """Number of corners recorded so far (0..4)."""
        return self._state.value

    @property
    def is_complete(self) -> bool:
        """Check if all four corners are in and geometry is derived."""
        return self._state is CalibrationState.COMPLETE

    @property
    def geometry(self) -> NetGeometry | None:
        """Derived geometry, or None before completion."""
        return self._geometry

    @property
    def corners(self) -> Mapping[CalibrationCorner, Point]:
        """Read-only view of the corners recorded so far."""
        return MappingProxyType(self._corners)

    @property
    def prompt(self) -> str | None:
        """Instruction for the next click, or None once complete."""
        if self.is_complete:
            return None
        return f"Calibration {self.step + 1}/4: {PROMPTS[self._state]}"

    def submit_point(self, x: float, y: float) -> NetGeometry | None:
        """Record a calibration click.

        Args:
            x: Pixel x coordinate
            y: Pixel y coordinate

        Returns:
            The derived geometry when this click completed calibration,
            None otherwise

        Raises:
            DegenerateCalibrationError: If the final click would make the
                geometry undefined; the click is discarded and the state
                stays AWAITING_RIGHT_TOP
        """
        corner = self._state.corner
        if corner is None:
            logger.debug("Calibration already complete; ignoring click (%.1f, %.1f)", x, y)
            return None

        point = Point(x=x, y=y)

        if self._state is not CalibrationState.AWAITING_RIGHT_TOP:
            self._corners[corner] = point
            self._state = self._state.next
            logger.debug("Calibration corner %s = (%.1f, %.1f)", corner.name, x, y)
            return None

        candidate = {**self._corners, corner: point}
        try:
            geometry = derive_geometry(candidate, self.settings.height_m)
        except DegenerateCalibrationError as e:
            logger.warning("Rejected %s click (%.1f, %.1f): %s", corner.name, x, y, e)
            raise

        self._corners = candidate
        self._geometry = geometry
        self._state = CalibrationState.COMPLETE
        return geometry

    def reset(self) -> None:
        """Clear all corners and geometry, back to the first click."""
        self._state = CalibrationState.AWAITING_LEFT_BOTTOM
        self._corners = {}
        self._geometry = None
