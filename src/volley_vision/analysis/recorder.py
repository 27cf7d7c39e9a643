"""Trail recorder grouping clicked points into reps.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

from volley_vision.core.config import RecordingSettings
from volley_vision.core.logging import get_logger
from volley_vision.core.types import RGB, Rep, RepPoint

logger = get_logger(__name__)


class TrailRecorder:
    """Holds the completed reps and the one rep being clicked.

    Every new active rep takes the next palette colour. The colour cursor
    only ever moves forward and wraps around the palette.
    """

    def __init__(self, settings: RecordingSettings | None = None) -> None:
        """Initialize recorder with settings.

        Args:
            settings: Recording settings (uses defaults if None)
        """
        self.settings = settings or RecordingSettings()
        self._palette: list[RGB] = list(self.settings.palette)
        self._color_cursor = 0
        self._completed: list[Rep] = []
        self._active = Rep(color=self._next_color())

    @property
    def completed_reps(self) -> list[Rep]:
        """Reps finished so far, in recording order."""
        return list(self._completed)

    @property
    def active_rep(self) -> Rep:
        """The rep currently receiving clicks."""
        return self._active

    @property
    def color_cursor(self) -> int:
        """Number of colours handed out so far."""
        return self._color_cursor

    @property
    def rep_count(self) -> int:
        """Number of completed reps."""
        return len(self._completed)

    def _next_color(self) -> RGB:
        color = self._palette[self._color_cursor % len(self._palette)]
        self._color_cursor += 1
        return color

    def add_point(self, x: float, y: float, t: float) -> RepPoint:
        """Append a clicked point to the active rep.

        Args:
            x: Pixel x coordinate
            y: Pixel y coordinate
            t: Video timestamp in seconds

        Returns:
            The recorded point
        """
        point = RepPoint(x=x, y=y, t=t)
        self._active.points.append(point)
        return point

    def undo_last(self) -> RepPoint | None:
        """Remove the most recent point of the active rep.

        Returns:
            The removed point, or None if the active rep was empty
        """
        if not self._active.points:
            return None
        return self._active.points.pop()

    def end_rep(self) -> Rep | None:
        """Close the active rep and start a new one.

        Empty reps are never stored; ending one does nothing.

        Returns:
            The completed rep, or None if the active rep was empty
        """
        if self._active.is_empty:
            return None

        rep = self._active
        self._completed.append(rep)
        self._active = Rep(color=self._next_color())
        logger.info("Rep %d recorded (%d points)", len(self._completed), rep.point_count)
        return rep

    def restart_active(self) -> None:
        """Drop the active rep and start a fresh one, keeping completed reps."""
        self._active = Rep(color=self._next_color())

    def reset(self) -> None:
        """Discard all reps. The colour cursor keeps advancing."""
        self._completed.clear()
        self._active = Rep(color=self._next_color())
