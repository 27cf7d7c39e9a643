"""Core data types and structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

RGB = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Point:
    """A pixel coordinate on the video frame (y grows downward)."""

    x: float
    y: float


class CalibrationCorner(Enum):
    """Net reference corners, listed in the order they must be clicked."""

    LEFT_BOTTOM = auto()
    LEFT_TOP = auto()
    RIGHT_BOTTOM = auto()
    RIGHT_TOP = auto()


class CalibrationState(Enum):
    """States of the four-click net calibration."""

    AWAITING_LEFT_BOTTOM = 0
    AWAITING_LEFT_TOP = 1
    AWAITING_RIGHT_BOTTOM = 2
    AWAITING_RIGHT_TOP = 3
    COMPLETE = 4

    @property
    def corner(self) -> CalibrationCorner | None:
        """Corner recorded by the next click, or None once complete."""
        if self is CalibrationState.COMPLETE:
            return None
        return list(CalibrationCorner)[self.value]

    @property
    def next(self) -> CalibrationState:
        """State after one more accepted click."""
        if self is CalibrationState.COMPLETE:
            return self
        return CalibrationState(self.value + 1)


class SessionMode(Enum):
    """What a session is currently doing with incoming clicks."""

    CALIBRATING = auto()
    RECORDING = auto()
    ENDED = auto()


class Direction(Enum):
    """Horizontal travel direction of a rep, first to last point."""

    LEFT = "←"
    RIGHT = "→"
    NONE = "•"

    @property
    def symbol(self) -> str:
        """Arrow used when printing the direction."""
        return self.value


@dataclass(frozen=True, slots=True)
class TapeLine:
    """The net tape in pixel space: ``y = slope * x + intercept``."""

    slope: float
    intercept: float

    def y_at(self, x: float) -> float:
        """Pixel y of the tape at horizontal position ``x``."""
        return self.slope * x + self.intercept


@dataclass(frozen=True, slots=True)
class NetGeometry:
    """Scale and reference line derived from the four calibration corners.

    Attributes:
        pixels_per_meter: Pixels per metre of real-world net height
        top_line: Net tape line in pixel space
        net_height_m: Net height the scale was derived against
    """

    pixels_per_meter: float
    top_line: TapeLine
    net_height_m: float

    def tape_y_at(self, x: float) -> float:
        """Pixel y of the net tape at ``x``."""
        return self.top_line.y_at(x)

    def meters_above_net(self, x: float, y: float) -> float:
        """Metres the point is above (+) or below (-) the tape at the same x."""
        return (self.tape_y_at(x) - y) / self.pixels_per_meter

    def meters_horizontal_distance(self, p1: Point | RepPoint, p2: Point | RepPoint) -> float:
        """Screen-horizontal distance between two points in metres."""
        return abs(p2.x - p1.x) / self.pixels_per_meter


@dataclass(frozen=True, slots=True)
class RepPoint:
    """A clicked ball position.

    Attributes:
        x: Pixel x coordinate
        y: Pixel y coordinate
        t: Video timestamp in seconds when the click happened
    """

    x: float
    y: float
    t: float


@dataclass(frozen=True, slots=True)
class Metrics:
    """Measurements for one rep. ``None`` means "could not be measured"."""

    peak_height_m: float | None = None
    above_net_cm: int | None = None
    width_m: float | None = None
    direction: Direction | None = None

    @property
    def is_empty(self) -> bool:
        """True when nothing could be measured."""
        return (
            self.peak_height_m is None
            and self.above_net_cm is None
            and self.width_m is None
            and self.direction is None
        )


@dataclass(slots=True)
class Rep:
    """One recorded set attempt.

    Attributes:
        color: Display colour (RGB)
        points: Clicked points in measurement order
        metrics: Last computed metrics, if any
    """

    color: RGB
    points: list[RepPoint] = field(default_factory=list)
    metrics: Metrics | None = None

    @property
    def point_count(self) -> int:
        """Number of clicked points."""
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        """True when no point has been clicked yet."""
        return not self.points

    @property
    def first_point(self) -> RepPoint | None:
        """First clicked point."""
        return self.points[0] if self.points else None

    @property
    def last_point(self) -> RepPoint | None:
        """Most recently clicked point."""
        return self.points[-1] if self.points else None


@dataclass(frozen=True, slots=True)
class RepRow:
    """One line of the end-of-session stats table."""

    rep_number: int
    color: RGB
    metrics: Metrics


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Cross-rep summary statistics.

    Attributes:
        rep_count: Number of reps considered
        measured_rep_count: Reps with a defined peak height
        best_rep_index: 0-based index of the rep with the highest peak
        best_peak_m: Highest peak height in metres
        average_peak_m: Mean peak height over measured reps
        average_width_m: Mean width over reps with a defined width
    """

    rep_count: int = 0
    measured_rep_count: int = 0
    best_rep_index: int | None = None
    best_peak_m: float | None = None
    average_peak_m: float | None = None
    average_width_m: float | None = None


@dataclass(frozen=True, slots=True)
class SessionReport:
    """Per-rep rows plus summary, produced when a session ends."""

    net_height_m: float
    rows: list[RepRow]
    summary: SessionSummary
