"""Session orchestration: routes input events to calibration and recording."""

from __future__ import annotations

from dataclasses import dataclass

from volley_vision.analysis.metrics import build_report
from volley_vision.analysis.recorder import TrailRecorder
from volley_vision.core.config import Settings, get_settings
from volley_vision.core.exceptions import EventError
from volley_vision.core.logging import get_logger
from volley_vision.core.types import (
    RGB,
    CalibrationState,
    NetGeometry,
    Rep,
    RepPoint,
    SessionMode,
    SessionReport,
)
from volley_vision.vision.calibration import NetCalibrator

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CalibrationClick:
    """A click on a net corner during calibration."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class RecordingClick:
    """A click on the ball while recording."""

    x: float
    y: float
    video_time_s: float


@dataclass(frozen=True, slots=True)
class EndRepCommand:
    """Close the current rep."""


@dataclass(frozen=True, slots=True)
class UndoCommand:
    """Remove the last clicked point of the current rep."""


@dataclass(frozen=True, slots=True)
class ResetCommand:
    """Wipe reps and calibration."""


@dataclass(frozen=True, slots=True)
class ReplayCommand:
    """Restart the video and record again over the same calibration."""


@dataclass(frozen=True, slots=True)
class SessionEnded:
    """The video reached its end."""


Event = (
    CalibrationClick
    | RecordingClick
    | EndRepCommand
    | UndoCommand
    | ResetCommand
    | ReplayCommand
    | SessionEnded
)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view of a session for external renderers."""

    mode: SessionMode
    calibration_state: CalibrationState
    calibration_prompt: str | None
    geometry: NetGeometry | None
    completed_reps: tuple[Rep, ...]
    active_points: tuple[RepPoint, ...]
    active_color: RGB

    @property
    def rep_count(self) -> int:
        """Number of completed reps."""
        return len(self.completed_reps)

    @property
    def status_line(self) -> str:
        """One-line status for a HUD."""
        status = {
            SessionMode.CALIBRATING: "Calibration mode",
            SessionMode.RECORDING: "Recording",
            SessionMode.ENDED: "Ended",
        }[self.mode]
        return (
            f"Status: {status}   Reps: {self.rep_count}   "
            f"Current pts: {len(self.active_points)}"
        )


class Session:
    """Owns all mutable state of one annotation session.

    Modes:
        CALIBRATING → RECORDING: fourth net corner accepted
        RECORDING → ENDED: video ended, metrics computed
        ENDED or RECORDING → RECORDING: replay/restart requested
        any → CALIBRATING: full reset

    Every operation runs to completion before the next event is handled.
    Events that do not apply to the current mode are ignored.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize session with settings.

        Args:
            settings: Application settings (uses defaults if None)
        """
        self.settings = settings or get_settings()
        self._calibrator = NetCalibrator(self.settings.net)
        self._recorder = TrailRecorder(self.settings.recording)
        self._mode = SessionMode.CALIBRATING
        self._report: SessionReport | None = None

    @property
    def mode(self) -> SessionMode:
        """Current session mode."""
        return self._mode

    @property
    def calibrator(self) -> NetCalibrator:
        """Net calibration state machine."""
        return self._calibrator

    @property
    def recorder(self) -> TrailRecorder:
        """Rep trail recorder."""
        return self._recorder

    @property
    def geometry(self) -> NetGeometry | None:
        """Calibration geometry, or None until calibration completes."""
        return self._calibrator.geometry

    @property
    def report(self) -> SessionReport | None:
        """Report from the last time the session ended."""
        return self._report

    def dispatch(self, event: Event) -> SessionReport | None:
        """Apply one input event.

        Args:
            event: Input event

        Returns:
            The session report for SessionEnded, None otherwise

        Raises:
            DegenerateCalibrationError: If a calibration click is rejected
            EventError: If the event type is unknown
        """
        if isinstance(event, CalibrationClick):
            self.calibration_click(event.x, event.y)
        elif isinstance(event, RecordingClick):
            self.recording_click(event.x, event.y, event.video_time_s)
        elif isinstance(event, EndRepCommand):
            self.end_rep()
        elif isinstance(event, UndoCommand):
            self.undo()
        elif isinstance(event, ResetCommand):
            self.reset()
        elif isinstance(event, ReplayCommand):
            self.replay()
        elif isinstance(event, SessionEnded):
            return self.end_session()
        else:
            raise EventError(f"Unknown event: {event!r}")
        return None

    def calibration_click(self, x: float, y: float) -> None:
        """Feed a net corner click to the calibrator."""
        if self._mode is not SessionMode.CALIBRATING:
            logger.debug("Ignoring calibration click in %s mode", self._mode.name)
            return

        self._calibrator.submit_point(x, y)
        if self._calibrator.is_complete:
            self._mode = SessionMode.RECORDING

    def recording_click(self, x: float, y: float, video_time_s: float) -> RepPoint | None:
        """Add a ball position to the active rep."""
        if self._mode is not SessionMode.RECORDING:
            logger.debug("Ignoring recording click in %s mode", self._mode.name)
            return None
        return self._recorder.add_point(x, y, video_time_s)

    def end_rep(self) -> Rep | None:
        """Close the active rep."""
        if self._mode is not SessionMode.RECORDING:
            logger.debug("Ignoring end-rep in %s mode", self._mode.name)
            return None
        return self._recorder.end_rep()

    def undo(self) -> RepPoint | None:
        """Undo the last click of the active rep."""
        if self._mode is not SessionMode.RECORDING:
            logger.debug("Ignoring undo in %s mode", self._mode.name)
            return None
        return self._recorder.undo_last()

    def reset(self) -> None:
        """Wipe reps and calibration and start over from the first corner."""
        self._recorder.reset()
        self._calibrator.reset()
        self._mode = SessionMode.CALIBRATING
        self._report = None
        logger.info("Session reset")

    def replay(self) -> None:
        """Restart recording from the top of the video.

        Works on the end screen and mid-recording. Completed reps and the
        calibration are kept; the rep in progress is dropped.
        """
        if self._mode is SessionMode.CALIBRATING:
            logger.debug("Ignoring replay in %s mode", self._mode.name)
            return
        self._recorder.restart_active()
        self._mode = SessionMode.RECORDING

    def end_session(self) -> SessionReport | None:
        """Compute metrics for all completed reps.

        The active rep is left out unless it was closed with ``end_rep``.

        Returns:
            SessionReport, or None if the session was not recording
        """
        if self._mode is not SessionMode.RECORDING:
            logger.debug("Ignoring session end in %s mode", self._mode.name)
            return None

        self._mode = SessionMode.ENDED
        self._report = build_report(self._recorder.completed_reps, self.geometry)
        summary = self._report.summary
        logger.info(
            "Session ended: %d reps, %d measured",
            summary.rep_count,
            summary.measured_rep_count,
        )
        return self._report

    def snapshot(self) -> SessionSnapshot:
        """Capture the current state for rendering."""
        active = self._recorder.active_rep
        return SessionSnapshot(
            mode=self._mode,
            calibration_state=self._calibrator.state,
            calibration_prompt=self._calibrator.prompt,
            geometry=self.geometry,
            completed_reps=tuple(self._recorder.completed_reps),
            active_points=tuple(active.points),
            active_color=active.color,
        )
