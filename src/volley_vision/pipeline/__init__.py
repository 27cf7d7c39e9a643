"""Session orchestration and input events."""

from volley_vision.pipeline.session import (
    CalibrationClick,
    EndRepCommand,
    Event,
    RecordingClick,
    ReplayCommand,
    ResetCommand,
    Session,
    SessionEnded,
    SessionSnapshot,
    UndoCommand,
)

__all__ = [
    "Session",
    "SessionSnapshot",
    "Event",
    "CalibrationClick",
    "RecordingClick",
    "EndRepCommand",
    "UndoCommand",
    "ResetCommand",
    "ReplayCommand",
    "SessionEnded",
]
