"""Command-line entry point: replay a click log and print set stats."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from volley_vision.core.config import NetSettings, Settings, get_settings
from volley_vision.core.exceptions import (
    CalibrationError,
    DegenerateCalibrationError,
    EventError,
    VolleyVisionError,
)
from volley_vision.core.logging import configure_logging, get_logger
from volley_vision.core.types import SessionMode, SessionReport
from volley_vision.pipeline.session import (
    CalibrationClick,
    EndRepCommand,
    Event,
    RecordingClick,
    ReplayCommand,
    ResetCommand,
    Session,
    SessionEnded,
    UndoCommand,
)

logger = get_logger(__name__)

PLACEHOLDER = "—"

_SIMPLE_EVENTS: dict[str, type] = {
    "end_rep": EndRepCommand,
    "undo": UndoCommand,
    "reset": ResetCommand,
    "replay": ReplayCommand,
    "session_ended": SessionEnded,
}


def parse_event(data: dict[str, Any]) -> Event:
    """Build an input event from one JSON object.

    Args:
        data: Mapping with a ``type`` key and the event fields

    Returns:
        Parsed event

    Raises:
        EventError: If the type is unknown or a field is missing
    """
    if not isinstance(data, dict):
        raise EventError(f"Event must be a JSON object, got {data!r}")

    kind = data.get("type")
    try:
        if kind == "calibration_click":
            return CalibrationClick(x=float(data["x"]), y=float(data["y"]))
        if kind == "recording_click":
            return RecordingClick(
                x=float(data["x"]),
                y=float(data["y"]),
                video_time_s=float(data.get("t", 0.0)),
            )
    except (KeyError, TypeError, ValueError) as e:
        raise EventError(f"Malformed {kind} event {data!r}: {e}") from e

    if kind in _SIMPLE_EVENTS:
        return _SIMPLE_EVENTS[kind]()

    raise EventError(f"Unknown event type: {kind!r}")


def load_events(path: Path) -> list[Event]:
    """Load a JSON list of events.

    Raises:
        EventError: If the file is not a JSON list of event objects
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise EventError(f"Failed to read click log {path}: {e}") from e

    if not isinstance(data, list):
        raise EventError("Click log must be a JSON list of events")

    return [parse_event(item) for item in data]


def replay_events(events: list[Event], settings: Settings | None = None) -> Session:
    """Run events through a fresh session, ending it if the log did not.

    A rejected calibration click is logged and skipped, as a user would
    simply click again.
    """
    session = Session(settings)
    for event in events:
        try:
            session.dispatch(event)
        except DegenerateCalibrationError as e:
            logger.warning("Skipping calibration click: %s", e)

    if session.mode is SessionMode.RECORDING:
        session.end_session()

    return session


def _fmt(value: float | None, spec: str = ".2f") -> str:
    return format(value, spec) if value is not None else PLACEHOLDER


def format_report(report: SessionReport) -> str:
    """Render a session report as a plain-text table."""
    lines = [
        "=" * 60,
        f"SET STATS (Net = {report.net_height_m:.2f} m)",
        "=" * 60,
        f"{'Rep':<8} {'Peak height (m)':<18} {'Above net (cm)':<16} {'Width (m)':<10}",
        "-" * 60,
    ]

    for row in report.rows:
        m = row.metrics
        above = str(m.above_net_cm) if m.above_net_cm is not None else PLACEHOLDER
        if m.width_m is not None and m.direction is not None:
            width = f"{m.direction.symbol} {m.width_m:.2f}"
        else:
            width = PLACEHOLDER
        lines.append(
            f"{'Rep ' + str(row.rep_number):<8} {_fmt(m.peak_height_m):<18} {above:<16} {width:<10}"
        )

    summary = report.summary
    lines.append("-" * 60)
    if summary.best_rep_index is not None:
        lines.append(
            f"Highest Peak:  Rep {summary.best_rep_index + 1} ({_fmt(summary.best_peak_m)} m)"
        )
    if summary.average_peak_m is not None:
        lines.append(f"Average Peak:  {summary.average_peak_m:.2f} m")
    if summary.average_width_m is not None:
        lines.append(f"Average Width: {summary.average_width_m:.2f} m")

    return "\n".join(lines)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="VolleyVision - measure volleyball sets from recorded clicks"
    )
    parser.add_argument(
        "clicks",
        type=Path,
        help="Path to a JSON click log",
    )
    parser.add_argument(
        "--net-height",
        type=float,
        help="Net height in metres (default: NET_HEIGHT_M or 2.43)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    sys.exit(run(args.clicks, args.net_height))


def build_net_settings(net_height_m: float) -> NetSettings:
    """Validate a net height given on the command line.

    Raises:
        CalibrationError: If the height is not a positive number
    """
    try:
        return NetSettings(height_m=net_height_m)
    except ValidationError as e:
        raise CalibrationError(f"Invalid net height {net_height_m}: {e}") from e


def run(clicks: Path, net_height_m: float | None = None) -> int:
    """Replay a click log and print the report.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    settings = get_settings()
    configure_logging(settings.logging)

    try:
        if net_height_m is not None:
            settings = settings.model_copy(update={"net": build_net_settings(net_height_m)})

        events = load_events(clicks)
        logger.info("Replaying %d events from %s", len(events), clicks)
        session = replay_events(events, settings)

        report = session.report
        if report is None:
            logger.warning("Session never reached recording; calibration incomplete")
            return 1

        print(format_report(report))

        if report.summary.measured_rep_count == 0:
            logger.warning("No reps could be measured")
            return 1

        return 0

    except VolleyVisionError as e:
        logger.error("Replay failed: %s", e)
        return 2

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return 3


if __name__ == "__main__":
    main()
