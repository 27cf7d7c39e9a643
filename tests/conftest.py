"""Pytest fixtures for VolleyVision tests."""

from __future__ import annotations

import pytest

from volley_vision.core.config import NetSettings, RecordingSettings, Settings
from volley_vision.core.types import CalibrationCorner, NetGeometry, Point, Rep, RepPoint
from volley_vision.pipeline.session import CalibrationClick, Session
from volley_vision.vision.geometry import derive_geometry

# Net clicked slightly tilted: right antenna sits 20 px lower on screen.
SCENARIO_CORNERS = {
    CalibrationCorner.LEFT_BOTTOM: Point(100, 400),
    CalibrationCorner.LEFT_TOP: Point(100, 100),
    CalibrationCorner.RIGHT_BOTTOM: Point(700, 420),
    CalibrationCorner.RIGHT_TOP: Point(700, 120),
}


@pytest.fixture
def net_settings() -> NetSettings:
    """Default men's beach net."""
    return NetSettings(height_m=2.43)


@pytest.fixture
def recording_settings() -> RecordingSettings:
    """Short palette so wrap-around is easy to hit."""
    return RecordingSettings(palette=[(255, 0, 0), (0, 255, 0), (0, 0, 255)])


@pytest.fixture
def settings(net_settings: NetSettings, recording_settings: RecordingSettings) -> Settings:
    """Application settings built from the section fixtures."""
    return Settings(net=net_settings, recording=recording_settings)


@pytest.fixture
def scenario_corners() -> dict[CalibrationCorner, Point]:
    """The four net corners of the reference scenario."""
    return dict(SCENARIO_CORNERS)


@pytest.fixture
def geometry(scenario_corners: dict[CalibrationCorner, Point]) -> NetGeometry:
    """Geometry derived from the reference scenario."""
    return derive_geometry(scenario_corners, 2.43)


@pytest.fixture
def high_set_rep() -> Rep:
    """A left-to-right set peaking 60 px above the tape at x=400."""
    return Rep(
        color=(255, 80, 80),
        points=[
            RepPoint(x=200, y=300, t=1.0),
            RepPoint(x=400, y=50, t=1.2),
            RepPoint(x=600, y=200, t=1.4),
        ],
    )


@pytest.fixture
def calibration_clicks() -> list[CalibrationClick]:
    """Calibration clicks in protocol order."""
    return [
        CalibrationClick(x=p.x, y=p.y)
        for p in (
            SCENARIO_CORNERS[CalibrationCorner.LEFT_BOTTOM],
            SCENARIO_CORNERS[CalibrationCorner.LEFT_TOP],
            SCENARIO_CORNERS[CalibrationCorner.RIGHT_BOTTOM],
            SCENARIO_CORNERS[CalibrationCorner.RIGHT_TOP],
        )
    ]


@pytest.fixture
def calibrated_session(settings: Settings, calibration_clicks: list[CalibrationClick]) -> Session:
    """A session that has finished calibration and is recording."""
    session = Session(settings)
    for click in calibration_clicks:
        session.dispatch(click)
    return session
