"""Tests for the four-click net calibration."""

from __future__ import annotations

import pytest

from volley_vision.core.config import NetSettings
from volley_vision.core.exceptions import DegenerateCalibrationError
from volley_vision.core.types import CalibrationCorner, CalibrationState, Point
from volley_vision.vision.calibration import NetCalibrator

CLICKS = [(100, 400), (100, 100), (700, 420), (700, 120)]


def _calibrate(calibrator: NetCalibrator) -> None:
    for x, y in CLICKS:
        calibrator.submit_point(x, y)


class TestNetCalibrator:
    """Tests for the NetCalibrator state machine."""

    def test_initial_state(self, net_settings: NetSettings) -> None:
        """Calibrator should wait for the left bottom corner."""
        calibrator = NetCalibrator(net_settings)

        assert calibrator.state == CalibrationState.AWAITING_LEFT_BOTTOM
        assert calibrator.step == 0
        assert not calibrator.is_complete
        assert calibrator.geometry is None
        assert dict(calibrator.corners) == {}

    def test_states_advance_in_order(self, net_settings: NetSettings) -> None:
        """Each click moves exactly one state forward."""
        calibrator = NetCalibrator(net_settings)
        expected = [
            CalibrationState.AWAITING_LEFT_TOP,
            CalibrationState.AWAITING_RIGHT_BOTTOM,
            CalibrationState.AWAITING_RIGHT_TOP,
            CalibrationState.COMPLETE,
        ]

        for (x, y), state in zip(CLICKS, expected):
            calibrator.submit_point(x, y)
            assert calibrator.state == state

    def test_clicks_fill_corners(self, net_settings: NetSettings) -> None:
        """Clicks should land in LB, LT, RB, RT order."""
        calibrator = NetCalibrator(net_settings)
        _calibrate(calibrator)

        corners = calibrator.corners
        assert corners[CalibrationCorner.LEFT_BOTTOM] == Point(100, 400)
        assert corners[CalibrationCorner.LEFT_TOP].y == 100
        assert corners[CalibrationCorner.RIGHT_BOTTOM].y == 420
        assert corners[CalibrationCorner.RIGHT_TOP].y == 120

    def test_fourth_click_returns_geometry(self, net_settings: NetSettings) -> None:
        """Only the completing click returns the derived geometry."""
        calibrator = NetCalibrator(net_settings)

        results = [calibrator.submit_point(x, y) for x, y in CLICKS]

        assert results[:3] == [None, None, None]
        assert results[3] is not None
        assert results[3] is calibrator.geometry
        assert results[3].pixels_per_meter == pytest.approx(123.46, abs=0.01)

    def test_click_after_complete_is_ignored(self, net_settings: NetSettings) -> None:
        """Extra clicks must not overwrite corners or re-derive geometry."""
        calibrator = NetCalibrator(net_settings)
        _calibrate(calibrator)
        geometry = calibrator.geometry

        assert calibrator.submit_point(5, 5) is None
        assert calibrator.geometry is geometry
        assert calibrator.corners[CalibrationCorner.RIGHT_TOP].x == 700

    def test_uses_configured_net_height(self) -> None:
        """A women's net height should change the scale."""
        calibrator = NetCalibrator(NetSettings(height_m=2.24))
        _calibrate(calibrator)

        assert calibrator.geometry is not None
        assert calibrator.geometry.pixels_per_meter == pytest.approx(300 / 2.24)
        assert calibrator.geometry.net_height_m == 2.24

    def test_degenerate_fourth_click_is_rejected(self, net_settings: NetSettings) -> None:
        """A right top corner straight above the left top is refused."""
        calibrator = NetCalibrator(net_settings)
        for x, y in CLICKS[:3]:
            calibrator.submit_point(x, y)

        with pytest.raises(DegenerateCalibrationError):
            calibrator.submit_point(100, 120)

        assert calibrator.state == CalibrationState.AWAITING_RIGHT_TOP
        assert calibrator.geometry is None
        assert CalibrationCorner.RIGHT_TOP not in calibrator.corners

        # A valid retry completes calibration
        calibrator.submit_point(700, 120)
        assert calibrator.is_complete

    def test_reset_clears_everything(self, net_settings: NetSettings) -> None:
        """Reset returns to the first corner and discards geometry."""
        calibrator = NetCalibrator(net_settings)
        _calibrate(calibrator)

        calibrator.reset()

        assert calibrator.state == CalibrationState.AWAITING_LEFT_BOTTOM
        assert calibrator.geometry is None
        assert dict(calibrator.corners) == {}

    def test_prompts_follow_steps(self, net_settings: NetSettings) -> None:
        """Prompt should name the next corner and disappear when done."""
        calibrator = NetCalibrator(net_settings)

        assert calibrator.prompt is not None
        assert calibrator.prompt.startswith("Calibration 1/4")
        assert "BOTTOM" in calibrator.prompt and "LEFT" in calibrator.prompt

        calibrator.submit_point(*CLICKS[0])
        assert calibrator.prompt is not None
        assert calibrator.prompt.startswith("Calibration 2/4")
        assert "TOP" in calibrator.prompt

        for x, y in CLICKS[1:]:
            calibrator.submit_point(x, y)
        assert calibrator.prompt is None

    def test_corners_view_is_read_only(self, net_settings: NetSettings) -> None:
        """External code cannot overwrite a recorded corner."""
        calibrator = NetCalibrator(net_settings)
        calibrator.submit_point(*CLICKS[0])

        with pytest.raises(TypeError):
            calibrator.corners[CalibrationCorner.LEFT_BOTTOM] = None  # type: ignore[index]


class TestCalibrationState:
    """Tests for the CalibrationState enum helpers."""

    def test_corner_mapping(self) -> None:
        """Each awaiting state names the corner it collects."""
        assert CalibrationState.AWAITING_LEFT_BOTTOM.corner == CalibrationCorner.LEFT_BOTTOM
        assert CalibrationState.AWAITING_RIGHT_TOP.corner == CalibrationCorner.RIGHT_TOP
        assert CalibrationState.COMPLETE.corner is None

    def test_complete_is_terminal(self) -> None:
        """COMPLETE does not advance."""
        assert CalibrationState.COMPLETE.next == CalibrationState.COMPLETE
