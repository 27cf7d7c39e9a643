"""Custom exceptions for VolleyVision."""


class VolleyVisionError(Exception):
    """Base exception for all VolleyVision errors."""

    pass


class CalibrationError(VolleyVisionError):
    """Calibration process failed or invalid calibration data."""

    def __init__(self, message: str = "Calibration failed") -> None:
        self.message = message
        super().__init__(self.message)


class DegenerateCalibrationError(CalibrationError):
    """Calibration clicks cannot define a usable net scale or tape line.

    Raised when both top corners share an x coordinate (vertical tape line)
    or when the clicked net has zero pixel height.
    """

    def __init__(self, message: str = "Degenerate net calibration") -> None:
        super().__init__(message)


class EventError(VolleyVisionError):
    """An input event could not be understood."""

    def __init__(self, message: str = "Invalid event") -> None:
        self.message = message
        super().__init__(self.message)
