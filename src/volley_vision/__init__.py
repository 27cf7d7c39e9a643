"""VolleyVision: turn clicks on volleyball video into set height and width."""

__version__ = "0.1.0"
