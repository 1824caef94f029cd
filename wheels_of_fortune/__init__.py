"""Wheels of Fortune: hex-tiled rotating wheels over a drifting particle field."""

__version__ = "0.1.0"
