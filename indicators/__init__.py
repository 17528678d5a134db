"""Streaming technical-analysis indicators updated one bar at a time."""

__version__ = "0.1.0"