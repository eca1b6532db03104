"""Sculpture Radar: sculpture parks and outdoor art near any place."""

__version__ = "0.1.0"
