"""Hourly reveal puzzle: one tile of the hour's image is uncovered per second."""

__version__ = "0.1.0"
