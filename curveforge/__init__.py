"""Rates calibration toolkit: exchange calendars, day counts, B-splines, curve bootstrapping and bond analytics."""

__version__ = "0.1.0"