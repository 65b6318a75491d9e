"""Exceptions raised by the label layout engine."""

from __future__ import annotations


class LabelError(Exception):
    """Base class for all label layout failures."""


class ConfigurationError(LabelError):
    """Unknown label type, invalid grid shape or bad layout options."""


class MeasurementError(LabelError):
    """Text could not be measured against the target box."""


class FitError(LabelError):
    """No font size above the configured floor fits the cell."""


__all__ = [
    "ConfigurationError",
    "FitError",
    "LabelError",
    "MeasurementError",
]
