"""Error taxonomy for planner layout and calendar computations."""

from __future__ import annotations


class PlannerError(ValueError):
    """Base class for layout and calendar errors."""


class InvalidGeometry(PlannerError):
    """Raised for unordered bounds, collapsing padding or non-positive grids."""


class DateOutOfRange(PlannerError):
    """Raised when date arithmetic leaves the representable calendar span."""


class EmptyGroupBounds(PlannerError):
    """Raised when bounds are requested for a group without children."""


class InvalidArgumentShape(PlannerError):
    """Raised when an input encoding is malformed or ambiguous."""
