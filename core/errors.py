"""
Typed failures raised by the projection engine.

Both subclass ValueError so callers that already guard input validation with
``except ValueError`` keep working.
"""

from __future__ import annotations


class ProjectionError(ValueError):
    """Base class for all projection errors."""


class InvalidParameter(ProjectionError):
    """A distribution parameter is out of its domain (e.g. negative volatility)."""


class InvalidConfig(ProjectionError):
    """The portfolio configuration cannot produce a summary (e.g. zero trials)."""
