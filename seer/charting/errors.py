"""Exceptions raised while building chart scripts."""

from __future__ import annotations


class SeerError(Exception):
    """Base class for chart rendering failures."""


class AccessorNotFoundError(SeerError, AttributeError):
    """A data record does not expose the requested accessor."""

    def __init__(self, record: object, accessor: str) -> None:
        self.record = record
        self.accessor = accessor
        super().__init__(f"{type(record).__name__!s} record has no accessor {accessor!r}.")


class MissingInputError(SeerError, ValueError):
    """A required input collection or series key was not supplied."""


class InvalidOptionError(SeerError, ValueError):
    """A chart option has a value the chart API cannot accept."""


class InvalidColorError(InvalidOptionError):
    """A chart color is not a hex color value."""


class UnknownVisualizerError(SeerError, ValueError):
    """`visualize()` was asked for a chart type that is not registered."""
