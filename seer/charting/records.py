"""Accessors that pull labels and values out of caller records.

Callers may pass records of any type. A record is read through an accessor,
which is either the name of an attribute/method on the record or a callable
taking the record. When no accessor is supplied, the record must implement the
`LabeledRecord` or `ValuedRecord` protocol.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from .errors import AccessorNotFoundError

Accessor = str | Callable[[Any], Any] | None


@runtime_checkable
class LabeledRecord(Protocol):
    """A record that can describe itself with a row or column label."""

    def label(self) -> object: ...


@runtime_checkable
class ValuedRecord(Protocol):
    """A record that carries a single chart value."""

    def value(self) -> object: ...


def read_label(record: object, accessor: Accessor) -> object:
    """Return the label of `record`, defaulting to `LabeledRecord.label()`."""

    return _read(record, accessor if accessor is not None else "label")


def read_value(record: object, accessor: Accessor) -> object:
    """Return the value of `record`, defaulting to `ValuedRecord.value()`."""

    return _read(record, accessor if accessor is not None else "value")


def _read(record: object, accessor: str | Callable[[Any], Any]) -> object:
    if callable(accessor):
        return accessor(record)

    try:
        attr = getattr(record, accessor)
    except AttributeError as exc:
        raise AccessorNotFoundError(record, accessor) from exc
    return attr() if callable(attr) else attr
