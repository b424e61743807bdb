"""Pytest fixtures shared across Seer tests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import pytest

from seer.charting import ChartIndexCounter


@dataclass(frozen=True)
class Sale:
    """A record implementing the LabeledRecord/ValuedRecord protocols."""

    day: str
    amount: int

    def label(self) -> str:
        return self.day

    def value(self) -> int:
        return self.amount


@dataclass(frozen=True)
class Product:
    """An outer collection element labeled by its `name` attribute."""

    name: str


@pytest.fixture
def products() -> list[Product]:
    """Return two products used as column headers."""

    return [Product(name="Sprocket"), Product(name="Gizmo")]


@pytest.fixture
def sales() -> list[list[Sale]]:
    """Return one aligned sales series per product."""

    return [
        [Sale("Mon", 3), Sale("Tue", 5)],
        [Sale("Mon", 7), Sale("Tue", 11)],
    ]


@pytest.fixture
def counter() -> ChartIndexCounter:
    """Return a fresh page-level chart index counter."""

    return ChartIndexCounter()


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no template or view rendering.
    - `integration`: tests touching Django templates, views or settings.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
