"""Sample widgets used by the demo page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class WidgetStat:
    """Quantity of a widget sold on a given day."""

    day: date
    quantity: int

    def label(self) -> str:
        return self.day.isoformat()

    def value(self) -> int:
        return self.quantity


@dataclass(frozen=True, slots=True)
class Widget:
    """A product with daily sales statistics."""

    name: str
    stats: tuple[WidgetStat, ...]


def demo_widgets() -> tuple[Widget, ...]:
    """Return a small, fixed set of widgets with three days of stats each."""

    days = (date(2025, 1, 1), date(2025, 1, 2), date(2025, 1, 3))
    quantities = {
        "Sprocket": (12, 18, 9),
        "Gizmo": (4, 7, 15),
        "Doohickey": (10, 10, 11),
    }
    return tuple(
        Widget(name=name, stats=tuple(WidgetStat(day=d, quantity=q) for d, q in zip(days, values)))
        for name, values in quantities.items()
    )
