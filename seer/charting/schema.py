"""Schema types for column chart options and data series.

Charts are driven by typed option objects rather than free-form keyword
dictionaries. Every recognized option is a named field, and every field is
assigned to exactly one serialization rule (quoted string or bare literal).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields

from .records import Accessor

DEFAULT_COLORS: tuple[str, ...] = ("#324F69", "#919E4B", "#A34D4D", "#BEC8BE", "#B9A272", "#8D6047")
DEFAULT_LEGEND_LOCATION = "bottom"
DEFAULT_HEIGHT = 350
DEFAULT_WIDTH = 550

ColorsOption = tuple[str, ...] | str


@dataclass(frozen=True, slots=True)
class ColumnChartOptions:
    """Display options for a Google Visualization ColumnChart.

    Args:
        colors: Hex colors (with or without `#`), or a preformatted JavaScript
            array literal of `{color, darker}` objects for 3D charts.
        legend: Legend position ("bottom", "top", "left", "right", "none").
        height: Chart height in pixels.
        width: Chart width in pixels.
        is_3_d: Whether columns are drawn in 3D.
        on_select: JavaScript expression registered as the `select` listener.

    Remaining fields map one-to-one onto the ColumnChart configuration options
    of the same (camel-cased) name and are omitted from output when unset.
    """

    axis_color: str | None = None
    axis_background_color: str | None = None
    axis_font_size: int | None = None
    background_color: str | None = None
    border_color: str | None = None
    colors: ColorsOption = DEFAULT_COLORS
    enable_tooltip: bool | None = None
    focus_border_color: str | None = None
    height: int = DEFAULT_HEIGHT
    is_3_d: bool = False
    is_stacked: bool | None = None
    legend: str = DEFAULT_LEGEND_LOCATION
    legend_background_color: str | None = None
    legend_font_size: int | None = None
    legend_text_color: str | None = None
    log_scale: bool | None = None
    max: float | None = None
    min: float | None = None
    reverse_axis: bool | None = None
    show_categories: bool | None = None
    title: str | None = None
    title_x: str | None = None
    title_y: str | None = None
    title_color: str | None = None
    title_font_size: int | None = None
    tooltip_font_size: int | None = None
    tooltip_height: int | None = None
    tooltip_width: int | None = None
    width: int = DEFAULT_WIDTH
    on_select: str | None = None


NONSTRING_OPTIONS: tuple[str, ...] = (
    "axis_font_size",
    "colors",
    "enable_tooltip",
    "height",
    "is_3_d",
    "is_stacked",
    "legend_font_size",
    "log_scale",
    "max",
    "min",
    "reverse_axis",
    "show_categories",
    "title_font_size",
    "tooltip_font_size",
    "tooltip_height",
    "tooltip_width",
    "width",
)

STRING_OPTIONS: tuple[str, ...] = (
    "axis_color",
    "axis_background_color",
    "background_color",
    "border_color",
    "focus_border_color",
    "legend",
    "legend_background_color",
    "legend_text_color",
    "title",
    "title_x",
    "title_y",
    "title_color",
)

# Emitted as an event listener, never inside the options literal.
CALLBACK_OPTIONS: tuple[str, ...] = ("on_select",)

OPTION_NAMES: frozenset[str] = frozenset(f.name for f in fields(ColumnChartOptions))


@dataclass(frozen=True, slots=True)
class ChartSeries:
    """Data inputs for a column chart.

    Args:
        data_series: One inner sequence of records per data column.
        data_label: Accessor producing the row label of each record.
        data_method: Accessor producing the numeric value of each record.
        series_label: Accessor producing a column header from each element of
            the outer (category) collection.
    """

    data_series: Sequence[Sequence[object]]
    data_label: Accessor = None
    data_method: Accessor = None
    series_label: Accessor = None
