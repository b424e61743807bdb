"""Render chart scripts for Google Visualization charts."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from django.conf import settings

from .builder import INDENT, ChartDataBuilder, js_string
from .codec import decode_chart_options, decode_chart_series
from .errors import UnknownVisualizerError
from .schema import ChartSeries, ColumnChartOptions
from .validator import ensure_valid_chart_options

logger = logging.getLogger(__name__)

DEFAULT_JSAPI_URL = "https://www.google.com/jsapi"
DEFAULT_ELEMENT = "chart"
CLIENT_CHART_INDEX = "Seer.chartsCount"


@dataclass(slots=True)
class ChartIndexCounter:
    """Hand out chart indexes for the charts embedded in one page.

    A counter belongs to a single page render; it is not shared between
    requests or threads.
    """

    next_index: int = 0

    def take(self) -> int:
        """Return the next free chart index and advance the counter."""

        index = self.next_index
        self.next_index += 1
        return index


@dataclass(frozen=True, slots=True)
class RenderedChart:
    """A rendered chart script and the index it occupies on the page.

    `index` is None when no counter was supplied; the script then takes
    `Seer.chartsCount` as its index in the browser.
    """

    script: str
    index: int | None
    element: str = DEFAULT_ELEMENT

    def __str__(self) -> str:
        return self.script


@dataclass(frozen=True, slots=True)
class ColumnChartFragments:
    """The DataTable and options fragments of a column chart script.

    Fragments are listed in the order the DataTable accepts them: rows and
    columns must exist before any cell is set.
    """

    row_count: str
    columns: str
    labels: str
    cells: str
    options: str


def build_column_chart_fragments(
    data: Iterable[object] | None,
    *,
    series: ChartSeries,
    options: ColumnChartOptions,
) -> ColumnChartFragments:
    """Build the text fragments for a column chart without wrapping them.

    Raises:
        MissingInputError: When `data` or the series collection is missing.
        AccessorNotFoundError: When a record lacks a requested accessor.
    """

    builder = ChartDataBuilder(data, series.data_series)
    rows = builder.data_rows(series.data_label)
    return ColumnChartFragments(
        row_count=builder.build_row_count(rows),
        columns=builder.build_columns(series.series_label),
        labels=builder.build_label_cells(rows),
        cells=builder.build_cells(series.data_method),
        options=builder.build_options(options),
    )


def render_column_chart(
    data: Iterable[object] | None,
    *,
    series: ChartSeries,
    options: ColumnChartOptions | None = None,
    element: str | None = None,
    counter: ChartIndexCounter | None = None,
) -> RenderedChart:
    """Render a Google Visualization ColumnChart script.

    Args:
        data: Outer collection; `series.series_label` is applied to each
            element to label a data column.
        series: Data series and accessors.
        options: Chart options; defaults apply when omitted.
        element: DOM id of the container element.
        counter: Page-level chart index counter. When omitted, the index is
            read from `Seer.chartsCount` in the browser instead.

    Returns:
        RenderedChart with the complete `<script>` block.

    Raises:
        SeerError: Any input or option failure; nothing is returned partially.
    """

    options = ensure_valid_chart_options(options or ColumnChartOptions())
    element = element or _default_element()
    fragments = build_column_chart_fragments(data, series=series, options=options)

    index = counter.take() if counter is not None else None
    chart_index = CLIENT_CHART_INDEX if index is None else str(index)
    logger.debug("Rendering column chart %s into element %r.", chart_index, element)

    listener = ""
    if options.on_select:
        listener = (
            f"\n{INDENT}google.visualization.events.addListener("
            f"Seer.charts[chartIndex], 'select', {options.on_select});"
        )

    script = f"""
<script type="text/javascript">
  google.load('visualization', '1', {{'packages':['columnchart']}});
  google.setOnLoadCallback(drawChart);
  function drawChart() {{
            var chartIndex = {chart_index};
            Seer.chartsData[chartIndex] = new google.visualization.DataTable();
{fragments.row_count}
{fragments.columns}
{fragments.labels}
{fragments.cells}
{fragments.options}
            var container = document.getElementById({js_string(element)});
            Seer.charts[chartIndex] = new google.visualization.ColumnChart(container);
            Seer.charts[chartIndex].draw(Seer.chartsData[chartIndex], options);{listener}
            Seer.chartsCount += 1;
  }}
</script>
"""
    return RenderedChart(script=script, index=index, element=element)


def _render_column_chart(
    data: Iterable[object] | None,
    *,
    series: Mapping[str, Any] | None,
    chart_options: Mapping[str, Any] | None,
    element: str | None,
    counter: ChartIndexCounter | None,
) -> RenderedChart:
    return render_column_chart(
        data,
        series=decode_chart_series(series),
        options=decode_chart_options(chart_options),
        element=element,
        counter=counter,
    )


Visualizer = Callable[..., RenderedChart]

VISUALIZERS: dict[str, Visualizer] = {
    "column_chart": _render_column_chart,
}


def visualize(
    data: Iterable[object] | None,
    *,
    as_: str,
    series: Mapping[str, Any] | None,
    chart_options: Mapping[str, Any] | None = None,
    in_element: str | None = None,
    counter: ChartIndexCounter | None = None,
) -> RenderedChart:
    """Render `data` with the visualizer registered under `as_`.

    Args:
        data: Outer collection of the chart.
        as_: Visualizer name, e.g. "column_chart".
        series: Mapping with `data_series` and its accessors.
        chart_options: Mapping of chart option names to values.
        in_element: DOM id of the container element.
        counter: Page-level chart index counter.

    Returns:
        RenderedChart for the selected visualizer.

    Raises:
        UnknownVisualizerError: When `as_` is not registered.
    """

    visualizer = VISUALIZERS.get(as_)
    if visualizer is None:
        supported = ", ".join(sorted(VISUALIZERS))
        raise UnknownVisualizerError(f"Invalid visualizer {as_!r}; expected one of: {supported}.")
    return visualizer(
        data,
        series=series,
        chart_options=chart_options,
        element=in_element,
        counter=counter,
    )


def init_visualization(jsapi_url: str | None = None) -> str:
    """Return the Google JS API loader and the client-side `Seer` registry."""

    url = jsapi_url or getattr(settings, "SEER_JSAPI_URL", DEFAULT_JSAPI_URL)
    return f"""
<script type="text/javascript" src="{url}"></script>
<script type="text/javascript">
  var Seer = Seer || {{ charts: [], chartsCount: 0, chartsData: [] }};
</script>
"""


def _default_element() -> str:
    return getattr(settings, "SEER_DEFAULT_ELEMENT", DEFAULT_ELEMENT)
