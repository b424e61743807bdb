"""Serialize chart inputs into Google Visualization DataTable statements.

The builder emits three fragments for the chart script:

- column declarations (`addColumn`),
- row labels and cell values (`addRows` / `setCell`),
- the options object literal.

Column 0 always holds the row label; data columns start at 1.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Sequence
from decimal import Decimal

from .errors import MissingInputError
from .records import Accessor, read_label, read_value
from .schema import NONSTRING_OPTIONS, STRING_OPTIONS, ColumnChartOptions
from .validator import is_preformatted_colors

DATA_TABLE = "Seer.chartsData[chartIndex]"
AXIS_COLUMN_LABEL = "Date"
INDENT = " " * 12


class ChartDataBuilder:
    """Build the DataTable and options fragments of a column chart script.

    Args:
        data: Outer collection; each element becomes one data column header.
        data_series: One inner sequence of records per data column.
    """

    def __init__(self, data: Iterable[object] | None, data_series: Sequence[Sequence[object]] | None) -> None:
        if data is None:
            raise MissingInputError("The chart data collection is required to render a chart.")
        if data_series is None:
            raise MissingInputError("A data series collection is required to render a chart.")
        self.data = list(data)
        self.data_series = [list(series) for series in data_series]

    def build_columns(self, series_label: Accessor) -> str:
        """Return one axis column plus one number column per `data` element."""

        lines = [f"{DATA_TABLE}.addColumn('string', {js_string(AXIS_COLUMN_LABEL)});"]
        for datum in self.data:
            label = read_label(datum, series_label)
            lines.append(f"{DATA_TABLE}.addColumn('number', {js_string(label)});")
        return _join(lines)

    def data_rows(self, data_label: Accessor) -> list[object]:
        """Return the distinct row labels across all series in first-seen order.

        Labels are compared as returned by the accessor, so `1` and `"1"` are
        separate rows.
        """

        rows: list[object] = []
        for series in self.data_series:
            for record in series:
                label = read_label(record, data_label)
                if label not in rows:
                    rows.append(label)
        return rows

    def build_rows(self, data_label: Accessor) -> str:
        """Return the `addRows` call and one label cell per row.

        Row indexes follow the label union order only; they are not matched
        against the records of each series.
        """

        rows = self.data_rows(data_label)
        return "\n".join((self.build_row_count(rows), self.build_label_cells(rows)))

    @staticmethod
    def build_row_count(rows: Sequence[object]) -> str:
        """Return the `addRows` call for an already computed row domain."""

        return _join([f"{DATA_TABLE}.addRows({len(rows)});"])

    @staticmethod
    def build_label_cells(rows: Sequence[object]) -> str:
        """Return one column 0 label cell per row."""

        return _join(
            [f"{DATA_TABLE}.setCell({index}, 0, {js_string(label)});" for index, label in enumerate(rows)]
        )

    def build_cells(self, data_method: Accessor) -> str:
        """Return one value cell per record, at (record index, series index + 1)."""

        lines: list[str] = []
        for column, series in enumerate(self.data_series, start=1):
            for row, record in enumerate(series):
                value = read_value(record, data_method)
                lines.append(f"{DATA_TABLE}.setCell({row}, {column}, {js_literal(value)});")
        return _join(lines)

    @staticmethod
    def build_options(options: ColumnChartOptions) -> str:
        """Return the `var options = {...};` literal for every set option."""

        entries: list[str] = []
        for name in NONSTRING_OPTIONS:
            value = getattr(options, name)
            if value is None:
                continue
            rendered = format_colors(value) if name == "colors" else js_literal(value)
            entries.append(f"{camelize(name)}: {rendered}")
        for name in STRING_OPTIONS:
            value = getattr(options, name)
            if value is None:
                continue
            entries.append(f"{camelize(name)}: {js_string(value)}")

        if not entries:
            return f"{INDENT}var options = {{}};"
        body = ",\n".join(f"{INDENT}  {entry}" for entry in entries)
        return f"{INDENT}var options = {{\n{body}\n{INDENT}}};"


def camelize(name: str) -> str:
    """Convert a snake_case option name to the chart API's lowerCamelCase."""

    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def format_colors(colors: tuple[str, ...] | str) -> str:
    """Render the colors option as a JavaScript array literal.

    Hex colors lose their leading `#`; a preformatted `darker` literal is
    emitted unchanged.
    """

    if is_preformatted_colors(colors):
        return str(colors)
    if isinstance(colors, str):
        colors = (colors,)
    return "[" + ",".join(js_string(color.lstrip("#")) for color in colors) + "]"


def js_string(value: object) -> str:
    """Quote `value` as a single-quoted JavaScript string."""

    text = str(value)
    text = text.replace("\\", "\\\\").replace("'", "\\'")
    text = text.replace("\n", "\\n").replace("\r", "\\r")
    text = text.replace("</", "<\\/")
    return f"'{text}'"


def js_literal(value: object) -> str:
    """Render a Python value as a bare JavaScript literal."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and not math.isfinite(value):
        return "null"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, Decimal):
        return "null" if not value.is_finite() else str(value)
    return js_string(value)


def _join(lines: list[str]) -> str:
    return "\n".join(f"{INDENT}{line}" for line in lines)
