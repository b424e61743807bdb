"""Decoding helpers turning loose caller mappings into chart schema objects.

Views and templates pass plain dictionaries (`chart_options={...}`,
`series={...}`). These helpers map them onto `ColumnChartOptions` and
`ChartSeries`, filling defaults for unset values.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .errors import InvalidOptionError, MissingInputError
from .schema import OPTION_NAMES, ChartSeries, ColumnChartOptions
from .validator import validate_colors

logger = logging.getLogger(__name__)

BOOLEAN_OPTIONS = frozenset({"enable_tooltip", "is_3_d", "is_stacked", "log_scale", "reverse_axis", "show_categories"})
NUMERIC_OPTIONS = frozenset(
    {
        "axis_font_size",
        "height",
        "legend_font_size",
        "max",
        "min",
        "title_font_size",
        "tooltip_font_size",
        "tooltip_height",
        "tooltip_width",
        "width",
    }
)


def decode_chart_options(payload: Mapping[str, Any] | None) -> ColumnChartOptions:
    """Decode chart options from a mapping.

    Args:
        payload: Option name to value. `None` values keep the option's default.
            Unknown keys are ignored.

    Returns:
        ColumnChartOptions instance.

    Raises:
        InvalidColorError: When `colors` contains a non-hex entry.
        InvalidOptionError: When a numeric option is not a number.
    """

    known: dict[str, Any] = {}
    for key, value in (payload or {}).items():
        name = str(key)
        if name not in OPTION_NAMES:
            logger.debug("Ignoring unknown chart option %r.", name)
            continue
        if value is None:
            continue
        if name in BOOLEAN_OPTIONS:
            value = _parse_bool(value)
        elif name in NUMERIC_OPTIONS:
            value = _parse_number(name, value)
        known[name] = value

    if "colors" in known:
        known["colors"] = validate_colors(known["colors"])
    return ColumnChartOptions(**known)


def decode_chart_series(payload: Mapping[str, Any] | None) -> ChartSeries:
    """Decode a data series definition from a mapping.

    Args:
        payload: Mapping with `data_series` and optional `series_label`,
            `data_label` and `data_method` accessors.

    Returns:
        ChartSeries instance.

    Raises:
        MissingInputError: When `payload` or its `data_series` is missing.
    """

    if payload is None:
        raise MissingInputError("A series definition is required to render a chart.")
    data_series = payload.get("data_series")
    if data_series is None:
        raise MissingInputError("series['data_series'] is required to render a chart.")
    return ChartSeries(
        data_series=data_series,
        series_label=payload.get("series_label"),
        data_label=payload.get("data_label"),
        data_method=payload.get("data_method"),
    )


def _parse_bool(value: object) -> bool:
    """Best-effort bool parsing; blank strings are False."""

    if isinstance(value, bool):
        return value
    normalized = str(value).strip().casefold()
    return normalized in {"1", "true", "yes", "on"}


def _parse_number(name: str, value: object) -> int | float:
    """Parse a numeric option, keeping ints as ints.

    Raises:
        InvalidOptionError: When `value` is not a number or numeric string.
    """

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise InvalidOptionError(f"Chart option {name!r} must be numeric, got {value!r}.") from None
