"""Validation for ColumnChartOptions.

Options usually come straight from view code, so validation fails fast and
reports every problem at once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidColorError, InvalidOptionError
from .schema import ColumnChartOptions

_HEX_COLOR = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating chart options."""

    is_valid: bool
    errors: tuple[str, ...] = ()


def is_hex_color(value: object) -> bool:
    """Return True when `value` is a 3 or 6 digit hex color, `#` optional."""

    return isinstance(value, str) and _HEX_COLOR.match(value) is not None


def is_preformatted_colors(colors: object) -> bool:
    """Return True for a JavaScript literal of 3D `{color, darker}` objects."""

    return isinstance(colors, str) and "darker" in colors


def validate_colors(colors: object) -> tuple[str, ...] | str:
    """Normalize and validate a colors option.

    Args:
        colors: A single hex color, a sequence of hex colors, or a preformatted
            JavaScript literal containing `darker` entries.

    Returns:
        A tuple of hex colors, or the preformatted literal unchanged.

    Raises:
        InvalidColorError: When any entry is not a hex color.
    """

    if is_preformatted_colors(colors):
        return colors  # type: ignore[return-value]
    if isinstance(colors, str):
        colors = (colors,)
    if not isinstance(colors, (list, tuple)):
        raise InvalidColorError(f"Invalid color option: {colors!r}.")
    for color in colors:
        if not is_hex_color(color):
            raise InvalidColorError(f"Invalid color option: {color!r}.")
    return tuple(colors)


def validate_chart_options(options: ColumnChartOptions) -> ValidationResult:
    """Validate a ColumnChartOptions instance.

    Args:
        options: Options to validate.

    Returns:
        ValidationResult listing every error found.
    """

    errors: list[str] = []

    for name in ("height", "width"):
        value = getattr(options, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(f"ColumnChartOptions.{name} must be a positive integer, got {value!r}.")

    for name in ("axis_font_size", "legend_font_size", "title_font_size", "tooltip_font_size",
                 "tooltip_height", "tooltip_width"):
        value = getattr(options, name)
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
            errors.append(f"ColumnChartOptions.{name} must be numeric, got {value!r}.")

    if options.min is not None and options.max is not None and options.min > options.max:
        errors.append(f"ColumnChartOptions.min ({options.min!r}) is greater than max ({options.max!r}).")

    try:
        validate_colors(options.colors)
    except InvalidColorError as exc:
        errors.append(str(exc))

    return ValidationResult(is_valid=not errors, errors=tuple(errors))


def ensure_valid_chart_options(options: ColumnChartOptions) -> ColumnChartOptions:
    """Return `options` unchanged or raise with every validation error.

    Raises:
        InvalidOptionError: When any option, colors included, is invalid.
    """

    result = validate_chart_options(options)
    if not result.is_valid:
        raise InvalidOptionError(" ".join(result.errors))
    return options
