"""Google Visualization chart rendering helpers.

Charts are rendered from typed option objects and caller data collections
into `<script>` blocks. This package contains the schema, validation, data
table serialization and rendering utilities used by the template tags.
"""

from .errors import (
    AccessorNotFoundError,
    InvalidColorError,
    InvalidOptionError,
    MissingInputError,
    SeerError,
    UnknownVisualizerError,
)
from .render import ChartIndexCounter, RenderedChart, init_visualization, render_column_chart, visualize
from .schema import ChartSeries, ColumnChartOptions

__all__ = [
    "AccessorNotFoundError",
    "ChartIndexCounter",
    "ChartSeries",
    "ColumnChartOptions",
    "InvalidColorError",
    "InvalidOptionError",
    "MissingInputError",
    "RenderedChart",
    "SeerError",
    "UnknownVisualizerError",
    "init_visualization",
    "render_column_chart",
    "visualize",
]
