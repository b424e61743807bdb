"""Template tags that embed Seer charts in Django templates.

Usage:

    {% load seer_tags %}
    {% seer_init %}
    <div id="chart"></div>
    {% visualize widgets as="column_chart" in_element="chart" series=series chart_options=options %}
"""

from __future__ import annotations

from typing import Any

from django import template
from django.utils.safestring import SafeString, mark_safe

from seer.charting.render import ChartIndexCounter, init_visualization, visualize as visualize_chart

register = template.Library()

_COUNTER_KEY = "seer_chart_index_counter"


@register.simple_tag
def seer_init() -> SafeString:
    """Emit the Google JS API loader and the client-side chart registry."""

    return mark_safe(init_visualization())


@register.simple_tag(takes_context=True)
def visualize(context: template.Context, data: Any, **kwargs: Any) -> SafeString:
    """Render `data` as a chart script.

    Keyword arguments mirror `seer.charting.visualize`: `as` (or `as_`),
    `series`, `chart_options` and `in_element`. Chart indexes are assigned
    per template render, so two charts on one page never share an index.
    """

    as_ = kwargs.pop("as", None) or kwargs.pop("as_", None) or "column_chart"
    rendered = visualize_chart(
        data,
        as_=as_,
        series=kwargs.get("series"),
        chart_options=kwargs.get("chart_options"),
        in_element=kwargs.get("in_element"),
        counter=_page_counter(context),
    )
    return mark_safe(rendered.script)


def _page_counter(context: template.Context) -> ChartIndexCounter:
    """Return the chart index counter for the current template render."""

    render_context = context.render_context
    # The innermost dict is scoped per template; the first one spans the whole render.
    root = render_context.dicts[0]
    counter = root.get(_COUNTER_KEY)
    if counter is None:
        counter = ChartIndexCounter()
        root[_COUNTER_KEY] = counter
    return counter
