"""Views for the Seer demo page."""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.shortcuts import render

from seer.demo import demo_widgets


def column_chart_demo(request: HttpRequest) -> HttpResponse:
    """Render a page embedding one column chart of demo widget sales."""

    widgets = demo_widgets()
    context = {
        "widgets": widgets,
        "series": {
            "series_label": "name",
            "data_label": "label",
            "data_method": "quantity",
            "data_series": [widget.stats for widget in widgets],
        },
        "chart_options": {
            "height": 300,
            "width": 600,
            "title": "Widget Quantities",
            "title_x": "Day",
            "title_y": "Quantity",
            "is_stacked": request.GET.get("stacked") == "1",
        },
    }
    return render(request, "seer/column_chart_demo.html", context)
