"""URL configuration for Seer demo views."""

from __future__ import annotations

from django.urls import path

from seer import views

app_name = "seer"

urlpatterns = [
    path("", views.column_chart_demo, name="column_chart_demo"),
]
