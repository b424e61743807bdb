"""URL configuration for the Seer demo site."""

from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("", include("seer.urls")),
]
