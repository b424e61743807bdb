"""Reusable Django app that renders Google Visualization charts."""
