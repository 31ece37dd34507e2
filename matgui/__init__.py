"""Signals, views, layouts, widgets, paint styles, bitmap font data and shader translation for a small GUI toolkit."""

__version__ = "0.1.0"