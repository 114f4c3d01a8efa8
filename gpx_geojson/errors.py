# path: gpx-geojson/gpx_geojson/errors.py

from __future__ import annotations


class ConversionError(Exception):
    """Base class for failures that prevent a GPX document from converting."""


class MissingDependencyError(ConversionError, RuntimeError):
    """The XML parsing library is not installed."""


class GPXParseError(ConversionError, ValueError):
    """The input is not well-formed (or not safely parseable) XML."""
