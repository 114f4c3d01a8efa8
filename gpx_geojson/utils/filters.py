# path: gpx-geojson/gpx_geojson/utils/filters.py

"""Template-side helpers for rendering converted GeoJSON."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional, Union
import json
import math


def geojson_linestring_length(geojson: Union[str, bytes, Mapping[str, Any]]) -> Optional[float]:
    """``properties.distance`` of a converted document, given as text or a parsed mapping."""
    if isinstance(geojson, (str, bytes)):
        geojson = json.loads(geojson)
    return (geojson.get("properties") or {}).get("distance")


def humanize_distance(meters: Union[int, float, str, None]) -> str:
    """Whole kilometers, halves rounded away from zero; unreadable input counts as 0."""
    try:
        value = float(meters or 0)
    except (TypeError, ValueError):
        value = 0.0
    if math.isnan(value) or math.isinf(value):
        value = 0.0
    km = (Decimal(str(value)) / 1000).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{int(km)} km"
