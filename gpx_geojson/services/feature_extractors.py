# path: gpx-geojson/gpx_geojson/services/feature_extractors.py

from __future__ import annotations

from typing import List, Optional, Tuple
from xml.etree.ElementTree import Element
import logging

from gpx_geojson.models.geojson_models import (
    Feature,
    FeatureProperties,
    LineStringGeometry,
    PointGeometry,
)
from gpx_geojson.utils.geo import is_valid_point, polyline_length_m
from gpx_geojson.utils.xml import child_text, float_attr, iter_named, parse_float

logger = logging.getLogger(__name__)

DEFAULT_TRACK_NAME = "Unnamed Track"
DEFAULT_WAYPOINT_NAME = "Waypoint"
INVALID_WAYPOINT_NAME = "Invalid Waypoint"


def read_lonlat(el: Element) -> Optional[Tuple[float, float]]:
    """(lon, lat) from an element's attributes, or None if unusable."""
    lat = float_attr(el, "lat")
    lon = float_attr(el, "lon")
    if not is_valid_point(lon, lat):
        return None
    return (lon, lat)


def extract_track(trk: Element) -> Feature:
    # trkpt may sit in one or more trkseg groups; segments are concatenated
    coordinates: List[Tuple[float, float]] = []
    dropped = 0
    for trkpt in iter_named(trk, "trkpt"):
        point = read_lonlat(trkpt)
        if point is None:
            dropped += 1
            continue
        coordinates.append(point)

    name = child_text(trk, "name") or DEFAULT_TRACK_NAME
    if dropped:
        logger.debug(f"Track {name!r}: dropped {dropped} invalid point(s)")

    return Feature(
        properties=FeatureProperties(
            name=name,
            type="track",
            distance=polyline_length_m(coordinates),
        ),
        geometry=LineStringGeometry(coordinates=coordinates),
    )


def extract_waypoint(wpt: Element) -> Feature:
    point = read_lonlat(wpt)
    if point is None:
        logger.debug(f"Waypoint with lat={wpt.get('lat')!r} lon={wpt.get('lon')!r} is invalid")
        return Feature(
            properties=FeatureProperties(name=INVALID_WAYPOINT_NAME, type="waypoint"),
            geometry=PointGeometry(coordinates=(0.0, 0.0)),
        )

    return Feature(
        properties=FeatureProperties(
            name=child_text(wpt, "name") or DEFAULT_WAYPOINT_NAME,
            type="waypoint",
            description=child_text(wpt, "desc") or child_text(wpt, "cmt"),
            elevation=parse_float(child_text(wpt, "ele")),
            symbol=child_text(wpt, "sym"),
        ),
        geometry=PointGeometry(coordinates=point),
    )
