# path: gpx-geojson/gpx_geojson/services/gpx_converter.py

from __future__ import annotations

from typing import List, Sequence, Tuple
from xml.etree.ElementTree import Element
import logging

from gpx_geojson.models.geojson_models import (
    Feature,
    FeatureCollection,
    FeatureProperties,
    GeoJSONDocument,
    LineStringGeometry,
    PointGeometry,
    to_geojson_text,
)
from gpx_geojson.services.feature_extractors import extract_track, extract_waypoint
from gpx_geojson.utils.geo import (
    bbox_wgs84,
    centroid,
    is_valid_point,
    zoom_for_distance,
)
from gpx_geojson.utils.xml import iter_named, parse_document

logger = logging.getLogger(__name__)

EMPTY_ZOOM = 11


def empty_properties() -> FeatureProperties:
    return FeatureProperties(center=(0.0, 0.0), zoom=EMPTY_ZOOM, distance=0.0, is_empty=True)


def empty_result() -> Feature:
    """Stand-in document for a GPX file without any track or waypoint."""
    return Feature(properties=empty_properties(), geometry=LineStringGeometry())


def extract_features(root: Element) -> Tuple[Feature, ...]:
    tracks = [extract_track(trk) for trk in iter_named(root, "trk")]
    waypoints = [extract_waypoint(wpt) for wpt in iter_named(root, "wpt")]
    return tuple(tracks + waypoints)


def coordinate_pool(features: Sequence[Feature]) -> List[Tuple[float, float]]:
    pool: List[Tuple[float, float]] = []
    for feature in features:
        geometry = feature.geometry
        if isinstance(geometry, LineStringGeometry):
            pool.extend(geometry.coordinates)
        elif isinstance(geometry, PointGeometry):
            pool.append(geometry.coordinates)
    # Drops the (0, 0) placeholder of invalid waypoints
    return [p for p in pool if is_valid_point(*p)]


def total_track_distance(features: Sequence[Feature]) -> float:
    return sum(f.properties.distance or 0.0 for f in features if f.kind == "track")


def assemble(features: Sequence[Feature]) -> GeoJSONDocument:
    if not features:
        return empty_result()

    if len(features) == 1:
        doc: GeoJSONDocument = features[0].model_copy(deep=True)
    else:
        doc = FeatureCollection(features=list(features))
    props = doc.properties

    pool = coordinate_pool(features)
    if not pool:
        logger.debug("GPX has features but no usable coordinates")
        props.center = (0.0, 0.0)
        props.distance = 0.0
        props.zoom = EMPTY_ZOOM
        props.is_empty = True
        return doc

    total = total_track_distance(features)
    props.center = centroid(bbox_wgs84(pool))
    props.zoom = zoom_for_distance(total)
    # a lone waypoint has no distance to report
    if isinstance(doc, FeatureCollection) or doc.kind == "track":
        props.distance = total
    return doc


def convert_gpx_document(content: bytes) -> GeoJSONDocument:
    root = parse_document(content)
    features = extract_features(root)
    logger.debug(f"Extracted {len(features)} feature(s) from GPX")
    return assemble(features)


def convert_gpx(content: bytes) -> str:
    """Convert raw GPX bytes to GeoJSON text.

    Raises:
        GPXParseError: the input is not well-formed XML
        MissingDependencyError: the XML parser is not installed
    """
    return to_geojson_text(convert_gpx_document(content))
