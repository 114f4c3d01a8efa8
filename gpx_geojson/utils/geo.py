# path: gpx-geojson/gpx_geojson/utils/geo.py

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple
import math

from gpx_geojson.models.geojson_models import BoundingBox


EARTH_RADIUS_M = 6371000.0

# (lon, lat); either side may be missing
LonLat = Tuple[Optional[float], Optional[float]]

# (min total distance in meters, zoom); first match wins
ZOOM_THRESHOLDS = (
    (100_000.0, 8),
    (50_000.0, 9),
    (20_000.0, 10),
    (10_000.0, 11),
    (5_000.0, 12),
)
DEFAULT_ZOOM = 13


def is_valid_point(lon: Optional[float], lat: Optional[float]) -> bool:
    if lon is None or lat is None:
        return False
    if math.isnan(lon) or math.isnan(lat):
        return False
    if not (-180.0 <= lon <= 180.0) or not (-90.0 <= lat <= 90.0):
        return False
    # (0, 0) is what broken receivers emit before a fix
    return not (lon == 0.0 and lat == 0.0)


def haversine_m(a: Optional[LonLat], b: Optional[LonLat]) -> float:
    """Great-circle distance in meters between two (lon, lat) points.

    Missing or invalid points contribute no distance.
    """
    if a is None or b is None or not is_valid_point(*a) or not is_valid_point(*b):
        return 0.0
    a_lon, a_lat = a
    b_lon, b_lat = b
    phi1 = math.radians(a_lat)
    phi2 = math.radians(b_lat)
    dphi = math.radians(b_lat - a_lat)
    dlmb = math.radians(b_lon - a_lon)

    s = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    # clamp: rounding can push s a hair past 1 for antipodal points
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(min(1.0, s)))


def polyline_length_m(points_lonlat: Sequence[LonLat]) -> float:
    total = 0.0
    for i in range(1, len(points_lonlat)):
        total += haversine_m(points_lonlat[i - 1], points_lonlat[i])
    return total


def bbox_wgs84(points_lonlat: Iterable[LonLat]) -> BoundingBox:
    present = [p for p in points_lonlat if p[0] is not None and p[1] is not None]
    if not present:
        return BoundingBox(min_lon=0.0, min_lat=0.0, max_lon=0.0, max_lat=0.0)
    lons = [p[0] for p in present]
    lats = [p[1] for p in present]
    return BoundingBox(
        min_lon=min(lons),
        min_lat=min(lats),
        max_lon=max(lons),
        max_lat=max(lats),
    )


def centroid(box: BoundingBox) -> Tuple[float, float]:
    """Center of a bounding box as (lat, lon).

    Latitude comes first, unlike GeoJSON coordinates: the map renderer that
    consumes ``properties.center`` expects it that way.
    """
    bounds = (box.min_lon, box.min_lat, box.max_lon, box.max_lat)
    if any(v is None for v in bounds):
        return (0.0, 0.0)
    lat = (box.min_lat + box.max_lat) / 2
    lon = (box.min_lon + box.max_lon) / 2
    return (lat, lon)


def zoom_for_distance(total_distance_m: float) -> int:
    for threshold, zoom in ZOOM_THRESHOLDS:
        if total_distance_m > threshold:
            return zoom
    return DEFAULT_ZOOM
