# path: gpx-geojson/gpx_geojson/models/geojson_models.py

from __future__ import annotations

from typing import List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


FeatureKind = Literal["track", "waypoint"]


class BoundingBox(BaseModel):
    min_lon: Optional[float] = None
    min_lat: Optional[float] = None
    max_lon: Optional[float] = None
    max_lat: Optional[float] = None


class LineStringGeometry(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: List[Tuple[float, float]] = Field(default_factory=list)  # (lon, lat)


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: Tuple[float, float] = (0.0, 0.0)  # (lon, lat)

    @field_validator("coordinates")
    @classmethod
    def validate_coords(cls, coords: Tuple[float, float]):
        lon, lat = coords
        if not (-180.0 <= lon <= 180.0):
            raise ValueError(f"lon out of range [-180,180]: {lon}")
        if not (-90.0 <= lat <= 90.0):
            raise ValueError(f"lat out of range [-90,90]: {lat}")
        return coords


Geometry = Union[LineStringGeometry, PointGeometry]


class FeatureProperties(BaseModel):
    """Properties shared by per-feature and aggregate GeoJSON objects.

    Unset fields are left out of the serialized document, so a track only
    carries ``distance`` and only degenerate results carry ``isEmpty``.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    type: Optional[FeatureKind] = None
    distance: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None
    elevation: Optional[float] = None
    symbol: Optional[str] = None
    center: Optional[Tuple[float, float]] = None  # (lat, lon)
    zoom: Optional[int] = None
    is_empty: Optional[bool] = Field(default=None, alias="isEmpty")


class Feature(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: FeatureProperties = Field(default_factory=FeatureProperties)
    geometry: Geometry = Field(discriminator="type")

    @property
    def kind(self) -> Optional[FeatureKind]:
        return self.properties.type

    @property
    def name(self) -> Optional[str]:
        return self.properties.name


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    properties: FeatureProperties = Field(default_factory=FeatureProperties)
    features: List[Feature]


GeoJSONDocument = Union[Feature, FeatureCollection]


def to_geojson_text(doc: GeoJSONDocument) -> str:
    return doc.model_dump_json(by_alias=True, exclude_none=True)
