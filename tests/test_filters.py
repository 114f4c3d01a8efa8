"""Tests for the template helpers."""
from __future__ import annotations

import pytest

from gpx_geojson.services.gpx_converter import convert_gpx
from gpx_geojson.utils.filters import geojson_linestring_length, humanize_distance


def test_linestring_length_from_text(two_segments_gpx):
    text = convert_gpx(two_segments_gpx)
    assert geojson_linestring_length(text) == pytest.approx(60_045, abs=1)


def test_linestring_length_from_mapping():
    assert geojson_linestring_length({"properties": {"distance": 1234.5}}) == 1234.5
    assert geojson_linestring_length({"properties": {}}) is None
    assert geojson_linestring_length({}) is None


@pytest.mark.parametrize(
    "meters,expected",
    [
        (60_045.3, "60 km"),
        (999, "1 km"),
        (0, "0 km"),
        (None, "0 km"),
        ("12400", "12 km"),
        (500, "1 km"),
        (2500, "3 km"),
        (4500.0, "5 km"),
        (-2500, "-3 km"),
        ("n/a", "0 km"),
        ("nan", "0 km"),
    ],
)
def test_humanize_distance(meters, expected):
    assert humanize_distance(meters) == expected
