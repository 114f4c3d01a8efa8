"""Tests for the GPX-file predicate and file name inference."""
from __future__ import annotations

from datetime import date

import pytest

from gpx_geojson.config import Settings, normalize_extensions
from gpx_geojson.services.host_helpers import infer_date_and_title, is_geo_track_file


@pytest.mark.parametrize(
    "path,expected",
    [
        ("_rides/2021-06-13-morning.gpx", True),
        ("_rides/EVENING.GPX", True),
        ("_rides/notes.md", False),
        ("_rides/gpx", False),
        ("_rides/track.gpx.bak", False),
    ],
)
def test_is_geo_track_file_by_extension(path, expected):
    assert is_geo_track_file(path) is expected


def test_is_geo_track_file_with_custom_extensions():
    assert is_geo_track_file("ride.xml", extensions=["gpx", ".XML"])
    assert not is_geo_track_file("ride.gpx", extensions=["xml"])


def test_is_geo_track_file_sniffs_content():
    sniff = b'<?xml version="1.0"?>\n<gpx version="1.1" creator="x">'
    assert is_geo_track_file("export.dat", sniff)
    assert is_geo_track_file("export.dat", b"<gpx:gpx xmlns:gpx='http://www.topografix.com/GPX/1/1'>")
    assert not is_geo_track_file("export.dat", b"<gpxdata/>")
    assert not is_geo_track_file("export.dat", b"---\nlayout: post\n---")


@pytest.mark.parametrize(
    "raw,expected",
    [
        (["gpx"], [".gpx"]),
        ([" .GPX ", "xml"], [".gpx", ".xml"]),
        (["", " ", "."], []),
    ],
)
def test_normalize_extensions(raw, expected):
    assert normalize_extensions(raw) == expected


def test_custom_extensions_match_settings_normalization(monkeypatch):
    monkeypatch.setenv("GPX_GEOJSON_GPX_EXT", " .XML ,")
    custom = Settings()
    assert custom.extensions == normalize_extensions([" .XML ", ""])
    assert is_geo_track_file("ride.xml", extensions=[" .XML ", ""])
    assert not is_geo_track_file("ride.gpx", extensions=[" .XML ", ""])


def test_settings_extensions_are_normalized(monkeypatch):
    monkeypatch.setenv("GPX_GEOJSON_GPX_EXT", " GPX, .xml ,")
    assert Settings().extensions == [".gpx", ".xml"]


def test_settings_reject_empty_extension_list(monkeypatch):
    monkeypatch.setenv("GPX_GEOJSON_GPX_EXT", " , ")
    with pytest.raises(ValueError):
        Settings()


@pytest.mark.parametrize(
    "filename,expected",
    [
        ("2021-06-13-morning-ride.gpx", (date(2021, 6, 13), "Morning ride")),
        ("2021-6-3_gravel.gpx", (date(2021, 6, 3), "Gravel")),
        ("20210613_col_du_galibier.gpx", (date(2021, 6, 13), "Col du galibier")),
        ("13-June-2021-alps.gpx", (date(2021, 6, 13), "Alps")),
        ("3 sep 2019 coast.gpx", (date(2019, 9, 3), "Coast")),
        ("march-7-2020-commute.gpx", (date(2020, 3, 7), "Commute")),
        ("Sept_21_2018.gpx", (date(2018, 9, 21), None)),
        ("2021-06-13.gpx", (date(2021, 6, 13), None)),
        ("evening-loop.gpx", (None, "Evening loop")),
        ("_rides/2020-02-30-leap.gpx", (None, "Leap")),
    ],
)
def test_infer_date_and_title(filename, expected):
    assert infer_date_and_title(filename) == expected


def test_infer_date_and_title_unknown_month_name_is_title():
    assert infer_date_and_title("morning-13-2021.gpx") == (None, "Morning 13 2021")
