"""Shared fixtures: sample files and a small GPX document builder."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

import pytest

SAMPLES = Path(__file__).parent / "samples"

GPX_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">'


def trk(points: Iterable[Tuple[str, str]], name: Optional[str] = None) -> str:
    """Build a <trk> with one segment from (lon, lat) attribute strings."""
    pts = "".join(f'<trkpt lon="{lon}" lat="{lat}"/>' for lon, lat in points)
    name_el = f"<name>{name}</name>" if name is not None else ""
    return f"<trk>{name_el}<trkseg>{pts}</trkseg></trk>"


def wpt(lon: str, lat: str, inner: str = "") -> str:
    return f'<wpt lon="{lon}" lat="{lat}">{inner}</wpt>'


def gpx(*children: str) -> bytes:
    return (GPX_HEADER + "".join(children) + "</gpx>").encode("utf-8")


@pytest.fixture
def two_segments_gpx() -> bytes:
    return (SAMPLES / "two_segments.gpx").read_bytes()


@pytest.fixture
def empty_gpx() -> bytes:
    return (SAMPLES / "empty.gpx").read_bytes()
