# path: gpx-geojson/gpx_geojson/api/routes/convert.py

from __future__ import annotations

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import Response

from gpx_geojson.config import settings
from gpx_geojson.errors import GPXParseError, MissingDependencyError
from gpx_geojson.services.gpx_converter import convert_gpx
from gpx_geojson.services.host_helpers import SNIFF_BYTES, is_geo_track_file

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/convert", tags=["convert"])

GEOJSON_MEDIA_TYPE = "application/geo+json"


@router.post("", response_class=Response)
async def convert_upload(file: UploadFile = File(...)) -> Response:
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_upload_bytes} bytes)",
        )
    if not is_geo_track_file(file.filename or "", content[:SNIFF_BYTES]):
        raise HTTPException(status_code=400, detail="Only GPX files are accepted")

    try:
        geojson = convert_gpx(content)
    except MissingDependencyError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except GPXParseError as e:
        logger.warning(f"Rejected {file.filename!r}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return Response(content=geojson, media_type=GEOJSON_MEDIA_TYPE)
