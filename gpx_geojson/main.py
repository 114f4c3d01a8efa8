# path: gpx-geojson/gpx_geojson/main.py

import logging
import sys

from fastapi import FastAPI

from gpx_geojson.config import settings
from gpx_geojson.api.routes.convert import router as convert_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)

app = FastAPI(title="gpx-geojson")

app.include_router(convert_router)


@app.get("/health")
def health():
    return {"status": "ok"}
