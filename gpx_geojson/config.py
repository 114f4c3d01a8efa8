# path: gpx-geojson/gpx_geojson/config.py

from __future__ import annotations

from typing import Iterable, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_extensions(exts: Iterable[str]) -> List[str]:
    """Lower-case ".ext" strings; blanks are dropped, a leading dot is optional."""
    cleaned = (e.strip().lstrip(".").lower() for e in exts)
    return [f".{e}" for e in cleaned if e]


class Settings(BaseSettings):
    # Comma-separated, without the leading dot (e.g. "gpx,xml")
    gpx_ext: str = Field(default="gpx", description="File extensions treated as GPX tracks")
    log_level: str = Field(default="INFO", description="Logging level")
    max_upload_bytes: int = Field(default=20 * 1024 * 1024, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="GPX_GEOJSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("gpx_ext")
    @classmethod
    def validate_gpx_ext(cls, v: str) -> str:
        if not normalize_extensions(v.split(",")):
            raise ValueError("gpx_ext must name at least one extension")
        return v

    @property
    def extensions(self) -> List[str]:
        return normalize_extensions(self.gpx_ext.split(","))


settings = Settings()
