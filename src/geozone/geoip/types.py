"""
Value types shared by the GeoIP resolver and its extractors.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class HandlerKind(Enum):
    """
    Response format handled by a GeoIP service.
    """

    NONE = "none"
    JSON = "json"
    XML = "xml"


# Exact, case-sensitive names accepted in configuration
HANDLER_NAMES = {
    "none": HandlerKind.NONE,
    "json": HandlerKind.JSON,
    "xml": HandlerKind.XML,
}


class GeoIPConfig(BaseModel):
    """
    Immutable lookup configuration: style, endpoint and selector.
    """

    kind: HandlerKind = Field(default=HandlerKind.NONE, description="Response format")
    url: str = Field(default="", description="GeoIP service endpoint")
    selector: str = Field(default="", description="Format-specific field locator")

    model_config = {"frozen": True}


class RegionZonePair(BaseModel):
    """
    Region and zone of a timezone, e.g. ("Europe", "Amsterdam").

    Both fields absent means the location is unknown.
    """

    region: Optional[str] = None
    zone: Optional[str] = None

    model_config = {"frozen": True}

    def is_valid(self) -> bool:
        return bool(self.region) and bool(self.zone)

    def __str__(self) -> str:
        if not self.region and not self.zone:
            return "unknown"
        return f"{self.region or ''}/{self.zone or ''}"


def split_tz_string(tz: str) -> RegionZonePair:
    """
    Split a timezone name like "Europe/Amsterdam" into region and zone.

    Quotes around the value are dropped and spaces become underscores.
    Any further parts stay with the zone, so "America/Argentina/Cordoba"
    gives ("America", "Argentina/Cordoba"). Values without a region
    separator produce an empty pair.
    """
    cleaned = tz.strip().replace('"', "").replace("'", "").replace(" ", "_")
    parts = [part for part in cleaned.split("/") if part]
    if len(parts) < 2:
        return RegionZonePair()
    return RegionZonePair(region=parts[0], zone="/".join(parts[1:]))
