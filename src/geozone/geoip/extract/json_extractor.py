"""
Extractor for JSON GeoIP services.

Locators are dot-separated key paths into nested objects, so a service
answering ``{"location": {"time_zone": "Europe/Berlin"}}`` is read with
the selector ``location.time_zone``.
"""

import json
from typing import Any, Optional

from ..types import HandlerKind
from .base import BaseExtractor
from .registry import register_extractor


@register_extractor(HandlerKind.JSON)
class JsonExtractor(BaseExtractor):
    """
    Extractor for services that answer with a JSON object.
    """

    default_selector = "time_zone"
    parse_errors = (ValueError, RecursionError)

    @property
    def kind(self) -> HandlerKind:
        return HandlerKind.JSON

    def parse(self, body: bytes) -> Any:
        return json.loads(body)

    def locate(self, document: Any, locator: str) -> Optional[str]:
        """Walk ``locator`` key by key; anything but a scalar leaf is a miss."""
        if not locator:
            return None

        value = document
        for key in locator.split("."):
            if not isinstance(value, dict) or key not in value:
                return None
            value = value[key]

        if value is None or isinstance(value, (dict, list)):
            return None
        text = value if isinstance(value, str) else str(value)
        return text or None
