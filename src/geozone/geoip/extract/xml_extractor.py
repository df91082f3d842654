"""
Extractor for XML GeoIP services.

Requires lxml; importing this module without it raises ImportError,
which leaves the XML style unregistered.
"""

from typing import Any, Optional

from lxml import etree

from ..types import HandlerKind
from .base import BaseExtractor
from .registry import register_extractor


@register_extractor(HandlerKind.XML)
class XmlExtractor(BaseExtractor):
    """
    Extractor for services that answer with an XML document.

    Locators are element tag names, matched in any namespace. The first
    matching element with non-empty text wins.
    """

    default_selector = "TimeZone"
    parse_errors = (etree.XMLSyntaxError, ValueError)

    @property
    def kind(self) -> HandlerKind:
        return HandlerKind.XML

    def parse(self, body: bytes) -> Any:
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        return etree.fromstring(body, parser=parser)

    def locate(self, document: Any, locator: str) -> Optional[str]:
        if not locator:
            return None

        for element in document.iter(f"{{*}}{locator}"):
            text = "".join(element.itertext()).strip()
            if text:
                return text
        return None
