"""
GeoIP lookup: resolver, extractors, fetching and background dispatch.
"""

from .config import load_geoip_config
from .dispatch import TaskDispatcher, get_dispatcher, shutdown_dispatcher
from .exceptions import ConfigurationError, GeoIPError
from .extract import (
    BaseExtractor,
    ExtractorRegistry,
    JsonExtractor,
    XmlExtractor,
    create_extractor,
    list_extractor_kinds,
    register_extractor,
    xml_supported,
)
from .fetch import fetch_url
from .handler import GeoIPResolver, resolve_kind
from .types import GeoIPConfig, HandlerKind, RegionZonePair, split_tz_string

__all__ = [
    "GeoIPResolver",
    "resolve_kind",
    "GeoIPConfig",
    "HandlerKind",
    "RegionZonePair",
    "split_tz_string",
    "BaseExtractor",
    "ExtractorRegistry",
    "JsonExtractor",
    "XmlExtractor",
    "create_extractor",
    "list_extractor_kinds",
    "register_extractor",
    "xml_supported",
    "fetch_url",
    "TaskDispatcher",
    "get_dispatcher",
    "shutdown_dispatcher",
    "load_geoip_config",
    "GeoIPError",
    "ConfigurationError",
]
