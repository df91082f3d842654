"""
Response extractors for GeoIP services.

Each supported response format has one extractor, registered by format
on import. XML support depends on the optional lxml dependency.
"""

# Core components
from .base import BaseExtractor

# Registry and factory
from .registry import (
    ExtractorRegistry,
    create_extractor,
    is_supported,
    list_extractor_kinds,
    register_extractor,
    xml_supported,
)

# Individual extractors (auto-registered via decorators)
from .json_extractor import JsonExtractor

try:
    from .xml_extractor import XmlExtractor
except ImportError:  # lxml not installed: XML style stays unavailable
    XmlExtractor = None

__all__ = [
    # Core
    "BaseExtractor",
    # Registry
    "ExtractorRegistry",
    "register_extractor",
    "create_extractor",
    "is_supported",
    "list_extractor_kinds",
    "xml_supported",
    # Extractors
    "JsonExtractor",
    "XmlExtractor",
]
