"""
GeoZone: GeoIP-based region and timezone lookup.

Subpackages
-----------
- geoip:       Resolver, response extractors, fetching and dispatch
- plugins:     Command line plugins
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version(__name__)
except PackageNotFoundError:  # local editable install
    __version__ = "0.0.0-dev"

__all__ = [
    "geoip",
]

from . import geoip
