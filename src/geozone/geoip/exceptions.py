"""
Exceptions raised while loading GeoIP configuration.

Lookups themselves never raise; failures there produce empty results.
"""


class GeoIPError(Exception):
    """
    Base exception for GeoIP configuration problems.
    """

    pass


class ConfigurationError(GeoIPError):
    """
    Raised when a settings file has no usable GeoIP section.
    """

    pass
