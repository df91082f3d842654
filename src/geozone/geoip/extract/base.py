"""
Abstract base class for GeoIP response extractors.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Type

from ..types import HandlerKind, RegionZonePair, split_tz_string

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """
    Abstract base class for extractors that locate a region and zone
    inside a GeoIP service response.

    A selector holds either one locator naming a timezone string
    ("time_zone"), or two comma-separated locators naming the region
    and zone fields directly ("country,timezone"). A selector with one
    empty half ("TimeZone,") counts as a single locator. What a locator
    means is up to each format.
    """

    #: Selector used when the configured one is empty.
    default_selector: str = ""

    #: Exceptions that signal an unparsable body for this format.
    parse_errors: Tuple[Type[BaseException], ...] = (ValueError,)

    def __init__(self):
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    @property
    @abstractmethod
    def kind(self) -> HandlerKind:
        """
        Return the response format handled by this extractor.
        """
        pass

    @abstractmethod
    def parse(self, body: bytes) -> Any:
        """
        Parse a response body into a format-specific document.
        """
        pass

    @abstractmethod
    def locate(self, document: Any, locator: str) -> Optional[str]:
        """
        Return the text found at ``locator`` in ``document``, if any.
        """
        pass

    def extract(self, body: bytes, selector: str) -> RegionZonePair:
        """
        Extract a region and zone from a response body.

        Args:
            body: Raw response bytes, possibly empty
            selector: Format-specific selector, empty for the default

        Returns:
            RegionZonePair, empty or partial when nothing usable was found
        """
        if not body:
            self.logger.debug("Empty response, no location available")
            return RegionZonePair()

        try:
            document = self.parse(body)
        except self.parse_errors as e:
            self.logger.warning(f"Unparsable {self.kind.value} response: {e}")
            return RegionZonePair()

        locators = [part.strip() for part in selector.split(",", 1)]
        locators = [part for part in locators if part] or [self.default_selector]
        if len(locators) == 2:
            region_locator, zone_locator = locators
            return RegionZonePair(
                region=self.locate(document, region_locator),
                zone=self.locate(document, zone_locator),
            )

        selector = locators[0]

        tz = self.locate(document, selector)
        if tz is None:
            self.logger.debug(f"No value found for selector '{selector}'")
            return RegionZonePair()
        return split_tz_string(tz)

    def passthrough(self, body: bytes) -> str:
        """
        Decode a response body as text without parsing it.
        """
        return body.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
