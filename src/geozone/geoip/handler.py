"""
GeoIP resolver: turns a style, URL and selector into a region/zone pair.

All lookups degrade quietly. A misconfigured resolver, an unreachable
service or an unparsable answer all produce an empty RegionZonePair (or
an empty string in raw mode); problems only show up in the logs.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config import load_geoip_config
from .dispatch import TaskDispatcher, get_dispatcher
from .extract import create_extractor, is_supported
from .fetch import fetch_url
from .types import HANDLER_NAMES, GeoIPConfig, HandlerKind, RegionZonePair

logger = logging.getLogger(__name__)


def resolve_kind(implementation: str) -> HandlerKind:
    """
    Map a style name to a usable HandlerKind.

    Unknown names, and known styles the running build cannot parse,
    become HandlerKind.NONE with a warning.
    """
    kind = HANDLER_NAMES.get(implementation)
    if kind is None:
        logger.warning(f"GeoIP style '{implementation}' is not recognized.")
        return HandlerKind.NONE
    if kind is not HandlerKind.NONE and not is_supported(kind):
        logger.warning(
            f"GeoIP style '{implementation}' is not supported in this installation."
        )
        return HandlerKind.NONE
    return kind


def _do_query(config: GeoIPConfig) -> RegionZonePair:
    if config.kind is HandlerKind.NONE:
        return RegionZonePair()
    extractor = create_extractor(config.kind)
    return extractor.extract(fetch_url(config.url), config.selector)


def _do_raw_query(config: GeoIPConfig) -> str:
    if config.kind is HandlerKind.NONE:
        return ""
    extractor = create_extractor(config.kind)
    return extractor.passthrough(fetch_url(config.url))


class GeoIPResolver:
    """
    Looks up the current region and timezone from a GeoIP service.

    The configuration is fixed at construction. The ``get`` methods block
    for one network round trip; the ``query`` methods run the same lookup
    on a worker thread and return a Future. Neither ever raises for
    network or parse failures.

    Example:
        resolver = GeoIPResolver("json", "https://geoip.example/lookup",
                                 "country,timezone")
        pair = resolver.query().result()
    """

    def __init__(
        self,
        implementation: str = "none",
        url: str = "",
        selector: str = "",
        dispatcher: Optional[TaskDispatcher] = None,
    ):
        self._config = GeoIPConfig(
            kind=resolve_kind(implementation), url=url, selector=selector
        )
        self._dispatcher = dispatcher

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], dispatcher: Optional[TaskDispatcher] = None
    ) -> "GeoIPResolver":
        """
        Create a resolver from a ``geoip`` settings block.

        Args:
            data: Mapping with optional keys style, url and selector
            dispatcher: Dispatcher for the asynchronous methods
        """
        return cls(
            str(data.get("style") or "none"),
            str(data.get("url") or ""),
            str(data.get("selector") or ""),
            dispatcher=dispatcher,
        )

    @classmethod
    def from_yaml(
        cls, path: Union[str, Path], dispatcher: Optional[TaskDispatcher] = None
    ) -> "GeoIPResolver":
        """
        Create a resolver from the ``geoip`` section of a YAML settings file.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the file has no usable geoip section
        """
        return cls.from_mapping(load_geoip_config(path), dispatcher=dispatcher)

    @property
    def config(self) -> GeoIPConfig:
        return self._config

    @property
    def kind(self) -> HandlerKind:
        return self._config.kind

    @property
    def url(self) -> str:
        return self._config.url

    @property
    def selector(self) -> str:
        return self._config.selector

    def is_valid(self) -> bool:
        return self._config.kind is not HandlerKind.NONE

    def get(self) -> RegionZonePair:
        """
        Look up the region and zone, blocking the calling thread.
        """
        if not self.is_valid():
            return RegionZonePair()
        return _do_query(self._config)

    def query(self) -> "Future[RegionZonePair]":
        """
        Look up the region and zone on a worker thread.
        """
        config = self._config.model_copy()
        return self._get_dispatcher().submit(lambda: _do_query(config))

    def get_raw(self) -> str:
        """
        Fetch the unparsed service response, blocking the calling thread.
        """
        if not self.is_valid():
            return ""
        return _do_raw_query(self._config)

    def query_raw(self) -> "Future[str]":
        """
        Fetch the unparsed service response on a worker thread.
        """
        config = self._config.model_copy()
        return self._get_dispatcher().submit(lambda: _do_raw_query(config))

    def _get_dispatcher(self) -> TaskDispatcher:
        return self._dispatcher or get_dispatcher()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(kind={self.kind.value}, "
            f"url={self.url!r}, selector={self.selector!r})"
        )
