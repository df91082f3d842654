"""
Registry mapping response formats to extractor classes.

Extractors register themselves through ``register_extractor``; a format
whose backend is not installed simply never registers, which is how
``is_supported`` knows what the running build can handle.
"""

import logging
from typing import Dict, List, Optional, Type

from ..types import HandlerKind
from .base import BaseExtractor

logger = logging.getLogger(__name__)


class ExtractorRegistry:
    """
    Registry for extractor classes keyed by HandlerKind.
    """

    _extractors: Dict[HandlerKind, Type[BaseExtractor]] = {}

    @classmethod
    def register(
        cls, kind: HandlerKind, extractor_class: Type[BaseExtractor]
    ) -> None:
        """
        Register an extractor class for a response format.

        Args:
            kind: Response format handled by the class
            extractor_class: Extractor class that inherits from BaseExtractor
        """
        if not issubclass(extractor_class, BaseExtractor):
            raise ValueError(
                f"Extractor class must inherit from BaseExtractor: {extractor_class}"
            )
        if kind is HandlerKind.NONE:
            raise ValueError("Cannot register an extractor for HandlerKind.NONE")

        cls._extractors[kind] = extractor_class
        logger.debug(
            f"Registered extractor: {kind.value} -> {extractor_class.__name__}"
        )

    @classmethod
    def unregister(cls, kind: HandlerKind) -> None:
        """
        Remove an extractor from the registry.
        """
        if kind in cls._extractors:
            del cls._extractors[kind]
            logger.debug(f"Unregistered extractor: {kind.value}")

    @classmethod
    def get_available_kinds(cls) -> List[HandlerKind]:
        """
        Get list of all response formats with a registered extractor.
        """
        return list(cls._extractors.keys())

    @classmethod
    def is_supported(cls, kind: HandlerKind) -> bool:
        return kind in cls._extractors

    @classmethod
    def create_extractor(cls, kind: HandlerKind) -> BaseExtractor:
        """
        Create an extractor for the given response format.

        Raises:
            ValueError: If no extractor is registered for ``kind``
        """
        if kind not in cls._extractors:
            raise ValueError(f"No extractor registered for: {kind.value}")
        return cls._extractors[kind]()


def register_extractor(
    kind: HandlerKind, extractor_class: Optional[Type[BaseExtractor]] = None
):
    """
    Decorator and function for registering extractors.

    Can be used as:
    1. Function: register_extractor(HandlerKind.JSON, JsonExtractor)
    2. Decorator: @register_extractor(HandlerKind.JSON)
    """

    def decorator(cls: Type[BaseExtractor]) -> Type[BaseExtractor]:
        ExtractorRegistry.register(kind, cls)
        return cls

    if extractor_class is not None:
        ExtractorRegistry.register(kind, extractor_class)
        return extractor_class
    return decorator


def create_extractor(kind: HandlerKind) -> BaseExtractor:
    """
    Create the extractor for a response format.
    """
    return ExtractorRegistry.create_extractor(kind)


def is_supported(kind: HandlerKind) -> bool:
    """
    Check whether the running build can parse the given format.
    """
    return ExtractorRegistry.is_supported(kind)


def list_extractor_kinds() -> List[HandlerKind]:
    """List all response formats with an available extractor."""
    return ExtractorRegistry.get_available_kinds()


def xml_supported() -> bool:
    return ExtractorRegistry.is_supported(HandlerKind.XML)
