"""Throttler name extractors for decorators and module registrations."""

from typing import Tuple

from .base import CONFIG_FIELD_NAMES, BaseExtractor, Extractor
from .decorators import DecoratorNameExtractor
from .modules import ModuleDefinitionExtractor
from .spans import BACKENDS, DEFAULT_BACKEND, get_matcher


def build_extractors(
    backend: str = DEFAULT_BACKEND,
) -> Tuple[DecoratorNameExtractor, ModuleDefinitionExtractor]:
    """Create the (used, defined) extractor pair for ``backend``."""
    return DecoratorNameExtractor(backend), ModuleDefinitionExtractor(backend)


__all__ = [
    "BACKENDS",
    "CONFIG_FIELD_NAMES",
    "DEFAULT_BACKEND",
    "BaseExtractor",
    "DecoratorNameExtractor",
    "Extractor",
    "ModuleDefinitionExtractor",
    "build_extractors",
    "get_matcher",
]
