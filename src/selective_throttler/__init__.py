"""Selective throttler: build-time discovery of throttler names and decorators."""

from .skip import derive_skip

__all__ = ["__version__", "derive_skip"]

__version__ = "0.1.0"
