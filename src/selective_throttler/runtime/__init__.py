"""Runtime support imported by the generated decorator modules."""

from .decorators import build_selective_throttle, build_single_throttle
from .metadata import AnnotationSink, AttributeSink, read_metadata
from .options import ThrottlerOptions

__all__ = [
    "AnnotationSink",
    "AttributeSink",
    "ThrottlerOptions",
    "build_selective_throttle",
    "build_single_throttle",
    "read_metadata",
]
