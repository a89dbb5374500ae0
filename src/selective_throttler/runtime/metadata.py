"""Throttler metadata protocol shared with the host framework's guard.

Keys are the field constant followed directly by the throttler name, e.g.
``THROTTLER:LIMITsensitive`` or ``THROTTLER:SKIPburst``.
"""

from typing import Any, Dict, Protocol

THROTTLER_TTL = "THROTTLER:TTL"
THROTTLER_LIMIT = "THROTTLER:LIMIT"
THROTTLER_SKIP = "THROTTLER:SKIP"
THROTTLER_BLOCK_DURATION = "THROTTLER:BLOCK_DURATION"
THROTTLER_TRACKER = "THROTTLER:TRACKER"
THROTTLER_KEY_GENERATOR = "THROTTLER:KEY_GENERATOR"

METADATA_ATTRIBUTE = "__throttler_metadata__"


def metadata_key(field: str, throttler_name: str) -> str:
    """Build the metadata key for one field of one throttler."""
    return field + throttler_name


class AnnotationSink(Protocol):
    """Destination for metadata written by the selective decorators."""

    def set_field(self, target: Any, key: str, value: Any) -> None: ...


class AttributeSink:
    """Store metadata in a dict on the decorated function or class.

    The dict lives in the target's own ``__dict__`` so a subclass never
    shares (or mutates) its parent's metadata.
    """

    def set_field(self, target: Any, key: str, value: Any) -> None:
        store = vars(target).get(METADATA_ATTRIBUTE)
        if store is None:
            store = {}
            setattr(target, METADATA_ATTRIBUTE, store)
        store[key] = value


def read_metadata(target: Any) -> Dict[str, Any]:
    """Return a copy of the metadata recorded on ``target``."""
    return dict(vars(target).get(METADATA_ATTRIBUTE, {}))


DEFAULT_SINK = AttributeSink()


__all__ = [
    "AnnotationSink",
    "AttributeSink",
    "DEFAULT_SINK",
    "METADATA_ATTRIBUTE",
    "THROTTLER_BLOCK_DURATION",
    "THROTTLER_KEY_GENERATOR",
    "THROTTLER_LIMIT",
    "THROTTLER_SKIP",
    "THROTTLER_TRACKER",
    "THROTTLER_TTL",
    "metadata_key",
    "read_metadata",
]
