"""Shared pieces for throttler name extractors."""

import re
from typing import Protocol, Set

from .spans import DEFAULT_BACKEND, SpanMatcher, get_matcher

# Override-config fields: keys of a selection dict that are never names
CONFIG_FIELD_NAMES = frozenset(
    {
        "limit",
        "ttl",
        "blockDuration",
        "getTracker",
        "generateKey",
        "block_duration",
        "get_tracker",
        "generate_key",
    }
)

# "name": "x", name: "x" or name="x"
NAME_FIELD_PATTERN = re.compile(
    r"(?:['\"]name['\"]|\bname)\s*[:=]\s*['\"]([^'\"]+)['\"]"
)


def decorator_callee(name: str) -> str:
    """Regex for ``@name`` or a dotted ``@module.name`` decorator."""
    return rf"@(?:[\w.]+\.)?{re.escape(name)}"


def name_fields(body: str) -> Set[str]:
    """Collect every ``name`` field value in ``body``."""
    return set(NAME_FIELD_PATTERN.findall(body))


class Extractor(Protocol):
    """Anything that turns source text into a set of throttler names."""

    def extract(self, source: str) -> Set[str]: ...


class BaseExtractor:
    """Base class for extractors backed by a span matcher.

    Subclasses implement ``extract`` using ``self.matcher`` so the backend
    can be swapped without touching the scanner or the analyzer.
    """

    def __init__(self, backend: str = DEFAULT_BACKEND):
        """Initialize extractor.

        Args:
            backend: Span matcher name ('heuristic' or 'balanced')
        """
        self.backend = backend
        self.matcher: SpanMatcher = get_matcher(backend)

    def extract(self, source: str) -> Set[str]:
        raise NotImplementedError
