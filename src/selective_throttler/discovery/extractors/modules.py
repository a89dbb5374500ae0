"""Extract throttler names defined by ``ThrottlerModule`` registrations."""

import re
from typing import Set

from .base import BaseExtractor, name_fields
from .spans import property_prefix

FOR_ROOT = r"\bThrottlerModule\.for_root"
FOR_ROOT_ASYNC = r"\bThrottlerModule\.for_root_async"
THROTTLERS_PROPERTY = re.compile(property_prefix("throttlers"))


class ModuleDefinitionExtractor(BaseExtractor):
    """Find names declared in throttler module registrations.

    Recognized shapes:
        ThrottlerModule.for_root([{"name": "x", ...}, ...])
        ThrottlerModule.for_root({"throttlers": [...]}) or a single
            ``name`` when the dict has no ``throttlers`` property
        ThrottlerModule.for_root_async({...}) - same search inside the
            factory's returned dict
    """

    def extract(self, source: str) -> Set[str]:
        names: Set[str] = set()

        for body in self.matcher.argument_spans(FOR_ROOT, "[", source):
            names.update(name_fields(body))

        for callee in (FOR_ROOT, FOR_ROOT_ASYNC):
            for body in self.matcher.argument_spans(callee, "{", source):
                names.update(self._names_in_options(body))

        return names

    def _names_in_options(self, body: str) -> Set[str]:
        if not THROTTLERS_PROPERTY.search(body):
            return name_fields(body)

        names: Set[str] = set()
        for span in self.matcher.property_spans("throttlers", body):
            names.update(name_fields(span))
        return names
