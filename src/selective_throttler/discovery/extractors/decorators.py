"""Extract throttler names used by decorator call sites."""

import re
from typing import Set

from .base import CONFIG_FIELD_NAMES, BaseExtractor, decorator_callee, name_fields

SINGLE_THROTTLE_PATTERN = re.compile(
    decorator_callee("single_throttle") + r"\s*\(\s*['\"]([^'\"]+)['\"]"
)
SELECTIVE_THROTTLE = decorator_callee("selective_throttle")
THROTTLE = decorator_callee("throttle")


class DecoratorNameExtractor(BaseExtractor):
    """Find names referenced by the selective and legacy decorators.

    Recognized shapes:
        single_throttle("name")             - the string literal
        selective_throttle({...})           - top-level dict keys
        throttle({...})                     - top-level dict keys (legacy)
        throttle([{"name": "x", ...}])      - ``name`` fields (legacy)

    Dict keys that are override-config fields (limit, ttl, ...) are skipped.
    """

    def extract(self, source: str) -> Set[str]:
        names = set(SINGLE_THROTTLE_PATTERN.findall(source))

        for callee in (SELECTIVE_THROTTLE, THROTTLE):
            for body in self.matcher.argument_spans(callee, "{", source):
                names.update(
                    key
                    for key in self.matcher.top_level_keys(body)
                    if key not in CONFIG_FIELD_NAMES
                )

        for body in self.matcher.argument_spans(THROTTLE, "[", source):
            names.update(name_fields(body))

        return names
