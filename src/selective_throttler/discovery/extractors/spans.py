"""Span matchers: locate call arguments and dict keys in raw source text.

Two backends share one interface:

- ``HeuristicMatcher`` uses lazy regular expressions for bracket spans and
  treats any line shaped like ``key:`` as a key. Nesting depth is not
  tracked, so a key line inside a nested dict is reported as well.
- ``BalancedMatcher`` walks the text, skipping strings and comments, to
  find the bracket that closes each span and reads depth-zero keys only.
"""

import re
from typing import Iterator, List, Optional, Protocol

KEY_PATTERN = re.compile(
    r"^\s*(?:['\"]([^'\"\s]+)['\"]|([a-zA-Z_$][a-zA-Z0-9_$-]*))\s*:"
)

CLOSERS = {"(": ")", "[": "]", "{": "}"}

# Trailing arguments after the bracketed one, e.g. `, sink=SINK`. Brackets are
# excluded so a nested closer followed by a comma does not end the span.
EXTRA_ARGS = r"(?:,[^(){}\[\]]*)?"


def property_prefix(prop: str) -> str:
    """Regex for a quoted or bare property name followed by ``:`` or ``=``."""
    escaped = re.escape(prop)
    return rf"(?:['\"]{escaped}['\"]|\b{escaped})\s*[:=]\s*"


def _match_key(text: str) -> Optional[str]:
    match = KEY_PATTERN.match(text)
    if not match:
        return None
    return match.group(1) or match.group(2)


class SpanMatcher(Protocol):
    """Interface implemented by the extraction backends."""

    def argument_spans(self, callee: str, opener: str, source: str) -> Iterator[str]:
        """Yield the inside of each ``callee(<opener>...)`` argument."""
        ...

    def property_spans(self, prop: str, body: str) -> Iterator[str]:
        """Yield the inside of each ``prop: [...]`` list in ``body``."""
        ...

    def top_level_keys(self, body: str) -> Iterator[str]:
        """Yield the keys of a dict literal body."""
        ...


class HeuristicMatcher:
    """Lazy-regex spans and line-shaped keys."""

    def argument_spans(self, callee: str, opener: str, source: str) -> Iterator[str]:
        closer = re.escape(CLOSERS[opener])
        pattern = re.compile(
            rf"{callee}\s*\(\s*{re.escape(opener)}([\s\S]*?){closer}\s*"
            + EXTRA_ARGS
            + r"\)"
        )
        for match in pattern.finditer(source):
            yield match.group(1)

    def property_spans(self, prop: str, body: str) -> Iterator[str]:
        pattern = re.compile(property_prefix(prop) + r"\[([\s\S]*?)\]")
        for match in pattern.finditer(body):
            yield match.group(1)

    def top_level_keys(self, body: str) -> Iterator[str]:
        for line in body.split("\n"):
            key = _match_key(line)
            if key:
                yield key


def _skip_string(text: str, index: int) -> int:
    """Return the index just past the string literal starting at ``index``."""
    quote = text[index]
    if text.startswith(quote * 3, index):
        end = text.find(quote * 3, index + 3)
        return len(text) if end == -1 else end + 3

    i = index + 1
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == quote or char == "\n":
            return i + 1
        i += 1
    return len(text)


def _skip_comment(text: str, index: int) -> int:
    end = text.find("\n", index)
    return len(text) if end == -1 else end


def find_closing(text: str, open_index: int) -> Optional[int]:
    """Find the bracket closing the one at ``open_index``.

    Brackets inside string literals and ``#`` comments are ignored.

    Returns:
        Index of the matching closer, or None if the span never closes
    """
    stack: List[str] = []
    i = open_index
    while i < len(text):
        char = text[i]
        if char in "'\"":
            i = _skip_string(text, i)
            continue
        if char == "#":
            i = _skip_comment(text, i)
            continue
        if char in CLOSERS:
            stack.append(CLOSERS[char])
        elif char in ")]}":
            if not stack or stack.pop() != char:
                return None
            if not stack:
                return i
        i += 1
    return None


def split_top_level(body: str) -> List[str]:
    """Split ``body`` on depth-zero commas, dropping comments."""
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    i = 0
    while i < len(body):
        char = body[i]
        if char in "'\"":
            end = _skip_string(body, i)
            current.append(body[i:end])
            i = end
            continue
        if char == "#":
            i = _skip_comment(body, i)
            continue
        if char in CLOSERS:
            depth += 1
        elif char in ")]}":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            i += 1
            continue
        current.append(char)
        i += 1
    parts.append("".join(current))
    return parts


class BalancedMatcher:
    """Bracket-matching spans and depth-zero keys."""

    def _spans(self, pattern: "re.Pattern[str]", text: str) -> Iterator[str]:
        for match in pattern.finditer(text):
            open_index = match.end() - 1
            close_index = find_closing(text, open_index)
            if close_index is not None:
                yield text[open_index + 1 : close_index]

    def argument_spans(self, callee: str, opener: str, source: str) -> Iterator[str]:
        pattern = re.compile(rf"{callee}\s*\(\s*{re.escape(opener)}")
        yield from self._spans(pattern, source)

    def property_spans(self, prop: str, body: str) -> Iterator[str]:
        pattern = re.compile(property_prefix(prop) + r"\[")
        yield from self._spans(pattern, body)

    def top_level_keys(self, body: str) -> Iterator[str]:
        for part in split_top_level(body):
            key = _match_key(part)
            if key:
                yield key


BACKENDS = {
    "heuristic": HeuristicMatcher,
    "balanced": BalancedMatcher,
}

DEFAULT_BACKEND = "heuristic"


def get_matcher(backend: str = DEFAULT_BACKEND) -> SpanMatcher:
    """Instantiate the span matcher registered as ``backend``.

    Raises:
        ValueError: If the backend name is unknown
    """
    try:
        return BACKENDS[backend]()
    except KeyError:
        raise ValueError(
            f"Unknown extraction backend '{backend}' "
            f"(expected one of: {', '.join(sorted(BACKENDS))})"
        ) from None
