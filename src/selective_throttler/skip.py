"""Skip-set derivation over the discovered throttler names."""

from typing import Iterable, List


def derive_skip(total: Iterable[str], selected: Iterable[str]) -> List[str]:
    """Return every name in ``total`` that is not in ``selected``.

    Order follows ``total`` so results are deterministic. Selected names
    missing from ``total`` are ignored.

    Args:
        total: All known throttler names
        selected: Names activated on a target

    Returns:
        Names to mark as skipped
    """
    chosen = set(selected)
    return [name for name in total if name not in chosen]


def is_known(total: Iterable[str], name: str) -> bool:
    """Check if a throttler name is known."""
    return name in set(total)


def others_excluding(total: Iterable[str], name: str) -> List[str]:
    """Get all throttler names except ``name``."""
    return derive_skip(total, [name])


def others_excluding_all(total: Iterable[str], names: Iterable[str]) -> List[str]:
    """Get all throttler names except ``names``."""
    return derive_skip(total, names)


__all__ = ["derive_skip", "is_known", "others_excluding", "others_excluding_all"]
