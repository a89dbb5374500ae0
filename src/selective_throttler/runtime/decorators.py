"""Decorator factories bound to a discovered list of throttler names.

The generated ``decorators`` module calls these builders with the names
baked in at build time, so no discovery happens when handlers are loaded.
"""

from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, TypeVar

from ..skip import derive_skip
from .metadata import (
    DEFAULT_SINK,
    THROTTLER_BLOCK_DURATION,
    THROTTLER_KEY_GENERATOR,
    THROTTLER_LIMIT,
    THROTTLER_SKIP,
    THROTTLER_TRACKER,
    THROTTLER_TTL,
    AnnotationSink,
    metadata_key,
)
from .options import OptionsInput, ThrottlerOptions, coerce_options

T = TypeVar("T")


def record_active(
    sink: AnnotationSink, target: Any, throttler_name: str, options: ThrottlerOptions
) -> None:
    """Record the configuration of one active throttler on ``target``.

    With overrides, all five fields are written and unset ones are stored
    as None (inherit). Without overrides only TTL and LIMIT are written, as
    None, which tells the guard to use the global configuration.
    """
    if options.has_overrides():
        fields = (
            (THROTTLER_TTL, options.ttl),
            (THROTTLER_LIMIT, options.limit),
            (THROTTLER_BLOCK_DURATION, options.block_duration),
            (THROTTLER_TRACKER, options.get_tracker),
            (THROTTLER_KEY_GENERATOR, options.generate_key),
        )
    else:
        fields = ((THROTTLER_TTL, None), (THROTTLER_LIMIT, None))

    for field, value in fields:
        sink.set_field(target, metadata_key(field, throttler_name), value)


def record_skipped(sink: AnnotationSink, target: Any, names: Iterable[str]) -> None:
    """Mark every name in ``names`` as skipped on ``target``."""
    for name in names:
        sink.set_field(target, metadata_key(THROTTLER_SKIP, name), True)


def build_single_throttle(
    all_names: Iterable[str], sink: Optional[AnnotationSink] = None
) -> Callable[..., Callable[[T], T]]:
    """Create ``single_throttle`` for a fixed set of known names.

    Args:
        all_names: Every throttler name discovered at build time
        sink: Metadata destination (default: attribute dict on the target)

    Returns:
        Factory ``single_throttle(name, override_config=None, *, sink=None)``
    """
    known: Tuple[str, ...] = tuple(all_names)
    default_sink = sink if sink is not None else DEFAULT_SINK

    def single_throttle(
        throttler_name: str,
        override_config: OptionsInput = None,
        *,
        sink: Optional[AnnotationSink] = None,
    ) -> Callable[[T], T]:
        """Use only ``throttler_name`` and skip every other known throttler.

        Args:
            throttler_name: Name of the throttler to use
            override_config: Optional overrides of the global settings
            sink: Metadata destination for this application only
        """
        options = coerce_options(override_config)
        target_sink = sink if sink is not None else default_sink

        def decorator(target: T) -> T:
            record_active(target_sink, target, throttler_name, options)
            record_skipped(target_sink, target, derive_skip(known, [throttler_name]))
            return target

        return decorator

    return single_throttle


def build_selective_throttle(
    all_names: Iterable[str], sink: Optional[AnnotationSink] = None
) -> Callable[..., Callable[[T], T]]:
    """Create ``selective_throttle`` for a fixed set of known names.

    Args:
        all_names: Every throttler name discovered at build time
        sink: Metadata destination (default: attribute dict on the target)

    Returns:
        Factory ``selective_throttle(throttler_configs, *, sink=None)``
    """
    known: Tuple[str, ...] = tuple(all_names)
    default_sink = sink if sink is not None else DEFAULT_SINK

    def selective_throttle(
        throttler_configs: Mapping[str, OptionsInput],
        *,
        sink: Optional[AnnotationSink] = None,
    ) -> Callable[[T], T]:
        """Use the throttlers keyed in ``throttler_configs`` and skip the rest.

        An empty or None value uses the global configuration for that name.
        """
        selected = {
            name: coerce_options(config) for name, config in throttler_configs.items()
        }
        target_sink = sink if sink is not None else default_sink

        def decorator(target: T) -> T:
            for name, options in selected.items():
                record_active(target_sink, target, name, options)
            record_skipped(target_sink, target, derive_skip(known, selected))
            return target

        return decorator

    return selective_throttle


__all__ = [
    "build_selective_throttle",
    "build_single_throttle",
    "record_active",
    "record_skipped",
]
