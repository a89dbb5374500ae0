"""Per-throttler override configuration accepted by the decorators."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

IntOrFactory = Union[int, Callable[[], int]]


class ThrottlerOptions(BaseModel):
    """Override configuration for one named throttler.

    Every field is optional. A field left unset inherits the global value
    configured for that throttler; it never means zero or false.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    limit: Optional[IntOrFactory] = None
    ttl: Optional[IntOrFactory] = None
    block_duration: Optional[IntOrFactory] = Field(default=None, alias="blockDuration")
    get_tracker: Optional[Callable[..., Any]] = Field(default=None, alias="getTracker")
    generate_key: Optional[Callable[..., Any]] = Field(default=None, alias="generateKey")

    def has_overrides(self) -> bool:
        """Check if any field overrides the global configuration."""

        return any(
            value is not None
            for value in (
                self.limit,
                self.ttl,
                self.block_duration,
                self.get_tracker,
                self.generate_key,
            )
        )


OptionsInput = Union[ThrottlerOptions, Mapping[str, Any], None]


def coerce_options(value: OptionsInput) -> ThrottlerOptions:
    """Normalize a decorator argument into ``ThrottlerOptions``.

    Raises:
        pydantic.ValidationError: If the value is not a mapping, or has
            unknown or invalid fields
    """
    if value is None:
        return ThrottlerOptions()
    if isinstance(value, ThrottlerOptions):
        return value
    if isinstance(value, Mapping):
        value = dict(value)
    return ThrottlerOptions.model_validate(value)


__all__ = ["IntOrFactory", "OptionsInput", "ThrottlerOptions", "coerce_options"]
