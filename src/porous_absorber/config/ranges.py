"""Named value ranges used to validate user-supplied parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


class ConfigError(ValueError):
    """Raised when a configuration value lies outside its permitted range."""

    pass


@dataclass(frozen=True)
class NamedRange(Generic[T]):
    """Inclusive range within which a named parameter is valid.

    Args:
        name: Human readable parameter name
        units: Units the parameter is entered in
        min: Smallest permitted value
        default: Value used when none is supplied
        max: Largest permitted value

    Example:
        >>> AIR_GAP = NamedRange("Air Gap", "mm", 0, 100, 500)
        >>> AIR_GAP.check(600)
        Traceback (most recent call last):
        ...
        ConfigError: Air Gap must be a value in mm between 0 and 500, not '600'
    """

    name: str
    units: str
    min: T
    default: T
    max: T

    def contains(self, value: T) -> bool:
        return self.min <= value <= self.max

    def failure_msg(self, value: T) -> str:
        return (
            f"{self.name} must be a value in {self.units} "
            f"between {self.min} and {self.max}, not '{value}'"
        )

    def check(self, value: T) -> T:
        """Return value unchanged, or raise ConfigError if out of range."""
        if not self.contains(value):
            raise ConfigError(self.failure_msg(value))
        return value
