"""Environment selectors for configuration sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Environment:
    """Named configuration variant to fetch values for.

    An Environment is an opaque selector (e.g. 'production', 'test' or a
    path-like 'eu/production'). Sources decide how to interpret the name.

    Attributes:
        name: Environment name. The empty name is the default environment.
    """

    name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(
                f"Environment name must be a string, got {type(self.name).__name__}"
            )

    def __str__(self) -> str:
        return self.name

    def is_default(self) -> bool:
        """Check whether this is the default (unnamed) environment.

        Returns:
            True if the name is empty, False otherwise.
        """
        return self.name == ""

    @staticmethod
    def coerce(value: Union["Environment", str]) -> "Environment":
        """Build an Environment from an Environment or a plain name.

        Args:
            value: Environment instance or environment name.

        Returns:
            Environment instance.

        Raises:
            TypeError: If value is neither an Environment nor a string.
        """
        if isinstance(value, Environment):
            return value
        if isinstance(value, str):
            return Environment(value)
        raise TypeError(f"Cannot use {value!r} as an environment")


DEFAULT_ENVIRONMENT = Environment()
