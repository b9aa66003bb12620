"""Source protocol for configuration sources."""

from __future__ import annotations

from typing import Dict, Protocol

from .environment import Environment


class ConfigurationSource(Protocol):
    """Protocol defining the interface for configuration sources.

    Any object with these two methods can be composed by the aggregators
    in ``compote.core.compose``, including the aggregators themselves.
    """

    def init(self) -> None:
        """Prepare the source for queries.

        Raises:
            ConfigurationSourceError: If the source cannot be set up.
        """
        ...

    def get_configuration(self, environment: Environment) -> Dict[str, str]:
        """Fetch configuration for an environment.

        Args:
            environment: Environment to fetch values for.

        Returns:
            Dictionary of configuration key-value pairs.

        Raises:
            MissingEnvironmentError: If the environment is unknown to the source.
            SourceFailureError: If the configuration cannot be fetched.
        """
        ...
