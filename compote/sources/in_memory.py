"""In-memory configuration sources."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..core.environment import Environment
from ..core.errors import MissingEnvironmentError


def _stringify(properties: Mapping[str, Any]) -> Dict[str, str]:
    return {str(k): str(v) for k, v in properties.items()}


class InMemoryConfigurationSource:
    """Configuration source backed by a fixed mapping.

    The same values are returned for every environment.
    """

    def __init__(self, properties: Mapping[str, Any], name: Optional[str] = None):
        """Initialize InMemoryConfigurationSource.

        Args:
            properties: Key-value pairs to serve. Values are converted to str.
            name: Optional custom name for this source.
        """
        self._properties = _stringify(properties)
        self.name = name or "memory"

    def init(self) -> None:
        pass

    def get_configuration(self, environment: Environment) -> Dict[str, str]:
        return dict(self._properties)

    def __repr__(self) -> str:
        return f"InMemoryConfigurationSource(name={self.name!r}, keys={sorted(self._properties)!r})"


class EnvironmentMapConfigurationSource:
    """Configuration source holding separate values per environment.

    Environments not present in the mapping raise MissingEnvironmentError.
    """

    def __init__(
        self,
        environments: Mapping[str, Mapping[str, Any]],
        name: Optional[str] = None,
    ):
        """Initialize EnvironmentMapConfigurationSource.

        Args:
            environments: Mapping of environment name to its key-value pairs.
            name: Optional custom name for this source.
        """
        self._environments = {
            env_name: _stringify(props) for env_name, props in environments.items()
        }
        self.name = name or "memory-environments"

    def init(self) -> None:
        pass

    def get_configuration(self, environment: Environment) -> Dict[str, str]:
        """Fetch the values stored for an environment.

        Args:
            environment: Environment to fetch values for.

        Returns:
            Copy of the environment's key-value pairs.

        Raises:
            MissingEnvironmentError: If no values are stored for the environment.
        """
        env = Environment.coerce(environment)
        try:
            return dict(self._environments[env.name])
        except KeyError:
            raise MissingEnvironmentError(env) from None

    def __repr__(self) -> str:
        return (
            f"EnvironmentMapConfigurationSource(name={self.name!r}, "
            f"environments={sorted(self._environments)!r})"
        )
