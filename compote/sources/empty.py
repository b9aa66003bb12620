"""Source that never provides any configuration."""

from __future__ import annotations

from typing import Dict

from ..core.environment import Environment


class EmptyConfigurationSource:
    """Configuration source returning no keys for every environment."""

    def __init__(self) -> None:
        self.name = "empty"

    def init(self) -> None:
        pass

    def get_configuration(self, environment: Environment) -> Dict[str, str]:
        return {}

    def __repr__(self) -> str:
        return "EmptyConfigurationSource()"
