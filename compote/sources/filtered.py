"""Key filtering wrapper around another configuration source."""

from __future__ import annotations

from typing import Dict, Optional

from ..core.environment import Environment
from ..core.filters import Filter, apply_filter
from ..core.source import ConfigurationSource


class FilteredConfigurationSource:
    """Apply a Filter to the output of another source."""

    def __init__(
        self,
        source: ConfigurationSource,
        flt: Optional[Filter],
        name: Optional[str] = None,
    ):
        self.source = source
        self.filter = flt
        self.name = name or f"filtered:{getattr(source, 'name', type(source).__name__)}"

    def init(self) -> None:
        self.source.init()

    def get_configuration(self, environment: Environment) -> Dict[str, str]:
        return apply_filter(self.source.get_configuration(environment), self.filter)

    def __repr__(self) -> str:
        return f"FilteredConfigurationSource(source={self.source!r}, filter={self.filter!r})"
