"""Configuration source implementations.

This package contains simple sources that need no file format or network
access: fixed in-memory values, per-environment in-memory values, process
environment variables, and a key-filtering wrapper.
"""

from .empty import EmptyConfigurationSource
from .env_vars import EnvironmentVariablesConfigurationSource
from .filtered import FilteredConfigurationSource
from .in_memory import EnvironmentMapConfigurationSource, InMemoryConfigurationSource

__all__ = [
    "EmptyConfigurationSource",
    "EnvironmentMapConfigurationSource",
    "EnvironmentVariablesConfigurationSource",
    "FilteredConfigurationSource",
    "InMemoryConfigurationSource",
]
