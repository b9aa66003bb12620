"""Compote - Configuration composition library.

Compose configuration from multiple sources into a single source, merged
per environment with later sources taking precedence.
"""

import logging

from .core.compose import FallbackConfigurationSource, MergeConfigurationSource
from .core.environment import DEFAULT_ENVIRONMENT, Environment
from .core.errors import ConfigurationSourceError, MissingEnvironmentError, SourceFailureError
from .core.filters import Filter
from .core.settings import Settings, configure_logging, load_settings
from .core.source import ConfigurationSource

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationSource",
    "ConfigurationSourceError",
    "DEFAULT_ENVIRONMENT",
    "Environment",
    "FallbackConfigurationSource",
    "Filter",
    "MergeConfigurationSource",
    "MissingEnvironmentError",
    "Settings",
    "SourceFailureError",
    "configure_logging",
    "load_settings",
]
