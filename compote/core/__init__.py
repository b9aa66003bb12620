from .compose import FallbackConfigurationSource, MergeConfigurationSource
from .environment import DEFAULT_ENVIRONMENT, Environment
from .errors import ConfigurationSourceError, MissingEnvironmentError, SourceFailureError
from .filters import Filter
from .settings import Settings, load_settings
from .source import ConfigurationSource

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
    "load_settings",
]
