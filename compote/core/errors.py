"""Errors raised by configuration sources."""

from __future__ import annotations

from typing import Union

from .environment import Environment


class ConfigurationSourceError(Exception):
    """Base class for failures reported by configuration sources."""


class MissingEnvironmentError(ConfigurationSourceError):
    """The requested environment is not known to a source.

    Attributes:
        environment: Name of the environment that was requested.
    """

    def __init__(self, environment: Union[Environment, str]):
        self.environment = str(environment)
        super().__init__(f"Missing environment: {self.environment}")


class SourceFailureError(ConfigurationSourceError):
    """A source failed to initialize or to produce its configuration."""
