"""Process environment variables as a configuration source."""

from __future__ import annotations

import logging
import os
from typing import Dict, Mapping, Optional

from ..core.environment import Environment
from ..core.errors import SourceFailureError

logger = logging.getLogger(__name__)


class EnvironmentVariablesConfigurationSource:
    """Configuration source for process environment variables.

    Variables are read once by ``init()``; the snapshot is served for every
    environment. With a prefix, only variables starting with it are kept and
    the prefix is removed from their keys.
    """

    def __init__(
        self,
        prefix: str = "",
        environ: Optional[Mapping[str, str]] = None,
        name: Optional[str] = None,
    ):
        """Initialize EnvironmentVariablesConfigurationSource.

        Args:
            prefix: Only keep variables starting with this prefix.
            environ: Mapping to read instead of ``os.environ``.
            name: Optional custom name for this source.
        """
        self.prefix = prefix
        self._environ = environ
        self.name = name or (f"env:{prefix}*" if prefix else "env")
        self._cache: Optional[Dict[str, str]] = None

    def _unprefixed(self, key: str) -> str:
        if self.prefix and key.startswith(self.prefix):
            return key[len(self.prefix):]
        return key

    def init(self) -> None:
        """Snapshot the environment variables."""
        environ = os.environ if self._environ is None else self._environ
        self._cache = {
            self._unprefixed(k): v
            for k, v in environ.items()
            if not self.prefix or k.startswith(self.prefix)
        }
        logger.debug("Loaded %d environment variables for %s", len(self._cache), self.name)

    def get_configuration(self, environment: Environment) -> Dict[str, str]:
        """Return the environment variable snapshot.

        Args:
            environment: Ignored; variables are the same for every environment.

        Returns:
            Copy of the snapshot taken by ``init()``.

        Raises:
            SourceFailureError: If ``init()`` has not been called.
        """
        if self._cache is None:
            raise SourceFailureError(f"{self.name} used before init()")
        return dict(self._cache)

    def __repr__(self) -> str:
        return f"EnvironmentVariablesConfigurationSource(prefix={self.prefix!r})"
