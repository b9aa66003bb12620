"""Aggregators presenting several configuration sources as one."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple, Union

from .environment import Environment
from .errors import ConfigurationSourceError, MissingEnvironmentError, SourceFailureError
from .merge import merge_configurations
from .source import ConfigurationSource
from .types import ProvenanceRecord

if TYPE_CHECKING:
    from .settings import Settings

logger = logging.getLogger(__name__)


def _source_name(source: ConfigurationSource) -> str:
    name = getattr(source, "name", None)
    return name if isinstance(name, str) and name else type(source).__name__


def _wrap_name(environment: Any) -> Any:
    # only plain names are wrapped; sources judge everything else
    if isinstance(environment, str):
        return Environment(environment)
    return environment


class MergeConfigurationSource:
    """Merge the configuration of several sources.

    Sources are queried in the order given and their results merged with
    later sources overriding earlier ones for the same keys. Any failure of
    an underlying source is propagated unchanged; no partial result is
    ever returned.

    The aggregator satisfies ``ConfigurationSource`` itself and can be
    nested inside another aggregator.
    """

    def __init__(
        self,
        *sources: ConfigurationSource,
        max_workers: Optional[int] = None,
    ):
        """Initialize MergeConfigurationSource.

        Args:
            *sources: Underlying sources in merge order, lowest precedence first.
            max_workers: Query sources on a thread pool of this size. None or 1
                queries them one after another.
        """
        self._sources: Tuple[ConfigurationSource, ...] = tuple(sources)
        self._max_workers = max_workers
        self.name = "merge"

    @classmethod
    def from_settings(
        cls,
        sources: Iterable[ConfigurationSource],
        settings: "Settings",
    ) -> "MergeConfigurationSource":
        """Create an aggregator tuned by library settings.

        Args:
            sources: Underlying sources in merge order.
            settings: Settings supplying the fan-out width.

        Returns:
            MergeConfigurationSource instance.
        """
        return cls(*sources, max_workers=settings.max_workers)

    @property
    def sources(self) -> Tuple[ConfigurationSource, ...]:
        return self._sources

    def init(self) -> None:
        """Initialize every underlying source in order.

        The first failure propagates and the remaining sources are left
        uninitialized.
        """
        for index, source in enumerate(self._sources):
            logger.debug("Initializing source %d (%s)", index, _source_name(source))
            source.init()

    def get_configuration(self, environment: Union[Environment, str]) -> Dict[str, str]:
        """Fetch and merge configuration from all sources.

        Args:
            environment: Environment to fetch values for.

        Returns:
            New dictionary owned by the caller.
        """
        effective, _ = self._merge(environment)
        return effective

    def get_provenance(
        self, environment: Union[Environment, str]
    ) -> Dict[str, ProvenanceRecord]:
        """Report which source supplies each merged key.

        Args:
            environment: Environment to fetch values for.

        Returns:
            Mapping of key to the provenance of its winning value.
        """
        _, provenance = self._merge(environment)
        return provenance

    def _merge(
        self, environment: Union[Environment, str]
    ) -> Tuple[Dict[str, str], Dict[str, ProvenanceRecord]]:
        env = _wrap_name(environment)
        payloads = self._fetch_all(env)
        effective, provenance = merge_configurations(
            payloads, [_source_name(s) for s in self._sources]
        )
        logger.debug(
            "Merged %d keys from %d sources for environment %r",
            len(effective),
            len(self._sources),
            str(env),
        )
        return effective, provenance

    def _fetch_all(self, environment: Environment) -> List[Dict[str, str]]:
        if self._max_workers and self._max_workers > 1 and len(self._sources) > 1:
            return self._fetch_parallel(environment)
        return [source.get_configuration(environment) for source in self._sources]

    def _fetch_parallel(self, environment: Environment) -> List[Dict[str, str]]:
        executor = ThreadPoolExecutor(
            max_workers=min(self._max_workers, len(self._sources)),
            thread_name_prefix="compote-merge",
        )
        try:
            futures = [
                executor.submit(source.get_configuration, environment)
                for source in self._sources
            ]
            # collect in merge order so the lowest-index failure wins
            return [future.result() for future in futures]
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

    def __repr__(self) -> str:
        return f"MergeConfigurationSource(sources={list(self._sources)!r})"


class FallbackConfigurationSource:
    """Serve configuration from the first source that can provide it.

    Sources raising a ``ConfigurationSourceError`` are skipped in favour of
    the next one. Other exceptions propagate unchanged.
    """

    def __init__(self, *sources: ConfigurationSource):
        """Initialize FallbackConfigurationSource.

        Args:
            *sources: Underlying sources in order of preference.

        Raises:
            ValueError: If no source is given.
        """
        if not sources:
            raise ValueError("FallbackConfigurationSource requires at least one source")
        self._sources: Tuple[ConfigurationSource, ...] = tuple(sources)
        self.name = "fallback"

    @property
    def sources(self) -> Tuple[ConfigurationSource, ...]:
        return self._sources

    def init(self) -> None:
        """Initialize every source, succeeding if at least one does.

        Raises:
            SourceFailureError: If no source could be initialized.
        """
        last_error: Optional[ConfigurationSourceError] = None
        initialized = 0
        for index, source in enumerate(self._sources):
            try:
                source.init()
            except ConfigurationSourceError as e:
                logger.info("Source %d (%s) failed to initialize: %s", index, _source_name(source), e)
                last_error = e
                continue
            initialized += 1
        if not initialized:
            raise SourceFailureError(
                "Unable to initialize any of the underlying sources"
            ) from last_error

    def get_configuration(self, environment: Union[Environment, str]) -> Dict[str, str]:
        """Fetch configuration from the first source that succeeds.

        Args:
            environment: Environment to fetch values for.

        Returns:
            Copy of the first successful source's configuration.

        Raises:
            MissingEnvironmentError: If every source lacks the environment.
            SourceFailureError: If no source succeeded for another reason.
        """
        env = _wrap_name(environment)
        errors: List[ConfigurationSourceError] = []
        for index, source in enumerate(self._sources):
            try:
                payload = source.get_configuration(env)
            except ConfigurationSourceError as e:
                logger.info("Source %d (%s) skipped: %s", index, _source_name(source), e)
                errors.append(e)
                continue
            return dict(payload)

        if all(isinstance(e, MissingEnvironmentError) for e in errors):
            raise MissingEnvironmentError(env) from errors[-1]
        raise SourceFailureError(
            f"No source could provide configuration for environment {str(env)!r}"
        ) from errors[-1]

    def __repr__(self) -> str:
        return f"FallbackConfigurationSource(sources={list(self._sources)!r})"
