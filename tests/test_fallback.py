"""Unit tests for FallbackConfigurationSource."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from compote.core.compose import FallbackConfigurationSource
from compote.core.environment import Environment
from compote.core.errors import MissingEnvironmentError, SourceFailureError
from compote.core.source import ConfigurationSource
from compote.sources import EnvironmentMapConfigurationSource, InMemoryConfigurationSource


def make_source(payload=None) -> MagicMock:
    source = MagicMock(spec=ConfigurationSource)
    source.get_configuration.return_value = payload if payload is not None else {}
    return source


class TestFallbackConfigurationSource:
    """Test suite for FallbackConfigurationSource."""

    def test_requires_sources(self):
        """Test that an empty fallback is rejected."""
        with pytest.raises(ValueError, match="at least one source"):
            FallbackConfigurationSource()

    def test_first_successful_source_wins(self):
        """Test that the first source's configuration is used."""
        first = make_source({"k": "first"})
        second = make_source({"k": "second"})
        fallback = FallbackConfigurationSource(first, second)

        assert fallback.get_configuration(Environment("test")) == {"k": "first"}
        second.get_configuration.assert_not_called()

    def test_skips_failing_sources(self):
        """Test that failing sources fall through to the next one."""
        first = make_source()
        first.get_configuration.side_effect = SourceFailureError("down")
        second = make_source()
        second.get_configuration.side_effect = MissingEnvironmentError("test")
        third = make_source({"k": "third"})
        fallback = FallbackConfigurationSource(first, second, third)

        assert fallback.get_configuration("test") == {"k": "third"}

    def test_all_missing_raises_missing_environment(self):
        """Test MissingEnvironmentError when no source knows the environment."""
        fallback = FallbackConfigurationSource(
            EnvironmentMapConfigurationSource({"prod": {"k": "v"}}),
            EnvironmentMapConfigurationSource({"dev": {"k": "v"}}),
        )

        with pytest.raises(MissingEnvironmentError) as exc_info:
            fallback.get_configuration(Environment("test"))

        assert exc_info.value.environment == "test"

    def test_mixed_failures_raise_source_failure(self):
        """Test SourceFailureError when some failure is not a missing environment."""
        first = make_source()
        first.get_configuration.side_effect = MissingEnvironmentError("test")
        second = make_source()
        last_error = SourceFailureError("down")
        second.get_configuration.side_effect = last_error
        fallback = FallbackConfigurationSource(first, second)

        with pytest.raises(SourceFailureError) as exc_info:
            fallback.get_configuration("test")

        assert exc_info.value.__cause__ is last_error

    def test_unexpected_errors_propagate(self):
        """Test that errors outside the taxonomy are not swallowed."""
        first = make_source()
        error = RuntimeError("bug")
        first.get_configuration.side_effect = error
        fallback = FallbackConfigurationSource(first, make_source({"k": "v"}))

        with pytest.raises(RuntimeError) as exc_info:
            fallback.get_configuration("test")

        assert exc_info.value is error

    def test_result_is_copy(self):
        """Test that the returned mapping is owned by the caller."""
        payload = {"k": "v"}
        fallback = FallbackConfigurationSource(make_source(payload))
        result = fallback.get_configuration("test")
        result["k"] = "changed"
        assert payload == {"k": "v"}

    def test_init_tolerates_partial_failure(self):
        """Test that init() succeeds when at least one source initializes."""
        broken = make_source()
        broken.init.side_effect = SourceFailureError("unreachable")
        working = make_source()
        fallback = FallbackConfigurationSource(broken, working)

        fallback.init()

        broken.init.assert_called_once()
        working.init.assert_called_once()

    def test_init_fails_when_no_source_initializes(self):
        """Test that init() fails when every source fails."""
        broken = make_source()
        cause = SourceFailureError("unreachable")
        broken.init.side_effect = cause
        fallback = FallbackConfigurationSource(broken)

        with pytest.raises(SourceFailureError, match="Unable to initialize") as exc_info:
            fallback.init()

        assert exc_info.value.__cause__ is cause

    def test_nested_in_merge(self):
        """Test that a fallback composes inside a merge."""
        from compote.core.compose import MergeConfigurationSource

        merge = MergeConfigurationSource(
            InMemoryConfigurationSource({"a": "1", "b": "1"}),
            FallbackConfigurationSource(
                EnvironmentMapConfigurationSource({"prod": {"b": "prod"}}),
                InMemoryConfigurationSource({"b": "default"}),
            ),
        )
        merge.init()
        assert merge.get_configuration("test") == {"a": "1", "b": "default"}
        assert merge.get_configuration("prod") == {"a": "1", "b": "prod"}

    def test_environment_passed_through_unchanged(self):
        """Test that non-string environments reach sources as given."""
        env = SimpleNamespace(name="test")
        first = make_source({"k": "v"})
        fallback = FallbackConfigurationSource(first)

        assert fallback.get_configuration(env) == {"k": "v"}
        assert first.get_configuration.call_args.args[0] is env
