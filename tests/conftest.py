"""Shared test fixtures for plugopt.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from plugopt.options.registry import OptionRegistry
from plugopt.plugin.base import Plugin


class Settings:
    """Plain value holder used as the target of bound options."""

    verbose: bool = False
    prefix: str | None = None
    generate_to_string: bool = False


class MyPlugin(Plugin):
    option_name = "-myplugin"

    verbose: bool = False
    prefix: str | None = None
    generate_to_string: bool = False

    def declare_options(self, options: OptionRegistry) -> None:
        options.bind("verbose", self, "verbose")
        options.bind("prefix", self, "prefix")
        options.bind("generateToString", self, "generate_to_string")


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def registry(settings: Settings) -> OptionRegistry:
    """A ``myplugin`` registry with verbose, prefix and generateToString."""
    options = OptionRegistry("myplugin")
    options.bind("verbose", settings, "verbose")
    options.bind("prefix", settings, "prefix")
    options.bind("generateToString", settings, "generate_to_string")
    return options


@pytest.fixture()
def my_plugin() -> MyPlugin:
    return MyPlugin()
