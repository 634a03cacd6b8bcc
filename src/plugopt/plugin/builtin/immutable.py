"""Immutable plugin: option declarations only."""
from __future__ import annotations

from plugopt.options.registry import OptionRegistry
from plugopt.plugin.base import Plugin


class ImmutablePlugin(Plugin):
    option_name = "-Ximmutable"

    fake: bool = False
    override_collection_class: str | None = None
    constructor_access: str = "public"

    def declare_options(self, options: OptionRegistry) -> None:
        options.bind("fake", self, "fake")
        options.bind("overrideCollectionClass", self, "override_collection_class")
        options.bind(
            "constructorAccess",
            self,
            "constructor_access",
            choice="{public|protected|private}",
        )
