"""Fluent builder plugin: option declarations only.

``BuilderPluginBase`` carries the naming options every builder-style
plugin shares; ``FluentBuilderPlugin`` adds its own behaviour switches.
"""
from __future__ import annotations

from plugopt.options.registry import OptionRegistry
from plugopt.plugin.base import Plugin


class BuilderPluginBase(Plugin):
    """Naming options shared by builder-generating plugins."""

    builder_class_name: str = "Builder"
    new_builder_method_name: str = "builder"

    def declare_options(self, options: OptionRegistry) -> None:
        options.bind("builderClassName", self, "builder_class_name")
        options.bind("newBuilderMethodName", self, "new_builder_method_name")


class FluentBuilderPlugin(BuilderPluginBase):
    option_name = "-Xfluent-builder"

    generate_tools: bool = True
    narrow: bool = False
    copy_partial: bool = True
    selector_class_name: str = "Selector"
    copy_to_method_name: str = "copyTo"

    def declare_options(self, options: OptionRegistry) -> None:
        options.bind("generateTools", self, "generate_tools")
        options.bind("narrow", self, "narrow")
        options.bind("copyPartial", self, "copy_partial")
        options.bind("selectorClassName", self, "selector_class_name")
        options.bind("copyToMethodName", self, "copy_to_method_name")
