"""Built-in plugins and the catalog that lists them."""
from __future__ import annotations

from plugopt.plugin.builtin.fluent_builder import BuilderPluginBase, FluentBuilderPlugin
from plugopt.plugin.builtin.immutable import ImmutablePlugin
from plugopt.plugin.catalog import PluginCatalog

default_catalog = PluginCatalog("builtin")
default_catalog.register_class("fluent-builder", FluentBuilderPlugin)
default_catalog.register_class("immutable", ImmutablePlugin)

__all__ = [
    "BuilderPluginBase",
    "FluentBuilderPlugin",
    "ImmutablePlugin",
    "default_catalog",
]
