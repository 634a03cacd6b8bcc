"""Plugin base class and the explicit plugin catalog.

Example
-------
::

    from plugopt.plugin import Plugin

    class GreeterPlugin(Plugin):
        option_name = "-Xgreeter"
        shout: bool = False

        def declare_options(self, options):
            options.bind("shout", self, "shout")
"""
from __future__ import annotations

from plugopt.plugin.base import Plugin
from plugopt.plugin.catalog import (
    PluginAlreadyRegisteredError,
    PluginCatalog,
    PluginNotFoundError,
)

__all__ = [
    "Plugin",
    "PluginAlreadyRegisteredError",
    "PluginCatalog",
    "PluginNotFoundError",
]
