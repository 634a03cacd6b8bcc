"""plugopt — declarative command-line options for code-generation plugins.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import plugopt

    class GreeterPlugin(plugopt.Plugin):
        option_name = "-Xgreeter"

        greeting: str | None = None
        shout: bool = False

        def declare_options(self, options):
            options.bind("greeting", self, "greeting")
            options.bind("shout", self, "shout")

    plugin = GreeterPlugin()
    rest = plugopt.parse_arguments(
        [plugin], ["-Xgreeter.greeting=Hello", "-Xgreeter.shout", "-d", "out"]
    )
    plugin.greeting   # 'Hello'
    rest              # ['-d', 'out']

    print(plugin.usage())

    plugopt.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from plugopt.host import parse_arguments
from plugopt.options import (
    ArgumentDispatcher,
    ConfigurationError,
    Option,
    OptionKind,
    OptionRegistry,
    PlugoptError,
    UnrecognizedArgumentError,
)
from plugopt.plugin import Plugin, PluginCatalog

__all__ = [
    "__version__",
    "ArgumentDispatcher",
    "ConfigurationError",
    "Option",
    "OptionKind",
    "OptionRegistry",
    "Plugin",
    "PluginCatalog",
    "PlugoptError",
    "UnrecognizedArgumentError",
    "parse_arguments",
]
