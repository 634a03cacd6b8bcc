"""Declarative option binding and argument matching for plugins.

Example
-------
::

    from plugopt.options import ArgumentDispatcher, OptionRegistry

    settings = {"prefix": None}
    registry = OptionRegistry("myplugin")
    registry.register_text("prefix", lambda: settings["prefix"],
                           lambda value: settings.__setitem__("prefix", value))

    ArgumentDispatcher(registry).dispatch("-myplugin.prefix=Abc")
    assert settings["prefix"] == "Abc"
"""
from __future__ import annotations

from plugopt.options.dispatch import ArgumentDispatcher
from plugopt.options.errors import (
    ConfigurationError,
    PlugoptError,
    UnrecognizedArgumentError,
)
from plugopt.options.option import Option, OptionKind, parse_flag, to_variable_name
from plugopt.options.registry import OptionRegistry, build

__all__ = [
    "ArgumentDispatcher",
    "ConfigurationError",
    "Option",
    "OptionKind",
    "OptionRegistry",
    "PlugoptError",
    "UnrecognizedArgumentError",
    "build",
    "parse_flag",
    "to_variable_name",
]
