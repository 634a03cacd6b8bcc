#!/usr/bin/env python3
"""Example: Quickstart — plugopt

Declare a plugin with two options, parse an argument vector shared with
the host, and print the generated usage text.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install plugopt
"""
from __future__ import annotations

import plugopt
from plugopt.options import OptionRegistry


class GreeterPlugin(plugopt.Plugin):
    option_name = "-Xgreeter"

    greeting: str | None = None
    shout: bool = False

    def declare_options(self, options: OptionRegistry) -> None:
        options.bind("greeting", self, "greeting")
        options.bind("shout", self, "shout")


def main() -> None:
    print(f"plugopt version: {plugopt.__version__}")

    # Step 1: Construct the plugin; its options are registered here
    plugin = GreeterPlugin()
    print(f"Options of {plugin.option_name}: {plugin.options.names()}")

    # Step 2: Walk the argument vector; unclaimed tokens go to the host
    argv = ["-d", "generated", "-Xgreeter.greeting=Hello", "-Xgreeter.shout", "schema.xsd"]
    remaining = plugopt.parse_arguments([plugin], argv)
    print(f"greeting={plugin.greeting!r} shout={plugin.shout!r}")
    print(f"Left for the host: {remaining}")

    # Step 3: Unknown options in the plugin's namespace are errors
    try:
        plugin.dispatch("-Xgreeter.volume=11")
    except plugopt.UnrecognizedArgumentError as exc:
        print(f"Rejected: {exc}")

    # Step 4: Usage text from the same declarations
    print(plugin.usage())


if __name__ == "__main__":
    main()
