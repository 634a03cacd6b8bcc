"""Minimal host-side walk of an argument vector across plugins.

A compiler host offers each argument to its plugins before interpreting
it itself.  ``parse_arguments`` reproduces that walk: every token is
offered to each plugin in turn, and tokens that no plugin consumes are
returned for the host to handle.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from plugopt.plugin.base import Plugin

logger = logging.getLogger(__name__)


def parse_arguments(plugins: Sequence[Plugin], argv: Sequence[str]) -> list[str]:
    """Dispatch *argv* to *plugins* and return the unclaimed tokens.

    Parameters
    ----------
    plugins:
        Plugin instances, in the order they should see each token.
    argv:
        The argument vector, without the program name.

    Returns
    -------
    list[str]
        Tokens that no plugin consumed, in their original order.

    Raises
    ------
    UnrecognizedArgumentError
        If a token in some plugin's namespace matches none of that
        plugin's options.  Parsing stops at the first such token.
    """
    args = list(argv)
    remaining: list[str] = []
    index = 0
    while index < len(args):
        consumed = 0
        for plugin in plugins:
            consumed = plugin.parse_argument(args, index)
            if consumed:
                break
        if consumed:
            index += consumed
        else:
            remaining.append(args[index])
            index += 1
    if remaining:
        logger.debug("Tokens left for the host: %s", remaining)
    return remaining
