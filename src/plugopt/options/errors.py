"""Error types raised by the option engine.

Every error carries the offending values as attributes so that the CLI
and host integrations can render precise, actionable messages.
"""
from __future__ import annotations


class PlugoptError(Exception):
    """Base class for all errors raised by plugopt."""


class ConfigurationError(PlugoptError):
    """Raised while building a registry when an option declaration is invalid.

    Parameters
    ----------
    namespace:
        Namespace of the plugin whose declaration is invalid.
    option_name:
        Name of the offending option.
    reason:
        Human-readable description of the problem.
    """

    def __init__(self, namespace: str, option_name: str, reason: str) -> None:
        self.namespace = namespace
        self.option_name = option_name
        self.reason = reason
        super().__init__(
            f"Invalid option {option_name!r} in plugin {namespace!r}: {reason}"
        )


class UnrecognizedArgumentError(PlugoptError):
    """Raised when a token in a plugin's namespace matches none of its options.

    Parameters
    ----------
    namespace:
        The plugin namespace the token was addressed to.
    token:
        The full argument token as given on the command line.
    message:
        Optional pre-formatted (e.g. localized) message.  A default
        English message is used when omitted.
    """

    def __init__(self, namespace: str, token: str, message: str | None = None) -> None:
        self.namespace = namespace
        self.token = token
        super().__init__(
            message
            if message is not None
            else f"Unrecognized argument for plugin {namespace!r}: {token!r}"
        )
