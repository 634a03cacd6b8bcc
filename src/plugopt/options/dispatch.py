"""Route argument tokens to the options of one plugin."""
from __future__ import annotations

import logging
from collections.abc import Callable

from plugopt.options.errors import UnrecognizedArgumentError
from plugopt.options.registry import OptionRegistry

logger = logging.getLogger(__name__)


class ArgumentDispatcher:
    """Offers tokens in a plugin's namespace to each of its options.

    The dispatcher keeps no state between calls: each token is handled
    on its own, and a later token for the same option overwrites the
    value stored by an earlier one.

    Parameters
    ----------
    registry:
        The options of the plugin.
    error_message:
        Optional callable producing the message of an
        ``UnrecognizedArgumentError`` from ``(namespace, token)``, used
        to localize the error.
    """

    def __init__(
        self,
        registry: OptionRegistry,
        error_message: Callable[[str, str], str] | None = None,
    ) -> None:
        self._registry = registry
        self._error_message = error_message

    @property
    def namespace(self) -> str:
        return self._registry.namespace

    def is_own_token(self, token: str) -> bool:
        """Return whether *token* starts with ``-<namespace>.`` (any case)."""
        return token.lower().startswith(f"-{self.namespace}.".lower())

    def dispatch(self, token: str) -> int:
        """Offer *token* to every option and return how many claimed it.

        Tokens outside this plugin's namespace are ignored and yield 0.

        Raises
        ------
        UnrecognizedArgumentError
            If the token is in this plugin's namespace but no option
            claims it.
        """
        if not self.is_own_token(token):
            return 0
        claimed = 0
        for option in self._registry:
            if option.try_claim(token):
                claimed += 1
        if claimed == 0:
            message = (
                self._error_message(self.namespace, token)
                if self._error_message is not None
                else None
            )
            raise UnrecognizedArgumentError(self.namespace, token, message)
        logger.debug("Dispatched %r to namespace %r", token, self.namespace)
        return claimed
