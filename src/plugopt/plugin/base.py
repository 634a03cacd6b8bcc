"""Common base class for code-generation plugins.

``Plugin`` manages command-line parsing, translated message bundles and
the printout of usage information.  A concrete plugin only declares its
option family name and its options::

    class GreeterPlugin(Plugin):
        option_name = "-Xgreeter"

        greeting: str | None = None
        shout: bool = False

        def declare_options(self, options):
            options.bind("greeting", self, "greeting")
            options.bind("shout", self, "shout")

    plugin = GreeterPlugin()
    plugin.parse_argument(["-Xgreeter.shout"], 0)   # -> 1
    plugin.shout                                    # -> True
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from pathlib import Path

from plugopt.i18n.bundle import ROOT_LOCALE, MessageBundle, normalize_locale
from plugopt.options.dispatch import ArgumentDispatcher
from plugopt.options.errors import ConfigurationError
from plugopt.options.registry import OptionRegistry, build

logger = logging.getLogger(__name__)

BASE_BUNDLE_NAME = "plugin"
BASE_RESOURCE_DIR = Path(__file__).parent / "resources"


class Plugin:
    """Base class all option-carrying plugins derive from.

    Subclasses set :attr:`option_name` and define ``declare_options``
    (see :mod:`plugopt.options.registry`).  The option registry is built
    while the plugin is constructed, so invalid declarations fail
    immediately.

    Parameters
    ----------
    locale:
        Locale tag for usage text and error messages; ``""`` selects
        the root (English) messages.

    Raises
    ------
    ConfigurationError
        If :attr:`option_name` is malformed or an option declaration is
        invalid.
    """

    #: The plugin's option family name, e.g. ``"-Xfluent-builder"``.
    option_name: str = ""

    #: Base name of the plugin's message bundle.  Defaults to the name of
    #: the module defining the plugin class.
    bundle_name: str | None = None

    #: Directory holding the plugin's message bundles.  Defaults to a
    #: ``resources`` directory next to the module defining the plugin.
    resource_dir: Path | None = None

    def __init__(self, locale: str = ROOT_LOCALE) -> None:
        if len(self.option_name) < 2 or not self.option_name.startswith("-"):
            raise ConfigurationError(
                type(self).__name__,
                self.option_name,
                "option_name must be a '-' followed by the plugin name",
            )
        self._locale = normalize_locale(locale)
        self._base_bundle = MessageBundle.load(
            BASE_BUNDLE_NAME, self._locale, BASE_RESOURCE_DIR
        )
        self._bundle = MessageBundle.load(
            self._bundle_name(), self._locale, self._resource_dir()
        )
        self._options = build(self, self.namespace)
        self._dispatcher = ArgumentDispatcher(self._options, self._unrecognized_message)
        logger.debug(
            "Initialized plugin %r with %d option(s)", self.namespace, len(self._options)
        )

    def _bundle_name(self) -> str:
        if self.bundle_name:
            return self.bundle_name
        return type(self).__module__.rsplit(".", 1)[-1]

    def _resource_dir(self) -> Path:
        if self.resource_dir is not None:
            return Path(self.resource_dir)
        return Path(inspect.getfile(type(self))).parent / "resources"

    def _unrecognized_message(self, namespace: str, token: str) -> str:
        return self._base_bundle.format("exception.unrecognizedArgument", namespace, token)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def namespace(self) -> str:
        """The option family name without its leading ``-``."""
        return self.option_name[1:]

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def title(self) -> str:
        """Display title of the plugin, from its bundle if present."""
        return self._bundle.get("title", self.namespace)

    @property
    def options(self) -> OptionRegistry:
        return self._options

    @property
    def bundle(self) -> MessageBundle:
        return self._bundle

    @property
    def base_bundle(self) -> MessageBundle:
        return self._base_bundle

    # ------------------------------------------------------------------
    # Argument parsing
    # ------------------------------------------------------------------

    def is_for_plugin(self, token: str) -> bool:
        """Return whether *token* is addressed to this plugin."""
        return self._dispatcher.is_own_token(token)

    def dispatch(self, token: str) -> int:
        """Apply *token* to this plugin's options; see ``ArgumentDispatcher``."""
        return self._dispatcher.dispatch(token)

    def parse_argument(self, args: Sequence[str], index: int) -> int:
        """Parse ``args[index]`` and return the number of tokens consumed.

        Returns 0 when the token belongs to another plugin or to the
        host.

        Raises
        ------
        UnrecognizedArgumentError
            If the token is in this plugin's namespace but matches none
            of its options.
        """
        return self._dispatcher.dispatch(args[index])

    # ------------------------------------------------------------------
    # Messages and usage
    # ------------------------------------------------------------------

    def message(self, key: str, *args: object) -> str:
        """Return a message from the plugin's bundle, formatted with *args*."""
        if args:
            return self._bundle.format(key, *args)
        return self._bundle.get(key)

    def usage(self) -> str:
        """Return plain-text usage information for this plugin."""
        from plugopt.docs.usage import PlainTextUsageBuilder

        builder = PlainTextUsageBuilder(self._base_bundle, self._bundle)
        builder.add_main(self.namespace)
        for option in self._options:
            builder.add_option(option)
        return builder.build()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace={self.namespace!r}, locale={self._locale!r})"
