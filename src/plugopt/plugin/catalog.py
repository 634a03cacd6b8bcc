"""Explicit catalog of plugin classes.

The set of plugins a tool documents or parses arguments for is known
when the tool is built, so plugins are listed explicitly rather than
discovered at runtime.

Example
-------
Register a plugin with the decorator::

    from plugopt.plugin import Plugin, PluginCatalog

    catalog = PluginCatalog("my-tool")

    @catalog.register("greeter")
    class GreeterPlugin(Plugin):
        option_name = "-Xgreeter"

Instantiate everything for a locale::

    plugins = catalog.instantiate_all(locale="de")
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from plugopt.options.errors import PlugoptError
from plugopt.plugin.base import Plugin

logger = logging.getLogger(__name__)


class PluginNotFoundError(PlugoptError, KeyError):
    """Raised when a requested plugin name is not in the catalog."""

    def __init__(self, name: str, catalog_name: str) -> None:
        self.plugin_name = name
        self.catalog_name = catalog_name
        super().__init__(
            f"Plugin {name!r} is not registered in the {catalog_name!r} catalog."
        )

    def __str__(self) -> str:
        return str(self.args[0])


class PluginAlreadyRegisteredError(PlugoptError, ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str, catalog_name: str) -> None:
        self.plugin_name = name
        self.catalog_name = catalog_name
        super().__init__(
            f"Plugin {name!r} is already registered in the {catalog_name!r} catalog. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class PluginCatalog:
    """Ordered catalog of ``Plugin`` subclasses keyed by name.

    Registration order is preserved; it is the order in which plugins
    receive argument tokens and appear in generated documentation.

    Parameters
    ----------
    name:
        A human-readable name for this catalog (used in error messages).
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._plugins: dict[str, type[Plugin]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[Plugin]], type[Plugin]]:
        """Return a class decorator that registers the decorated class.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is already in use in this catalog.
        TypeError
            If the decorated class does not subclass ``Plugin``.
        """

        def decorator(cls: type[Plugin]) -> type[Plugin]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[Plugin]) -> None:
        """Register a class directly without using the decorator syntax.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is already registered.
        TypeError
            If ``cls`` is not a subclass of ``Plugin``.
        """
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, Plugin)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                f"it must be a subclass of {Plugin.__name__}."
            )
        self._plugins[name] = cls
        logger.debug(
            "Registered plugin %r -> %s in catalog %r",
            name,
            cls.__qualname__,
            self._name,
        )

    def deregister(self, name: str) -> None:
        """Remove a plugin from the catalog.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._plugins:
            raise PluginNotFoundError(name, self._name)
        del self._plugins[name]
        logger.debug("Deregistered plugin %r from catalog %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[Plugin]:
        """Return the class registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If no plugin is registered under ``name``.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name, self._name) from None

    def list_plugins(self) -> list[str]:
        """Return plugin names in registration order."""
        return list(self._plugins)

    def plugin_classes(self) -> list[type[Plugin]]:
        """Return plugin classes in registration order."""
        return list(self._plugins.values())

    def instantiate_all(self, locale: str = "") -> list[Plugin]:
        """Create one fresh instance of every plugin for *locale*.

        Raises
        ------
        ConfigurationError
            If any plugin declares invalid options.
        """
        return [cls(locale) for cls in self._plugins.values()]

    def __contains__(self, name: object) -> bool:
        """Support ``"my-plugin" in catalog`` membership test."""
        return name in self._plugins

    def __len__(self) -> int:
        """Return the number of registered plugins."""
        return len(self._plugins)

    def __repr__(self) -> str:
        return f"PluginCatalog(name={self._name!r}, plugins={self.list_plugins()})"
