"""Ordered option registry for one plugin instance.

Plugins enumerate their options explicitly.  Each class in a plugin's
hierarchy may define a ``declare_options(self, options)`` hook; ``build``
calls every such hook from the most ancestral class down, so options of
a base plugin always precede those of its subclasses::

    class BasePlugin(Plugin):
        option_name = "-Xbase"

        def __init__(self, locale=""):
            self.verbose = False
            super().__init__(locale)

        def declare_options(self, options):
            options.bind("verbose", self, "verbose")

A hook only runs for the class that defines it; subclasses never call
``super().declare_options``.
"""
from __future__ import annotations

import inspect
import logging
import types
import typing
from collections.abc import Callable, Iterator
from typing import Any

from plugopt.options.errors import ConfigurationError
from plugopt.options.option import Option, OptionKind, canonical_key, is_valid_name

logger = logging.getLogger(__name__)

DECLARE_HOOK = "declare_options"

_KIND_BY_TYPE: dict[object, OptionKind] = {
    str: OptionKind.TEXT,
    bool: OptionKind.FLAG,
}


class OptionRegistry:
    """Ordered, name-unique collection of the options of one plugin.

    Parameters
    ----------
    namespace:
        The owning plugin's namespace, without the leading ``-``.
    """

    def __init__(self, namespace: str) -> None:
        self._namespace = namespace
        self._options: list[Option] = []
        self._by_key: dict[str, Option] = {}

    @property
    def namespace(self) -> str:
        return self._namespace

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        kind: object,
        getter: Callable[[], Any],
        setter: Callable[[Any], None],
        choice: str | None = None,
    ) -> Option:
        """Register an option of the given kind and return it.

        Parameters
        ----------
        name:
            Canonical option name.
        kind:
            An ``OptionKind``, or the Python type ``str`` / ``bool``.
        getter, setter:
            Accessors for the option's value slot.
        choice:
            Optional documentation of the legal values.

        Raises
        ------
        ConfigurationError
            If the kind is unsupported or the name is already taken.
        """
        option_kind = self._resolve_kind(name, kind)
        if not is_valid_name(name):
            raise ConfigurationError(
                self._namespace,
                name,
                "option names may only contain letters, digits, '-', '_' and '.'",
            )
        key = canonical_key(name)
        if key in self._by_key:
            raise ConfigurationError(
                self._namespace,
                name,
                f"name collides with already declared option "
                f"{self._by_key[key].name!r}",
            )
        option = Option(name, option_kind, self._namespace, getter, setter, choice)
        self._options.append(option)
        self._by_key[key] = option
        logger.debug(
            "Registered %s option %r in namespace %r",
            option_kind.name,
            name,
            self._namespace,
        )
        return option

    def register_text(
        self,
        name: str,
        getter: Callable[[], Any],
        setter: Callable[[Any], None],
        choice: str | None = None,
    ) -> Option:
        """Register a free-text option."""
        return self.register(name, OptionKind.TEXT, getter, setter, choice)

    def register_flag(
        self,
        name: str,
        getter: Callable[[], Any],
        setter: Callable[[Any], None],
        choice: str | None = None,
    ) -> Option:
        """Register a boolean flag option."""
        return self.register(name, OptionKind.FLAG, getter, setter, choice)

    def bind(
        self,
        name: str,
        target: object,
        attribute: str,
        kind: object = None,
        choice: str | None = None,
    ) -> Option:
        """Register an option stored in ``target.<attribute>``.

        When *kind* is omitted it is taken from the attribute's class
        annotation, falling back to the type of its current value.
        """
        if kind is None:
            kind = _infer_kind(target, attribute)
        return self.register(
            name,
            kind,
            lambda: getattr(target, attribute, None),
            lambda value: setattr(target, attribute, value),
            choice,
        )

    def _resolve_kind(self, name: str, kind: object) -> OptionKind:
        if isinstance(kind, OptionKind):
            return kind
        try:
            return _KIND_BY_TYPE[kind]
        except (KeyError, TypeError):
            raise ConfigurationError(
                self._namespace,
                name,
                f"unsupported value kind {_kind_label(kind)}; "
                "only text (str) and flag (bool) options are supported",
            ) from None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> Option:
        """Return the option addressed by *name* (any spelling variant).

        Raises
        ------
        KeyError
            If no option of that name is registered.
        """
        try:
            return self._by_key[canonical_key(name)]
        except (KeyError, ValueError):
            raise KeyError(
                f"No option {name!r} in namespace {self._namespace!r}"
            ) from None

    def names(self) -> list[str]:
        """Return option names in registration order."""
        return [option.name for option in self._options]

    def values(self) -> dict[str, str]:
        """Return a mapping of option name to rendered current value."""
        return {option.name: option.render() for option in self._options}

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: object) -> bool:
        return (
            isinstance(name, str)
            and is_valid_name(name)
            and canonical_key(name) in self._by_key
        )

    def __repr__(self) -> str:
        return f"OptionRegistry(namespace={self._namespace!r}, options={self.names()})"


def build(plugin: object, namespace: str) -> OptionRegistry:
    """Build the registry for *plugin*, ancestor options first.

    Walks ``type(plugin).__mro__`` from ``object`` towards the concrete
    class and invokes every ``declare_options`` hook defined directly on
    a class in that chain.

    Raises
    ------
    ConfigurationError
        If any declaration is invalid.
    """
    registry = OptionRegistry(namespace)
    for klass in reversed(type(plugin).__mro__):
        hook = vars(klass).get(DECLARE_HOOK)
        if hook is None:
            continue
        logger.debug("Collecting options of %s for %r", klass.__qualname__, namespace)
        hook(plugin, registry)
    return registry


def _class_annotations(klass: type) -> dict[str, object]:
    # Postponed annotations are strings; a name that cannot be resolved
    # leaves the raw string in place, which registration then rejects.
    try:
        return inspect.get_annotations(klass, eval_str=True)
    except (NameError, AttributeError, SyntaxError, TypeError) as exc:
        logger.debug("Cannot evaluate annotations of %s: %s", klass.__qualname__, exc)
        return inspect.get_annotations(klass)


def _strip_optional(annotation: object) -> object:
    if typing.get_origin(annotation) not in (typing.Union, types.UnionType):
        return annotation
    args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    if len(args) == 1:
        return args[0]
    return annotation


def _infer_kind(target: object, attribute: str) -> object:
    for klass in type(target).__mro__:
        annotations = _class_annotations(klass)
        if attribute in annotations:
            return _strip_optional(annotations[attribute])
    value = getattr(target, attribute, None)
    if value is None:
        return None
    return type(value)


def _kind_label(kind: object) -> str:
    if isinstance(kind, type):
        return kind.__name__
    return repr(kind)
