"""A single declared plugin option and its token-matching rules.

An ``Option`` binds one name to one value slot of its owning plugin.
The slot is reached through a getter/setter pair captured at
registration time, so the option never inspects the plugin itself.

Matching
--------
A token addresses an option when, after stripping the ``-<namespace>.``
prefix and any ``=value`` suffix, the remaining option name equals the
declared name either literally or after word-boundary normalization,
both compared case-insensitively::

    -Xfluent-builder.generateTools=y
    -Xfluent-builder.generate-tools
    -xfluent-builder.GENERATE-TOOLS=false

all address the option ``generateTools`` of plugin ``-Xfluent-builder``.
A name holding anything besides letters, digits, ``-``, ``_`` and ``.``
addresses no option.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Letters and digits of any script, joined by single "-", "_" or "." separators.
_NAME_PATTERN = re.compile(r"[^\W_]+(?:[-_.][^\W_]+)*")
_SEPARATOR_PATTERN = re.compile(r"[-_.]")

FLAG_SENTINEL = "y"
_TRUE_VALUES = frozenset({"y", "yes", "true", "1"})


class OptionKind(Enum):
    """The value kinds an option may have."""

    TEXT = "text"
    FLAG = "flag"


def is_valid_name(name: str) -> bool:
    """Return whether *name* is usable as an option name.

    Only letters, digits and the separators ``-``, ``_`` and ``.`` are
    allowed; a separator may not lead, trail or repeat.
    """
    return _NAME_PATTERN.fullmatch(name) is not None


def _split_case(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    for index in range(1, len(chunk)):
        previous, current = chunk[index - 1], chunk[index]
        following = chunk[index + 1] if index + 1 < len(chunk) else ""
        if (
            (current.isupper() and not previous.isupper())
            or (current.isupper() and following.islower())
            or current.isdigit() != previous.isdigit()
        ):
            words.append(chunk[start:index])
            start = index
    words.append(chunk[start:])
    return words


def split_words(name: str) -> list[str]:
    """Split *name* on hyphens, underscores, dots and case boundaries.

    ``generate-to-string``, ``generateToString`` and ``GenerateTo_String``
    all yield ``generate``, ``to``, ``string`` (case preserved).

    Raises
    ------
    ValueError
        If *name* contains any other character (see ``is_valid_name``).
    """
    if not is_valid_name(name):
        raise ValueError(f"Invalid option name {name!r}")
    words: list[str] = []
    for chunk in _SEPARATOR_PATTERN.split(name):
        words.extend(_split_case(chunk))
    return words


def to_variable_name(name: str) -> str:
    """Normalize *name* to lower camel case.

    ``generate-to-string`` and ``Generate-ToString`` both become
    ``generateToString``.
    """
    words = split_words(name)
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def canonical_key(name: str) -> str:
    """Return the key two option names must share to address the same option.

    The key keeps word boundaries, so ``p.r.e.f.i.x`` and ``prefix`` differ.
    """
    return "-".join(word.lower() for word in split_words(name))


def parse_flag(raw: str) -> bool:
    """Convert a raw flag value to a bool.

    Anything outside ``y``/``yes``/``true``/``1`` is false, including
    unrecognized values such as ``maybe``.
    """
    return raw.strip().lower() in _TRUE_VALUES


class Option:
    """One named, typed setting of a plugin.

    Parameters
    ----------
    name:
        Canonical option name, e.g. ``"generateTools"``.
    kind:
        Whether the option holds free text or a boolean flag.
    namespace:
        Namespace of the owning plugin, without its leading ``-``.
    getter:
        Zero-argument callable returning the current stored value.
    setter:
        One-argument callable storing a converted value.
    choice:
        Optional description of the legal value domain.  Only used in
        documentation; values are never validated against it.
    """

    def __init__(
        self,
        name: str,
        kind: OptionKind,
        namespace: str,
        getter: Callable[[], Any],
        setter: Callable[[Any], None],
        choice: str | None = None,
    ) -> None:
        self._name = name
        self._kind = kind
        self._namespace = namespace
        self._getter = getter
        self._setter = setter
        self._choice = choice
        self._key = canonical_key(name) if is_valid_name(name) else None

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> OptionKind:
        return self._kind

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def choice(self) -> str | None:
        return self._choice

    @property
    def is_flag(self) -> bool:
        return self._kind is OptionKind.FLAG

    @property
    def placeholder(self) -> str:
        """Value placeholder shown in usage text, e.g. ``{y|n}``."""
        if self._choice:
            return self._choice
        return "{y|n}" if self.is_flag else "<string>"

    @property
    def usage_key(self) -> str:
        """Message bundle key holding this option's description."""
        return f"{self._name}.desc"

    @property
    def argument(self) -> str:
        """The command-line spelling of this option without a value."""
        return f"-{self._namespace}.{self._name}"

    # ------------------------------------------------------------------
    # Value access
    # ------------------------------------------------------------------

    def get(self) -> Any:
        return self._getter()

    def set(self, value: Any) -> None:
        self._setter(value)

    def set_string_value(self, raw: str) -> None:
        """Convert *raw* according to this option's kind and store it."""
        if self.is_flag:
            self.set(parse_flag(raw))
        else:
            self.set(raw)

    def render(self) -> str:
        """Return the stored value as a string, ``""`` when unset."""
        value = self.get()
        if value is None:
            return ""
        if self.is_flag:
            return "true" if value else "false"
        return str(value)

    # ------------------------------------------------------------------
    # Token matching
    # ------------------------------------------------------------------

    def _option_part(self, token: str) -> str | None:
        prefix = f"-{self._namespace}."
        if not token.lower().startswith(prefix.lower()):
            return None
        return token[len(prefix):].split("=", 1)[0]

    def matches(self, token: str) -> bool:
        """Return whether *token* addresses this option."""
        option_part = self._option_part(token)
        if option_part is None or not is_valid_name(option_part):
            return False
        if option_part.lower() == self._name.lower():
            return True
        return canonical_key(option_part) == self._key

    def try_claim(self, token: str) -> bool:
        """Store the value carried by *token* if it addresses this option.

        Returns
        -------
        bool
            ``True`` when the token was claimed, ``False`` otherwise (in
            which case nothing is modified).
        """
        if not self.matches(token):
            return False
        _, sep, raw = token.partition("=")
        self.set_string_value(raw if sep else FLAG_SENTINEL)
        logger.debug("Option %s claimed %r -> %r", self.argument, token, self.get())
        return True

    def __repr__(self) -> str:
        return (
            f"Option(name={self._name!r}, kind={self._kind.name}, "
            f"namespace={self._namespace!r})"
        )
