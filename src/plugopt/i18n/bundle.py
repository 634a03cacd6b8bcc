"""Locale-aware message bundles backed by YAML files.

A bundle named ``fluent_builder`` for locale ``de-CH`` is assembled from
up to three files in the same directory, most specific last::

    fluent_builder.yaml         # root locale
    fluent_builder_de.yaml
    fluent_builder_de_CH.yaml

Each file is a flat mapping of message key to message text.  Keys
missing from a more specific file fall back to the less specific ones.
Messages use positional ``{0}``-style placeholders.
"""
from __future__ import annotations

import logging
from pathlib import Path

import yaml

from plugopt.options.errors import PlugoptError

logger = logging.getLogger(__name__)

ROOT_LOCALE = ""

_MISSING = object()


class MissingMessageError(PlugoptError, KeyError):
    """Raised when a key is absent from a bundle and all of its parents."""

    def __init__(self, bundle: str, key: str) -> None:
        self.bundle = bundle
        self.key = key
        super().__init__(f"Message {key!r} not found in bundle {bundle!r}")

    def __str__(self) -> str:
        return str(self.args[0])


def normalize_locale(tag: str) -> str:
    """Normalize a locale tag to ``lang`` or ``lang-REGION`` form.

    ``de_ch``, ``DE-ch`` and ``de-CH`` all become ``de-CH``; ``""`` and
    ``"root"`` denote the root locale.
    """
    tag = tag.strip().replace("_", "-")
    if tag.lower() in ("", "root", "und"):
        return ROOT_LOCALE
    parts = tag.split("-")
    normalized = [parts[0].lower()]
    normalized.extend(
        part.upper() if len(part) == 2 else part for part in parts[1:]
    )
    return "-".join(normalized)


def locale_suffixes(tag: str) -> list[str]:
    """Return file-name suffixes for *tag*, least specific first.

    ``locale_suffixes("de-CH")`` is ``["", "_de", "_de_CH"]``.
    """
    locale = normalize_locale(tag)
    suffixes = [""]
    if locale == ROOT_LOCALE:
        return suffixes
    parts = locale.split("-")
    for end in range(1, len(parts) + 1):
        suffixes.append("_" + "_".join(parts[:end]))
    return suffixes


class MessageBundle:
    """Messages for one bundle name and locale.

    Parameters
    ----------
    name:
        Bundle base name, used in error messages.
    locale:
        Locale tag the bundle was loaded for.
    messages:
        Fully merged key → message mapping.
    """

    def __init__(self, name: str, locale: str, messages: dict[str, str]) -> None:
        self._name = name
        self._locale = normalize_locale(locale)
        self._messages = dict(messages)

    @classmethod
    def load(cls, name: str, locale: str, directory: Path) -> "MessageBundle":
        """Load and merge the bundle chain for *locale* from *directory*.

        Missing files are skipped; a bundle with no files at all is
        empty rather than an error, so plugins without translations
        still work.
        """
        messages: dict[str, str] = {}
        found = False
        for suffix in locale_suffixes(locale):
            path = directory / f"{name}{suffix}.yaml"
            if not path.is_file():
                continue
            found = True
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            if not isinstance(data, dict):
                raise PlugoptError(
                    f"Message bundle {path} must contain a mapping, "
                    f"got {type(data).__name__}"
                )
            messages.update({str(key): str(value) for key, value in data.items()})
        if not found:
            logger.warning(
                "No message bundle %r found in %s; using empty bundle.",
                name,
                directory,
            )
        else:
            logger.debug(
                "Loaded bundle %r for locale %r with %d message(s)",
                name,
                locale,
                len(messages),
            )
        return cls(name, locale, messages)

    @property
    def name(self) -> str:
        return self._name

    @property
    def locale(self) -> str:
        return self._locale

    def get(self, key: str, default: object = _MISSING) -> str:
        """Return the message for *key*.

        Raises
        ------
        MissingMessageError
            If *key* is absent and no *default* was given.
        """
        try:
            return self._messages[key]
        except KeyError:
            if default is _MISSING:
                raise MissingMessageError(self._name, key) from None
            return str(default)

    def format(self, key: str, *args: object) -> str:
        """Return the message for *key* with ``{0}``… placeholders filled."""
        return self.get(key).format(*args)

    def keys(self) -> list[str]:
        return sorted(self._messages)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"MessageBundle(name={self._name!r}, locale={self._locale!r})"
