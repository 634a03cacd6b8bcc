"""Translated message bundles for plugin usage text and errors."""
from __future__ import annotations

from plugopt.i18n.bundle import (
    ROOT_LOCALE,
    MessageBundle,
    MissingMessageError,
    locale_suffixes,
    normalize_locale,
)

__all__ = [
    "ROOT_LOCALE",
    "MessageBundle",
    "MissingMessageError",
    "locale_suffixes",
    "normalize_locale",
]
