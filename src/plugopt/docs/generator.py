"""Generate markdown usage pages and README files for a set of plugins.

The site directory holds hand-written markdown pages (``index``,
``getting``, ``history``, ``usage``), optionally localized as
``<page>_<locale>.md``.  The generator:

1. replaces the ``<args>`` … ``</args>`` block of each locale's
   ``usage`` page with the cheat sheets of all plugins,
2. writes one ``<namespace>[_<locale>].md`` usage page per plugin,
3. stitches the pages into ``README.md`` / ``README_<locale>.md``.

Usage
-----
::

    from plugopt.docs import DocumentationGenerator
    from plugopt.plugin.builtin import default_catalog

    generator = DocumentationGenerator(
        Path("src/site/markdown"),
        Path("README.md"),
        default_catalog.plugin_classes(),
        ["", "de"],
    )
    generator.generate()
"""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from plugopt.docs.usage import PluginDocumentationFormatter
from plugopt.i18n.bundle import ROOT_LOCALE, normalize_locale
from plugopt.plugin.base import Plugin

logger = logging.getLogger(__name__)

DEFAULT_LOCALES: tuple[str, ...] = (ROOT_LOCALE, "de")
README_PAGES: tuple[str, ...] = ("index", "getting", "history", "usage")
USAGE_PAGE = "usage"

# Reference-link lines such as "[3]: #xfluent-builder"; regenerated on
# every run, so stale ones are dropped when pages are stitched.
INDEX_PATTERN = re.compile(r"^\s*\[\d+\]:\s*#.*$")

_ARGS_OPEN = "<args>"
_ARGS_CLOSE = "</args>"


def localized_path(path: Path, locale: str) -> Path:
    """Return *path* with ``_<locale>`` inserted before its suffix.

    The root locale leaves *path* unchanged.
    """
    locale = normalize_locale(locale)
    if locale == ROOT_LOCALE:
        return path
    return path.with_name(f"{path.stem}_{locale}{path.suffix}")


class DocumentationGenerator:
    """Writes usage pages and READMEs for an explicit list of plugins.

    Parameters
    ----------
    site_dir:
        Directory holding the markdown pages.
    readme_base:
        Path of the root-locale README; other locales get
        ``README_<locale>.md`` next to it.
    plugins:
        Plugin classes to document.  One instance per locale is created.
    locales:
        Locale tags to generate documentation for.
    """

    def __init__(
        self,
        site_dir: Path,
        readme_base: Path,
        plugins: Sequence[type[Plugin]],
        locales: Sequence[str] = DEFAULT_LOCALES,
    ) -> None:
        self._site_dir = Path(site_dir)
        self._readme_files: dict[str, Path] = {}
        self._formatters: dict[str, list[PluginDocumentationFormatter]] = {}
        for tag in locales:
            locale = normalize_locale(tag)
            self._readme_files[locale] = localized_path(Path(readme_base), locale)
            self._formatters[locale] = [
                PluginDocumentationFormatter(plugin_cls(locale)) for plugin_cls in plugins
            ]

    @property
    def site_dir(self) -> Path:
        return self._site_dir

    @property
    def readme_files(self) -> dict[str, Path]:
        return dict(self._readme_files)

    def formatters(self, locale: str) -> list[PluginDocumentationFormatter]:
        return list(self._formatters[normalize_locale(locale)])

    def localized_file(self, base_name: str, locale: str) -> Path:
        """Return the localized site page, falling back to the root page."""
        localized = localized_path(self._site_dir / f"{base_name}.md", locale)
        if localized.is_file():
            return localized
        return self._site_dir / f"{base_name}.md"

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self) -> list[Path]:
        """Write all usage pages, then all READMEs; return written paths."""
        written = self.write_usage_files()
        written.extend(self.write_readmes())
        return written

    def write_usage_files(self) -> list[Path]:
        """Patch the general usage pages and write one page per plugin."""
        written = self.write_general_usage_files()
        for formatters in self._formatters.values():
            for formatter in formatters:
                path = self._site_dir / f"{formatter.usage_file_name}.md"
                path.write_text(formatter.usage_markdown(), encoding="utf-8")
                logger.debug("Wrote usage page %s", path)
                written.append(path)
        return written

    def write_general_usage_files(self) -> list[Path]:
        """Replace the ``<args>`` block of each locale's usage page.

        Lines between ``<args>`` and ``</args>`` are replaced by the
        cheat sheets of all plugins; the marker lines are kept.  A page
        without markers is rewritten unchanged.
        """
        written: list[Path] = []
        for locale, formatters in self._formatters.items():
            usage_file = self.localized_file(USAGE_PAGE, locale)
            if usage_file in written:
                logger.warning(
                    "No usage page for locale %r; %s already patched.", locale, usage_file
                )
                continue
            output: list[str] = []
            skip = False
            for line in usage_file.read_text(encoding="utf-8").splitlines():
                stripped = line.strip()
                if stripped == _ARGS_OPEN:
                    output.append(line)
                    for formatter in formatters:
                        output.append(
                            formatter.config_cheat_sheet(6, "<arg>-", "</arg>").rstrip("\n")
                        )
                    skip = True
                    continue
                if skip:
                    skip = stripped != _ARGS_CLOSE
                if not skip:
                    output.append(line)
            usage_file.write_text("\n".join(output) + "\n", encoding="utf-8")
            logger.debug("Patched general usage page %s", usage_file)
            written.append(usage_file)
        return written

    def write_readmes(self) -> list[Path]:
        """Stitch the site pages and plugin pages into one README per locale."""
        written: list[Path] = []
        for locale, formatters in self._formatters.items():
            readme = self._readme_files[locale]
            parts: list[str] = []
            for page in README_PAGES:
                parts.extend(self._page_lines(self.localized_file(page, locale)))
            for formatter in formatters:
                parts.extend(
                    self._page_lines(self._site_dir / f"{formatter.usage_file_name}.md")
                )
            for number, formatter in enumerate(formatters, start=1):
                parts.append(f"[{number}]: #{formatter.plugin.namespace.lower()}")
            readme.parent.mkdir(parents=True, exist_ok=True)
            readme.write_text("\n".join(parts) + "\n", encoding="utf-8")
            logger.debug("Wrote README %s", readme)
            written.append(readme)
        return written

    @staticmethod
    def _page_lines(path: Path) -> list[str]:
        return [
            line
            for line in path.read_text(encoding="utf-8").splitlines()
            if not INDEX_PATTERN.match(line)
        ]
