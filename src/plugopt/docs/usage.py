"""Usage text renderers driven by a plugin's option registry.

``PlainTextUsageBuilder`` produces the terminal help text a host prints
for ``-help``; ``PluginDocumentationFormatter`` produces the markdown
usage page and the compact cheat-sheet fragment used by
:mod:`plugopt.docs.generator`.  Both only read from the registry.
"""
from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from plugopt.i18n.bundle import MessageBundle
from plugopt.options.option import Option

if TYPE_CHECKING:
    from plugopt.plugin.base import Plugin

_MAIN_INDENT = "  "
_OPTION_INDENT = "      "
_DESCRIPTION_INDENT = "          "
_WIDTH = 79


def option_description(option: Option, bundle: MessageBundle, base_bundle: MessageBundle) -> str:
    """Return the localized description of *option*, or a placeholder."""
    return bundle.get(option.usage_key, base_bundle.get("usage.noDescription", ""))


class PlainTextUsageBuilder:
    """Accumulates plain-text usage for one plugin.

    Parameters
    ----------
    base_bundle:
        Messages shared by all plugins (headings, labels).
    bundle:
        The plugin's own messages (plugin and option descriptions).
    """

    def __init__(self, base_bundle: MessageBundle, bundle: MessageBundle) -> None:
        self._base_bundle = base_bundle
        self._bundle = bundle
        self._lines: list[str] = []
        self._has_options = False

    def add_main(self, namespace: str) -> "PlainTextUsageBuilder":
        """Add the one-line invocation summary of the plugin."""
        summary = self._bundle.get("usage", "")
        line = f"{_MAIN_INDENT}-{namespace}"
        self._lines.append(f"{line}    :  {summary}" if summary else line)
        return self

    def add_option(self, option: Option) -> "PlainTextUsageBuilder":
        """Add one documentation block for *option*."""
        if not self._has_options:
            self._lines.append(f"{_MAIN_INDENT}  {self._base_bundle.get('usage.options')}:")
            self._has_options = True
        kind = self._base_bundle.get(f"usage.kind.{option.kind.value}", option.kind.value)
        header = f"{_OPTION_INDENT}{option.argument}={option.placeholder}  [{kind}]"
        current = option.render()
        if current:
            header += f"  ({self._base_bundle.format('usage.default', current)})"
        self._lines.append(header)
        description = option_description(option, self._bundle, self._base_bundle)
        self._lines.append(
            textwrap.fill(
                description,
                width=_WIDTH,
                initial_indent=_DESCRIPTION_INDENT,
                subsequent_indent=_DESCRIPTION_INDENT,
            )
        )
        return self

    def build(self) -> str:
        return "\n".join(self._lines) + "\n"


class PluginDocumentationFormatter:
    """Markdown documentation for one plugin in the plugin's locale.

    Parameters
    ----------
    plugin:
        A constructed plugin; its locale selects the language of the
        generated text.
    """

    def __init__(self, plugin: "Plugin") -> None:
        self._plugin = plugin

    @property
    def plugin(self) -> "Plugin":
        return self._plugin

    @property
    def usage_file_name(self) -> str:
        """File name (without ``.md``) of the plugin's usage page."""
        locale = self._plugin.locale
        return f"{self._plugin.namespace}_{locale}" if locale else self._plugin.namespace

    def usage_markdown(self) -> str:
        """Return the markdown usage page for the plugin."""
        plugin = self._plugin
        base = plugin.base_bundle
        lines = [
            f'<a name="{plugin.namespace.lower()}"></a>',
            f"### {plugin.title}",
        ]
        summary = plugin.bundle.get("usage", "")
        if summary:
            lines.extend(["", summary])
        lines.extend(["", f"#### {base.get('doc.usage')}", "", f"##### -{plugin.namespace}", ""])
        if len(plugin.options):
            lines.extend([f"##### {base.get('doc.options')}", ""])
        for option in plugin.options:
            lines.append(f"###### {option.argument}=`{option.placeholder}`")
            lines.append("")
            current = option.render()
            kind = base.get(f"usage.kind.{option.kind.value}", option.kind.value)
            lines.append(f"{base.get('doc.kind')}: {kind}  ")
            if current:
                lines.append(f"{base.get('doc.default')}: `{current}`")
            lines.append("")
            lines.append(option_description(option, plugin.bundle, base))
            lines.append("")
        return "\n".join(lines).rstrip("\n") + "\n"

    def config_cheat_sheet(self, indent: int, line_prefix: str, line_suffix: str) -> str:
        """Return a compact one-line-per-argument summary of the plugin.

        Each line is ``indent`` spaces, then *line_prefix*, the argument
        without its leading ``-``, and *line_suffix*.  The first line
        names the plugin itself.
        """
        pad = " " * indent
        plugin = self._plugin
        lines = [f"{pad}{line_prefix}{plugin.namespace}{line_suffix}"]
        for option in plugin.options:
            lines.append(
                f"{pad}{line_prefix}{plugin.namespace}.{option.name}="
                f"{option.placeholder}{line_suffix}"
            )
        return "\n".join(lines) + "\n"
