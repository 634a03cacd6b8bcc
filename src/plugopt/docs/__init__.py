"""Documentation generated from plugin option registries.

The renderers here are read-only consumers of a plugin's namespace and
options; they never take part in argument dispatch.
"""
from __future__ import annotations

from plugopt.docs.generator import DocumentationGenerator, localized_path
from plugopt.docs.usage import PlainTextUsageBuilder, PluginDocumentationFormatter

__all__ = [
    "DocumentationGenerator",
    "PlainTextUsageBuilder",
    "PluginDocumentationFormatter",
    "localized_path",
]
