#!/usr/bin/env python3
"""Example: Documentation — plugopt

Generate markdown usage pages and READMEs for the built-in plugins in a
temporary site directory.

Usage:
    python examples/02_documentation.py

Requirements:
    pip install plugopt
"""
from __future__ import annotations

import tempfile
from pathlib import Path

from plugopt.docs import DocumentationGenerator
from plugopt.plugin.builtin import default_catalog

PAGES = {
    "index.md": "# Plugins\n",
    "getting.md": "## Getting started\n",
    "history.md": "## History\n",
    "usage.md": "## Usage\n\n```\n<args>\n</args>\n```\n",
}


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        site = Path(tmp) / "site"
        site.mkdir()
        for name, text in PAGES.items():
            (site / name).write_text(text, encoding="utf-8")

        generator = DocumentationGenerator(
            site, Path(tmp) / "README.md", default_catalog.plugin_classes(), ["", "de"]
        )
        for path in generator.generate():
            print(f"Written: {path.name}")

        print((Path(tmp) / "README.md").read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
