"""Tests for plugopt.docs.generator — usage page patching, per-plugin
pages and README stitching on a temporary site directory.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from plugopt.docs.generator import DocumentationGenerator, localized_path
from plugopt.plugin.builtin import FluentBuilderPlugin, ImmutablePlugin

_USAGE = """\
## Usage

<args>
stale line
</args>

After the block.
"""


@pytest.fixture()
def site(tmp_path: Path) -> Path:
    site_dir = tmp_path / "site"
    site_dir.mkdir()
    (site_dir / "index.md").write_text("# Plugins\n[9]: #stale\n", encoding="utf-8")
    (site_dir / "index_de.md").write_text("# Erweiterungen\n", encoding="utf-8")
    (site_dir / "getting.md").write_text("## Getting\n", encoding="utf-8")
    (site_dir / "history.md").write_text("## History\n", encoding="utf-8")
    (site_dir / "usage.md").write_text(_USAGE, encoding="utf-8")
    (site_dir / "usage_de.md").write_text(_USAGE.replace("Usage", "Verwendung"), encoding="utf-8")
    return site_dir


@pytest.fixture()
def generator(site: Path, tmp_path: Path) -> DocumentationGenerator:
    return DocumentationGenerator(
        site, tmp_path / "README.md", [FluentBuilderPlugin, ImmutablePlugin], ["", "de"]
    )


class TestLocalizedPath:
    def test_root_unchanged(self) -> None:
        assert localized_path(Path("README.md"), "") == Path("README.md")

    def test_locale_inserted(self) -> None:
        assert localized_path(Path("docs/README.md"), "de") == Path("docs/README_de.md")


class TestSetup:
    def test_readme_files_per_locale(self, generator: DocumentationGenerator, tmp_path: Path) -> None:
        assert generator.readme_files == {
            "": tmp_path / "README.md",
            "de": tmp_path / "README_de.md",
        }

    def test_one_plugin_instance_per_locale(self, generator: DocumentationGenerator) -> None:
        assert [f.plugin.locale for f in generator.formatters("de")] == ["de", "de"]

    def test_localized_file_prefers_locale(self, generator: DocumentationGenerator, site: Path) -> None:
        assert generator.localized_file("index", "de") == site / "index_de.md"

    def test_localized_file_falls_back(self, generator: DocumentationGenerator, site: Path) -> None:
        assert generator.localized_file("getting", "de") == site / "getting.md"


class TestUsageFiles:
    def test_args_block_replaced(self, generator: DocumentationGenerator, site: Path) -> None:
        generator.write_general_usage_files()
        text = (site / "usage.md").read_text(encoding="utf-8")
        assert "stale line" not in text
        assert "      <arg>-Xfluent-builder</arg>" in text
        assert "      <arg>-Ximmutable.fake={y|n}</arg>" in text
        assert text.index("<args>") < text.index("<arg>-Xfluent-builder") < text.index("</args>")
        assert "After the block." in text

    def test_patching_is_repeatable(self, generator: DocumentationGenerator, site: Path) -> None:
        generator.write_general_usage_files()
        first = (site / "usage.md").read_text(encoding="utf-8")
        generator.write_general_usage_files()
        assert (site / "usage.md").read_text(encoding="utf-8") == first

    def test_plugin_pages_written_per_locale(self, generator: DocumentationGenerator, site: Path) -> None:
        generator.write_usage_files()
        for name in ("Xfluent-builder", "Xfluent-builder_de", "Ximmutable", "Ximmutable_de"):
            assert (site / f"{name}.md").is_file()
        assert "Verwendung" in (site / "Ximmutable_de.md").read_text(encoding="utf-8")

    def test_shared_usage_page_patched_once(self, site: Path, tmp_path: Path) -> None:
        (site / "usage_de.md").unlink()
        generator = DocumentationGenerator(
            site, tmp_path / "README.md", [ImmutablePlugin], ["", "de"]
        )
        assert generator.write_general_usage_files() == [site / "usage.md"]


class TestReadmes:
    def test_generate_writes_readmes(self, generator: DocumentationGenerator, tmp_path: Path) -> None:
        written = generator.generate()
        assert tmp_path / "README.md" in written
        assert tmp_path / "README_de.md" in written

    def test_readme_contents(self, generator: DocumentationGenerator, tmp_path: Path) -> None:
        generator.generate()
        readme = (tmp_path / "README.md").read_text(encoding="utf-8")
        assert readme.startswith("# Plugins\n## Getting\n## History\n## Usage")
        assert "[9]: #stale" not in readme
        assert "### Fluent Builder" in readme
        assert readme.rstrip("\n").endswith("[1]: #xfluent-builder\n[2]: #ximmutable")

    def test_localized_readme(self, generator: DocumentationGenerator, tmp_path: Path) -> None:
        generator.generate()
        readme = (tmp_path / "README_de.md").read_text(encoding="utf-8")
        assert readme.startswith("# Erweiterungen")
        assert "Macht generierte Klassen unveränderlich" in readme

    def test_missing_page_raises(self, generator: DocumentationGenerator, site: Path) -> None:
        (site / "history.md").unlink()
        generator.write_usage_files()
        with pytest.raises(FileNotFoundError):
            generator.write_readmes()
