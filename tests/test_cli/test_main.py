"""Tests for plugopt.cli.main using Click's CliRunner."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from plugopt.cli.main import cli
from plugopt.options.registry import OptionRegistry
from plugopt.plugin.base import Plugin
from plugopt.plugin.builtin import default_catalog


class BrokenPlugin(Plugin):
    option_name = "-Xbroken"

    count: int = 0

    def declare_options(self, options: OptionRegistry) -> None:
        options.bind("count", self, "count")


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


class TestVersionAndPlugins:
    def test_version(self, runner: CliRunner, expected_version: str) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output

    def test_plugins_lists_builtins(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["plugins"])
        assert result.exit_code == 0
        assert "fluent-builder" in result.output
        assert "-Ximmutable" in result.output


class TestUsage:
    def test_usage_single_plugin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["usage", "immutable"])
        assert result.exit_code == 0
        assert "-Ximmutable.fake={y|n}" in result.output
        assert "-Xfluent-builder" not in result.output

    def test_usage_all_plugins(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["usage"])
        assert result.exit_code == 0
        assert "-Xfluent-builder" in result.output
        assert "-Ximmutable" in result.output

    def test_usage_localized(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["usage", "immutable", "--locale", "de"])
        assert result.exit_code == 0
        assert "Optionen" in result.output

    def test_usage_unknown_plugin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["usage", "nope"])
        assert result.exit_code == 1

    def test_usage_single_plugin_configuration_error(self, runner: CliRunner) -> None:
        default_catalog.register_class("broken", BrokenPlugin)
        try:
            result = runner.invoke(cli, ["usage", "broken"])
        finally:
            default_catalog.deregister("broken")
        assert result.exit_code == 1
        assert "Configuration error" in result.output
        assert "count" in result.output
        assert isinstance(result.exception, SystemExit)


class TestParse:
    def test_parse_shows_values_and_remaining(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["parse", "--", "-Ximmutable.constructorAccess=private", "-d", "out"],
        )
        assert result.exit_code == 0
        assert "private" in result.output
        assert "-d out" in result.output

    def test_parse_unrecognized_argument_exits(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "--", "-Ximmutable.unknownThing=1"])
        assert result.exit_code == 1


class TestDocs:
    def test_docs_generates_readme(self, runner: CliRunner, tmp_path: Path) -> None:
        site = tmp_path / "site"
        site.mkdir()
        for page in ("index", "getting", "history"):
            (site / f"{page}.md").write_text(f"# {page}\n", encoding="utf-8")
        (site / "usage.md").write_text("<args>\n</args>\n", encoding="utf-8")
        readme = tmp_path / "README.md"

        result = runner.invoke(cli, ["docs", str(site), str(readme), "--locale", ""])

        assert result.exit_code == 0
        assert readme.is_file()
        assert "[2]: #ximmutable" in readme.read_text(encoding="utf-8")
        assert not (tmp_path / "README_de.md").exists()

    def test_docs_missing_site_exits(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["docs", str(tmp_path / "missing"), str(tmp_path / "R.md")])
        assert result.exit_code == 1

    def test_docs_preview_shows_root_readme(self, runner: CliRunner, tmp_path: Path) -> None:
        site = tmp_path / "site"
        site.mkdir()
        for page in ("getting", "history"):
            (site / f"{page}.md").write_text(f"# {page}\n", encoding="utf-8")
        (site / "index.md").write_text("# RootIndexPage\n", encoding="utf-8")
        (site / "index_de.md").write_text("# DeutscheStartseite\n", encoding="utf-8")
        (site / "usage.md").write_text("<args>\n</args>\n", encoding="utf-8")
        readme = tmp_path / "README.md"

        result = runner.invoke(
            cli,
            ["docs", str(site), str(readme), "--locale", "de", "--locale", "", "--preview"],
        )

        assert result.exit_code == 0
        assert (tmp_path / "README_de.md").is_file()
        assert "RootIndexPage" in result.output
        assert "DeutscheStartseite" not in result.output
