"""CLI entry point for plugopt.

Invoked as::

    plugopt [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m plugopt.cli.main

Commands
--------
version     Show version information
plugins     List catalogued plugins
usage       Print plain-text usage of one or all plugins
parse       Dispatch arguments to the plugins and show the result
docs        Generate markdown usage pages and README files
"""
from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _instantiate_or_exit(locale: str) -> list:
    """Instantiate all built-in plugins, exiting on configuration errors."""
    from plugopt.options.errors import PlugoptError
    from plugopt.plugin.builtin import default_catalog

    try:
        return default_catalog.instantiate_all(locale)
    except PlugoptError as exc:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="plugopt")
def cli() -> None:
    """Declarative command-line options for code-generation plugins."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from plugopt import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]plugopt[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# plugins command
# ---------------------------------------------------------------------------


@cli.command(name="plugins")
def plugins_command() -> None:
    """List all catalogued plugins with their namespaces."""
    from plugopt.plugin.builtin import default_catalog

    plugins = _instantiate_or_exit("")
    table = Table(title="Registered plugins")
    table.add_column("Name", style="bold")
    table.add_column("Argument")
    table.add_column("Options", justify="right")
    for name, plugin in zip(default_catalog.list_plugins(), plugins):
        table.add_row(name, escape(plugin.option_name), str(len(plugin.options)))
    console.print(table)


# ---------------------------------------------------------------------------
# usage command
# ---------------------------------------------------------------------------


@cli.command(name="usage")
@click.argument("name", required=False)
@click.option("--locale", default="", help="Locale tag for the text, e.g. 'de' (default: root)")
def usage_command(name: str | None, locale: str) -> None:
    """Print plain-text usage of one plugin, or of all plugins.

    NAME is a catalog name as shown by ``plugopt plugins``.
    """
    from plugopt.options.errors import PlugoptError
    from plugopt.plugin.builtin import default_catalog
    from plugopt.plugin.catalog import PluginNotFoundError

    if name is None:
        plugins = _instantiate_or_exit(locale)
    else:
        try:
            plugin_cls = default_catalog.get(name)
        except PluginNotFoundError as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
            err_console.print(f"Available: {', '.join(default_catalog.list_plugins())}")
            sys.exit(1)
        try:
            plugins = [plugin_cls(locale)]
        except PlugoptError as exc:
            err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
            sys.exit(1)

    for plugin in plugins:
        click.echo(plugin.usage())


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse", context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def parse_command(args: tuple[str, ...]) -> None:
    """Dispatch ARGS to all plugins and show the resulting option values.

    Examples:

    \b
        plugopt parse -Xfluent-builder.narrow -Ximmutable.constructorAccess=private
        plugopt parse -- -Xfluent-builder.generate-tools=n -d out
    """
    from plugopt.host import parse_arguments
    from plugopt.options.errors import UnrecognizedArgumentError

    plugins = _instantiate_or_exit("")
    try:
        remaining = parse_arguments(plugins, args)
    except UnrecognizedArgumentError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    for plugin in plugins:
        table = Table(title=escape(plugin.option_name), show_lines=False)
        table.add_column("Option", style="bold")
        table.add_column("Kind")
        table.add_column("Value")
        for option in plugin.options:
            table.add_row(option.name, option.kind.value, escape(option.render()))
        console.print(table)

    if remaining:
        console.print(
            f"\n[bold]{len(remaining)}[/bold] argument(s) left for the host: "
            + escape(" ".join(remaining))
        )


# ---------------------------------------------------------------------------
# docs command
# ---------------------------------------------------------------------------


@cli.command(name="docs")
@click.argument("site_dir", default="src/site/markdown", type=click.Path(file_okay=False))
@click.argument("readme", default="README.md", type=click.Path(dir_okay=False))
@click.option(
    "--locale",
    "locales",
    multiple=True,
    help="Locale to generate (repeatable; default: root and 'de')",
)
@click.option("--preview", is_flag=True, default=False, help="Print the root README after writing")
def docs_command(site_dir: str, readme: str, locales: tuple[str, ...], preview: bool) -> None:
    """Generate plugin usage pages and README files.

    SITE_DIR holds the markdown pages (index, getting, history, usage);
    README is the path of the root-locale README to write.
    """
    from plugopt.docs.generator import DEFAULT_LOCALES, DocumentationGenerator
    from plugopt.i18n.bundle import ROOT_LOCALE
    from plugopt.options.errors import PlugoptError
    from plugopt.plugin.builtin import default_catalog

    try:
        generator = DocumentationGenerator(
            Path(site_dir),
            Path(readme),
            default_catalog.plugin_classes(),
            locales or DEFAULT_LOCALES,
        )
        written = generator.generate()
    except PlugoptError as exc:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    for path in written:
        console.print(f"[green]Written:[/green] {path}")

    if preview:
        readme_files = generator.readme_files
        root_readme = readme_files.get(ROOT_LOCALE) or next(iter(readme_files.values()))
        console.print(Syntax(root_readme.read_text(encoding="utf-8"), "markdown"))


if __name__ == "__main__":
    cli()
