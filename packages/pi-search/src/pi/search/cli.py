"""CLI entry point for pi-search. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys

import click

from pi.search.catalog import Catalog, CatalogError, load_catalog
from pi.search.scoring import RankedCandidate

_BOLD = "\033[1m"
_RESET = "\033[0m"

catalog_option = click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Catalog TOML file (default: $PI_SEARCH_CATALOG or ./redirects.toml)",
)


def _load(catalog_path: str | None) -> Catalog:
    try:
        return load_catalog(catalog_path)
    except CatalogError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _format_row(ranked: RankedCandidate, color: bool) -> str:
    if color:
        label = ranked.highlighted(_BOLD, _RESET)
    else:
        label = ranked.highlighted("[", "]")
    result = ranked.result
    return f"{result.score:>3}  {result.type:<11}  {label}  {ranked.candidate.description}"


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Logging level",
)
@click.pass_context
def main(ctx, log_level):
    """Fuzzy search over a redirect catalog."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("query")
@catalog_option
@click.option(
    "--fallback/--strict",
    default=True,
    help="Suggest close keys and aliases when nothing matches",
)
@click.option("--limit", type=int, default=None, help="Maximum number of results")
@click.option("--color/--no-color", default=None, help="Highlight with terminal bold")
def search(query, catalog_path, fallback, limit, color):
    """Rank catalog entries for QUERY."""
    catalog = _load(catalog_path)
    results = catalog.search(query, fallback=fallback, limit=limit)
    if not results:
        click.echo(f"No matches for '{query}'", err=True)
        sys.exit(1)

    if color is None:
        color = sys.stdout.isatty()
    for ranked in results:
        click.echo(_format_row(ranked, color), color=color)


@main.command()
@click.argument("name")
@catalog_option
def resolve(name, catalog_path):
    """Print the URL for a key or alias."""
    catalog = _load(catalog_path)
    candidate = catalog.resolve(name)
    if candidate is not None:
        click.echo(candidate.url)
        return

    click.echo(f"'{name}' not found", err=True)
    suggestions = catalog.suggest(name)
    if suggestions:
        click.echo("Did you mean:", err=True)
        for ranked in suggestions:
            click.echo(f"  {ranked.candidate.key} - {ranked.candidate.description}", err=True)
    sys.exit(1)


@main.command("list")
@catalog_option
def list_entries(catalog_path):
    """List every catalog entry, sorted by key."""
    catalog = _load(catalog_path)
    if not len(catalog):
        click.echo("Catalog is empty.")
        return

    for candidate in catalog.candidates:
        aliases = ", ".join(candidate.aliases)
        alias_info = f" (aliases: {aliases})" if aliases else ""
        click.echo(f"{candidate.key}{alias_info} - {candidate.description}")
        click.echo(f"    {candidate.url}")


if __name__ == "__main__":
    main()
