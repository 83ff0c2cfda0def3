"""Inspection CLI command."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from weblinks.cli.main import Context, pass_context
from weblinks.core.schema import LinkOrigin

console = Console()


@click.command()
@click.argument("document", type=click.Path(path_type=Path))
@click.option(
    "--origin",
    "-o",
    type=click.Choice([o.value for o in LinkOrigin]),
    help="Show only links from this origin",
)
@click.option(
    "--relation",
    "-r",
    help="Show only links with this relation",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on warnings",
)
@pass_context
def inspect(
    ctx: Context,
    document: Path,
    origin: str | None,
    relation: str | None,
    strict: bool,
) -> None:
    """
    List the links in a document and report conflicts.

    Examples:

        # All links and warnings
        weblinks inspect links.yml

        # Only cite-as links found in headers, fail if anything looks wrong
        weblinks inspect links.yml --origin header --relation cite-as --strict
    """
    registry = ctx.load(document)

    links = registry.filter(relation=relation, origin=origin)

    if links:
        table = Table(title=f"Links in {document}")
        table.add_column("Origin", style="dim")
        table.add_column("Relation", style="cyan")
        table.add_column("Href")
        table.add_column("Anchor")
        table.add_column("Facets")

        for link in links:
            facets = ", ".join(f"{name}={value}" for name, value in link.facets.items())
            table.add_row(
                link.origin.value,
                link.relation,
                link.href,
                link.anchor,
                facets or "-",
            )

        console.print(table)
    else:
        console.print("[yellow]No matching links[/yellow]")

    warnings = registry.warnings

    console.print("\n[bold]Summary[/bold]")
    console.print(f"  Links: {len(registry)}")
    console.print(f"  Linksets: {len(registry.linksets())}")
    console.print(f"  Warnings: {len(warnings)}")

    if warnings:
        style = "red" if strict else "yellow"
        console.print(f"\n[{style}]Warnings:[/{style}]")
        for warn in warnings:
            console.print(f"  • {warn}", markup=False, style=style)

    if warnings and strict:
        console.print("\n[red bold]Inspection failed (strict mode)[/red bold]")
        raise SystemExit(1)
