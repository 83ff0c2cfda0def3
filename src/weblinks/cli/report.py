"""Report generation CLI command."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from weblinks.cli.main import Context, pass_context

console = Console()


@click.command()
@click.argument("document", type=click.Path(path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the report to this file instead of stdout",
)
@click.option(
    "--title",
    default="Link Report",
    help="Report title",
)
@pass_context
def report(ctx: Context, document: Path, output: Path | None, title: str) -> None:
    """
    Generate a Markdown report of links and warnings.

    Examples:

        weblinks report links.yml -o docs/links.md
    """
    from weblinks.generators.markdown import generate_report

    registry = ctx.load(document)
    content = generate_report(registry, title=title)

    if output is None:
        click.echo(content)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content)
    console.print(f"[green]Generated:[/green] {output}")
