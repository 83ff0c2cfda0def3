"""Main CLI entry point for weblinks."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from weblinks import __version__
from weblinks.logging import configure_logging

console = Console()


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.default_anchor: str | None = None
        self.verbose: bool = False
        self._registries: dict[Path, Any] = {}

    def load(self, path: Path) -> Any:
        """Load a link document into a registry, once per path."""
        if path not in self._registries:
            from weblinks.core.links import InvalidLinkError
            from weblinks.core.registry import Registry

            if not path.exists():
                raise click.ClickException(f"Link document not found: {path}")
            try:
                self._registries[path] = Registry.load(path, default_anchor=self.default_anchor)
            except (ValidationError, InvalidLinkError, yaml.YAMLError) as e:
                raise click.ClickException(f"Invalid link document {path}: {e}") from e
        return self._registries[path]


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.version_option(version=__version__, prog_name="weblinks")
@click.option(
    "-a",
    "--anchor",
    envvar="WEBLINKS_DEFAULT_ANCHOR",
    default=None,
    help="Default anchor for links without one (overrides the document's)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@pass_context
def cli(ctx: Context, anchor: str | None, verbose: bool) -> None:
    """
    Weblinks - inspect Web Links collected from headers, HTML and linksets.

    Reads documents of pre-parsed links, reports conflicts and renders links.
    """
    ctx.default_anchor = anchor
    ctx.verbose = verbose
    configure_logging(verbose)


# Import and register subcommands
from weblinks.cli.inspect import inspect
from weblinks.cli.render import render
from weblinks.cli.report import report

cli.add_command(inspect)
cli.add_command(render)
cli.add_command(report)


if __name__ == "__main__":
    cli()
