"""sentry-docs-ls CLI - sdls command."""

import click

from sentry_docs_ls.cli.resolve import resolve_command
from sentry_docs_ls.cli.serve import serve_command
from sentry_docs_ls.core.logging import configure_logging


@click.group()
@click.version_option(package_name="sentry-docs-ls", prog_name="sdls")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Go-to-definition language server for Sentry docs MDX tags."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(serve_command, name="serve")
cli.add_command(resolve_command, name="resolve")


if __name__ == "__main__":
    cli()
