"""sdls resolve command - one-shot definition lookup."""

import json
from pathlib import Path

import click

from sentry_docs_ls.config.loader import load_config
from sentry_docs_ls.core.errors import ConfigError
from sentry_docs_ls.definition.responder import DefinitionService
from sentry_docs_ls.documents.positions import UTF8
from sentry_docs_ls.documents.store import DocumentStore


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line", type=click.IntRange(min=0))
@click.argument("column", type=click.IntRange(min=0))
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file to use instead of .sentry-docs-ls.yaml",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def resolve_command(
    file: Path,
    line: int,
    column: int,
    config_path: Path | None,
    as_json: bool,
) -> None:
    """Print the file referenced by the tag at LINE:COLUMN of FILE.

    LINE and COLUMN are zero-based; COLUMN counts bytes. Exits with
    status 1 when there is no definition.
    """
    try:
        config = load_config(config_path=config_path)
    except ConfigError as e:
        if not as_json:
            raise click.ClickException(str(e)) from e
        click.echo(json.dumps({"definition": None, "error": e.to_dict()}, default=str))
        raise SystemExit(1) from e

    path = file.resolve()
    uri = path.as_uri()
    store = DocumentStore()
    store.open(uri, path.read_text(encoding="utf-8", errors="replace"))

    link = DefinitionService(store, config.docs).definition(uri, line, column, UTF8)

    if as_json:
        payload = None
        if link is not None:
            payload = {
                "target": str(link.target),
                "exists": link.target.exists(),
                "kind": type(link.tag).__name__,
                "snippet": link.origin.text,
            }
        click.echo(json.dumps({"definition": payload}))
    elif link is not None:
        click.echo(str(link.target))
    else:
        click.echo("No definition", err=True)

    if link is None:
        raise SystemExit(1)
