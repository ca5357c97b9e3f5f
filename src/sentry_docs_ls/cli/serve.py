"""sdls serve command - run the language server."""

from pathlib import Path
from typing import Any

import click
import structlog

from sentry_docs_ls.config.constants import PORT_MAX, PORT_MIN
from sentry_docs_ls.config.loader import load_config
from sentry_docs_ls.core.errors import ConfigError
from sentry_docs_ls.core.logging import configure_logging, get_log_file_path
from sentry_docs_ls.server.app import run_server

logger = structlog.get_logger()


@click.command()
@click.option("--tcp", is_flag=True, help="Listen on TCP instead of stdio")
@click.option("--host", type=str, help="Override bind address for --tcp")
@click.option(
    "--port", "-p", type=click.IntRange(PORT_MIN, PORT_MAX), help="Override port for --tcp"
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file to use instead of .sentry-docs-ls.yaml",
)
@click.pass_context
def serve_command(
    ctx: click.Context,
    tcp: bool,
    host: str | None,
    port: int | None,
    config_path: Path | None,
) -> None:
    """Start the language server.

    Editors launch this over stdio. Logs go to stderr or the configured
    log files, never stdout.
    """
    try:
        config = load_config(config_path=config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    overrides: dict[str, Any] = {}
    if tcp:
        overrides["transport"] = "tcp"
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if overrides:
        config.server = config.server.model_copy(update=overrides)

    logging_config = config.logging
    if ctx.obj and ctx.obj.get("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)

    try:
        run_server(config)
    except OSError as e:
        logger.exception("server_failed", transport=config.server.transport)
        message = f"Server failed: {e}"
        if (log_file := get_log_file_path()) is not None:
            message += f". See {log_file} for details."
        raise click.ClickException(message) from e
