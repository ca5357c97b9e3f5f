"""Structured logging for the language server.

Events go through structlog into stdlib handlers, one per configured
output, each with its own level and renderer. Every event raised while a
definition query runs carries that query's request_id.

Nothing is ever written to stdout unless an output asks for it: in stdio
mode stdout carries the protocol stream.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from sentry_docs_ls.config.models import LoggingConfig, LogOutputConfig

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

# First file output of the active configuration; CLI errors point here
_log_file_path: Path | None = None

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
_CONSOLE_DESTINATIONS = frozenset({"stderr", "stdout"})


def get_request_id() -> str | None:
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> str:
    """Set or generate the correlation ID for the current query."""
    rid = request_id or uuid4().hex[:12]
    _request_id.set(rid)
    return rid


def clear_request_id() -> None:
    _request_id.set(None)


def get_log_file_path() -> Path | None:
    """File that receives logs under the active configuration, if any."""
    return _log_file_path


def _add_request_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_request_id():
        event_dict["request_id"] = rid
    return event_dict


def _level(name: str | None, fallback: int) -> int:
    return _LEVELS.get(name.upper(), fallback) if name else fallback


def _handler_for(output: LogOutputConfig) -> logging.Handler:
    if output.destination in _CONSOLE_DESTINATIONS:
        # Looked up per call so a swapped sys.stderr is honoured
        return logging.StreamHandler(getattr(sys, output.destination))
    path = Path(output.destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def _formatter(
    output: LogOutputConfig, shared: list[structlog.types.Processor]
) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        colors = (
            output.destination in _CONSOLE_DESTINATIONS
            and getattr(sys, output.destination).isatty()
        )
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)


def configure_logging(*, config: LoggingConfig | None = None, level: str = "INFO") -> None:
    """Route structlog and stdlib logging to the configured outputs.

    Args:
        config: Outputs and levels. Without it, a single console output
            on stderr at ``level`` is used.
        level: Default level when no config is given.
    """
    global _log_file_path
    from sentry_docs_ls.config.models import LoggingConfig

    if config is None:
        config = LoggingConfig(level=level)  # type: ignore[arg-type]
    default_level = _level(config.level, logging.INFO)

    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_request_id,  # type: ignore[list-item]
    ]
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Levels may change on reconfiguration
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(default_level)
    # pygls logs every JSON-RPC message at DEBUG
    logging.getLogger("pygls").setLevel(logging.WARNING)

    _log_file_path = None
    for output in config.outputs:
        if _log_file_path is None and output.destination not in _CONSOLE_DESTINATIONS:
            _log_file_path = Path(output.destination)
        handler = _handler_for(output)
        handler.setLevel(_level(output.level, default_level))
        handler.setFormatter(_formatter(output, shared))
        root.addHandler(handler)
