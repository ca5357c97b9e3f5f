"""Config module exports."""

from sentry_docs_ls.config.loader import load_config
from sentry_docs_ls.config.models import (
    DocsConfig,
    DocsLsConfig,
    LoggingConfig,
    ServerConfig,
)

__all__ = [
    "load_config",
    "DocsConfig",
    "DocsLsConfig",
    "LoggingConfig",
    "ServerConfig",
]
