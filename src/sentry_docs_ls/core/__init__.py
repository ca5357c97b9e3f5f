"""Core module exports."""

from sentry_docs_ls.core.errors import (
    ConfigError,
    DefinitionError,
    DocsLsError,
    ErrorCode,
)
from sentry_docs_ls.core.logging import (
    clear_request_id,
    configure_logging,
    get_log_file_path,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "DefinitionError",
    "DocsLsError",
    "ErrorCode",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_log_file_path",
    "get_request_id",
    "set_request_id",
]
