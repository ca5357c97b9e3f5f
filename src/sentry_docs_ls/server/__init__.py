"""Language server module exports."""

from sentry_docs_ls.server.app import DocsLanguageServer, create_server, run_server

__all__ = [
    "DocsLanguageServer",
    "create_server",
    "run_server",
]
