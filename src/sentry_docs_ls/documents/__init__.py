"""Open document tracking."""

from sentry_docs_ls.documents.positions import to_byte_column, to_character
from sentry_docs_ls.documents.store import DocumentStore, Lines, split_lines

__all__ = [
    "DocumentStore",
    "Lines",
    "split_lines",
    "to_byte_column",
    "to_character",
]
