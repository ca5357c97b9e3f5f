"""In-memory snapshots of open documents, keyed by URI."""

from __future__ import annotations

import threading

import structlog

logger = structlog.get_logger()

Lines = tuple[bytes, ...]


def split_lines(text: str) -> Lines:
    """Split document text into UTF-8 byte lines without terminators."""
    return tuple(text.encode("utf-8").splitlines())


class DocumentStore:
    """Open documents as immutable line tuples. Thread-safe.

    Every update swaps the whole snapshot for a URI, so a reader sees
    either the old lines or the new ones in full. Writers serialize on
    the lock; readers take no lock, since a single dict lookup is atomic
    and the tuples it returns are never mutated.
    """

    def __init__(self) -> None:
        self._documents: dict[str, Lines] = {}
        self._lock = threading.Lock()

    def put(self, uri: str, lines: Lines) -> None:
        """Replace the stored lines for uri."""
        snapshot = tuple(lines)
        with self._lock:
            self._documents[uri] = snapshot

    def get(self, uri: str) -> Lines | None:
        return self._documents.get(uri)

    def remove(self, uri: str) -> None:
        with self._lock:
            self._documents.pop(uri, None)

    def open(self, uri: str, text: str) -> None:
        lines = split_lines(text)
        self.put(uri, lines)
        logger.debug("document_opened", uri=uri, lines=len(lines))

    def change(self, uri: str, text: str) -> None:
        lines = split_lines(text)
        self.put(uri, lines)
        logger.debug("document_changed", uri=uri, lines=len(lines))

    def __contains__(self, uri: object) -> bool:
        return uri in self._documents

    def __len__(self) -> int:
        return len(self._documents)
