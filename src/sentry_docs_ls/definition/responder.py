"""Go-to-definition for Include and PlatformContent tags.

A query walks document lookup, tag location, classification and path
resolution in order. Each step can end the query; every such exit is
logged and turned into "no definition" rather than an error.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import unquote, urlparse

import structlog

from sentry_docs_ls.config.models import DocsConfig
from sentry_docs_ls.core.errors import DefinitionError
from sentry_docs_ls.core.logging import clear_request_id, set_request_id
from sentry_docs_ls.definition.locator import find_enclosing_tag
from sentry_docs_ls.definition.models import DefinitionLink, Other, Point
from sentry_docs_ls.definition.resolver import find_docs_root, resolve_tag
from sentry_docs_ls.definition.tags import classify
from sentry_docs_ls.documents.positions import UTF8, to_byte_column, to_character
from sentry_docs_ls.documents.store import DocumentStore

logger = structlog.get_logger()


def uri_to_path(uri: str) -> Path:
    parsed = urlparse(uri)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(uri)


class DefinitionService:
    """Answers definition queries against an injected document store."""

    def __init__(self, store: DocumentStore, config: DocsConfig | None = None) -> None:
        self.store = store
        self.config = config or DocsConfig()

    def definition(
        self,
        uri: str,
        line: int,
        character: int,
        encoding: str = UTF8,
    ) -> DefinitionLink | None:
        """Resolve the tag under (line, character) in an open document.

        Args:
            uri: Document URI as sent by the client.
            line: Zero-based line.
            character: Zero-based offset in ``encoding`` units.
            encoding: Negotiated position encoding.

        Returns:
            The link to the referenced file, or None when there is none.
        """
        set_request_id()
        try:
            return self._definition(uri, line, character, encoding)
        except DefinitionError as e:
            logger.info(
                e.error_name.lower(),
                uri=uri,
                line=line,
                character=character,
                reason=e.message,
            )
            return None
        finally:
            clear_request_id()

    def _definition(self, uri: str, line: int, character: int, encoding: str) -> DefinitionLink:
        lines = self.store.get(uri)
        if lines is None:
            raise DefinitionError.unknown_document(uri)

        column = character
        if 0 <= line < len(lines):
            column = to_byte_column(lines[line], character, encoding)
        span = find_enclosing_tag(lines, line, column)
        tag = classify(span.text)
        if isinstance(tag, Other):
            raise DefinitionError.unresolvable_tag_kind(tag.name)

        docs_root = find_docs_root(uri_to_path(uri), self.config)
        target = resolve_tag(docs_root, tag, self.config)
        logger.debug("definition_resolved", uri=uri, snippet=span.text, target=str(target))

        start, end = span.start, span.end
        return DefinitionLink(
            target=target,
            origin=span,
            tag=tag,
            origin_start=Point(start.line, to_character(lines[start.line], start.column, encoding)),
            origin_end=Point(end.line, to_character(lines[end.line], end.column + 1, encoding)),
        )
