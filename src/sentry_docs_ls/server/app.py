"""Language server wiring.

Text sync notifications feed the DocumentStore; definition requests go to
DefinitionService and are converted to LSP types here. Definition runs on
the pygls worker threads so a long scan never stalls notifications.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import structlog
from lsprotocol import types
from pygls.lsp.server import LanguageServer

from sentry_docs_ls.config.constants import DIST_NAME, SERVER_NAME
from sentry_docs_ls.config.models import DocsLsConfig
from sentry_docs_ls.definition.models import DefinitionLink
from sentry_docs_ls.definition.responder import DefinitionService
from sentry_docs_ls.documents.store import DocumentStore

logger = structlog.get_logger()

_FILE_START = types.Range(
    start=types.Position(line=0, character=0),
    end=types.Position(line=0, character=0),
)


def _get_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"


class DocsLanguageServer(LanguageServer):
    """LanguageServer that owns one document store and definition service."""

    def __init__(self, config: DocsLsConfig, store: DocumentStore) -> None:
        super().__init__(
            SERVER_NAME,
            _get_version(),
            text_document_sync_kind=types.TextDocumentSyncKind.Full,
        )
        self.config = config
        self.store = store
        self.service = DefinitionService(store, config.docs)


def to_location_link(link: DefinitionLink) -> types.LocationLink:
    """LocationLink whose target is the start of the resolved file."""
    origin = types.Range(
        start=types.Position(line=link.origin_start.line, character=link.origin_start.column),
        end=types.Position(line=link.origin_end.line, character=link.origin_end.column),
    )
    return types.LocationLink(
        target_uri=link.target.absolute().as_uri(),
        target_range=_FILE_START,
        target_selection_range=_FILE_START,
        origin_selection_range=origin,
    )


def to_location(link: DefinitionLink) -> types.Location:
    return types.Location(uri=link.target.absolute().as_uri(), range=_FILE_START)


def supports_definition_links(capabilities: types.ClientCapabilities | None) -> bool:
    text_document = capabilities.text_document if capabilities else None
    definition = text_document.definition if text_document else None
    return bool(definition and definition.link_support)


def initialized(ls: DocsLanguageServer, params: types.InitializedParams) -> None:  # noqa: ARG001
    logger.info("server_initialized", encoding=str(ls.workspace.position_encoding))
    ls.window_log_message(
        types.LogMessageParams(type=types.MessageType.Info, message="server initialized!")
    )


def did_open(ls: DocsLanguageServer, params: types.DidOpenTextDocumentParams) -> None:
    ls.store.open(params.text_document.uri, params.text_document.text)


def did_change(ls: DocsLanguageServer, params: types.DidChangeTextDocumentParams) -> None:
    if not params.content_changes:
        return
    # Full sync: the last change carries the whole document
    ls.store.change(params.text_document.uri, params.content_changes[-1].text)


def did_close(ls: DocsLanguageServer, params: types.DidCloseTextDocumentParams) -> None:
    ls.store.remove(params.text_document.uri)
    logger.debug("document_closed", uri=params.text_document.uri)


def definition(
    ls: DocsLanguageServer, params: types.DefinitionParams
) -> list[types.LocationLink] | types.Location | None:
    """Answer textDocument/definition; never raises for a missing target."""
    link = ls.service.definition(
        params.text_document.uri,
        params.position.line,
        params.position.character,
        ls.workspace.position_encoding,
    )
    if link is None:
        return None
    if supports_definition_links(ls.client_capabilities):
        return [to_location_link(link)]
    return to_location(link)


def create_server(
    config: DocsLsConfig | None = None,
    store: DocumentStore | None = None,
) -> DocsLanguageServer:
    """Build a server with text sync and definition features registered.

    pygls marks registration on the handler object, so every server gets
    its own handlers that delegate to the module-level functions.
    """
    server = DocsLanguageServer(
        config or DocsLsConfig(),
        store if store is not None else DocumentStore(),
    )

    @server.feature(types.INITIALIZED)
    def _initialized(ls: DocsLanguageServer, params: types.InitializedParams) -> None:
        initialized(ls, params)

    @server.feature(types.TEXT_DOCUMENT_DID_OPEN)
    def _did_open(ls: DocsLanguageServer, params: types.DidOpenTextDocumentParams) -> None:
        did_open(ls, params)

    @server.feature(types.TEXT_DOCUMENT_DID_CHANGE)
    def _did_change(ls: DocsLanguageServer, params: types.DidChangeTextDocumentParams) -> None:
        did_change(ls, params)

    @server.feature(types.TEXT_DOCUMENT_DID_CLOSE)
    def _did_close(ls: DocsLanguageServer, params: types.DidCloseTextDocumentParams) -> None:
        did_close(ls, params)

    @server.thread()
    @server.feature(types.TEXT_DOCUMENT_DEFINITION)
    def _definition(
        ls: DocsLanguageServer, params: types.DefinitionParams
    ) -> list[types.LocationLink] | types.Location | None:
        return definition(ls, params)

    return server


def run_server(config: DocsLsConfig, store: DocumentStore | None = None) -> None:
    """Serve over the configured transport until the client disconnects."""
    server = create_server(config, store)
    if config.server.transport == "tcp":
        logger.info(
            "server_starting",
            transport="tcp",
            host=config.server.host,
            port=config.server.port,
        )
        server.start_tcp(config.server.host, config.server.port)
    else:
        logger.info("server_starting", transport="stdio")
        server.start_io()
