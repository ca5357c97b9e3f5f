"""Tag location, classification and path resolution."""

from sentry_docs_ls.definition.locator import find_enclosing_tag
from sentry_docs_ls.definition.models import (
    DefinitionLink,
    Include,
    Other,
    PlatformContent,
    Point,
    Tag,
    TagSpan,
)
from sentry_docs_ls.definition.resolver import find_docs_root, resolve_tag
from sentry_docs_ls.definition.responder import DefinitionService, uri_to_path
from sentry_docs_ls.definition.tags import classify

__all__ = [
    "DefinitionLink",
    "DefinitionService",
    "Include",
    "Other",
    "PlatformContent",
    "Point",
    "Tag",
    "TagSpan",
    "classify",
    "find_docs_root",
    "find_enclosing_tag",
    "resolve_tag",
    "uri_to_path",
]
