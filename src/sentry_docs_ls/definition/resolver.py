"""Map tags to file paths under the docs root."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import assert_never

from sentry_docs_ls.config.models import DocsConfig
from sentry_docs_ls.core.errors import DefinitionError
from sentry_docs_ls.definition.models import Include, Other, PlatformContent, Tag


def find_docs_root(document: Path, config: DocsConfig) -> Path:
    """Docs root for a document: config override, else first matching segment.

    Raises:
        DefinitionError: DOCS_ROOT_NOT_FOUND when no segment of the path
            equals config.root_dir_name.
    """
    if config.docs_root:
        return Path(config.docs_root)
    parts = document.parts
    for index, part in enumerate(parts):
        if part == config.root_dir_name:
            return Path(*parts[: index + 1])
    raise DefinitionError.docs_root_not_found(str(document), config.root_dir_name)


def resolve_tag(docs_root: Path, tag: Tag, config: DocsConfig) -> Path:
    """Expected location of the file a tag references.

    No existence check is made; a dangling reference still resolves.

    Raises:
        DefinitionError: UNRESOLVABLE_TAG_KIND for Other.
    """
    if isinstance(tag, Include):
        base = docs_root / config.includes_dir
    elif isinstance(tag, PlatformContent):
        base = docs_root / config.platform_includes_dir
    elif isinstance(tag, Other):
        raise DefinitionError.unresolvable_tag_kind(tag.name)
    else:
        assert_never(tag)

    target = base / tag.path.lstrip("/")
    if not PurePath(tag.path).suffix:
        target = target.with_name(target.name + config.default_extension)
    return target
