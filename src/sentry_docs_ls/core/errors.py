"""Error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Definition
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Definition (3xxx)
    UNKNOWN_DOCUMENT = 3001
    NO_ENCLOSING_TAG = 3002
    MALFORMED_TAG = 3003
    UNRESOLVABLE_TAG_KIND = 3004
    DOCS_ROOT_NOT_FOUND = 3005


@dataclass(frozen=True, slots=True)
class DocsLsError(Exception):
    """Base error with structured context for logs and CLI output."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'MALFORMED_TAG')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(DocsLsError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class DefinitionError(DocsLsError):
    """A definition query that cannot produce a target.

    Always recovered into an empty result by the responder.
    """

    @classmethod
    def unknown_document(cls, uri: str) -> "DefinitionError":
        return cls(
            code=ErrorCode.UNKNOWN_DOCUMENT,
            message=f"Document is not open: {uri}",
            details={"uri": uri},
        )

    @classmethod
    def no_enclosing_tag(cls, line: int, column: int) -> "DefinitionError":
        return cls(
            code=ErrorCode.NO_ENCLOSING_TAG,
            message=f"No tag encloses {line}:{column}",
            details={"line": line, "column": column},
        )

    @classmethod
    def malformed_tag(cls, snippet: str, reason: str) -> "DefinitionError":
        return cls(
            code=ErrorCode.MALFORMED_TAG,
            message=f"Tag is not a single well-formed element: {reason}",
            details={"snippet": snippet, "reason": reason},
        )

    @classmethod
    def unresolvable_tag_kind(cls, name: str) -> "DefinitionError":
        return cls(
            code=ErrorCode.UNRESOLVABLE_TAG_KIND,
            message=f"<{name}> does not reference a file",
            details={"name": name},
        )

    @classmethod
    def docs_root_not_found(cls, path: str, root_dir_name: str) -> "DefinitionError":
        return cls(
            code=ErrorCode.DOCS_ROOT_NOT_FOUND,
            message=f"No '{root_dir_name}' directory above {path}",
            details={"path": path, "root_dir_name": root_dir_name},
        )

