"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (SENTRY_DOCS_LS__SECTION__KEY)
3. Workspace YAML (.sentry-docs-ls.yaml)
4. Global YAML (~/.config/sentry-docs-ls/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    SENTRY_DOCS_LS__<SECTION>__<KEY>=<VALUE>

Examples:
    SENTRY_DOCS_LS__LOGGING__LEVEL=DEBUG
    SENTRY_DOCS_LS__SERVER__TRANSPORT=tcp
    SENTRY_DOCS_LS__DOCS__ROOT_DIR_NAME=develop-docs
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from sentry_docs_ls.config.constants import (
    DEFAULT_CONTENT_EXTENSION,
    DEFAULT_ROOT_DIR_NAME,
    INCLUDES_DIR,
    PLATFORM_INCLUDES_DIR,
    PORT_MAX,
    PORT_MIN,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SENTRY_DOCS_LS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every definition query.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ServerConfig(BaseModel):
    """Language server transport configuration.

    Env vars:
        SENTRY_DOCS_LS__SERVER__TRANSPORT: stdio or tcp
        SENTRY_DOCS_LS__SERVER__HOST: Bind address for tcp (default: 127.0.0.1)
        SENTRY_DOCS_LS__SERVER__PORT: Port for tcp (default: 2087)
    """

    transport: Literal["stdio", "tcp"] = Field(
        default="stdio",
        description="Editors launch the server over stdio. Use tcp for debugging.",
    )
    host: str = Field(default="127.0.0.1", description="Bind address for tcp transport.")
    port: int = Field(default=2087, description="Port for tcp transport.")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not (PORT_MIN <= v <= PORT_MAX):
            raise ValueError(f"Port must be {PORT_MIN}-{PORT_MAX}, got {v}")
        return v


class DocsConfig(BaseModel):
    """Documentation tree layout.

    Env vars:
        SENTRY_DOCS_LS__DOCS__ROOT_DIR_NAME: Directory name that marks the docs root
        SENTRY_DOCS_LS__DOCS__DOCS_ROOT: Absolute docs root, skips detection
        SENTRY_DOCS_LS__DOCS__DEFAULT_EXTENSION: Suffix for extensionless references
    """

    root_dir_name: str = Field(
        default=DEFAULT_ROOT_DIR_NAME,
        description="The first path segment with this name is taken as the docs root.",
    )
    docs_root: str | None = Field(
        default=None,
        description="Absolute docs root. When set, root_dir_name detection is skipped.",
    )
    includes_dir: str = Field(
        default=INCLUDES_DIR,
        description="Directory under the docs root holding <Include> targets.",
    )
    platform_includes_dir: str = Field(
        default=PLATFORM_INCLUDES_DIR,
        description="Directory under the docs root holding <PlatformContent> targets.",
    )
    default_extension: str = Field(
        default=DEFAULT_CONTENT_EXTENSION,
        description="Appended to references that have no file extension.",
    )

    @field_validator("default_extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        v = v.strip()
        if not v or v == ".":
            raise ValueError("Extension must not be empty")
        return v if v.startswith(".") else f".{v}"

    @field_validator("docs_root")
    @classmethod
    def validate_docs_root(cls, v: str | None) -> str | None:
        if v is None:
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"docs_root must be an absolute path: {v}")
        return str(path)


class DocsLsConfig(BaseModel):
    """Root configuration.

    All settings can be configured via:
    1. Environment variables: SENTRY_DOCS_LS__SECTION__KEY
    2. YAML config files (workspace or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    docs: DocsConfig = Field(default_factory=DocsConfig)
