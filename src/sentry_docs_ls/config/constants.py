"""Configuration constants.

Values that are not user-configurable live here as plain names; the
documentation layout defaults are also the defaults of DocsConfig.
"""

# =============================================================================
# Server Identity
# =============================================================================

SERVER_NAME = "sentry-docs-language-server"
"""Name reported in InitializeResult.serverInfo."""

DIST_NAME = "sentry-docs-ls"
"""Distribution name used to look up the installed version."""

# =============================================================================
# Documentation Layout Defaults
# =============================================================================

DEFAULT_ROOT_DIR_NAME = "sentry-docs"
"""Checkout directory name that marks the docs root."""

INCLUDES_DIR = "includes"
"""Holds files referenced by <Include name="..."/>."""

PLATFORM_INCLUDES_DIR = "platform-includes"
"""Holds files referenced by <PlatformContent includePath="..."/>."""

DEFAULT_CONTENT_EXTENSION = ".mdx"
"""Content-file suffix appended to extensionless references."""

# =============================================================================
# Config File Locations
# =============================================================================

WORKSPACE_CONFIG_NAME = ".sentry-docs-ls.yaml"
"""Per-workspace config file, looked up in the working directory."""

ENV_PREFIX = "SENTRY_DOCS_LS__"
"""Prefix for environment variable overrides."""

# =============================================================================
# Protocol/Validation Constants
# =============================================================================

PORT_MIN = 0
PORT_MAX = 65535
"""Valid port range."""
