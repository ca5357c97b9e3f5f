"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error mapping
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from sentry_docs_ls.config.loader import (
    GLOBAL_CONFIG_PATH,
    _deep_merge,
    _load_yaml,
    load_config,
)
from sentry_docs_ls.config.models import DocsLsConfig, LoggingConfig
from sentry_docs_ls.core.errors import ConfigError, ErrorCode


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")
        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self) -> None:
        """Nested dicts are merged recursively."""
        base = {"docs": {"root_dir_name": "sentry-docs", "default_extension": ".md"}}
        override = {"docs": {"root_dir_name": "develop-docs"}}
        assert _deep_merge(base, override) == {
            "docs": {"root_dir_name": "develop-docs", "default_extension": ".md"}
        }

    def test_override_replaces_non_dict(self) -> None:
        base: dict[str, Any] = {"a": {"nested": 1}}
        override: dict[str, Any] = {"a": "simple"}
        assert _deep_merge(base, override) == {"a": "simple"}

    def test_does_not_mutate_base(self) -> None:
        base = {"a": 1}
        _deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_default_config_when_no_files(self, isolated_config: Path) -> None:
        config = load_config(isolated_config)
        assert isinstance(config, DocsLsConfig)
        assert config.logging.level == "INFO"
        assert config.server.transport == "stdio"
        assert config.docs.root_dir_name == "sentry-docs"
        assert config.docs.default_extension == ".mdx"

    def test_loads_workspace_config(self, isolated_config: Path) -> None:
        (isolated_config / ".sentry-docs-ls.yaml").write_text(
            "docs:\n  root_dir_name: develop-docs\n"
        )
        config = load_config(isolated_config)
        assert config.docs.root_dir_name == "develop-docs"

    def test_defaults_to_cwd(self, isolated_config: Path) -> None:
        (isolated_config / ".sentry-docs-ls.yaml").write_text("logging:\n  level: DEBUG\n")
        assert load_config().logging.level == "DEBUG"

    def test_global_config_under_workspace_config(self, isolated_config: Path) -> None:
        global_file = isolated_config / "global.yaml"
        global_file.write_text("docs:\n  root_dir_name: g\n  default_extension: md\n")
        (isolated_config / ".sentry-docs-ls.yaml").write_text("docs:\n  root_dir_name: w\n")

        with patch("sentry_docs_ls.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(isolated_config)
        assert config.docs.root_dir_name == "w"
        assert config.docs.default_extension == ".md"

    def test_explicit_config_path(self, isolated_config: Path) -> None:
        explicit = isolated_config / "custom.yaml"
        explicit.write_text("server:\n  transport: tcp\n  port: 9000\n")
        (isolated_config / ".sentry-docs-ls.yaml").write_text("server:\n  port: 1234\n")

        config = load_config(isolated_config, config_path=explicit)
        assert config.server.transport == "tcp"
        assert config.server.port == 9000

    def test_missing_explicit_config_path(self, isolated_config: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(isolated_config, config_path=isolated_config / "missing.yaml")
        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_env_vars_override_yaml(self, isolated_config: Path) -> None:
        """Environment variables override YAML config."""
        (isolated_config / ".sentry-docs-ls.yaml").write_text("logging:\n  level: INFO\n")

        with patch.dict(os.environ, {"SENTRY_DOCS_LS__LOGGING__LEVEL": "WARNING"}):
            config = load_config(isolated_config)
        assert config.logging.level == "WARNING"

    def test_nested_env_var(self, isolated_config: Path) -> None:
        with patch.dict(os.environ, {"SENTRY_DOCS_LS__DOCS__DEFAULT_EXTENSION": "md"}):
            config = load_config(isolated_config)
        assert config.docs.default_extension == ".md"

    def test_kwargs_override_all(self, isolated_config: Path) -> None:
        """Keyword arguments override everything."""
        (isolated_config / ".sentry-docs-ls.yaml").write_text("logging:\n  level: DEBUG\n")
        config = load_config(isolated_config, logging=LoggingConfig(level="ERROR"))
        assert config.logging.level == "ERROR"

    def test_raises_config_error_for_invalid_value(self, isolated_config: Path) -> None:
        (isolated_config / ".sentry-docs-ls.yaml").write_text("server:\n  port: -1\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(isolated_config)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.details["field"].startswith("server")


class TestGlobalConfigPath:
    def test_is_in_user_config(self) -> None:
        assert isinstance(GLOBAL_CONFIG_PATH, Path)
        assert "sentry-docs-ls" in str(GLOBAL_CONFIG_PATH)
