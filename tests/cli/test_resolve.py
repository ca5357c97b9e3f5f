"""Tests for sdls resolve command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from sentry_docs_ls.cli.main import cli

runner = CliRunner()


@pytest.fixture
def docs_page(isolated_config: Path) -> Path:
    """A page inside a sentry-docs checkout with one existing include."""
    root = isolated_config / "sentry-docs"
    (root / "includes").mkdir(parents=True)
    (root / "includes" / "setup.mdx").write_text("Setup steps\n")
    page = root / "docs" / "index.mdx"
    page.parent.mkdir(parents=True)
    page.write_text(
        "# Title\n"
        '<Include name="setup" />\n'
        "<PlatformContent\n"
        '  includePath="missing/thing"\n'
        "/>\n"
    )
    return page


class TestResolveCommand:
    def test_given_include_when_resolve_then_prints_target_path(self, docs_page: Path) -> None:
        result = runner.invoke(cli, ["resolve", str(docs_page), "1", "3"])
        assert result.exit_code == 0, result.output
        expected = docs_page.parent.parent / "includes" / "setup.mdx"
        assert str(expected.resolve()) in result.output

    def test_given_json_flag_when_resolve_then_prints_definition_payload(
        self, docs_page: Path
    ) -> None:
        result = runner.invoke(cli, ["resolve", str(docs_page), "3", "4", "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)["definition"]
        assert payload["kind"] == "PlatformContent"
        assert payload["target"].endswith("platform-includes/missing/thing.mdx")
        assert payload["exists"] is False
        assert payload["snippet"] == '<PlatformContent   includePath="missing/thing" />'

    def test_given_prose_when_resolve_then_exits_1(self, docs_page: Path) -> None:
        result = runner.invoke(cli, ["resolve", str(docs_page), "0", "2"])
        assert result.exit_code == 1
        assert "No definition" in result.output

    def test_given_prose_and_json_when_resolve_then_null_definition(self, docs_page: Path) -> None:
        result = runner.invoke(cli, ["resolve", str(docs_page), "0", "2", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output) == {"definition": None}

    def test_given_workspace_config_when_resolve_then_extension_applied(
        self, docs_page: Path, isolated_config: Path
    ) -> None:
        (isolated_config / ".sentry-docs-ls.yaml").write_text("docs:\n  default_extension: md\n")
        result = runner.invoke(cli, ["resolve", str(docs_page), "1", "3"])
        assert result.exit_code == 0, result.output
        assert result.output.strip().endswith("setup.md")

    def test_given_broken_yaml_when_resolve_then_reports_parse_error(
        self, docs_page: Path, isolated_config: Path
    ) -> None:
        (isolated_config / ".sentry-docs-ls.yaml").write_text("docs: [unclosed\n")
        result = runner.invoke(cli, ["resolve", str(docs_page), "1", "3"])
        assert result.exit_code != 0
        assert "CONFIG_PARSE_ERROR" in result.output

    def test_given_missing_file_when_resolve_then_usage_error(self, isolated_config: Path) -> None:
        result = runner.invoke(cli, ["resolve", str(isolated_config / "nope.mdx"), "0", "0"])
        assert result.exit_code == 2

    def test_given_negative_line_when_resolve_then_usage_error(self, docs_page: Path) -> None:
        result = runner.invoke(cli, ["resolve", str(docs_page), "--", "-1", "0"])
        assert result.exit_code == 2

    def test_given_json_when_config_invalid_then_error_payload(
        self, docs_page: Path, isolated_config: Path
    ) -> None:
        (isolated_config / ".sentry-docs-ls.yaml").write_text("server:\n  port: 99999\n")

        result = runner.invoke(cli, ["resolve", str(docs_page), "1", "3", "--json"])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["definition"] is None
        assert payload["error"]["code"] == 2002
        assert payload["error"]["error"] == "CONFIG_INVALID_VALUE"
        assert payload["error"]["details"]["field"].startswith("server")
