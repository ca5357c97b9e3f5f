"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
# This ensures that the local sentry_docs_ls package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of sentry_docs_ls modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("sentry_docs_ls"):
        del sys.modules[module_name]


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run from tmp_path with no global config file and no env overrides."""
    from sentry_docs_ls.config import loader

    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "global-none.yaml")
    for key in list(os.environ):
        if key.upper().startswith("SENTRY_DOCS_LS__"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers bound to captured streams between tests."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()
