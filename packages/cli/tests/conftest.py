"""Pytest configuration and fixtures for CLI tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

# Make the packages importable when running from a source checkout
packages_dir = Path(__file__).parent.parent.parent
for package_root in (packages_dir / "cli", packages_dir / "renderer", packages_dir / "common-py"):
    if str(package_root) not in sys.path:
        sys.path.insert(0, str(package_root))


@pytest.fixture
def runner():
    """Provide a Typer CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("STENCIL_ENGINE_VERSION", raising=False)
    monkeypatch.delenv("STENCIL_LOG_LEVEL", raising=False)


@pytest.fixture
def theme_dir(tmp_path):
    """A theme template directory."""
    root = tmp_path / "templates"
    (root / "components").mkdir(parents=True)
    (root / "pages").mkdir()
    (root / "components" / "greeting.html").write_text(
        "{{ lang('greeting', name=name) }}", encoding="utf-8"
    )
    (root / "pages" / "home.html").write_text(
        "{% include 'components/greeting' %} ({{ locale_name }})", encoding="utf-8"
    )
    (root / "pages" / "plain.html").write_text("Hello {{ name }}", encoding="utf-8")
    return root


@pytest.fixture
def context_file(tmp_path):
    """A render context JSON file."""
    path = tmp_path / "context.json"
    path.write_text(json.dumps({"name": "Pat"}), encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path):
    """A stencil.yaml with locale and translations."""
    path = tmp_path / "stencil.yaml"
    path.write_text(
        "engine_version: v4\n"
        "locale: en-US\n"
        "translations:\n"
        "  greeting: 'Hello, {name}!'\n",
        encoding="utf-8",
    )
    return path
