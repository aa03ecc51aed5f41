"""Pytest configuration and fixtures for renderer tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import sys
from pathlib import Path

import pytest

# Make the packages importable when running from a source checkout
packages_dir = Path(__file__).parent.parent.parent
for package_root in (packages_dir / "renderer", packages_dir / "common-py"):
    if str(package_root) not in sys.path:
        sys.path.insert(0, str(package_root))


@pytest.fixture
def renderer():
    """A v3 renderer with site and theme settings."""
    from stencil_renderer import StencilRenderer

    return StencilRenderer(
        {"cdn_url": "https://cdn.example.com/"},
        {"color": "red"},
        "v3",
    )


@pytest.fixture
def renderer_v4():
    """A v4 renderer with empty settings."""
    from stencil_renderer import StencilRenderer

    return StencilRenderer({}, {}, "v4")


@pytest.fixture
def translator():
    """An en-US translator with a small catalog."""
    from stencil_renderer import CatalogTranslator

    return CatalogTranslator(
        "en-US",
        {
            "header": {"welcome": "Welcome, {name}!"},
            "cart": {"items": "{count} items"},
        },
    )


@pytest.fixture
def sample_templates():
    """Raw templates of a small theme."""
    return {
        "components/greeting": "Hi {{ name }}",
        "pages/home": "{% include 'components/greeting' %}!",
        "pages/about": "About {{ template }}",
    }


@pytest.fixture
def template_dir(tmp_path):
    """A theme template directory on disk."""
    root = tmp_path / "templates"
    (root / "components").mkdir(parents=True)
    (root / "pages").mkdir()
    (root / "components" / "greeting.html").write_text("Hi {{ name }}", encoding="utf-8")
    (root / "pages" / "home.html").write_text(
        "{% include 'components/greeting' %}!", encoding="utf-8"
    )
    (root / "pages" / "notes.txt").write_text("not a template", encoding="utf-8")
    return root
