"""
Shared fixtures for the sales offer service tests.
"""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from web.services import offer_builder

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def fresh_template_cache():
    """Every test starts with an empty template cache."""
    offer_builder.clear_template_cache()
    yield
    offer_builder.clear_template_cache()


@pytest.fixture
def property_data() -> dict:
    with open(FIXTURES_DIR / "property.json", "r") as f:
        return json.load(f)


@pytest.fixture
def property_file() -> Path:
    return FIXTURES_DIR / "property.json"


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """
    Point the service at a temporary settings.yaml.
    Returns a writer taking the YAML text.
    """
    path = tmp_path / "settings.yaml"
    monkeypatch.setenv("SALES_OFFER_SETTINGS", str(path))
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    def write(text: str) -> Path:
        path.write_text(text)
        return path

    return write


@pytest.fixture
def simple_templates(tmp_path, settings_file):
    """
    Minimal page templates that make the assembled document easy to assert on.
    """
    templates_dir = tmp_path / "templates"
    templates_dir.mkdir()
    (templates_dir / "page-1.html").write_text("<p>cover {{ unit_code }}</p>")
    (templates_dir / "page-2-apt.html").write_text("<p>apartment {{ unit_code }}</p>")
    (templates_dir / "page-2-villa.html").write_text("<p>villa {{ unit_code }}</p>")
    (templates_dir / "page-3.html").write_text('<img src="{{ imgSrc }}">')
    (templates_dir / "page-4.html").write_text("<p>contact {{ unit_code }}</p>")
    (templates_dir / "document.html").write_text("<body>{{ pages }}</body>")
    settings_file(f"templates:\n  directory: \"{templates_dir}\"\n")
    return templates_dir


@pytest.fixture
def client():
    from web.app import app
    return TestClient(app)


@pytest.fixture
def fake_renderer(monkeypatch):
    """
    Replace the headless browser with a stub that records the HTML it was given.
    """
    calls = []

    async def render(html: str) -> bytes:
        calls.append(html)
        return b"%PDF-1.4 fake"

    monkeypatch.setattr("web.routers.offers.render_pdf", render)
    return calls
