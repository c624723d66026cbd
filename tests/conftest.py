"""Shared test fixtures for sitegen."""

import json
from pathlib import Path

import pytest

from sitegen.content.loader import load_content
from sitegen.content.placeholders import resolve_document

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def raw_content():
    return load_content(FIXTURES / "site_copy.json")


@pytest.fixture
def site_data(raw_content):
    return resolve_document(raw_content)


@pytest.fixture
def content_file(tmp_path, raw_content):
    """A writable copy of the fixture content document."""
    path = tmp_path / "site_copy.json"
    path.write_text(json.dumps(raw_content), encoding="utf-8")
    return path
