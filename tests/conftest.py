"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed jsonfeed_model package.
"""

import json
import pytest
from pathlib import Path

from jsonfeed_model import VERSION_1, VERSION_1_1


FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def load_fixture(name: str) -> dict:
    """Load a JSON fixture document from the repository fixtures directory."""
    with open(FIXTURES / name, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def feed_v1_1_data() -> dict:
    """A 1.1 feed using 1.1-only keys, hubs, attachments and extension keys."""
    return load_fixture("feed_v1_1.json")


@pytest.fixture
def feed_v1_data() -> dict:
    """A 1.0 feed using only keys permitted in 1.0."""
    return load_fixture("feed_v1.json")


@pytest.fixture
def minimal_feed():
    """Factory for the smallest valid feed document of a given declared version."""
    def _make(version: str = VERSION_1_1, items=None) -> dict:
        return {
            "version": version,
            "title": "Lorem ipsum dolor sit amet.",
            "items": items if items is not None else [
                {
                    "id": "2bcb497d-c40b-4493-b5ae-bc63c74b48fa",
                    "content_html": "Vestibulum non magna vitae tortor.",
                    "url": "https://example.org/vestibulum-non",
                }
            ],
        }
    return _make


@pytest.fixture(params=[VERSION_1, VERSION_1_1], ids=["v1", "v1_1"])
def target_version(request) -> str:
    """Both recognized target revisions."""
    return request.param
