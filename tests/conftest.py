"""Pytest configuration and fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from marfa_gallery.api.main import create_app
from marfa_gallery.config import get_settings
from marfa_gallery.database import get_database, run_migrations
from marfa_gallery.identifiers import TwoWordIDGenerator

WALLET_A = "0x742d35Cc6639C0532fEb42387b22e3f0a1dd9527"
WALLET_B = "0x8ba1f109551bD432803012645aac136c4c0a5070"


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Settings pointing at a throwaway SQLite file, rate limiting off."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'gallery.db'}")
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "0")
    monkeypatch.setenv("ENVIRONMENT", "test")
    return get_settings()


@pytest.fixture
def db(settings):
    database = get_database(settings.database_url)
    run_migrations(database)
    yield database
    database.close()


@pytest.fixture
def id_generator():
    return TwoWordIDGenerator(rng=random.Random(1234))


@pytest.fixture
def client(settings, id_generator):
    app = create_app(settings, id_generator=id_generator)
    with TestClient(app) as test_client:
        yield test_client


def art_payload(n: int, **metadata):
    """Submission body for the n-th sample artwork."""
    body = {
        "name": f"Bleached Study #{n}",
        "description": f"Bone and sky, variation {n}",
        "image": f"ipfs://QmImage{n}",
        "attributes": [{"trait_type": "Series", "value": "Desert"}],
    }
    body.update(metadata)
    return {"ipfs_metadata_url": f"ipfs://QmMetadata{n}", "metadata": body}
