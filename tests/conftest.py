"""Shared fixtures for review dashboard tests."""

import random
import pytest

from review_dashboard.config import Config
from review_dashboard.dashboard import ReviewDashboard
from review_dashboard.persistence import StatusOverlay, MemoryStore, JsonFileStore
from review_dashboard.providers import StaticReviewProvider
from review_dashboard.web import create_app

from factories import API_KEY


@pytest.fixture
def overlay():
    """In-memory approval overlay."""
    return StatusOverlay(MemoryStore())


@pytest.fixture
def file_overlay(tmp_path):
    """Approval overlay persisted in a temporary JSON file."""
    return StatusOverlay(JsonFileStore(str(tmp_path / 'approved.json')))


@pytest.fixture
def dashboard(overlay):
    """Dashboard over the bundled sample data with a seeded random source."""
    return ReviewDashboard(StaticReviewProvider(), overlay, rng=random.Random(42))


@pytest.fixture
def config():
    cfg = Config()
    cfg.settings.storage.backend = 'memory'
    return cfg


@pytest.fixture
def app(config, dashboard):
    application = create_app(config, dashboard=dashboard)
    application.config['TESTING'] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {'X-API-Key': API_KEY}
