import pytest
from fastapi.testclient import TestClient

from shortflix.config import Settings
from shortflix.main import create_app
from shortflix.store import ShortsStore


@pytest.fixture
def store():
    return ShortsStore()


@pytest.fixture
def settings():
    return Settings(api_prefix="/api", cors_origins=["*"])


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


def valid_payload(**overrides):
    payload = {
        "videoUrl": "https://example.com/clip.mp4",
        "title": "New Clip",
        "tags": ["new", "Sample"],
    }
    payload.update(overrides)
    return payload
