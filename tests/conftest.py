import pytest

from main import create_app
from prompt_relay.config import Settings

from .fakes import FakeGenerator


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key")


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def app(settings, generator):
    app = create_app(settings=settings, generator=generator)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
