import pytest
from fastapi.testclient import TestClient

from converter.core.config import Settings
from converter.main import create_app
from converter.services.rates.base import RateProvider

from .fakes import FakeProvider


@pytest.fixture
def settings() -> Settings:
    s = Settings(exchange_rate_provider="static", debug=False, _env_file=None)
    s.init_post_load()
    return s


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def make_client(settings):
    """Build a TestClient around a given provider; lifespan runs on enter."""
    clients = []

    def _make(provider: RateProvider) -> TestClient:
        client = TestClient(create_app(settings_override=settings, provider_override=provider))
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.__exit__(None, None, None)


@pytest.fixture
def client(make_client, fake_provider) -> TestClient:
    return make_client(fake_provider)
