"""Pytest fixtures for the vault services and HTTP API."""

import pytest

from config import TestingConfig
from main import create_app
from mock_data import all_assets_data
from services.catalog import CatalogService
from services.gateway import AdRewardGateway, DownloadGateway


@pytest.fixture
def app():
    """Create the Flask app with zero latency and no rate limits."""
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    """Create test client; loads the landing page so a fresh session exists."""
    with app.test_client() as client:
        client.get('/')
        yield client


@pytest.fixture
def catalog():
    """The five-asset sample catalog without artificial delay."""
    return CatalogService.from_records(all_assets_data)


@pytest.fixture
def ads():
    return AdRewardGateway()


@pytest.fixture
def downloads():
    return DownloadGateway('https://example.com/download')
