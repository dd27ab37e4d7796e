"""API test fixtures - TestClient over the in-memory invoice store."""

import pytest
from starlette.testclient import TestClient

from api.app import create_app


@pytest.fixture
def app(invoice_store, page_cache, config):
    """App with error handlers, listing and form actions."""
    return create_app(invoice_store, page_cache, config)


@pytest.fixture
def client(app):
    """Test client that leaves redirects for the test to inspect."""
    return TestClient(app, raise_server_exceptions=False, follow_redirects=False)


@pytest.fixture
def delete_enabled_client(invoice_store, page_cache, delete_enabled_config):
    app = create_app(invoice_store, page_cache, delete_enabled_config)
    return TestClient(app, raise_server_exceptions=False, follow_redirects=False)
