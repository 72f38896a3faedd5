"""Pytest fixtures for the Zoho Creator client tests."""

import pytest

from zoho_creator.integrations.clients.mocks import MockCreatorTransport
from zoho_creator.integrations.clients.real_http.creator import ZohoCreatorClient
from zoho_creator.integrations.contracts.interfaces import Credentials


@pytest.fixture
def credentials():
    return Credentials(
        login_id="owner@example.com",
        password="s3cret",
        api_key="api-key-123",
        application_name="owner/crm",
    )


@pytest.fixture
def transport():
    """Network-free transport; queue bodies with transport.queue(...)."""
    return MockCreatorTransport()


@pytest.fixture
def client(credentials, transport):
    return ZohoCreatorClient(credentials, transport=transport)
