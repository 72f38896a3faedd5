from zoho_creator.integrations.clients.mocks import MockCreatorTransport
from zoho_creator.integrations.clients.mocks.creator_transport import (
    error_list_body,
    status_body,
)
from zoho_creator.integrations.clients.real_http.creator import ZohoCreatorClient
from zoho_creator.integrations.clients.real_http.transport import RequestsTransport
from zoho_creator.integrations.policy.response_wrappers import NO_RECORDS_FOUND_STATUS
from zoho_creator.utils.config_loader import CreatorConfig

FIELDS = {"Name": "Ada Lovelace", "Email": "ada@example.com"}
CRITERIA = 'Email == "ada@example.com"'


def test_add_posts_fields_with_apikey_and_ticket(client, transport):
    client.acquire_ticket()

    result = client.add("Contacts", FIELDS)

    assert result.success is True
    url, form_fields = transport.calls[-1]
    assert url == "https://creator.zoho.com/api/xml/owner/crm/Contacts/add/"
    assert form_fields == {
        "Name": "Ada Lovelace",
        "Email": "ada@example.com",
        "apikey": "api-key-123",
        "ticket": "mock-ticket-0001",
    }


def test_add_does_not_mutate_caller_fields(client):
    fields = dict(FIELDS)

    client.add("Contacts", fields)

    assert fields == FIELDS


def test_add_without_ticket_surfaces_remote_auth_error(client, transport):
    transport.queue(error_list_body("2917"))

    result = client.add("Contacts", FIELDS)

    assert transport.calls[0][1]["ticket"] == ""
    assert result.success is False
    assert result.error.code == "2917"
    assert result.error.message == "You must login to access this API."


def test_update_posts_criteria_and_default_and_operator(client, transport):
    client.acquire_ticket()

    result = client.update("Contacts", FIELDS, CRITERIA)

    assert result.success is True
    assert result.updated is True
    url, form_fields = transport.calls[-1]
    assert url == "https://creator.zoho.com/api/xml/owner/crm/Contacts/update/"
    assert form_fields["criteria"] == CRITERIA
    assert form_fields["reloperator"] == "AND"
    assert form_fields["apikey"] == "api-key-123"
    assert form_fields["ticket"] == "mock-ticket-0001"


def test_update_passes_custom_relational_operator(client, transport):
    client.update("Contacts", FIELDS, CRITERIA, rel_operator="OR")

    assert transport.calls[0][1]["reloperator"] == "OR"


def test_update_else_add_returns_update_when_records_changed(client, transport):
    transport.queue(status_body("update", "Success"))

    result = client.update_else_add("Contacts", FIELDS, CRITERIA)

    assert len(transport.calls) == 1
    assert result.method == "update"
    assert result.as_dict() == {
        "raw_response": status_body("update", "Success"),
        "success": True,
        "updated": True,
        "method": "update",
    }


def test_update_else_add_falls_back_to_add_when_nothing_matched(credentials, transport):
    add_body = status_body("add", "Success")
    transport.queue(status_body("update", NO_RECORDS_FOUND_STATUS), add_body)
    client = ZohoCreatorClient(credentials, transport=transport)

    result = client.update_else_add("Contacts", FIELDS, CRITERIA)

    assert [call[0].rsplit("/", 2)[-2] for call in transport.calls] == ["update", "add"]
    assert "criteria" not in transport.calls[1][1]
    assert result.method == "add"

    add_alone = ZohoCreatorClient(credentials, transport=MockCreatorTransport([add_body])).add("Contacts", FIELDS)
    expected = add_alone.as_dict()
    expected["method"] = "add"
    assert result.as_dict() == expected


def test_update_else_add_returns_add_failure_after_fallback(client, transport):
    transport.queue(status_body("update", NO_RECORDS_FOUND_STATUS), error_list_body("2899"))

    result = client.update_else_add("Contacts", FIELDS, CRITERIA)

    assert result.method == "add"
    assert result.success is False
    assert result.error.code == "2899"


def test_update_else_add_does_not_add_after_update_failure(client, transport):
    transport.queue(error_list_body("2897"))

    result = client.update_else_add("Contacts", FIELDS, CRITERIA)

    assert len(transport.calls) == 1
    assert result.method == "update"
    assert result.success is False
    assert result.error.message == "Permission denied to update records."


def test_update_else_add_does_not_add_after_transport_failure(client, transport):
    transport.queue(None)

    result = client.update_else_add("Contacts", FIELDS, CRITERIA)

    assert len(transport.calls) == 1
    assert result.as_dict()["error"] == {"code": "400", "message": "Bad Request."}
    assert result.method == "update"


def test_application_can_be_changed_between_calls(client, transport):
    client.application = "owner/inventory"

    client.add("Items", {"Sku": "A-1"})

    assert transport.calls[0][0] == "https://creator.zoho.com/api/xml/owner/inventory/Items/add/"


def test_record_urls_follow_configured_api_url(credentials, transport):
    client = ZohoCreatorClient(
        credentials,
        transport=transport,
        config=CreatorConfig(api_url="https://creator.zoho.eu/api"),
        application="owner/eu-app",
    )

    client.update("Contacts", FIELDS, CRITERIA)

    assert transport.calls[0][0] == "https://creator.zoho.eu/api/xml/owner/eu-app/Contacts/update/"


def test_default_transport_follows_config(credentials):
    client = ZohoCreatorClient(credentials, config=CreatorConfig(timeout_seconds=5, verify_ssl=False))

    assert isinstance(client.transport, RequestsTransport)
    assert client.transport.timeout_seconds == 5
    assert client.transport.verify_ssl is False
