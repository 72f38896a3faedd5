import logging

import pytest
import requests

from zoho_creator.integrations.clients.real_http.transport import RequestsTransport


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code
        self.content = text.encode("utf-8")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse("RESULT=TRUE")
        self.error = error
        self.calls = []
        self.closed = False

    def _handle(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._handle("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._handle("POST", url, **kwargs)

    def close(self):
        self.closed = True


def test_send_without_fields_issues_get():
    session = FakeSession()
    transport = RequestsTransport(timeout_seconds=12, session=session)

    body = transport.send("https://accounts.zoho.com/login?LOGIN_ID=x")

    assert body == "RESULT=TRUE"
    method, url, kwargs = session.calls[0]
    assert method == "GET"
    assert url == "https://accounts.zoho.com/login?LOGIN_ID=x"
    assert kwargs == {"timeout": 12, "verify": True}


def test_send_with_fields_posts_form_data():
    session = FakeSession(FakeResponse("<response/>"))
    transport = RequestsTransport(session=session)

    body = transport.send("https://creator.zoho.com/api/xml/o/a/F/add/", {"Name": "Ada", "ticket": ""})

    assert body == "<response/>"
    method, _, kwargs = session.calls[0]
    assert method == "POST"
    assert kwargs["data"] == {"Name": "Ada", "ticket": ""}
    assert kwargs["verify"] is True


def test_error_status_still_returns_body():
    session = FakeSession(FakeResponse("<response><errorlist/></response>", status_code=500))
    transport = RequestsTransport(session=session)

    assert transport.send("https://creator.zoho.com/api/", {"a": "b"}) == "<response><errorlist/></response>"


@pytest.mark.parametrize(
    "error",
    [
        requests.exceptions.ConnectionError("refused"),
        requests.exceptions.Timeout("slow"),
        requests.exceptions.SSLError("bad certificate"),
    ],
)
def test_request_errors_are_reported_as_no_response(error):
    transport = RequestsTransport(session=FakeSession(error=error))

    assert transport.send("https://accounts.zoho.com/login") is None


def test_password_is_not_logged(caplog):
    transport = RequestsTransport(session=FakeSession(error=requests.exceptions.ConnectionError("refused")))

    with caplog.at_level(logging.DEBUG):
        transport.send("https://accounts.zoho.com/login?LOGIN_ID=me&PASSWORD=hunter2")

    assert "hunter2" not in caplog.text
    assert "https://accounts.zoho.com/login" in caplog.text


def test_disabled_verification_is_passed_through_and_logged(caplog):
    session = FakeSession()

    with caplog.at_level(logging.WARNING):
        transport = RequestsTransport(verify_ssl=False, session=session)
    transport.send("https://accounts.zoho.com/logout")

    assert "DISABLED" in caplog.text
    assert session.calls[0][2]["verify"] is False


def test_close_closes_session():
    session = FakeSession()

    RequestsTransport(session=session).close()

    assert session.closed is True


def test_empty_form_fields_still_post():
    session = FakeSession(FakeResponse("<response/>"))
    transport = RequestsTransport(session=session)

    transport.send("https://creator.zoho.com/api/xml/o/a/F/add/", {})

    method, _, kwargs = session.calls[0]
    assert method == "POST"
    assert kwargs["data"] == {}
