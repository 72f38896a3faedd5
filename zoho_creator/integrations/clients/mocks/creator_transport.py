"""
Mock Zoho Creator transport.

Purpose:
- Stands in for RequestsTransport without making any network calls
- Records every call so tests can inspect URLs and form payloads
- Replays queued bodies first, then falls back to realistic success bodies
  chosen from the URL

Queue None to simulate a transport failure.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Dict, List, Mapping, Optional, Tuple

from zoho_creator.integrations.contracts.interfaces import CreatorTransport

logger = logging.getLogger(__name__)

MOCK_TICKET = "mock-ticket-0001"


def session_body(result: bool, **params: str) -> str:
    lines = ["#", "#Mon Oct 19 09:00:00 PDT 2026"]
    lines.extend(f"{key}={value}" for key, value in params.items())
    lines.append(f"RESULT={'TRUE' if result else 'FALSE'}")
    return "\n".join(lines)


def status_body(operation: str, status: str, form: str = "Form") -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        "<response><result>"
        f'<form name="{form}"><{operation}>'
        "<values><field name=\"Name\"><value>mock</value></field></values>"
        f"<status>{status}</status>"
        f"</{operation}></form>"
        "</result></response>"
    )


def error_list_body(code: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f"<response><errorlist><error><code>{code}</code></error></errorlist></response>"
    )


class MockCreatorTransport(CreatorTransport):
    def __init__(self, responses: Optional[List[Optional[str]]] = None) -> None:
        self.responses: Deque[Optional[str]] = deque(responses or [])
        self.calls: List[Tuple[str, Optional[Dict[str, Any]]]] = []

    def queue(self, *responses: Optional[str]) -> "MockCreatorTransport":
        self.responses.extend(responses)
        return self

    def send(self, url: str, form_fields: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        self.calls.append((url, dict(form_fields) if form_fields is not None else None))
        if self.responses:
            return self.responses.popleft()
        return self._default_body(url)

    @staticmethod
    def _default_body(url: str) -> str:
        logger.info(f"[MOCK] Answering {url.split('?')[0]}")
        path = url.split("?")[0].rstrip("/")
        if path.endswith("/login"):
            return session_body(True, TICKET=MOCK_TICKET)
        if path.endswith("/logout"):
            return session_body(True)
        if path.endswith("/update"):
            return status_body("update", "Success")
        return status_body("add", "Success")
