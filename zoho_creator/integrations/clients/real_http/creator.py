"""
Zoho Creator HTTP Client.

Purpose:
- Logs in to Zoho accounts to obtain an API ticket, and logs out again
- Adds and updates records of a Creator application through the XML API
- Normalizes every response into the OperationResult contract

Usage:
    client = ZohoCreatorClient(credentials)
    client.acquire_ticket()
    client.update_else_add("Contacts", {"Email": "a@b.c"}, "Email == \"a@b.c\"")
    client.destroy_ticket()

Important:
- Operations never raise for remote or transport failures; inspect
  result.success.
- Record calls do not check for a ticket locally. Without one Zoho answers
  with an error code which is returned like any other failure.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from zoho_creator.integrations.contracts.interfaces import (
    CreatorTransport,
    Credentials,
    OperationResult,
    RecordOperation,
    Session,
)
from zoho_creator.integrations.clients.real_http.transport import RequestsTransport
from zoho_creator.integrations.policy.response_wrappers import (
    normalize_record_response,
    normalize_session_response,
)
from zoho_creator.utils.config_loader import CreatorConfig

logger = logging.getLogger(__name__)


class ZohoCreatorClient:
    def __init__(
        self,
        credentials: Credentials,
        transport: Optional[CreatorTransport] = None,
        config: Optional[CreatorConfig] = None,
        application: Optional[str] = None,
    ) -> None:
        self.credentials = credentials
        self.config = config or CreatorConfig()
        self.transport = transport or RequestsTransport(
            timeout_seconds=self.config.timeout_seconds,
            verify_ssl=self.config.verify_ssl,
        )
        self.session = Session()
        self.application = application or credentials.application_name or self.config.application

    # -- Session --

    def acquire_ticket(self) -> OperationResult:
        """Log in and store the issued ticket."""
        query = {
            "LOGIN_ID": self.credentials.login_id,
            "PASSWORD": self.credentials.password,
            "FROM_AGENT": "true",
            "servicename": self.config.service_name,
        }
        url = f"{self._accounts_url}/login?{urlencode(query)}"

        result = normalize_session_response(self.transport.send(url))
        self.session.activate(result.api_ticket if result.success else None)
        if result.success:
            logger.info(f"Acquired Zoho API ticket for {self.credentials.login_id}")
        return result

    def destroy_ticket(self) -> OperationResult:
        """Log out and forget the stored ticket."""
        query = {
            "ticket": self.session.ticket or "",
            "FROM_AGENT": "true",
        }
        url = f"{self._accounts_url}/logout?{urlencode(query)}"

        result = normalize_session_response(self.transport.send(url))
        if result.success:
            self.session.clear()
            logger.info("Destroyed Zoho API ticket")
        return result

    # -- Records --

    def add(self, form: str, fields: Mapping[str, Any]) -> OperationResult:
        payload = dict(fields)
        payload["apikey"] = self.credentials.api_key
        payload["ticket"] = self.session.ticket or ""

        raw = self.transport.send(self._record_url(form, RecordOperation.ADD), payload)
        return normalize_record_response(raw, RecordOperation.ADD)

    def update(
        self,
        form: str,
        fields: Mapping[str, Any],
        criteria: str,
        rel_operator: str = "AND",
    ) -> OperationResult:
        payload = dict(fields)
        payload["apikey"] = self.credentials.api_key
        payload["ticket"] = self.session.ticket or ""
        payload["criteria"] = criteria
        payload["reloperator"] = rel_operator

        raw = self.transport.send(self._record_url(form, RecordOperation.UPDATE), payload)
        return normalize_record_response(raw, RecordOperation.UPDATE)

    def update_else_add(self, form: str, fields: Mapping[str, Any], criteria: str) -> OperationResult:
        """Update the records matching criteria, or add one if none match."""
        result = self.update(form, fields, criteria).with_method(RecordOperation.UPDATE.value)

        if result.success and not result.updated:
            logger.info(f"No {form} record matched {criteria!r}, adding instead")
            result = self.add(form, fields).with_method(RecordOperation.ADD.value)

        return result

    # -- Helpers --

    @property
    def _accounts_url(self) -> str:
        return self.config.accounts_url.rstrip("/")

    def _record_url(self, form: str, operation: RecordOperation) -> str:
        return f"{self.config.api_url.rstrip('/')}/xml/{self.application}/{form}/{operation.value}/"
