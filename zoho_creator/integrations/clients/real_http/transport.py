"""
requests-based transport for Zoho's accounts and Creator services.

One request per call, no retries. Any requests failure (timeout,
connection, TLS) is logged and reported as None so the normalizer can turn
it into the transport failure result.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional
from urllib.parse import urlsplit

import requests

from zoho_creator.integrations.contracts.interfaces import CreatorTransport

logger = logging.getLogger(__name__)


class RequestsTransport(CreatorTransport):
    def __init__(
        self,
        timeout_seconds: float = 30.0,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.verify_ssl = verify_ssl
        self.session = session or requests.Session()
        if not verify_ssl:
            logger.warning("TLS certificate verification is DISABLED for Zoho requests")

    def send(self, url: str, form_fields: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        # Query strings carry the password and ticket; only log the endpoint.
        parts = urlsplit(url)
        endpoint = f"{parts.scheme}://{parts.netloc}{parts.path}"
        try:
            if form_fields is not None:
                logger.debug(f"POST {endpoint}")
                response = self.session.post(
                    url,
                    data=dict(form_fields),
                    timeout=self.timeout_seconds,
                    verify=self.verify_ssl,
                )
            else:
                logger.debug(f"GET {endpoint}")
                response = self.session.get(
                    url,
                    timeout=self.timeout_seconds,
                    verify=self.verify_ssl,
                )
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout calling {endpoint}: {str(e)}")
            return None
        except requests.exceptions.RequestException as e:
            logger.error(f"Error calling {endpoint}: {type(e).__name__} - {str(e)}")
            return None

        # Zoho reports its own errors inside the body, so keep it either way.
        if response.status_code >= 400:
            logger.warning(f"HTTP {response.status_code} from {endpoint}")
        else:
            logger.info(f"Successfully called {endpoint} ({len(response.content)} bytes)")
        return response.text

    def close(self) -> None:
        self.session.close()
