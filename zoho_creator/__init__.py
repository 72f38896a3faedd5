"""
Zoho Creator API client.

Authenticates against Zoho accounts with a session ticket and adds/updates
records in a Creator application. Every public operation returns an
OperationResult instead of raising.
"""

from .integrations.clients.real_http.creator import ZohoCreatorClient
from .integrations.contracts.interfaces import (
    Credentials,
    OperationError,
    OperationResult,
    Session,
)

__all__ = [
    "ZohoCreatorClient",
    "Credentials",
    "OperationError",
    "OperationResult",
    "Session",
]
