"""
Real HTTP integration clients.

These clients communicate with Zoho's accounts and Creator services over
HTTPS.

Important:
- Transports must implement contracts.interfaces.CreatorTransport
- Clients must return contracts.interfaces.OperationResult
"""

from .creator import ZohoCreatorClient
from .transport import RequestsTransport

__all__ = ["ZohoCreatorClient", "RequestsTransport"]
