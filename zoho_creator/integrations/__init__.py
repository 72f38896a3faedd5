"""
Integrations layer.

This package contains all code used to talk to Zoho Creator:
- the accounts service (ticket login/logout)
- the Creator XML record API (add/update)

Key rule:
- Callers MUST NOT parse Zoho responses themselves.
- Clients send through a CreatorTransport and hand the raw body to the
  normalizers under integrations/policy, which return OperationResult.

Switching implementations:
- Use clients/real_http for the network and clients/mocks for offline runs.
"""

from .contracts.interfaces import (
    CreatorTransport,
    Credentials,
    OperationError,
    OperationResult,
    RecordOperation,
    Session,
)
from .contracts.responses import (
    AddResult,
    ErrorListResult,
    ParsedResponse,
    TextKeyValue,
    TransportFailure,
    UnrecognizedResult,
    UpdateResult,
)
from .policy.error_codes import ERROR_CODES, NO_RECORDS_FOUND_CODE, lookup_error

__all__ = [
    # interfaces
    "CreatorTransport", "Credentials", "OperationError", "OperationResult",
    "RecordOperation", "Session",
    # parsed response shapes
    "AddResult", "ErrorListResult", "ParsedResponse", "TextKeyValue",
    "TransportFailure", "UnrecognizedResult", "UpdateResult",
    # error catalog
    "ERROR_CODES", "NO_RECORDS_FOUND_CODE", "lookup_error",
]
