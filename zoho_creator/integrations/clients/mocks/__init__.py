"""
Mock integration clients.

These return canned (but realistic) Zoho bodies without calling any
external API. They are used when:
- running the CLI with --mock
- testing the client end-to-end without network access

Important:
- Mocks follow the SAME CreatorTransport interface as the real transport.
"""

from .creator_transport import MockCreatorTransport

__all__ = ["MockCreatorTransport"]
