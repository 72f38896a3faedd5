"""
Contracts (data models).

This folder defines the request/response shapes for the Zoho Creator
integration:
- credentials and the session ticket
- the uniform OperationResult every client call returns
- the parsed wire shapes the normalizer works on

Both the real HTTP client and the mock transport rely on these contracts.
"""
