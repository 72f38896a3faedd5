"""
Response policy.

- error_codes.py: Zoho Creator's numeric error catalog
- response_wrappers.py: turns raw Zoho bodies into OperationResult
"""
