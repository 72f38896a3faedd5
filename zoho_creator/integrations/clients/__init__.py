"""
Integration clients.

- real_http/: talks to Zoho over HTTPS with requests
- mocks/: replays canned Zoho bodies without any network access

Both plug into ZohoCreatorClient through the CreatorTransport interface.
"""
