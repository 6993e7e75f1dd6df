"""
Flask Extensions

The content API client is created here unconfigured and bound to the app in
the factory, the same way a database extension would be.
"""

from vawmy.services.api_client import ApiClient

# Content API client (configured by create_app)
api = ApiClient()
