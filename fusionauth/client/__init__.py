"""FusionAuth API client.

Architecture:
- base.py: configuration holder and request bootstrap (API key, tenant header)
- fusionauth_client.py: FusionAuthClient, composed of one mixin per API area
- <area>.py: endpoint methods grouped by FusionAuth API area (users, oauth, ...)
"""
from .base import TENANT_ID_HEADER, BaseClient
from .fusionauth_client import FusionAuthClient

__all__ = ["BaseClient", "FusionAuthClient", "TENANT_ID_HEADER"]
