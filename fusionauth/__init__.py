"""Python client library for the FusionAuth identity server REST API.

Usage:
    from fusionauth import FusionAuthClient

    client = FusionAuthClient("api-key", "http://localhost:9011")
    response = client.retrieve_user(user_id)
"""
from .client import TENANT_ID_HEADER, FusionAuthClient
from .config import ClientConfig, ProxyConfig, load_settings
from .core import (
    ClientResponse,
    ConfigurationError,
    FormDataBodyHandler,
    FusionAuthError,
    JSONBodyHandler,
    JSONResponseHandler,
    ResponseDecodeError,
    RESTClient,
    TransportError,
)

__version__ = "1.0.0"

__all__ = [
    "FusionAuthClient",
    "TENANT_ID_HEADER",
    "ClientConfig",
    "ProxyConfig",
    "load_settings",
    "RESTClient",
    "ClientResponse",
    "JSONBodyHandler",
    "FormDataBodyHandler",
    "JSONResponseHandler",
    "FusionAuthError",
    "ConfigurationError",
    "TransportError",
    "ResponseDecodeError",
]
