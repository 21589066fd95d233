"""Generic REST invocation core shared by every FusionAuth API method.

Architecture:
- rest_client.py: fluent request builder, performs the single HTTP round trip
- body_handlers.py: JSON and form-urlencoded request body encoders
- response_handlers.py: JSON response decoding
- client_response.py: uniform result envelope
- exceptions.py: typed exceptions
"""
from .body_handlers import BodyHandler, FormDataBodyHandler, JSONBodyHandler
from .client_response import ClientResponse
from .exceptions import (
    ConfigurationError,
    FusionAuthError,
    ResponseDecodeError,
    TransportError,
)
from .response_handlers import JSONResponseHandler, ResponseHandler
from .rest_client import HTTP_METHODS, RESTClient

__all__ = [
    # Builder
    "RESTClient",
    "HTTP_METHODS",

    # Body & response handling
    "BodyHandler",
    "JSONBodyHandler",
    "FormDataBodyHandler",
    "ResponseHandler",
    "JSONResponseHandler",
    "ClientResponse",

    # Exceptions
    "FusionAuthError",
    "ConfigurationError",
    "TransportError",
    "ResponseDecodeError",
]
