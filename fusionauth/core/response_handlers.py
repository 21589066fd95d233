"""Response body decoders."""
from __future__ import annotations
import json
from typing import Any

from .exceptions import ResponseDecodeError


class ResponseHandler:
    """Turns a raw response body into a Python value."""

    def __call__(self, content: bytes) -> Any:
        raise NotImplementedError


class JSONResponseHandler(ResponseHandler):
    """Decode a UTF-8 JSON body into dicts, lists and scalars.

    Raises:
        ResponseDecodeError: If the body is not valid UTF-8 JSON
    """

    def __call__(self, content: bytes) -> Any:
        try:
            return json.loads(content.decode("utf-8"))
        except ValueError as e:
            raise ResponseDecodeError(f"Response body is not valid JSON: {e}", content=content) from e
