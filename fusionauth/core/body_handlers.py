"""Request body encoders used by the REST client.

Two interchangeable strategies turn a request payload into wire bytes plus the
headers the body needs:

- JSONBodyHandler: ``application/json``, empty top-level fields dropped
- FormDataBodyHandler: ``application/x-www-form-urlencoded`` (OAuth endpoints)

Usage:
    rest.body_handler(JSONBodyHandler({"user": {"email": "a@b.io"}}))
"""
from __future__ import annotations
import json
import uuid
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlencode


class BodyHandler:
    """Strategy interface for request body encoding."""

    def body(self) -> bytes:
        """Return the serialized request body."""
        raise NotImplementedError

    def body_object(self) -> Any:
        """Return the payload exactly as the caller supplied it."""
        raise NotImplementedError

    def set_headers(self, headers: List[str]) -> None:
        """Append body-specific header lines (e.g. Content-Type) to ``headers``."""
        raise NotImplementedError


SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, dict, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def _json_default(value: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_value(value: Any) -> str:
    """Render a form or query value; booleans become ``true`` / ``false``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class JSONBodyHandler(BodyHandler):
    """Encode a payload as a UTF-8 JSON document.

    Top-level entries that are None, an empty string or an empty collection are
    left out of the document. Nested values are written verbatim, so
    ``{"user": {"middleName": ""}}`` keeps its ``middleName``.
    """

    def __init__(self, body_object: Optional[Mapping[str, Any]]):
        self._body_object = body_object
        if body_object is None:
            filtered: Any = {}
        elif isinstance(body_object, Mapping):
            filtered = {key: value for key, value in body_object.items() if not _is_empty(value)}
        else:
            filtered = body_object
        self._body = json.dumps(
            filtered,
            separators=(",", ":"),
            ensure_ascii=False,
            default=_json_default,
        ).encode("utf-8")

    def body(self) -> bytes:
        return self._body

    def body_object(self) -> Any:
        return self._body_object

    def set_headers(self, headers: List[str]) -> None:
        headers.append(f"Content-Length: {len(self._body)}")
        headers.append("Content-Type: application/json")


class FormDataBodyHandler(BodyHandler):
    """Encode a payload as ``application/x-www-form-urlencoded``.

    Sequence values become repeated keys in order, mappings are flattened to
    ``key[sub]=value`` and None values are skipped.
    """

    def __init__(self, body_object: Optional[Mapping[str, Any]]):
        self._body_object = body_object
        self._body = urlencode(self._pairs(body_object or {})).encode("ascii")

    @classmethod
    def _pairs(cls, body_object: Mapping[str, Any], prefix: Optional[str] = None) -> List[Tuple[str, str]]:
        pairs: List[Tuple[str, str]] = []
        for key, value in body_object.items():
            name = key if prefix is None else f"{prefix}[{key}]"
            if value is None:
                continue
            if isinstance(value, Mapping):
                pairs.extend(cls._pairs(value, name))
            elif isinstance(value, SEQUENCE_TYPES):
                pairs.extend((name, format_value(item)) for item in value if item is not None)
            else:
                pairs.append((name, format_value(value)))
        return pairs

    def body(self) -> bytes:
        return self._body

    def body_object(self) -> Any:
        return self._body_object

    def set_headers(self, headers: List[str]) -> None:
        # requests sends a pre-encoded bytes body without a Content-Type
        headers.append("Content-Type: application/x-www-form-urlencoded")

