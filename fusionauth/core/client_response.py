"""Uniform result returned by every FusionAuth API call."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import FusionAuthError, ResponseDecodeError, TransportError


@dataclass(frozen=True)
class ClientResponse:
    """Result of a single REST round trip.

    Exactly one of ``success_response`` / ``error_response`` can be set, and only
    when the server returned a non-empty body. ``exception`` is set when no usable
    HTTP response was obtained (TransportError) or its body could not be decoded
    (ResponseDecodeError).

    Check ``was_successful()`` before reading ``success_response``.
    """
    method: str
    request: Any = None
    status: Optional[int] = None
    success_response: Any = None
    error_response: Any = None
    exception: Optional[FusionAuthError] = None

    def was_successful(self) -> bool:
        return self.status is not None and 200 <= self.status <= 299 and self.exception is None

    @property
    def transport_error(self) -> Optional[TransportError]:
        return self.exception if isinstance(self.exception, TransportError) else None

    @property
    def decode_error(self) -> Optional[ResponseDecodeError]:
        return self.exception if isinstance(self.exception, ResponseDecodeError) else None
