"""Low-level HTTP request builder for the FusionAuth API.

Every API method builds one RESTClient, chains its configuration and calls
``go()`` exactly once. ``go()`` never raises for network or HTTP failures; those
come back inside the ClientResponse. Only an unusable builder (no URL/host, no
method, a missing client certificate file, a header that cannot be sent) raises
ConfigurationError, before any I/O.

Usage:
    response = (
        RESTClient()
        .url("http://localhost:9011")
        .uri("/api/user")
        .url_segment(user_id)
        .authorization(api_key)
        .get()
        .go()
    )
    if response.was_successful():
        user = response.success_response["user"]
"""
from __future__ import annotations
import base64
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

import requests
from requests.structures import CaseInsensitiveDict

from ..config.settings import DEFAULT_CONNECT_TIMEOUT_MS, DEFAULT_READ_TIMEOUT_MS, ProxyConfig
from .body_handlers import SEQUENCE_TYPES, BodyHandler, format_value
from .client_response import ClientResponse
from .exceptions import ConfigurationError, ResponseDecodeError, TransportError
from .response_handlers import JSONResponseHandler, ResponseHandler

logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


def _join(url: str, part: str) -> str:
    """Join ``part`` onto ``url`` with exactly one slash between them."""
    return url.rstrip("/") + "/" + part.lstrip("/")


def _proxy_url(proxy: ProxyConfig) -> str:
    url = proxy.url if "://" in proxy.url else f"http://{proxy.url}"
    if proxy.auth is None:
        return url
    parts = urlsplit(url)
    credentials = f"{quote(proxy.username, safe='')}:{quote(proxy.password, safe='')}"
    return urlunsplit(parts._replace(netloc=f"{credentials}@{parts.netloc}"))


def _masked(headers: CaseInsensitiveDict) -> Dict[str, str]:
    logged = dict(headers)
    for name in logged:
        if name.lower() == "authorization":
            logged[name] = "****"
    return logged


class RESTClient:
    """Fluent builder for a single FusionAuth REST call."""

    def __init__(self) -> None:
        self._url: Optional[str] = None
        self._parameters: Dict[str, List[str]] = {}
        self._headers: List[str] = []
        self._method: Optional[str] = None
        self._body_handler: Optional[BodyHandler] = None
        self._success_response_handler: ResponseHandler = JSONResponseHandler()
        self._error_response_handler: ResponseHandler = JSONResponseHandler()
        self._connect_timeout = DEFAULT_CONNECT_TIMEOUT_MS
        self._read_timeout = DEFAULT_READ_TIMEOUT_MS
        self._certificate: Optional[str] = None
        self._key: Optional[str] = None
        self._proxy: Optional[ProxyConfig] = None

    # ─────────────────────────────────────────────────────────────────────────
    # URL
    # ─────────────────────────────────────────────────────────────────────────
    def url(self, url: str) -> RESTClient:
        self._url = url
        return self

    def uri(self, uri: str) -> RESTClient:
        """Append a path (e.g. ``/api/user``) to the base URL.

        Ignored until a base URL has been set.
        """
        if not self._url:
            return self
        self._url = _join(self._url, uri)
        return self

    def url_segment(self, value: Any) -> RESTClient:
        """Append one path segment; None is ignored."""
        if value is None:
            return self
        self._url = _join(self._url or "", str(value))
        return self

    def url_parameter(self, name: str, value: Any) -> RESTClient:
        """Register a query parameter.

        None is ignored, sequences register every element under ``name`` and
        repeated calls with the same name accumulate.
        """
        if value is None:
            return self
        if isinstance(value, SEQUENCE_TYPES):
            values = [format_value(item) for item in value if item is not None]
        else:
            values = [format_value(value)]
        if values:
            self._parameters.setdefault(name, []).extend(values)
        return self

    def build_url(self) -> str:
        """Return the request URL including the encoded query string."""
        url = self._url or ""
        pairs = [(name, value) for name, values in self._parameters.items() for value in values]
        if not pairs:
            return url
        query = urlencode(pairs)
        if url.endswith("?") or url.endswith("&"):
            return url + query
        return url + ("&" if "?" in url else "?") + query

    # ─────────────────────────────────────────────────────────────────────────
    # Headers & authentication
    # ─────────────────────────────────────────────────────────────────────────
    @property
    def headers(self) -> List[str]:
        return list(self._headers)

    def header(self, name: str, value: Any) -> RESTClient:
        self._headers.append(f"{name}: {value}")
        return self

    def header_line(self, line: str) -> RESTClient:
        self._headers.append(line)
        return self

    def authorization(self, key: str) -> RESTClient:
        """Set the Authorization header, replacing any previous one."""
        self._reset_authorization_headers()
        self._headers.append(f"Authorization: {key}")
        return self

    def basic_authorization(self, username: Optional[str], password: Optional[str]) -> RESTClient:
        if username is None or password is None:
            return self
        self._reset_authorization_headers()
        encoded = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        self._headers.append(f"Authorization: Basic {encoded}")
        return self

    def _reset_authorization_headers(self) -> None:
        self._headers = [line for line in self._headers if not line.lower().startswith("authorization:")]

    # ─────────────────────────────────────────────────────────────────────────
    # Method, body & handlers
    # ─────────────────────────────────────────────────────────────────────────
    def method(self, method: str) -> RESTClient:
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ConfigurationError(f"Unsupported HTTP method: {method}")
        self._method = method
        return self

    def get(self) -> RESTClient:
        return self.method("GET")

    def post(self) -> RESTClient:
        return self.method("POST")

    def put(self) -> RESTClient:
        return self.method("PUT")

    def patch(self) -> RESTClient:
        return self.method("PATCH")

    def delete(self) -> RESTClient:
        return self.method("DELETE")

    def body_handler(self, body_handler: Optional[BodyHandler]) -> RESTClient:
        self._body_handler = body_handler
        return self

    def success_response_handler(self, handler: ResponseHandler) -> RESTClient:
        self._success_response_handler = handler
        return self

    def error_response_handler(self, handler: ResponseHandler) -> RESTClient:
        self._error_response_handler = handler
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Transport
    # ─────────────────────────────────────────────────────────────────────────
    def connect_timeout(self, connect_timeout: int) -> RESTClient:
        """Connect timeout in milliseconds."""
        self._connect_timeout = connect_timeout
        return self

    def read_timeout(self, read_timeout: int) -> RESTClient:
        """Read timeout in milliseconds."""
        self._read_timeout = read_timeout
        return self

    def certificate(self, certificate: Optional[str], key: Optional[str] = None) -> RESTClient:
        """TLS client certificate (and private key) paths, used for https URLs only."""
        self._certificate = certificate
        self._key = key
        return self

    def proxy(self, proxy: Optional[ProxyConfig]) -> RESTClient:
        self._proxy = proxy
        return self

    def _client_certificate(self, url: str) -> Union[str, Tuple[str, str], None]:
        if not self._certificate or not url.lower().startswith("https"):
            return None
        if self._key:
            return (self._certificate, self._key)
        return self._certificate

    def _proxies(self) -> Optional[Dict[str, str]]:
        if self._proxy is None:
            return None
        proxy_url = _proxy_url(self._proxy)
        return {"http": proxy_url, "https": proxy_url}

    def _build_headers(self, lines: List[str]) -> CaseInsensitiveDict:
        headers: CaseInsensitiveDict = CaseInsensitiveDict()
        for line in lines:
            name, sep, value = line.partition(":")
            name, value = name.strip(), value.strip()
            if not sep or not name:
                raise ConfigurationError(f"Malformed header line: {line!r}")
            if name in headers:
                headers[name] = f"{headers[name]}, {value}"
            else:
                headers[name] = value
        return headers

    def _validate(self) -> None:
        try:
            host = urlsplit(self._url).hostname if self._url else None
        except ValueError:
            host = None
        if not host:
            raise ConfigurationError("You must specify a URL")
        if not self._method:
            raise ConfigurationError("You must specify a HTTP method")
        if self._client_certificate(self._url):
            for path in (self._certificate, self._key):
                if path and not Path(path).is_file():
                    raise ConfigurationError(f"TLS client certificate file not found: {path}")
        for line in self._headers:
            try:
                line.encode("latin-1")
            except UnicodeEncodeError:
                name = line.partition(":")[0].strip()
                raise ConfigurationError(f"Header {name} contains characters outside latin-1") from None

    def go(self) -> ClientResponse:
        """Send the request and classify the result.

        Returns:
            ClientResponse for every HTTP status and for transport failures

        Raises:
            ConfigurationError: If the URL (with a host) or the method is missing, a
                client certificate file does not exist or a header is not latin-1
        """
        self._validate()
        method = self._method
        request = self._body_handler.body_object() if self._body_handler is not None else None
        url = self.build_url()

        lines = list(self._headers)
        body = None
        if self._body_handler is not None:
            self._body_handler.set_headers(lines)
            body = self._body_handler.body()
        headers = self._build_headers(lines)

        logger.debug("Request: %s %s", method, url)
        logger.debug("HEADERS: %s", _masked(headers))

        response = None
        try:
            with requests.Session() as session:
                response = session.request(
                    method,
                    url,
                    headers=headers,
                    data=body,
                    timeout=(self._connect_timeout / 1000, self._read_timeout / 1000),
                    cert=self._client_certificate(url),
                    proxies=self._proxies(),
                    allow_redirects=False,
                )
                status = response.status_code
                content = response.content
        except requests.RequestException as e:
            logger.warning("Request failed: %s %s (%s)", method, url, e)
            error = TransportError(f"{method} {url} failed: {e}", method=method, url=url)
            error.__cause__ = e
            return ClientResponse(method=method, request=request, exception=error)
        finally:
            if response is not None:
                response.close()

        logger.debug("Response: %s %s -> %s", method, url, status)

        successful = 200 <= status <= 299
        handler = self._success_response_handler if successful else self._error_response_handler
        decoded = None
        if content:
            try:
                decoded = handler(content)
            except ResponseDecodeError as e:
                logger.warning("Could not decode response body: %s %s -> %s", method, url, status)
                e.status = status
                return ClientResponse(method=method, request=request, status=status, exception=e)

        return ClientResponse(
            method=method,
            request=request,
            status=status,
            success_response=decoded if successful else None,
            error_response=None if successful else decoded,
        )
