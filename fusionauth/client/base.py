"""Shared request bootstrap for every FusionAuth API group."""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Optional

from ..config.settings import (
    DEFAULT_CONNECT_TIMEOUT_MS,
    DEFAULT_READ_TIMEOUT_MS,
    ClientConfig,
    ProxyConfig,
    load_settings,
)
from ..core import RESTClient

logger = logging.getLogger(__name__)

TENANT_ID_HEADER = "X-FusionAuth-TenantId"


class BaseClient:
    """Holds the client configuration and hands out pre-configured RESTClient builders.

    The configuration is fixed at construction. ``with_tenant_id`` returns a new
    client instead of mutating this one, so a client can be shared between threads.

    Usage:
        client = FusionAuthClient("api-key", "http://localhost:9011")
        response = client.retrieve_user(user_id)
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        *,
        tenant_id: Optional[str] = None,
        connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_MS,
        read_timeout: int = DEFAULT_READ_TIMEOUT_MS,
        certificate: Optional[str] = None,
        certificate_key: Optional[str] = None,
        proxy: Optional[ProxyConfig] = None,
    ):
        """Initialize the client.

        Args:
            api_key: API key sent as the Authorization header (None for anonymous use only)
            base_url: FusionAuth base URL, e.g. http://localhost:9011
            tenant_id: Tenant scoping every request through the X-FusionAuth-TenantId header
            connect_timeout: Connect timeout in milliseconds
            read_timeout: Read timeout in milliseconds
            certificate: TLS client certificate path (https only)
            certificate_key: Private key for ``certificate``
            proxy: Proxy used for every request
        """
        self.config = ClientConfig(
            base_url=base_url,
            api_key=api_key,
            tenant_id=tenant_id,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            certificate=certificate,
            certificate_key=certificate_key,
            proxy=proxy,
        )

    @classmethod
    def from_config(cls, config: ClientConfig):
        client = cls(config.api_key, config.base_url)
        client.config = config
        return client

    @classmethod
    def from_env(cls):
        """Build a client from FUSIONAUTH_* environment variables and /run/secrets."""
        return cls.from_config(load_settings())

    @property
    def api_key(self) -> Optional[str]:
        return self.config.api_key

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def tenant_id(self) -> Optional[str]:
        return self.config.tenant_id

    def with_tenant_id(self, tenant_id: Optional[str]):
        """Return a copy of this client scoped to ``tenant_id`` (None removes the scope)."""
        return type(self).from_config(replace(self.config, tenant_id=tenant_id))

    def start_anonymous(self) -> RESTClient:
        """Builder without the API key, for endpoints authenticated by JWT or not at all."""
        config = self.config
        client = RESTClient()
        if config.tenant_id is not None:
            client.header(TENANT_ID_HEADER, config.tenant_id)
        return (
            client.url(config.base_url)
            .connect_timeout(config.connect_timeout)
            .read_timeout(config.read_timeout)
            .certificate(config.certificate, config.certificate_key)
            .proxy(config.proxy)
        )

    def start(self) -> RESTClient:
        """Builder authenticated with the configured API key."""
        client = self.start_anonymous()
        if self.config.api_key is not None:
            client.authorization(self.config.api_key)
        return client
