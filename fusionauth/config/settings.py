"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT_MS = 2000
DEFAULT_READ_TIMEOUT_MS = 2000


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.info("Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.info("Loaded %s from environment (fallback)", env_var)
            return secret_value

    return None


def _get_int(var_name: str, default: int) -> int:
    """Read an integer environment variable, falling back to ``default`` when unset."""
    raw = os.environ.get(var_name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {var_name} must be an integer (got {raw!r}).") from None


@dataclass(frozen=True)
class ProxyConfig:
    """HTTP(S) proxy used for every request, with optional basic credentials."""
    url: str
    username: Optional[str] = None
    password: Optional[str] = None

    @property
    def auth(self) -> Optional[str]:
        """``username:password`` when both credentials are configured."""
        if self.username is None or self.password is None:
            return None
        return f"{self.username}:{self.password}"


@dataclass(frozen=True)
class ClientConfig:
    """Client configuration container.

    Set once when the client is constructed and read by every request.
    Timeouts are in milliseconds.
    """
    base_url: str
    api_key: Optional[str] = None
    tenant_id: Optional[str] = None
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_MS
    read_timeout: int = DEFAULT_READ_TIMEOUT_MS
    certificate: Optional[str] = None
    certificate_key: Optional[str] = None
    proxy: Optional[ProxyConfig] = None


def load_settings() -> ClientConfig:
    """Load client settings from the environment and /run/secrets."""
    base_url = os.environ.get("FUSIONAUTH_URL", "").strip()
    if not base_url:
        raise RuntimeError("Environment variable FUSIONAUTH_URL is required.")

    api_key = _load_secret_from_file("fusionauth_api_key", "FUSIONAUTH_API_KEY")
    if not api_key:
        raise RuntimeError("FUSIONAUTH_API_KEY not found in /run/secrets or environment")

    tenant_id = os.environ.get("FUSIONAUTH_TENANT_ID", "").strip() or None

    connect_timeout = _get_int("FUSIONAUTH_CONNECT_TIMEOUT_MS", DEFAULT_CONNECT_TIMEOUT_MS)
    read_timeout = _get_int("FUSIONAUTH_READ_TIMEOUT_MS", DEFAULT_READ_TIMEOUT_MS)

    # TLS client certificate (only used for https URLs)
    certificate = os.environ.get("FUSIONAUTH_CLIENT_CERT", "").strip() or None
    certificate_key = os.environ.get("FUSIONAUTH_CLIENT_KEY", "").strip() or None

    proxy = None
    proxy_url = os.environ.get("FUSIONAUTH_PROXY_URL", "").strip()
    if proxy_url:
        proxy = ProxyConfig(
            url=proxy_url,
            username=os.environ.get("FUSIONAUTH_PROXY_USERNAME") or None,
            password=_load_secret_from_file("fusionauth_proxy_password", "FUSIONAUTH_PROXY_PASSWORD"),
        )

    logger.info(
        "FusionAuth settings loaded; url=%s; tenant=%s; proxy=%s",
        base_url,
        tenant_id or "-",
        "yes" if proxy else "no",
    )

    return ClientConfig(
        base_url=base_url,
        api_key=api_key,
        tenant_id=tenant_id,
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        certificate=certificate,
        certificate_key=certificate_key,
        proxy=proxy,
    )
