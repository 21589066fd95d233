"""Configuration module for the FusionAuth client."""
from .settings import ClientConfig, ProxyConfig, load_settings

__all__ = ["ClientConfig", "ProxyConfig", "load_settings"]
