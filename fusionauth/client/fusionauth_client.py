"""The FusionAuth client: one method per FusionAuth REST API endpoint."""
from __future__ import annotations

from .api_keys import APIKeysAPI
from .applications import ApplicationsAPI
from .connectors import ConnectorsAPI
from .consents import ConsentsAPI
from .email_templates import EmailTemplatesAPI
from .entities import EntitiesAPI
from .event_logs import EventLogsAPI
from .families import FamiliesAPI
from .forms import FormsAPI
from .groups import GroupsAPI
from .identity_providers import IdentityProvidersAPI
from .ip_access_control_lists import IPAccessControlListsAPI
from .jwt import JWTAPI
from .keys import KeysAPI
from .lambdas import LambdasAPI
from .login import LoginAPI
from .messengers import MessengersAPI
from .oauth import OAuthAPI
from .passwords import PasswordsAPI
from .reactor import ReactorAPI
from .reports import ReportsAPI
from .system import SystemAPI
from .tenants import TenantsAPI
from .themes import ThemesAPI
from .two_factor import TwoFactorAPI
from .user_actions import UserActionsAPI
from .users import UsersAPI
from .webauthn import WebAuthnAPI
from .webhooks import WebhooksAPI


class FusionAuthClient(
    APIKeysAPI,
    ApplicationsAPI,
    ConnectorsAPI,
    ConsentsAPI,
    EmailTemplatesAPI,
    EntitiesAPI,
    EventLogsAPI,
    FamiliesAPI,
    FormsAPI,
    GroupsAPI,
    IdentityProvidersAPI,
    IPAccessControlListsAPI,
    JWTAPI,
    KeysAPI,
    LambdasAPI,
    LoginAPI,
    MessengersAPI,
    OAuthAPI,
    PasswordsAPI,
    ReactorAPI,
    ReportsAPI,
    SystemAPI,
    TenantsAPI,
    ThemesAPI,
    TwoFactorAPI,
    UserActionsAPI,
    UsersAPI,
    WebAuthnAPI,
    WebhooksAPI,
):
    """Client for the FusionAuth REST API.

    Each method builds exactly one request and returns a ClientResponse. Methods
    never raise for HTTP errors or network failures; inspect the response instead.

    Usage:
        client = FusionAuthClient(api_key, "http://localhost:9011")
        response = client.retrieve_user_by_email("alice@example.com")
        if response.was_successful():
            user = response.success_response["user"]
        elif response.exception is not None:
            raise response.exception
        else:
            logger.warning("FusionAuth returned %s: %s", response.status, response.error_response)
    """
