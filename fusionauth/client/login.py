"""Login, logout and passwordless APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class LoginAPI(BaseClient):
    """Login, logout and passwordless APIs."""

    def identity_provider_login(self, request: Dict[str, Any]) -> ClientResponse:
        """Handles login via third-parties including Social login, external OAuth and OpenID
        Connect, and other login systems.

        Args:
            request: The third-party login request that contains information from the third-party
                login providers that FusionAuth uses to reconcile the user's account.
        """
        return (
            self.start_anonymous()
            .uri("/api/identity-provider/login")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def login(self, request: Dict[str, Any]) -> ClientResponse:
        """Authenticates a user to FusionAuth.

        This API optionally requires an API key. See
        ``Application.loginConfiguration.requireAuthentication``.

        Args:
            request: The login request that contains the user credentials used to log them in.
        """
        return (
            self.start()
            .uri("/api/login")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def login_ping(
        self,
        user_id: str,
        application_id: str,
        caller_ip_address: Optional[str] = None,
    ) -> ClientResponse:
        """Sends a ping to FusionAuth indicating that the user was automatically logged into an
        application. When using FusionAuth's SSO or your own, you should call this if the user is
        already logged in centrally, but accesses an application where they no longer have a
        session. This helps correctly track login counts, times and helps with reporting.

        Args:
            user_id: The Id of the user that was logged in.
            application_id: The Id of the application that they logged into.
            caller_ip_address: (Optional) The IP address of the end-user that is logging in. If a
                null value is provided the IP address will be that of the client or last proxy that
                sent the request.
        """
        return (
            self.start()
            .uri("/api/login")
            .url_segment(user_id)
            .url_segment(application_id)
            .url_parameter("ipAddress", caller_ip_address)
            .put()
            .go()
        )

    def login_ping_with_request(self, request: Dict[str, Any]) -> ClientResponse:
        """Sends a ping to FusionAuth indicating that the user was automatically logged into an
        application. When using FusionAuth's SSO or your own, you should call this if the user is
        already logged in centrally, but accesses an application where they no longer have a
        session. This helps correctly track login counts, times and helps with reporting.

        Args:
            request: The login request that contains the user credentials used to log them in.
        """
        return (
            self.start()
            .uri("/api/login")
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def logout(self, global_: bool, refresh_token: Optional[str] = None) -> ClientResponse:
        """The Logout API is intended to be used to remove the refresh token and access token
        cookies if they exist on the client and revoke the refresh token stored. This API does
        nothing if the request does not contain an access token or refresh token cookies.

        Args:
            global_: When this value is set to true all the refresh tokens issued to the owner of
                the provided token will be revoked.
            refresh_token: (Optional) The refresh_token as a request parameter instead of coming in
                via a cookie. If provided this takes precedence over the cookie.
        """
        return (
            self.start_anonymous()
            .uri("/api/logout")
            .url_parameter("global", global_)
            .url_parameter("refreshToken", refresh_token)
            .post()
            .go()
        )

    def logout_with_request(self, request: Dict[str, Any]) -> ClientResponse:
        """The Logout API is intended to be used to remove the refresh token and access token
        cookies if they exist on the client and revoke the refresh token stored. This API takes the
        refresh token in the JSON body.

        Args:
            request: The request object that contains all the information used to logout the user.
        """
        return (
            self.start_anonymous()
            .uri("/api/logout")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def passwordless_login(self, request: Dict[str, Any]) -> ClientResponse:
        """Complete a login request using a passwordless code

        Args:
            request: The passwordless login request that contains all the information used to
                complete login.
        """
        return (
            self.start_anonymous()
            .uri("/api/passwordless/login")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def send_passwordless_code(self, request: Dict[str, Any]) -> ClientResponse:
        """Send a passwordless authentication code in an email to complete login.

        Args:
            request: The passwordless send request that contains all the information used to send
                an email containing a code.
        """
        return (
            self.start_anonymous()
            .uri("/api/passwordless/send")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def start_identity_provider_login(self, request: Dict[str, Any]) -> ClientResponse:
        """Begins a login request for a 3rd party login that requires user interaction such as
        HYPR.

        Args:
            request: The third-party login request that contains information from the third-party
                login providers that FusionAuth uses to reconcile the user's account.
        """
        return (
            self.start()
            .uri("/api/identity-provider/start")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def start_passwordless_login(self, request: Dict[str, Any]) -> ClientResponse:
        """Start a passwordless login request by generating a passwordless code.

        This code can be sent to the User using the Send Passwordless Code API or using a mechanism
        outside of FusionAuth. The passwordless login is completed by using the Passwordless Login
        API with this code.

        Args:
            request: The passwordless start request that contains all the information used to begin
                the passwordless login request.
        """
        return (
            self.start()
            .uri("/api/passwordless/start")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def start_two_factor_login(self, request: Dict[str, Any]) -> ClientResponse:
        """Start a Two-Factor login request by generating a two-factor identifier.

        This code can then be sent to the Two Factor Send API (/api/two-factor/send)in order to
        send a one-time use code to a user. You can also use one-time use code returned to send the
        code out-of-band. The Two-Factor login is completed by making a request to the Two-Factor
        Login API (/api/two-factor/login). with the two-factor identifier and the one-time use
        code.

        This API is intended to allow you to begin a Two-Factor login outside a normal login that
        originated from the Login API (/api/login).

        Args:
            request: The Two-Factor start request that contains all the information used to begin
                the Two-Factor login request.
        """
        return (
            self.start()
            .uri("/api/two-factor/start")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def two_factor_login(self, request: Dict[str, Any]) -> ClientResponse:
        """Complete login using a 2FA challenge

        Args:
            request: The login request that contains the user credentials used to log them in.
        """
        return (
            self.start_anonymous()
            .uri("/api/two-factor/login")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )
