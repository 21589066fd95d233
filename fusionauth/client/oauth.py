"""OAuth 2.0, OpenID Connect and device grant APIs."""
from __future__ import annotations
from typing import Optional

from ..core import ClientResponse, FormDataBodyHandler
from .base import BaseClient


class OAuthAPI(BaseClient):
    """OAuth 2.0, OpenID Connect and device grant APIs."""

    def approve_device(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        token: str,
        user_code: str,
    ) -> ClientResponse:
        """Approve a device grant.

        Args:
            client_id: (Optional) The unique client identifier. The client Id is the Id of the
                FusionAuth Application in which you are attempting to authenticate.
            client_secret: (Optional) The client secret. This value will be required if client
                authentication is enabled.
            token: The access token used to identify the user.
            user_code: The end-user verification code.
        """
        post_data = {
            "client_id": client_id,
            "client_secret": client_secret,
            "token": token,
            "user_code": user_code,
        }
        return (
            self.start()
            .uri("/oauth2/device/approve")
            .body_handler(FormDataBodyHandler(post_data))
            .post()
            .go()
        )

    def client_credentials_grant(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        scope: Optional[str] = None,
    ) -> ClientResponse:
        """Make a Client Credentials grant request to obtain an access token.

        Args:
            client_id: (Optional) The client identifier. The client Id is the Id of the FusionAuth
                Entity in which you are attempting to authenticate. This parameter is optional when
                Basic Authorization is used to authenticate this request.
            client_secret: (Optional) The client secret used to authenticate this request. This
                parameter is optional when Basic Authorization is used to authenticate this
                request.
            scope: (Optional) This parameter is used to indicate which target entity you are
                requesting access. To request access to an entity, use the format
                target-entity:<target-entity-id>:<roles>. Roles are an optional comma separated
                list.
        """
        post_data = {
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "client_credentials",
            "scope": scope,
        }
        return (
            self.start_anonymous()
            .uri("/oauth2/token")
            .body_handler(FormDataBodyHandler(post_data))
            .post()
            .go()
        )

    def exchange_oauth_code_for_access_token(
        self,
        code: str,
        client_id: Optional[str],
        client_secret: Optional[str],
        redirect_uri: str,
    ) -> ClientResponse:
        """Exchanges an OAuth authorization code for an access token.

        Makes a request to the Token endpoint to exchange the authorization code returned from the
        Authorize endpoint for an access token.

        Args:
            code: The authorization code returned on the /oauth2/authorize response.
            client_id: (Optional) The unique client identifier. The client Id is the Id of the
                FusionAuth Application in which you are attempting to authenticate. This parameter
                is optional when Basic Authorization is used to authenticate this request.
            client_secret: (Optional) The client secret. This value will be required if client
                authentication is enabled.
            redirect_uri: The URI to redirect to upon a successful request.
        """
        post_data = {
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "authorization_code",
            "redirect_uri": redirect_uri,
        }
        return (
            self.start_anonymous()
            .uri("/oauth2/token")
            .body_handler(FormDataBodyHandler(post_data))
            .post()
            .go()
        )

    def exchange_oauth_code_for_access_token_using_pkce(
        self,
        code: str,
        client_id: Optional[str],
        client_secret: Optional[str],
        redirect_uri: str,
        code_verifier: str,
    ) -> ClientResponse:
        """Exchanges an OAuth authorization code and code_verifier for an access token.

        Makes a request to the Token endpoint to exchange the authorization code returned from the
        Authorize endpoint and a code_verifier for an access token.

        Args:
            code: The authorization code returned on the /oauth2/authorize response.
            client_id: (Optional) The unique client identifier. The client Id is the Id of the
                FusionAuth Application in which you are attempting to authenticate. This parameter
                is optional when the Authorization header is provided. This parameter is optional
                when Basic Authorization is used to authenticate this request.
            client_secret: (Optional) The client secret. This value may optionally be provided in
                the request body instead of the Authorization header.
            redirect_uri: The URI to redirect to upon a successful request.
            code_verifier: The random string generated previously. Will be compared with the
                code_challenge sent previously, which allows the OAuth provider to authenticate
                your app.
        """
        post_data = {
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "authorization_code",
            "redirect_uri": redirect_uri,
            "code_verifier": code_verifier,
        }
        return (
            self.start_anonymous()
            .uri("/oauth2/token")
            .body_handler(FormDataBodyHandler(post_data))
            .post()
            .go()
        )

    def exchange_refresh_token_for_access_token(
        self,
        refresh_token: str,
        client_id: Optional[str],
        client_secret: Optional[str],
        scope: Optional[str],
        user_code: Optional[str] = None,
    ) -> ClientResponse:
        """Exchange a Refresh Token for an Access Token.

        If you will be using the Refresh Token Grant, you will make a request to the Token endpoint
        to exchange the user’s refresh token for an access token.

        Args:
            refresh_token: The refresh token that you would like to use to exchange for an access
                token.
            client_id: (Optional) The unique client identifier. The client Id is the Id of the
                FusionAuth Application in which you are attempting to authenticate. This parameter
                is optional when the Authorization header is provided. This parameter is optional
                when Basic Authorization is used to authenticate this request.
            client_secret: (Optional) The client secret. This value may optionally be provided in
                the request body instead of the Authorization header.
            scope: (Optional) This parameter is optional and if omitted, the same scope requested
                during the authorization request will be used. If provided the scopes must match
                those requested during the initial authorization request.
            user_code: (Optional) The end-user verification code. This code is required if using
                this endpoint to approve the Device Authorization.
        """
        post_data = {
            "refresh_token": refresh_token,
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "refresh_token",
            "scope": scope,
            "user_code": user_code,
        }
        return (
            self.start_anonymous()
            .uri("/oauth2/token")
            .body_handler(FormDataBodyHandler(post_data))
            .post()
            .go()
        )

    def exchange_user_credentials_for_access_token(
        self,
        username: str,
        password: str,
        client_id: Optional[str],
        client_secret: Optional[str],
        scope: Optional[str],
        user_code: Optional[str] = None,
    ) -> ClientResponse:
        """Exchange User Credentials for a Token.

        If you will be using the Resource Owner Password Credential Grant, you will make a request
        to the Token endpoint to exchange the user’s email and password for an access token.

        Args:
            username: The login identifier of the user. The login identifier can be either the
                email or the username.
            password: The user’s password.
            client_id: (Optional) The unique client identifier. The client Id is the Id of the
                FusionAuth Application in which you are attempting to authenticate. This parameter
                is optional when the Authorization header is provided. This parameter is optional
                when Basic Authorization is used to authenticate this request.
            client_secret: (Optional) The client secret. This value may optionally be provided in
                the request body instead of the Authorization header.
            scope: (Optional) This parameter is optional and if omitted, the same scope requested
                during the authorization request will be used. If provided the scopes must match
                those requested during the initial authorization request.
            user_code: (Optional) The end-user verification code. This code is required if using
                this endpoint to approve the Device Authorization.
        """
        post_data = {
            "username": username,
            "password": password,
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "password",
            "scope": scope,
            "user_code": user_code,
        }
        return (
            self.start_anonymous()
            .uri("/oauth2/token")
            .body_handler(FormDataBodyHandler(post_data))
            .post()
            .go()
        )

    def introspect_access_token(self, client_id: str, token: str) -> ClientResponse:
        """Inspect an access token issued as the result of the User based grant such as the
        Authorization Code Grant, Implicit Grant, the User Credentials Grant or the Refresh Grant.

        Args:
            client_id: The unique client identifier. The client Id is the Id of the FusionAuth
                Application for which this token was generated.
            token: The access token returned by this OAuth provider as the result of a successful
                client credentials grant.
        """
        post_data = {
            "client_id": client_id,
            "token": token,
        }
        return (
            self.start_anonymous()
            .uri("/oauth2/introspect")
            .body_handler(FormDataBodyHandler(post_data))
            .post()
            .go()
        )

    def introspect_client_credentials_access_token(self, token: str) -> ClientResponse:
        """Inspect an access token issued as the result of the Client Credentials Grant.

        Args:
            token: The access token returned by this OAuth provider as the result of a successful
                client credentials grant.
        """
        post_data = {
            "token": token,
        }
        return (
            self.start_anonymous()
            .uri("/oauth2/introspect")
            .body_handler(FormDataBodyHandler(post_data))
            .post()
            .go()
        )

    def retrieve_open_id_configuration(self) -> ClientResponse:
        """Returns the well known OpenID Configuration JSON document"""
        return (
            self.start_anonymous()
            .uri("/.well-known/openid-configuration")
            .get()
            .go()
        )

    def retrieve_user_code(
        self,
        client_id: str,
        client_secret: str,
        user_code: str,
    ) -> ClientResponse:
        """Retrieve a user_code that is part of an in-progress Device Authorization Grant.

        This API is useful if you want to build your own login workflow to complete a device grant.

        Args:
            client_id: The client Id.
            client_secret: The client Id.
            user_code: The end-user verification code.
        """
        post_data = {
            "client_id": client_id,
            "client_secret": client_secret,
            "user_code": user_code,
        }
        return (
            self.start_anonymous()
            .uri("/oauth2/device/user-code")
            .body_handler(FormDataBodyHandler(post_data))
            .get()
            .go()
        )

    def retrieve_user_code_using_api_key(self, user_code: str) -> ClientResponse:
        """Retrieve a user_code that is part of an in-progress Device Authorization Grant.

        This API is useful if you want to build your own login workflow to complete a device grant.

        This request will require an API key.

        Args:
            user_code: The end-user verification code.
        """
        post_data = {
            "user_code": user_code,
        }
        return (
            self.start_anonymous()
            .uri("/oauth2/device/user-code")
            .body_handler(FormDataBodyHandler(post_data))
            .get()
            .go()
        )

    def retrieve_user_info_from_access_token(self, encoded_jwt: str) -> ClientResponse:
        """Call the UserInfo endpoint to retrieve User Claims from the access token issued by
        FusionAuth.

        Args:
            encoded_jwt: The encoded JWT (access token).
        """
        return (
            self.start_anonymous()
            .uri("/oauth2/userinfo")
            .authorization(f"Bearer {encoded_jwt}")
            .get()
            .go()
        )

    def validate_device(self, user_code: str, client_id: str) -> ClientResponse:
        """Validates the end-user provided user_code from the user-interaction of the Device
        Authorization Grant. If you build your own activation form you should validate the user
        provided code prior to beginning the Authorization grant.

        Args:
            user_code: The end-user verification code.
            client_id: The client Id.
        """
        return (
            self.start_anonymous()
            .uri("/oauth2/device/validate")
            .url_parameter("user_code", user_code)
            .url_parameter("client_id", client_id)
            .get()
            .go()
        )
