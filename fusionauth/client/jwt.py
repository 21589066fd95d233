"""JWT and refresh token APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class JWTAPI(BaseClient):
    """JWT and refresh token APIs."""

    def exchange_refresh_token_for_jwt(self, request: Dict[str, Any]) -> ClientResponse:
        """Exchange a refresh token for a new JWT.

        Args:
            request: The refresh request.
        """
        return (
            self.start_anonymous()
            .uri("/api/jwt/refresh")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def import_refresh_tokens(self, request: Dict[str, Any]) -> ClientResponse:
        """Bulk imports refresh tokens.

        This request performs minimal validation and runs batch inserts of refresh tokens with the
        expectation that each token represents a user that already exists and is registered for the
        corresponding FusionAuth Application. This is done to increases the insert performance.

        Therefore, if you encounter an error due to a database key violation, the response will
        likely offer a generic explanation. If you encounter an error, you may optionally enable
        additional validation to receive a JSON response body with specific validation errors. This
        will slow the request down but will allow you to identify the cause of the failure. See the
        validateDbConstraints request parameter.

        Args:
            request: The request that contains all the information about all the refresh tokens to
                import.
        """
        return (
            self.start()
            .uri("/api/user/refresh-token/import")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def issue_jwt(
        self,
        application_id: str,
        encoded_jwt: str,
        refresh_token: Optional[str] = None,
    ) -> ClientResponse:
        """Issue a new access token (JWT) for the requested Application after ensuring the provided
        JWT is valid. A valid access token is properly signed and not expired.

        This API may be used in an SSO configuration to issue new tokens for another application
        after the user has obtained a valid token from authentication.

        Args:
            application_id: The Application Id for which you are requesting a new access token be
                issued.
            encoded_jwt: The encoded JWT (access token).
            refresh_token: (Optional) An existing refresh token used to request a refresh token in
                addition to a JWT in the response. The target application represented by the
                applicationId request parameter must have refresh tokens enabled in order to
                receive a refresh token in the response.
        """
        return (
            self.start_anonymous()
            .uri("/api/jwt/issue")
            .authorization(f"Bearer {encoded_jwt}")
            .url_parameter("applicationId", application_id)
            .url_parameter("refreshToken", refresh_token)
            .get()
            .go()
        )

    def reconcile_jwt(self, request: Dict[str, Any]) -> ClientResponse:
        """Reconcile a User to FusionAuth using JWT issued from another Identity Provider.

        Args:
            request: The reconcile request that contains the data to reconcile the User.
        """
        return (
            self.start_anonymous()
            .uri("/api/jwt/reconcile")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_refresh_token_by_id(self, token_id: str) -> ClientResponse:
        """Retrieves a single refresh token by unique Id.

        This is not the same thing as the string value of the refresh token. If you have that, you
        already have what you need.

        Args:
            token_id: The Id of the token.
        """
        return (
            self.start()
            .uri("/api/jwt/refresh")
            .url_segment(token_id)
            .get()
            .go()
        )

    def retrieve_refresh_tokens(self, user_id: str) -> ClientResponse:
        """Retrieves the refresh tokens that belong to the user with the given Id.

        Args:
            user_id: The Id of the user.
        """
        return (
            self.start()
            .uri("/api/jwt/refresh")
            .url_parameter("userId", user_id)
            .get()
            .go()
        )

    def retrieve_user_using_jwt(self, encoded_jwt: str) -> ClientResponse:
        """Retrieves the user for the given Id.

        This method does not use an API key, instead it uses a JSON Web Token (JWT) for
        authentication.

        Args:
            encoded_jwt: The encoded JWT (access token).
        """
        return (
            self.start_anonymous()
            .uri("/api/user")
            .authorization(f"Bearer {encoded_jwt}")
            .get()
            .go()
        )

    def revoke_refresh_token(
        self,
        token: Optional[str],
        user_id: Optional[str],
        application_id: Optional[str] = None,
    ) -> ClientResponse:
        """Revokes refresh tokens.

        Usage examples: - Delete a single refresh token, pass in only the token.
        revokeRefreshToken(token)

        - Delete all refresh tokens for a user, pass in only the userId. revokeRefreshToken(null,
        userId)

        - Delete all refresh tokens for a user for a specific application, pass in both the userId
        and the applicationId. revokeRefreshToken(null, userId, applicationId)

        - Delete all refresh tokens for an application revokeRefreshToken(null, null,
        applicationId)

        Note: ``null`` may be handled differently depending upon the programming language.

        See also: (method names may vary by language... but you'll figure it out)

        - revokeRefreshTokenById - revokeRefreshTokenByToken - revokeRefreshTokensByUserId -
        revokeRefreshTokensByApplicationId - revokeRefreshTokensByUserIdForApplication

        Args:
            token: (Optional) The refresh token to delete.
            user_id: (Optional) The user Id whose tokens to delete.
            application_id: (Optional) The application Id of the tokens to delete.
        """
        return (
            self.start()
            .uri("/api/jwt/refresh")
            .url_parameter("token", token)
            .url_parameter("userId", user_id)
            .url_parameter("applicationId", application_id)
            .delete()
            .go()
        )

    def revoke_refresh_token_by_id(self, token_id: str) -> ClientResponse:
        """Revokes a single refresh token by the unique Id.

        The unique Id is not sensitive as it cannot be used to obtain another JWT.

        Args:
            token_id: The unique Id of the token to delete.
        """
        return (
            self.start()
            .uri("/api/jwt/refresh")
            .url_segment(token_id)
            .delete()
            .go()
        )

    def revoke_refresh_token_by_token(self, token: str) -> ClientResponse:
        """Revokes a single refresh token by using the actual refresh token value.

        This refresh token value is sensitive, so  be careful with this API request.

        Args:
            token: The refresh token to delete.
        """
        return (
            self.start()
            .uri("/api/jwt/refresh")
            .url_parameter("token", token)
            .delete()
            .go()
        )

    def revoke_refresh_tokens_by_application_id(self, application_id: str) -> ClientResponse:
        """Revoke all refresh tokens that belong to an application by applicationId.

        Args:
            application_id: The unique Id of the application that you want to delete all refresh
                tokens for.
        """
        return (
            self.start()
            .uri("/api/jwt/refresh")
            .url_parameter("applicationId", application_id)
            .delete()
            .go()
        )

    def revoke_refresh_tokens_by_user_id(self, user_id: str) -> ClientResponse:
        """Revoke all refresh tokens that belong to a user by user Id.

        Args:
            user_id: The unique Id of the user that you want to delete all refresh tokens for.
        """
        return (
            self.start()
            .uri("/api/jwt/refresh")
            .url_parameter("userId", user_id)
            .delete()
            .go()
        )

    def revoke_refresh_tokens_by_user_id_for_application(
        self,
        user_id: str,
        application_id: str,
    ) -> ClientResponse:
        """Revoke all refresh tokens that belong to a user by user Id for a specific application by
        applicationId.

        Args:
            user_id: The unique Id of the user that you want to delete all refresh tokens for.
            application_id: The unique Id of the application that you want to delete refresh tokens
                for.
        """
        return (
            self.start()
            .uri("/api/jwt/refresh")
            .url_parameter("userId", user_id)
            .url_parameter("applicationId", application_id)
            .delete()
            .go()
        )

    def revoke_refresh_tokens_with_request(self, request: Dict[str, Any]) -> ClientResponse:
        """Revokes refresh tokens using the information in the JSON body.

        The handling for this method is the same as the revokeRefreshToken method and is based on
        the information you provide in the RefreshDeleteRequest object. See that method for
        additional information.

        Args:
            request: The request information used to revoke the refresh tokens.
        """
        return (
            self.start()
            .uri("/api/jwt/refresh")
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def validate_jwt(self, encoded_jwt: str) -> ClientResponse:
        """Validates the provided JWT (encoded JWT string) to ensure the token is valid.

        A valid access token is properly signed and not expired.

        This API may be used to verify the JWT as well as decode the encoded JWT into human
        readable identity claims.

        Args:
            encoded_jwt: The encoded JWT (access token).
        """
        return (
            self.start_anonymous()
            .uri("/api/jwt/validate")
            .authorization(f"Bearer {encoded_jwt}")
            .get()
            .go()
        )

    def vend_jwt(self, request: Dict[str, Any]) -> ClientResponse:
        """It's a JWT vending machine!

        Issue a new access token (JWT) with the provided claims in the request. This JWT is not
        scoped to a tenant or user, it is a free form token that will contain what claims you
        provide.

        The iat, exp and jti claims will be added by FusionAuth, all other claims must be provided
        by the caller.

        If a TTL is not provided in the request, the TTL will be retrieved from the default Tenant
        or the Tenant specified on the request either by way of the X-FusionAuth-TenantId request
        header, or a tenant scoped API key.

        Args:
            request: The request that contains all the claims for this JWT.
        """
        return (
            self.start()
            .uri("/api/jwt/vend")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )
